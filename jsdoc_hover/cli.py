"""Command line interface for rendering JSDoc comments as Markdown."""

import argparse
import logging
from pathlib import Path

from jsdoc_hover.document_source import document_source
from jsdoc_hover.hover_markdown import hover_markdown
from jsdoc_hover.load_config import load_config

logger = logging.getLogger(__name__)


def _run_render(args: argparse.Namespace) -> int:
    """Render the doc comments of one source file."""
    source: Path = args.source
    if not source.is_file():
        msg = f"Source file not found: {source}"
        raise SystemExit(msg)

    try:
        source_text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Cannot read {source}: {e}"
        raise SystemExit(msg) from e

    config = load_config(args.config)
    markdown = document_source(
        source_text,
        args.name or source.stem,
        args.reference_path or source.name,
        config=config,
    )

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(markdown, encoding="utf-8")
        print(f"Wrote documentation for {source} to: {args.output}")
    else:
        print(markdown, end="")
    return 0


def _run_hover(args: argparse.Namespace) -> int:
    """Print the hover documentation for an identifier imported by a file."""
    source: Path = args.source
    if not source.is_file():
        msg = f"Source file not found: {source}"
        raise SystemExit(msg)

    markdown = hover_markdown(source, args.identifier, load_config(args.config))
    if markdown is None:
        msg = f"No documentation found for {args.identifier} in {source}"
        raise SystemExit(msg)
    print(markdown, end="")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    ap = argparse.ArgumentParser(
        description="Render JSDoc block comments as cross-referenced Markdown.",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render all doc comments of a file")
    render.add_argument("source", type=Path, help="JS/TS source file")
    render.add_argument(
        "--name",
        help="Declaring name used in class/function signatures (default: file stem)",
    )
    render.add_argument(
        "--reference-path",
        help="Path used as the target of type links (default: file name)",
    )
    render.add_argument(
        "--output",
        type=Path,
        help="Write the Markdown to this file instead of stdout",
    )
    render.set_defaults(func=_run_render)

    hover = sub.add_parser("hover", help="Show docs for an imported identifier")
    hover.add_argument("source", type=Path, help="File containing the import")
    hover.add_argument("identifier", help="Capitalized identifier to look up")
    hover.set_defaults(func=_run_hover)

    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Running %s", args.command)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
