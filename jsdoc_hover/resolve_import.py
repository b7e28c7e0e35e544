"""Logic for locating the source file an identifier is imported from."""

import logging
import re
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

IMPORT_RE = re.compile(
    r"""import\s+(?:(\w+)|\{([^}]+)\})\s+from\s+['"]([^'"]+)['"]""",
)  # import Foo from '...' / import { A, B } from "..."

DEFAULT_EXTENSIONS = (".ts", ".js", ".jsx")


def find_import_specifiers(source_text: str, identifier: str) -> list[str]:
    """Return the module specifiers of every import that brings in identifier."""
    specifiers = []
    for m in IMPORT_RE.finditer(source_text):
        default_name, named, specifier = m.groups()
        if default_name is not None:
            if default_name == identifier:
                specifiers.append(specifier)
        elif identifier in [n.strip() for n in named.split(",")]:
            specifiers.append(specifier)
    return specifiers


def resolve_import_path(
    importer: Path,
    specifier: str,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> Path | None:
    """Resolve a relative specifier against the importer, trying each extension."""
    base = (importer.parent / specifier).resolve()
    for ext in extensions:
        candidate = Path(f"{base}{ext}")
        if candidate.exists():
            logger.debug("Resolved %s to %s", specifier, candidate)
            return candidate
    logger.debug("No file found for import %s from %s", specifier, importer)
    return None


def resolve_imported_file(
    importer: Path,
    source_text: str,
    identifier: str,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> Path | None:
    """Return the first file, among the imports of identifier, that exists."""
    extensions = tuple(extensions)
    for specifier in find_import_specifiers(source_text, identifier):
        target = resolve_import_path(importer, specifier, extensions)
        if target is not None:
            return target
    return None
