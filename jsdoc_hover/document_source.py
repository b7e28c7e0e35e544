"""Pipeline from raw source text to rendered Markdown documentation."""

from typing import Any

from jsdoc_hover.extract_doc_comments import extract_doc_comments
from jsdoc_hover.parse_doc_comment import parse_doc_comments
from jsdoc_hover.render_markdown import render_markdown


def document_source(
    source_text: str,
    declaring_name: str,
    reference_path: str,
    *,
    config: dict[str, Any] | None = None,
) -> str:
    """Extract, parse and render all doc comments found in source_text."""
    config = config or {}
    records = parse_doc_comments(extract_doc_comments(source_text))
    return render_markdown(
        records,
        declaring_name,
        reference_path,
        builtin_types=config.get("builtin_types"),
        code_language=(config.get("markdown") or {}).get("code_language", "js"),
    )
