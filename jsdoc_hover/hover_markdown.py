"""Hover lookup: documentation for a type imported into a source file."""

import logging
from pathlib import Path
from typing import Any

from jsdoc_hover.document_source import document_source
from jsdoc_hover.is_type_name import is_type_name
from jsdoc_hover.load_config import load_config
from jsdoc_hover.resolve_import import (
    DEFAULT_EXTENSIONS,
    resolve_imported_file,
)

logger = logging.getLogger(__name__)


def hover_markdown(
    source_file: Path,
    identifier: str,
    config: dict[str, Any] | None = None,
) -> str | None:
    """Return Markdown docs for identifier as imported by source_file.

    Returns None when there is nothing to show: the word does not look like a type
    name, it is not imported, the import cannot be resolved to a file, or a file
    cannot be read.
    """
    if not is_type_name(identifier):
        return None
    config = config or load_config()

    try:
        source_text = source_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Cannot read %s: %s", source_file, e)
        return None

    extensions = config.get("source_extensions") or DEFAULT_EXTENSIONS
    target = resolve_imported_file(source_file, source_text, identifier, extensions)
    if target is None:
        logger.debug("No resolvable import of %s in %s", identifier, source_file)
        return None

    try:
        target_text = target.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Cannot read %s: %s", target, e)
        return None

    logger.info("Rendering documentation for %s from %s", identifier, target)
    return document_source(target_text, identifier, str(target), config=config)
