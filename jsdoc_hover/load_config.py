"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from jsdoc_hover.deep_merge import deep_merge
from jsdoc_hover.is_builtin_type import BUILTIN_TYPES

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "builtin_types": sorted(BUILTIN_TYPES),
    "source_extensions": [".ts", ".js", ".jsx"],
    "markdown": {
        "code_language": "js",
    },
}

LIST_KEYS = ("builtin_types", "source_extensions")


def _normalize_lists(user_config: dict[str, Any]) -> dict[str, Any]:
    """Wrap scalar values of list settings; drop values of any other shape."""
    result = dict(user_config)
    for key in LIST_KEYS:
        if key not in result or isinstance(result[key], list):
            continue
        value = result[key]
        if isinstance(value, str):
            result[key] = [value]
        else:
            logger.warning("Ignoring %s: expected a list, got %r", key, value)
            del result[key]
    return result


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, _normalize_lists(user_config))
    return config
