"""Heuristic for picking identifiers worth a documentation lookup."""

import re

TYPE_NAME_RE = re.compile(r"^[A-Z]")


def is_type_name(word: str) -> bool:
    """Check if the word looks like a class/type name (starts with a capital)."""
    return bool(TYPE_NAME_RE.match(word))
