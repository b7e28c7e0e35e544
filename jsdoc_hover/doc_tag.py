"""Closed set of the JSDoc tags understood by the parser."""

from enum import Enum


class DocTag(Enum):
    """A recognized leading tag keyword."""

    TYPEDEF = "typedef"
    CALLBACK = "callback"
    CLASS = "class"
    FUNCTION = "function"
    EXTENDS = "extends"
    PARAM = "param"
    PROPERTY = "property"
    RETURNS = "returns"


_KEYWORDS: dict[str, DocTag] = {
    "@typedef": DocTag.TYPEDEF,
    "@callback": DocTag.CALLBACK,
    "@class": DocTag.CLASS,
    "@function": DocTag.FUNCTION,
    "@extends": DocTag.EXTENDS,
    "@param": DocTag.PARAM,
    "@property": DocTag.PROPERTY,
    "@returns": DocTag.RETURNS,
    "@return": DocTag.RETURNS,
}


def classify_tag(token: str) -> DocTag | None:
    """Map the first token of a comment line to its tag, if it is one."""
    return _KEYWORDS.get(token)
