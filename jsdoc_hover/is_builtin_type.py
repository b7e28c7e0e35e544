"""Predicate for checking if a JSDoc type needs no cross-reference."""

from collections.abc import Iterable

from jsdoc_hover.strip_braces import strip_braces

BUILTIN_TYPES = frozenset(
    {
        "boolean",
        "number",
        "string",
        "object",
        "array",
        "function",
        "reactnode",
        "void",
        "undefined",
    }
)


def is_builtin_type(
    type_token: str, builtin_types: Iterable[str] | None = None
) -> bool:
    """Check if the type token is a primitive/built-in type.

    Handles `{Foo}` wrapping and a trailing `[]` array suffix; comparison is
    case-insensitive.
    """
    known = (
        BUILTIN_TYPES
        if builtin_types is None
        else {t.lower() for t in builtin_types}
    )
    value = strip_braces(type_token)
    if value.endswith("]"):
        value = value.replace("[", "", 1).replace("]", "", 1)
    return value.lower() in known
