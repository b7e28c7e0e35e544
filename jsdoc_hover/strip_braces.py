"""Utility for unwrapping brace-delimited JSDoc type tokens."""


def strip_braces(type_token: str) -> str:
    """Remove one enclosing `{ }` pair, e.g. `{string}` -> `string`."""
    if type_token.startswith("{") and type_token.endswith("}"):
        return type_token[1:-1]
    return type_token
