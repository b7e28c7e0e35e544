"""Logic for rendering JSDoc type tokens in Markdown."""

from jsdoc_hover.strip_braces import strip_braces

NO_BORDER = ""
INLINE_CODE = "`"
BLOCK_CODE = "```"


def render_type(type_token: str, border: str = BLOCK_CODE) -> str:
    """Render a type without its braces, wrapped in the given code border."""
    value = strip_braces(type_token)
    if not value:
        return ""
    return f"{border}{value}{border}"
