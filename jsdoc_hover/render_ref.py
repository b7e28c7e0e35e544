"""Logic for building anchor links to documented types."""

from jsdoc_hover.strip_braces import strip_braces


def render_ref(type_token: str, reference_path: str) -> str:
    """Build `<reference_path>#<anchor>` for a type.

    The anchor is the lower-cased type name, which assumes the consuming Markdown
    renderer slugs `## Name` headings the same way.
    """
    anchor = strip_braces(type_token).strip().lower()
    return f"{reference_path}#{anchor}"
