"""Logic for rendering parameter and property names."""


def render_name(name: str, border: str = "**") -> str:
    """Render a name, marking optional (`[x]`) and defaulted (`x=1`) names.

    `[count=0]` -> `**count?** (default: 0)`
    """
    if not name:
        return ""

    value = name
    optional = False
    if len(value) > 1 and value.startswith("[") and value.endswith("]"):
        value = value[1:-1]
        optional = True

    value, _, default = value.partition("=")
    rendered = f"{border}{value}{'?' if optional else ''}{border}"
    if default:
        rendered += f" (default: {default})"
    return rendered
