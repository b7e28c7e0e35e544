"""Logic for rendering the fenced signature line of a documentation record."""

from jsdoc_hover.doc_record import DocRecord
from jsdoc_hover.render_type import NO_BORDER, render_type


def signature_line(record: DocRecord, declaring_name: str) -> str:
    """Return the declaration-style line for a record.

    Free functions are namespaced under the declaring name; a class is always shown
    under the declaring name, whatever its @class tag said.
    """
    if record.kind == "callback":
        return f"function {record.name}"
    if record.kind == "function":
        return f"function {declaring_name}.{record.name}"
    if record.kind == "class":
        line = f"class {declaring_name}"
        if record.extends_type:
            line += f" extends {render_type(record.extends_type, NO_BORDER)}"
        return line
    return f"{render_type(record.kind, NO_BORDER)} {record.name}".strip()


def render_signature(record: DocRecord, declaring_name: str, lang: str = "js") -> str:
    """Render the signature as a fenced Markdown code block."""
    return f"```{lang}\n{signature_line(record, declaring_name)}\n```"
