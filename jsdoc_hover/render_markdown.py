"""Logic for rendering documentation records as one Markdown document."""

from collections.abc import Iterable

from jsdoc_hover.doc_record import DocMember, DocRecord, DocReturn
from jsdoc_hover.is_builtin_type import is_builtin_type
from jsdoc_hover.render_name import render_name
from jsdoc_hover.render_ref import render_ref
from jsdoc_hover.render_signature import render_signature
from jsdoc_hover.render_type import INLINE_CODE, render_type
from jsdoc_hover.sort_records import sort_records


def render_markdown(
    records: Iterable[DocRecord],
    declaring_name: str,
    reference_path: str,
    *,
    builtin_types: Iterable[str] | None = None,
    code_language: str = "js",
) -> str:
    """Render records (class records first) as Markdown sections.

    Each record becomes a `## name` heading, a fenced signature, an optional
    description and bulleted Properties/Parameters/Returns lists, followed by a
    `---` separator. Non built-in types link to `reference_path#<type>`.
    """
    known = None if builtin_types is None else frozenset(builtin_types)
    parts: list[str] = []
    for record in sort_records(records):
        parts += [f"## {record.name}", ""]
        parts += [render_signature(record, declaring_name, code_language), ""]

        if record.description:
            parts += ["### Description", record.description, ""]

        parts.extend(
            _render_members("Properties", record.properties, reference_path, known)
        )
        parts.extend(
            _render_members("Parameters", record.parameters, reference_path, known)
        )
        parts.extend(_render_returns(record.returns, reference_path, known))

        parts += ["---", ""]

    if not parts:
        return ""
    return "\n".join(parts).rstrip() + "\n"


def _render_linked_type(
    type_token: str,
    reference_path: str,
    builtin_types: Iterable[str] | None,
) -> str:
    """Render a type as inline code, linked when it is not a built-in."""
    rendered = render_type(type_token, INLINE_CODE)
    if rendered and not is_builtin_type(type_token, builtin_types):
        rendered = f"[{rendered}]({render_ref(type_token, reference_path)})"
    return rendered


def _render_members(
    title: str,
    members: tuple[DocMember, ...],
    reference_path: str,
    builtin_types: Iterable[str] | None,
) -> list[str]:
    """Render a Properties or Parameters section."""
    if not members:
        return []
    parts = [f"### {title}", ""]
    for m in members:
        ptype = _render_linked_type(m.type, reference_path, builtin_types)
        line = f"- {render_name(m.name)} : {ptype} - {m.description or ''}"
        parts.append(line.rstrip())
    parts.append("")
    return parts


def _render_returns(
    returns: tuple[DocReturn, ...],
    reference_path: str,
    builtin_types: Iterable[str] | None,
) -> list[str]:
    """Render the Returns section."""
    if not returns:
        return []
    parts = ["### Returns", ""]
    for r in returns:
        rtype = _render_linked_type(r.type, reference_path, builtin_types)
        parts.append(f"- {rtype} - {r.description or ''}".rstrip())
    parts.append("")
    return parts
