"""Logic for turning a cleaned doc comment body into a DocRecord.

Lines are classified by their first whitespace-delimited token. Tagged lines fill the
record's fields positionally; untagged lines continue the description of whatever the
previous line touched (a parameter, property, return value, or the record itself).
"""

from collections.abc import Iterable
from dataclasses import replace
from enum import Enum, auto
from typing import NamedTuple

from jsdoc_hover.doc_record import DocMember, DocRecord, DocReturn
from jsdoc_hover.doc_tag import DocTag, classify_tag


class _Target(Enum):
    NONE = auto()
    PARAMETER = auto()
    PROPERTY = auto()
    RETURN = auto()
    DESCRIPTION = auto()


class _LastTouched(NamedTuple):
    target: _Target
    index: int = -1


_NOTHING = _LastTouched(_Target.NONE)


def _token(tokens: list[str], i: int) -> str:
    """Return the i-th token or an empty string."""
    return tokens[i] if i < len(tokens) else ""


def _after_dash(line: str) -> str | None:
    """Return the text after the first '-', or None when there is no '-'."""
    _, sep, rest = line.partition("-")
    return rest.strip() if sep else None


def _join(existing: str | None, text: str) -> str:
    return f"{existing} {text}" if existing else text


def parse_doc_comment(body: str) -> DocRecord:
    """Parse one doc comment body into a DocRecord. Never raises."""
    kind = ""
    name = ""
    extends_type: str | None = None
    description: list[str] = []
    entries: dict[_Target, list] = {
        _Target.PARAMETER: [],
        _Target.PROPERTY: [],
        _Target.RETURN: [],
    }
    last = _NOTHING

    for raw_line in body.splitlines():
        line = raw_line.strip()
        if not line:
            # A blank line ends the running description of a tagged field.
            last = _NOTHING
            continue

        tokens = line.split()
        tag = classify_tag(tokens[0])

        if tag is None:
            if last.target in entries:
                items = entries[last.target]
                entry = items[last.index]
                items[last.index] = replace(
                    entry, description=_join(entry.description, line)
                )
            else:
                description.append(line)
            # Only the line right after a tag continues that tag.
            last = _LastTouched(_Target.DESCRIPTION)
            continue

        last = _NOTHING
        if tag is DocTag.TYPEDEF:
            kind = _token(tokens, 1)
            name = _token(tokens, 2)
        elif tag is DocTag.CALLBACK:
            kind = "callback"
            name = _token(tokens, 1)
        elif tag is DocTag.CLASS:
            kind = "class"
            name = _token(tokens, 1)
        elif tag is DocTag.FUNCTION:
            kind = "function"
        elif tag is DocTag.EXTENDS:
            extends_type = _token(tokens, 1)
        elif tag is DocTag.RETURNS:
            items = entries[_Target.RETURN]
            items.append(
                DocReturn(type=_token(tokens, 1), description=_after_dash(line))
            )
            last = _LastTouched(_Target.RETURN, len(items) - 1)
        else:
            target = _Target.PARAMETER if tag is DocTag.PARAM else _Target.PROPERTY
            items = entries[target]
            items.append(
                DocMember(
                    name=_token(tokens, 2),
                    type=_token(tokens, 1),
                    description=_after_dash(line),
                )
            )
            last = _LastTouched(target, len(items) - 1)

    return DocRecord(
        kind=kind,
        name=name,
        description=" ".join(description),
        extends_type=extends_type,
        parameters=tuple(entries[_Target.PARAMETER]),
        properties=tuple(entries[_Target.PROPERTY]),
        returns=tuple(entries[_Target.RETURN]),
    )


def parse_doc_comments(bodies: Iterable[str]) -> list[DocRecord]:
    """Parse every comment body independently, preserving order."""
    return [parse_doc_comment(body) for body in bodies]
