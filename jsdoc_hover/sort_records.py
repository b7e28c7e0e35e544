"""Ordering of documentation records for rendering."""

from collections.abc import Iterable

from jsdoc_hover.doc_record import DocRecord


def sort_records(records: Iterable[DocRecord]) -> list[DocRecord]:
    """Return a new list with class records first, otherwise in input order."""
    return sorted(records, key=lambda r: not r.is_class)
