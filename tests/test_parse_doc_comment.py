"""Tests for the tag parser."""

from jsdoc_hover.doc_record import DocMember, DocRecord, DocReturn
from jsdoc_hover.doc_tag import DocTag, classify_tag
from jsdoc_hover.parse_doc_comment import parse_doc_comment, parse_doc_comments


def test_classify_tag() -> None:
    """Verify the closed tag keyword table."""
    assert classify_tag("@param") is DocTag.PARAM
    assert classify_tag("@return") is DocTag.RETURNS
    assert classify_tag("@returns") is DocTag.RETURNS
    assert classify_tag("@example") is None
    assert classify_tag("param") is None


def test_single_param() -> None:
    """Verify a well-formed @param line."""
    record = parse_doc_comment("@param {string} name - desc")
    assert record.parameters == (
        DocMember(name="name", type="{string}", description="desc"),
    )


def test_typedef_and_properties() -> None:
    """Verify typedef kind/name and property entries in order."""
    body = "\n".join(
        [
            "@typedef {Object} Options",
            "@property {number} [size=10] - the size",
            "@property {Widget} owner - owning widget",
        ]
    )
    record = parse_doc_comment(body)
    assert record.kind == "{Object}"
    assert record.name == "Options"
    assert [p.name for p in record.properties] == ["[size=10]", "owner"]
    assert record.properties[1].type == "{Widget}"


def test_class_callback_function_extends() -> None:
    """Verify the declaration tags."""
    cls = parse_doc_comment("@class Button\n@extends {Widget}")
    assert cls.kind == "class"
    assert cls.name == "Button"
    assert cls.extends_type == "{Widget}"
    assert cls.is_class

    cb = parse_doc_comment("@callback onClick")
    assert (cb.kind, cb.name) == ("callback", "onClick")

    fn = parse_doc_comment("@function\nDoes things.")
    assert fn.kind == "function"
    assert fn.name == ""
    assert fn.description == "Does things."


def test_returns_both_spellings() -> None:
    """Verify that every return tag is kept in order."""
    record = parse_doc_comment("@returns {string} - text\n@return {number} - count")
    assert record.returns == (
        DocReturn(type="{string}", description="text"),
        DocReturn(type="{number}", description="count"),
    )


def test_missing_dash_leaves_description_unset() -> None:
    """Verify that a tag line without '-' has no description."""
    record = parse_doc_comment("@param {string} name")
    assert record.parameters[0].description is None


def test_description_after_first_dash() -> None:
    """Verify that the description is everything after the first '-'."""
    record = parse_doc_comment("@param {string} id - a well-known id")
    assert record.parameters[0].description == "a well-known id"


def test_continuation_attaches_to_param() -> None:
    """Verify that an untagged line extends the previous parameter."""
    record = parse_doc_comment("@param {string} x - base\nmore")
    assert record.parameters[0].description == "base more"
    assert record.description == ""


def test_continuation_only_follows_tag_line() -> None:
    """Verify that a second untagged line goes to the record description."""
    record = parse_doc_comment("@property {number} n - one\ntwo\nthree")
    assert record.properties[0].description == "one two"
    assert record.description == "three"

    record = parse_doc_comment("@param {string} x - a\nb\nc")
    assert record.parameters[0].description == "a b"
    assert record.description == "c"


def test_continuation_on_missing_description() -> None:
    """Verify that a continuation fills a tag line that had no '-'."""
    record = parse_doc_comment("@returns {Widget}\nthe created widget")
    assert record.returns[0].description == "the created widget"


def test_continuation_targets_latest_entry() -> None:
    """Verify that continuation goes to the most recently added entry."""
    body = "@param {string} a - first\n@param {string} a - second\nextra"
    record = parse_doc_comment(body)
    assert record.parameters[0].description == "first"
    assert record.parameters[1].description == "second extra"


def test_description_lines_joined() -> None:
    """Verify that untagged lines build the top-level description."""
    record = parse_doc_comment("First line.\nSecond line.\n@class Foo\nThird.")
    assert record.description == "First line. Second line. Third."


def test_blank_line_ends_field_continuation() -> None:
    """Verify that text after a blank line goes to the record description."""
    record = parse_doc_comment("@param {string} x - base\n\nAbout the record.")
    assert record.parameters[0].description == "base"
    assert record.description == "About the record."


def test_unknown_tag_is_description() -> None:
    """Verify that unrecognized tags are treated as plain text."""
    record = parse_doc_comment("@deprecated use Bar")
    assert record.description == "@deprecated use Bar"


def test_empty_body() -> None:
    """Verify that an empty body gives an empty record."""
    assert parse_doc_comment("") == DocRecord()


def test_missing_tokens_are_empty() -> None:
    """Verify that short tag lines do not fail."""
    record = parse_doc_comment("@param\n@typedef")
    assert record.parameters == (DocMember(name="", type="", description=None),)
    assert record.kind == ""
    assert record.name == ""


def test_parse_doc_comments_independent() -> None:
    """Verify that several bodies parse independently and in order."""
    records = parse_doc_comments(["@class A", "@callback b\nText"])
    assert [r.name for r in records] == ["A", "b"]
    assert records[0].description == ""
    assert records[1].description == "Text"
