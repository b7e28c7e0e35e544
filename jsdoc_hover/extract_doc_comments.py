"""Logic for pulling JSDoc block comments out of source text."""

import re

DOC_COMMENT_RE = re.compile(r"/\*\*[\s\S]*?\*/")
COMMENT_MARKER_RE = re.compile(r"/\*\*|\*/")
LINE_STAR_RE = re.compile(r"^[ \t]*\* ?", re.MULTILINE)


def extract_doc_comments(source_text: str) -> list[str]:
    """Return the cleaned bodies of all `/** ... */` comments, in source order."""
    bodies = []
    for m in DOC_COMMENT_RE.finditer(source_text):
        body = COMMENT_MARKER_RE.sub("", m.group(0))
        body = LINE_STAR_RE.sub("", body)
        bodies.append(body.strip())
    return bodies
