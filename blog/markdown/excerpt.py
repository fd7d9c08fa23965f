"""Plain-text excerpts from raw markdown bodies."""

import re

DEFAULT_EXCERPT_LENGTH = 160

_TOC_FENCE_RE = re.compile(r"```toc\s*```")
_TOC_BRACKET_RE = re.compile(r"^[ \t]*\[toc\][ \t]*$", re.IGNORECASE | re.MULTILINE)
_TOC_HEADING_RE = re.compile(
    r"^[ \t]*#{1,6}[ \t]+(?:table of contents|목차)[ \t]*$", re.IGNORECASE | re.MULTILINE
)
_HEADING_MARKER_RE = re.compile(r"#{1,6}\s+")
_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
_ITALIC_RE = re.compile(r"\*(.+?)\*")
_WHITESPACE_RE = re.compile(r"\s+")


def generate_excerpt(content: str, length: int = DEFAULT_EXCERPT_LENGTH) -> str:
    """
    Return the first ``length`` characters of ``content`` as plain text.

    The cut is not moved to a word boundary and no ellipsis is added.
    """
    text = _TOC_FENCE_RE.sub("", content)
    text = _TOC_BRACKET_RE.sub("", text)
    text = _TOC_HEADING_RE.sub("", text)
    text = _HEADING_MARKER_RE.sub("", text)
    text = _BOLD_RE.sub(r"\1", text)
    text = _ITALIC_RE.sub(r"\1", text)
    text = _WHITESPACE_RE.sub(" ", text).strip()
    return text[:length]
