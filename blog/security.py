# blog/security.py
"""
Safe text extraction from untrusted HTML.

Used wherever plain text is derived from rendered markup (TOC labels,
heading text, ids). Nothing in here raises: empty or unusable input
degrades to the ``NO_TEXT`` / ``NO_ID`` sentinels so callers can tell
"no content" apart from an empty string.
"""

import logging
import re
from functools import lru_cache
from typing import Optional

import bleach
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

NO_TEXT = "NO_TEXT"
NO_ID = "NO_ID"

DEFAULT_MAX_LENGTH = 40
DEFAULT_MIN_LENGTH = 2

# Elements whose content is never text, dropped before bleach strips tags
_DROP_WITH_CONTENT = ["script", "style", "template", "noscript", "iframe", "object", "embed"]

_ENTITY_RE = re.compile(r"&[a-zA-Z0-9#]+;")
_DANGEROUS_PATTERNS = [
    re.compile(r"javascript:", re.IGNORECASE),
    re.compile(r"data:", re.IGNORECASE),
    re.compile(r"vbscript:", re.IGNORECASE),
    re.compile(r"alert\s*\([^)]*\)", re.IGNORECASE),
    re.compile(r"eval\s*\([^)]*\)", re.IGNORECASE),
    re.compile(r"expression\s*\([^)]*\)", re.IGNORECASE),
]
_WHITESPACE_RE = re.compile(r"\s+")
_INVALID_ID_CHARS_RE = re.compile(r"[^a-zA-Z0-9\-_.]")
_HEADING_CONTENT_RE = re.compile(r"<h[1-6][^>]*>(.*?)</h[1-6]>", re.IGNORECASE | re.DOTALL)
_SIMPLE_TEXT_RE = re.compile(r">([^<]+)<")


@lru_cache(maxsize=1)
def _get_text_only_cleaner() -> bleach.sanitizer.Cleaner:
    """Cleaner that allows no tags and no attributes but keeps text."""
    return bleach.sanitizer.Cleaner(
        tags=set(),
        attributes={},
        protocols=set(),
        strip=True,
        strip_comments=True,
    )


def _strip_markup(html: str) -> str:
    soup = BeautifulSoup(html, "html.parser")
    for element in soup.find_all(_DROP_WITH_CONTENT):
        element.decompose()
    return _get_text_only_cleaner().clean(str(soup))


def safe_extract_text(
    html_string,
    max_length: Optional[int] = DEFAULT_MAX_LENGTH,
    min_length: int = DEFAULT_MIN_LENGTH,
) -> str:
    """
    Safely extract text content from an HTML string.

    Markup is removed with a tags-nothing bleach pass, then residual protocol
    prefixes and script-call patterns that survive tag stripping are scrubbed
    and whitespace is collapsed.

    Args:
        html_string: HTML to extract text from
        max_length: Truncate to this many characters and append "...".
            ``None`` disables truncation.
        min_length: Shorter results count as no text

    Returns:
        Extracted text, or ``NO_TEXT`` when nothing usable remains
    """
    if not html_string or not isinstance(html_string, str):
        return NO_TEXT

    try:
        text = _strip_markup(html_string)
        text = _ENTITY_RE.sub(" ", text)
        for pattern in _DANGEROUS_PATTERNS:
            text = pattern.sub("", text)
        text = _WHITESPACE_RE.sub(" ", text).strip()
    except Exception as e:
        logger.warning("Text extraction failed, returning sentinel: %s", e)
        return NO_TEXT

    if not text or len(text) < min_length:
        return NO_TEXT

    if max_length is not None and len(text) > max_length:
        return text[:max_length].strip() + "..."
    return text


def safe_extract_heading_text(heading_html) -> str:
    """Extract the text of a heading element, falling back to the whole string."""
    if not heading_html or not isinstance(heading_html, str):
        return NO_TEXT

    match = _HEADING_CONTENT_RE.search(heading_html)
    if match and match.group(1):
        return safe_extract_text(match.group(1))

    simple = _SIMPLE_TEXT_RE.search(heading_html)
    if simple:
        return safe_extract_text(simple.group(1))

    return safe_extract_text(heading_html)


def sanitize_id(value) -> str:
    """
    Reduce ``value`` to a safe HTML id.

    Only ``[A-Za-z0-9._-]`` survive. Returns ``NO_ID`` when nothing does.
    """
    if not value or not isinstance(value, str):
        return NO_ID

    try:
        cleaned = _strip_markup(value)
    except Exception as e:
        logger.warning("Id sanitization failed, returning sentinel: %s", e)
        return NO_ID

    cleaned = _ENTITY_RE.sub("", cleaned)
    cleaned = _INVALID_ID_CHARS_RE.sub("", cleaned)
    return cleaned or NO_ID


def safe_truncate(text, max_length: int) -> str:
    """
    Truncate ``text`` for display, preferring a word boundary.

    The last space is used only when it falls past 70% of ``max_length``.
    An ellipsis is always appended to truncated text.
    """
    if not text or not isinstance(text, str):
        return ""

    if len(text) <= max_length:
        return text

    truncated = text[:max_length]
    last_space = truncated.rfind(" ")
    if last_space > max_length * 0.7:
        return truncated[:last_space] + "..."
    return truncated + "..."
