from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from html import escape
from typing import Iterable, TypedDict

from bs4 import BeautifulSoup, Tag

from blog.security import NO_TEXT, safe_extract_text

logger = logging.getLogger(__name__)

EXCLUDED_HEADINGS = {"목차", "table of contents", "toc", "contents"}
TOC_LEVELS = ["h2", "h3"]
MIN_TOC_ENTRIES = 2

# The placeholder heading, optionally wrapped in its own self-link
TOC_HEADING_RE = re.compile(
    r"<h([1-6])[^>]*>\s*(?:<a[^>]*>)?\s*(?:table of contents|목차)\s*(?:</a>)?\s*</h\1>",
    re.IGNORECASE,
)
LIST_OPEN_RE = re.compile(r"\s*<(ul|ol)\b", re.IGNORECASE)
LIST_TAG_RE = re.compile(r"<(/?)(ul|ol)\b[^>]*>", re.IGNORECASE)


@dataclass(frozen=True)
class Heading:
    level: int
    id: str
    text: str


class HeadingNode(TypedDict):
    level: int
    id: str
    title: str
    children: list["HeadingNode"]


def nest_headings(headings: Iterable[Heading]) -> list[HeadingNode]:
    """Arrange a flat heading sequence into a tree by level."""
    tree: list[HeadingNode] = []
    stack: list[HeadingNode] = []
    for heading in headings:
        node: HeadingNode = {
            "level": heading.level,
            "id": heading.id,
            "title": heading.text,
            "children": [],
        }

        while stack and stack[-1]["level"] >= heading.level:
            stack.pop()

        if stack:
            stack[-1]["children"].append(node)
        else:
            tree.append(node)

        stack.append(node)

    return tree


def find_balanced_list_end(html: str, start: int) -> int:
    """
    Return the index just past the list that opens at ``start``.

    Walks forward counting nested ``<ul>``/``<ol>`` open and close tags until
    the depth returns to zero. Returns -1 when the markup never balances.
    """
    depth = 0
    for match in LIST_TAG_RE.finditer(html, start):
        depth += -1 if match.group(1) else 1
        if depth == 0:
            return match.end()
        if depth < 0:
            return -1
    return -1


def remove_generated_toc(html: str) -> str:
    """Drop the placeholder heading and the list generated right after it."""
    match = TOC_HEADING_RE.search(html)
    if not match:
        return html

    list_match = LIST_OPEN_RE.match(html, match.end())
    if not list_match:
        return html[: match.start()] + html[match.end():]

    list_start = list_match.start(1) - 1
    list_end = find_balanced_list_end(html, list_start)
    if list_end == -1:
        logger.debug("Generated TOC list is unbalanced, leaving it in place")
        return html

    logger.debug("Removed generated TOC list (%d chars)", list_end - match.start())
    return html[: match.start()] + html[list_end:]


def _heading_label_html(heading: Tag, identifier: str) -> str:
    """Inner HTML of a heading, unwrapping the self-link added by the autolink stage."""
    anchor = heading.find("a", href=f"#{identifier}")
    target = anchor if anchor is not None else heading
    return "".join(str(child) for child in target.contents)


def extract_headings(html: str) -> list[Heading]:
    """
    Return every id-bearing h2/h3 in document order that qualifies for the TOC.

    Headings whose label is empty or one of the TOC placeholder names are skipped.
    """
    soup = BeautifulSoup(html, "html.parser")
    headings: list[Heading] = []
    for element in soup.find_all(TOC_LEVELS):
        identifier = element.get("id")
        if not identifier:
            continue

        label_html = _heading_label_html(element, identifier)
        text = safe_extract_text(label_html, max_length=None, min_length=1)
        if text == NO_TEXT or text.strip().lower() in EXCLUDED_HEADINGS:
            continue

        headings.append(Heading(level=int(element.name[1]), id=identifier, text=text))
    return headings


def _toc_link(heading: Heading) -> str:
    return f'<a href="#{escape(heading.id, quote=True)}">{escape(heading.text, quote=False)}</a>'


def render_toc(headings: list[Heading]) -> str:
    """
    Render headings as a two-level nested list.

    Each h2 opens a top-level item; h3s nest under the open h2. An h3 seen
    before any h2 opens a single implicit item holding the sub-list.
    """
    if len(headings) < MIN_TOC_ENTRIES:
        return ""

    parts = ["<ul>"]
    item_open = False
    sublist_open = False
    for heading in headings:
        if heading.level == 2:
            if sublist_open:
                parts.append("</ul>")
                sublist_open = False
            if item_open:
                parts.append("</li>")
            parts.append(f"<li>{_toc_link(heading)}")
            item_open = True
            continue

        if not item_open:
            parts.append("<li>")
            item_open = True
        if not sublist_open:
            parts.append("<ul>")
            sublist_open = True
        parts.append(f"<li>{_toc_link(heading)}</li>")

    if sublist_open:
        parts.append("</ul>")
    if item_open:
        parts.append("</li>")
    parts.append("</ul>")
    return "".join(parts)


def build_table_of_contents(html: str) -> tuple[str, str]:
    """
    Replace the generated TOC with one rebuilt from the final headings.

    Returns ``(html, table_of_contents)``. The TOC is derived from the
    headings themselves, so documents without a placeholder still get one
    when they have at least two qualifying headings.
    """
    html = remove_generated_toc(html)
    html = TOC_HEADING_RE.sub("", html)

    headings = extract_headings(html)
    logger.debug("Found %d TOC headings", len(headings))
    return html, render_toc(headings)
