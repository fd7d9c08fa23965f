# blog/markdown/postprocessors/toc_list.py
"""
Postprocessor that inserts a table-of-contents list after the TOC heading.

This postprocessor:
- Finds the first heading named "toc", "table of contents" or "목차"
- Collects the headings that follow it, down to ``max_depth``
- Inserts a tight, unordered, nested list of links right after the heading

The list is a first draft: ``build_table_of_contents`` later removes it and
rebuilds the TOC from the final heading ids.
"""

import re
from typing import List

from bs4 import BeautifulSoup, Tag

from ..toc_extractor import Heading, HeadingNode, nest_headings

TOC_HEADING_PATTERN = re.compile(r"^(toc|table[ -]of[ -]contents?|목차)$", re.IGNORECASE)

_HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]


def _build_list(soup: BeautifulSoup, nodes: List[HeadingNode], ordered: bool) -> Tag:
    list_tag = soup.new_tag("ol" if ordered else "ul")
    for node in nodes:
        item = soup.new_tag("li")
        link = soup.new_tag("a", href=f"#{node['id']}")
        link.string = node["title"]
        item.append(link)
        if node["children"]:
            item.append(_build_list(soup, node["children"], ordered))
        list_tag.append(item)
    return list_tag


def insert_toc_list(
    html: str,
    context: dict,
    max_depth: int = 3,
    ordered: bool = False,
) -> str:
    """
    Insert a nested list of heading links after the TOC heading.

    Args:
        html: HTML string to process
        context: Context dictionary (not used currently)
        max_depth: Deepest heading level to list (default: 3)
        ordered: Use <ol> instead of <ul> (default: False)

    Returns:
        HTML with the list inserted, or unchanged if there is no TOC heading
    """
    soup = BeautifulSoup(html, "html.parser")
    headings = soup.find_all(_HEADING_TAGS)

    toc_index = next(
        (
            index
            for index, heading in enumerate(headings)
            if TOC_HEADING_PATTERN.match(heading.get_text(" ", strip=True))
        ),
        None,
    )
    if toc_index is None:
        return html

    entries = []
    for heading in headings[toc_index + 1:]:
        level = int(heading.name[1])
        identifier = heading.get("id")
        text = heading.get_text(" ", strip=True)
        if level > max_depth or not identifier or not text:
            continue
        entries.append(Heading(level=level, id=identifier, text=text))

    if not entries:
        return html

    headings[toc_index].insert_after(_build_list(soup, nest_headings(entries), ordered))
    return str(soup)


def insert_toc_list_default(html: str, context: dict) -> str:
    """
    Default configuration for insert_toc_list.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return insert_toc_list(html, context, max_depth=3, ordered=False)
