"""
Korean-aware line wrapper for post bodies.

Long prose lines are broken after clause connectors (하고, 지만, 때문에, ...)
when one falls inside the limit, otherwise at the last space past 40% of the
limit, and as a last resort at the limit itself. Breaks never land inside
inline code or a markdown link. Frontmatter, code blocks and structural
lines (headings, lists, tables, images, quotes) are left alone.
"""

import re
from typing import List

MAX_LENGTH = 150
FALLBACK_MIN_RATIO = 0.4

# Clause endings and connectors that make natural break points
BREAK_AFTER = [
    "하고 ",
    "하며 ",
    "하면 ",
    "하면서 ",
    "이고 ",
    "이며 ",
    "이면 ",
    "지만 ",
    "는데 ",
    "으며 ",
    "에서 ",
    "으로 ",
    "에게 ",
    "때문에 ",
    "위해서 ",
    "통해서 ",
    "경우에 ",
    "한편, ",
    "또한 ",
    "그리고 ",
    "그러나 ",
    "하지만 ",
    "따라서 ",
    "그래서 ",
    "즉, ",
    "), ",
    "). ",
]

_PROTECTED_PREFIXES = ("#", "```", "|", "![", "> ", "- ", "* ", "---")
_NUMBERED_LIST_RE = re.compile(r"^\d+\.\s")
_LINK_RE = re.compile(r"\[.*\]\(.*\)")


def is_protected_line(line: str) -> bool:
    return line.startswith(_PROTECTED_PREFIXES) or bool(_NUMBERED_LIST_RE.match(line))


def in_inline_code(text: str, pos: int) -> bool:
    return text[:pos].count("`") % 2 == 1


def in_link(text: str, pos: int) -> bool:
    open_bracket = text.rfind("[", 0, pos)
    close_paren = text.find(")", pos)
    if open_bracket == -1 or close_paren == -1:
        return False
    return bool(_LINK_RE.search(text[open_bracket:close_paren + 1]))


def _is_safe_break(text: str, pos: int) -> bool:
    return not in_inline_code(text, pos) and not in_link(text, pos)


def _find_break(text: str, max_length: int) -> int:
    best = -1
    for pattern in BREAK_AFTER:
        search_from = 0
        while search_from < max_length:
            index = text.find(pattern, search_from)
            if index == -1 or index + len(pattern) > max_length:
                break
            position = index + len(pattern)
            if _is_safe_break(text, position):
                best = max(best, position)
            search_from = index + 1
    if best != -1:
        return best

    lower_bound = max_length * FALLBACK_MIN_RATIO
    position = max_length
    while position > lower_bound:
        if text[position] == " " and _is_safe_break(text, position):
            return position + 1
        position -= 1

    return max_length


def wrap_line(line: str, max_length: int = MAX_LENGTH) -> str:
    if len(line) <= max_length or is_protected_line(line):
        return line

    parts: List[str] = []
    remaining = line
    while len(remaining) > max_length:
        position = _find_break(remaining, max_length)
        parts.append(remaining[:position].rstrip())
        remaining = remaining[position:].lstrip()

    if remaining:
        parts.append(remaining)
    return "\n".join(parts)


def wrap_content(content: str, max_length: int = MAX_LENGTH) -> str:
    """Wrap every prose line of a post, keeping everything else byte-for-byte."""
    result = []
    in_code_block = False
    in_frontmatter = False
    delimiter_count = 0

    for line in content.split("\n"):
        stripped = line.strip()
        if stripped == "---":
            delimiter_count += 1
            if delimiter_count <= 2:
                in_frontmatter = delimiter_count == 1
            result.append(line)
            continue
        if in_frontmatter:
            result.append(line)
            continue

        if stripped.startswith("```"):
            in_code_block = not in_code_block
            result.append(line)
            continue
        if in_code_block:
            result.append(line)
            continue

        result.append(wrap_line(line, max_length))

    return "\n".join(result)
