# blog/quality/structure_check.py
"""
Structure validation.

Checks for the TOC block, H1 headings, skipped heading levels and long lines.
"""

import re

from .base import CheckResult, iter_body_lines

MAX_LINE_LENGTH = 150
MAX_REPORTED_LONG_LINES = 5

HEADING_RE = re.compile(r"^(#{1,6})\s")
INLINE_TOC_FENCE_RE = re.compile(r"^```toc\s*```$")

# Long lines that are fine as they are: links, images, tables, long URLs
LONG_LINE_EXCEPTIONS = [
    re.compile(r"^\s*\[.*\]\(http"),
    re.compile(r"^\s*!\["),
    re.compile(r"^\s*\|"),
    re.compile(r"https?://\S{50,}"),
]


def check_structure(content: str) -> CheckResult:
    result = CheckResult()

    has_toc = False
    in_code_block = False
    headings = []
    long_lines = []

    for line_number, line in iter_body_lines(content):
        stripped = line.strip()
        if not in_code_block and INLINE_TOC_FENCE_RE.match(stripped):
            has_toc = True
            continue
        if stripped.startswith("```"):
            if not in_code_block and stripped == "```toc":
                has_toc = True
            in_code_block = not in_code_block
            continue
        if in_code_block:
            continue

        match = HEADING_RE.match(line)
        if match:
            headings.append((len(match.group(1)), line_number, stripped))

        if len(line) > MAX_LINE_LENGTH and not any(p.search(line) for p in LONG_LINE_EXCEPTIONS):
            long_lines.append((line_number, len(line)))

    if not has_toc:
        result.errors.append("Missing TOC block (```toc```)")

    h1_lines = [f"line {number}" for level, number, _ in headings if level == 1]
    if h1_lines:
        result.errors.append(f"H1 heading found (use H2+ only): {', '.join(h1_lines)}")

    for previous, current in zip(headings, headings[1:]):
        if current[0] > previous[0] + 1:
            result.warnings.append(
                f"Heading level skip at line {current[1]}: "
                f"H{previous[0]} → H{current[0]} ({current[2]})"
            )

    for number, length in long_lines[:MAX_REPORTED_LONG_LINES]:
        result.warnings.append(f"Line {number}: {length} chars (max {MAX_LINE_LENGTH})")
    if len(long_lines) > MAX_REPORTED_LONG_LINES:
        result.warnings.append(f"...and {len(long_lines) - MAX_REPORTED_LONG_LINES} more long lines")

    result.stats = {
        "has_toc": has_toc,
        "has_h1": bool(h1_lines),
        "heading_count": len(headings),
        "long_line_count": len(long_lines),
    }
    return result
