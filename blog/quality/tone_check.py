# blog/quality/tone_check.py
"""
존댓말 (formal Korean) tone checker.

Counts sentences ending in formal and informal (반말) forms and flags posts
that drift away from a consistently formal tone.
"""

import re

from .base import CheckResult, iter_body_lines

FORMAL_ENDINGS = [
    re.compile(r"습니다[.!?]?\s*$"),
    re.compile(r"[가-힣]니다[.!?]?\s*$"),  # 합니다, 됩니다, 봅니다: ㅂ batchim is part of the syllable
    re.compile(r"세요[.!?]?\s*$"),
    re.compile(r"겠습니다[.!?]?\s*$"),
    re.compile(r"시오[.!?]?\s*$"),
    re.compile(r"입니다[.!?]?\s*$"),
]

INFORMAL_ENDINGS = [
    re.compile(r"[^다]다[.!?]?\s*$"),  # ~다, but not 습니다/ㅂ니다
    re.compile(r"[^요]야[.!?]?\s*$"),
    re.compile(r"거든[.!?]?\s*$"),
    re.compile(r"잖아[.!?]?\s*$"),
    re.compile(r"는데[.!?]?\s*$"),
]

MIN_FORMAL_RATIO = 0.5
MAX_INFORMAL_LINES = 2
MIN_LINE_LENGTH = 5

_SKIP_PREFIXES = ("#", "```", "|", "-", "*", ">", "!", "[")
_NUMBERED_LIST_RE = re.compile(r"^\d+\.")


def should_skip_line(line: str) -> bool:
    """Headings, code fences, tables, lists, quotes, images, links and short lines."""
    stripped = line.strip()
    if not stripped:
        return True
    if stripped.startswith(_SKIP_PREFIXES):
        return True
    if _NUMBERED_LIST_RE.match(stripped):
        return True
    return len(stripped) < MIN_LINE_LENGTH


def check_tone(content: str) -> CheckResult:
    result = CheckResult()
    stats = {"formal": 0, "informal": 0, "neutral": 0, "total": 0}

    in_code_block = False
    for line_number, line in iter_body_lines(content):
        if line.strip().startswith("```"):
            in_code_block = not in_code_block
            continue
        if in_code_block or should_skip_line(line):
            continue

        stats["total"] += 1
        if any(pattern.search(line) for pattern in FORMAL_ENDINGS):
            stats["formal"] += 1
        elif any(pattern.search(line) for pattern in INFORMAL_ENDINGS):
            stats["informal"] += 1
            result.warnings.append(
                f'Line {line_number}: Informal tone detected: "{line.strip()[-20:]}"'
            )
        else:
            stats["neutral"] += 1

    judged = stats["formal"] + stats["informal"]
    if judged:
        formal_ratio = stats["formal"] / judged
        if formal_ratio < MIN_FORMAL_RATIO and stats["informal"] > MAX_INFORMAL_LINES:
            result.errors.append(
                f"Low formality ratio: {formal_ratio * 100:.0f}% "
                f"({stats['formal']} formal, {stats['informal']} informal sentences)"
            )

    result.stats = stats
    return result
