from dataclasses import dataclass, field
from typing import Iterator, List, Tuple


@dataclass
class CheckResult:
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    stats: dict = field(default_factory=dict)


def iter_body_lines(content: str) -> Iterator[Tuple[int, str]]:
    """
    Yield ``(line_number, line)`` for every line outside the frontmatter block.

    Only the first two ``---`` lines delimit frontmatter; later ones are
    horizontal rules and are yielded like any other line.
    """
    delimiter_count = 0
    in_frontmatter = False
    for index, line in enumerate(content.split("\n"), start=1):
        if line.strip() == "---" and delimiter_count < 2:
            delimiter_count += 1
            in_frontmatter = delimiter_count == 1
            continue
        if in_frontmatter:
            continue
        yield index, line
