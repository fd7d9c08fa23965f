"""Run every quality check against a post file."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from .base import CheckResult
from .frontmatter_check import check_frontmatter
from .structure_check import check_structure
from .tone_check import check_tone


@dataclass
class ValidationResult:
    file: str
    frontmatter: CheckResult
    tone: CheckResult
    structure: CheckResult
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.errors


def validate_content(content: str, file: str = "<string>") -> ValidationResult:
    checks = {
        "frontmatter": check_frontmatter(content),
        "tone": check_tone(content),
        "structure": check_structure(content),
    }

    result = ValidationResult(file=file, **checks)
    for name, check in checks.items():
        result.errors.extend(f"[{name}] {error}" for error in check.errors)
        result.warnings.extend(f"[{name}] {warning}" for warning in check.warnings)
    return result


def validate_post(file_path) -> ValidationResult:
    """
    Validate a markdown post on disk.

    Raises:
        OSError: The file cannot be read
    """
    file_path = Path(file_path)
    return validate_content(file_path.read_text(encoding="utf-8"), file=str(file_path))
