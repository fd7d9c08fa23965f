# blog/quality/frontmatter_check.py
"""
Frontmatter schema validation.

Checks required fields, that the category is a known one, the date format
and the shape of the tag list.
"""

import re

import yaml

from ..posts import split_frontmatter
from .base import CheckResult
from .categories import VALID_CATEGORIES

REQUIRED_FIELDS = ["title", "date", "category", "tags"]

DATE_PATTERNS = [
    re.compile(r"^\d{4}-\d{2}-\d{2}$"),  # 2025-08-23
    re.compile(r"^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}:\d{2}"),  # ISO 8601
]


def check_frontmatter(content: str) -> CheckResult:
    result = CheckResult()

    try:
        data, _ = split_frontmatter(content)
    except yaml.YAMLError as e:
        result.errors.append(f"Failed to parse frontmatter: {e}")
        return result

    for name in REQUIRED_FIELDS:
        if data.get(name) in (None, ""):
            result.errors.append(f"Missing required field: {name}")

    category = data.get("category")
    if category and not isinstance(category, str):
        result.errors.append(f"category must be a string, got: {type(category).__name__}")
    elif category and category not in VALID_CATEGORIES:
        valid = ", ".join(sorted(VALID_CATEGORIES))
        result.errors.append(f'Invalid category: "{category}". Valid: {valid}')

    if data.get("date"):
        date_str = str(data["date"])
        if not any(pattern.match(date_str) for pattern in DATE_PATTERNS):
            result.errors.append(f'Invalid date format: "{date_str}". Use YYYY-MM-DD or ISO 8601')

    tags = data.get("tags")
    if tags is not None:
        if not isinstance(tags, list):
            result.errors.append(f"tags must be a list, got: {type(tags).__name__}")
        elif not tags:
            result.warnings.append("tags list is empty")

    title = data.get("title")
    if isinstance(title, str) and re.search(r"['\"\\]", title):
        result.warnings.append("Title contains quotes or backslashes - may cause YAML issues")

    result.stats = {"fields": sorted(data)}
    return result
