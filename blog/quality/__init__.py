from .categories import CATEGORIES, CATEGORY_KEYS, get_category_config
from .frontmatter_check import check_frontmatter
from .structure_check import check_structure
from .tone_check import check_tone
from .validate import ValidationResult, validate_content, validate_post

__all__ = (
    "CATEGORIES",
    "CATEGORY_KEYS",
    "ValidationResult",
    "check_frontmatter",
    "check_structure",
    "check_tone",
    "get_category_config",
    "validate_content",
    "validate_post",
)
