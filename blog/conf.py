"""
Content engine settings.

Reads the ``BLOG`` dict from Django settings into an immutable value object
that is passed explicitly into the parser, the post queries and the
related-post scorer.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from django.conf import settings

PRODUCTION = "production"

DEFAULTS = {
    "POSTS_DIR": "_posts",
    "DRAFTS_DIR": "_drafts",
    "ENVIRONMENT": "development",
    "EXCERPT_LENGTH": 160,
    "RELATED_POSTS_LIMIT": 5,
    "RELATED_POSTS_MIN_SCORE": 0.2,
}


@dataclass(frozen=True)
class BlogSettings:
    posts_dir: Path
    drafts_dir: Path
    environment: str = "development"
    excerpt_length: int = 160
    related_posts_limit: int = 5
    related_posts_min_score: float = 0.2

    @property
    def is_production(self) -> bool:
        return self.environment == PRODUCTION

    def content_roots(self) -> List[Tuple[Path, bool]]:
        """
        Return ``(root, is_draft)`` pairs that posts are read from.

        Drafts are only visible outside production.
        """
        roots = [(self.posts_dir, False)]
        if not self.is_production:
            roots.append((self.drafts_dir, True))
        return roots

    def root_for(self, file_path: Path) -> Tuple[Path, bool]:
        """Return the content root containing ``file_path`` and its draft flag."""
        resolved = Path(file_path).resolve()
        for root, is_draft in ((self.drafts_dir, True), (self.posts_dir, False)):
            try:
                resolved.relative_to(Path(root).resolve())
            except ValueError:
                continue
            return root, is_draft
        return self.posts_dir, False

    @classmethod
    def from_settings(cls, overrides: Optional[dict] = None) -> "BlogSettings":
        values = dict(DEFAULTS)
        values.update(getattr(settings, "BLOG", None) or {})
        values.update(overrides or {})
        return cls(
            posts_dir=Path(values["POSTS_DIR"]),
            drafts_dir=Path(values["DRAFTS_DIR"]),
            environment=str(values["ENVIRONMENT"]),
            excerpt_length=int(values["EXCERPT_LENGTH"]),
            related_posts_limit=int(values["RELATED_POSTS_LIMIT"]),
            related_posts_min_score=float(values["RELATED_POSTS_MIN_SCORE"]),
        )


def get_blog_settings() -> BlogSettings:
    return BlogSettings.from_settings()
