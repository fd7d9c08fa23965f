from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Optional, Sequence

from .conf import BlogSettings, get_blog_settings
from .posts import PostData, parse_post_date

logger = logging.getLogger(__name__)

TAG_WEIGHT = 0.7
CATEGORY_WEIGHT = 0.3
LIMIT_DEFAULT = 5
MIN_SCORE_DEFAULT = 0.2


@dataclass(frozen=True)
class RelatedPost:
    slug: str
    title: str
    category: str
    date: str
    tags: List[str] = field(default_factory=list)
    score: float = 0.0

    @classmethod
    def from_post(cls, post: PostData, score: float) -> "RelatedPost":
        return cls(
            slug=post.slug,
            title=post.front_matter.title,
            category=post.front_matter.category,
            date=post.front_matter.date,
            tags=list(post.front_matter.tags),
            score=score,
        )

    def to_dict(self) -> dict:
        return {
            "slug": self.slug,
            "title": self.title,
            "category": self.category,
            "date": self.date,
            "tags": list(self.tags),
            "score": self.score,
        }


def calculate_tag_similarity(tags1: Iterable[str], tags2: Iterable[str]) -> float:
    """Case-insensitive Jaccard similarity of two tag lists."""
    set_a = {tag.lower() for tag in tags1}
    set_b = {tag.lower() for tag in tags2}
    if not set_a or not set_b:
        return 0.0
    intersection = set_a & set_b
    if not intersection:
        return 0.0
    union = set_a | set_b
    return len(intersection) / len(union)


def calculate_category_similarity(category1: str, category2: str) -> float:
    return 1.0 if category1.lower() == category2.lower() else 0.0


def calculate_relevance_score(current: PostData, candidate: PostData) -> float:
    tag_score = calculate_tag_similarity(current.front_matter.tags, candidate.front_matter.tags)
    category_score = calculate_category_similarity(
        current.front_matter.category, candidate.front_matter.category
    )
    return TAG_WEIGHT * tag_score + CATEGORY_WEIGHT * category_score


def _candidates(current: PostData, all_posts: Sequence[PostData], config: BlogSettings):
    """Every post except ``current``; drafts only outside production."""
    for post in all_posts:
        if post.slug == current.slug:
            continue
        if post.is_draft and config.is_production:
            continue
        yield post


def get_related_posts(
    current: PostData,
    all_posts: Sequence[PostData],
    limit: int = LIMIT_DEFAULT,
    min_score: float = MIN_SCORE_DEFAULT,
    *,
    config: Optional[BlogSettings] = None,
) -> List[RelatedPost]:
    """
    Return up to ``limit`` posts ordered by relevance to ``current``.

    Relevance weighs tag overlap (Jaccard) at 70% and an exact category match
    at 30%. Results below ``min_score`` are discarded.
    """
    config = config or get_blog_settings()

    scored = []
    for post in _candidates(current, all_posts, config):
        score = calculate_relevance_score(current, post)
        if score < min_score:
            continue
        scored.append(RelatedPost.from_post(post, score))

    scored.sort(key=lambda related: related.score, reverse=True)
    logger.debug("%d related posts for %s", len(scored), current.slug)
    return scored[:limit]


def _date_key(related: RelatedPost) -> datetime:
    return parse_post_date(related.date) or datetime.min


def get_category_posts(
    current: PostData,
    all_posts: Sequence[PostData],
    limit: int = LIMIT_DEFAULT,
    *,
    config: Optional[BlogSettings] = None,
) -> List[RelatedPost]:
    """Posts in the same category as ``current``, newest first."""
    config = config or get_blog_settings()
    category = current.front_matter.category.lower()

    matches = [
        RelatedPost.from_post(post, 1.0)
        for post in _candidates(current, all_posts, config)
        if post.front_matter.category.lower() == category
    ]
    matches.sort(key=_date_key, reverse=True)
    return matches[:limit]


def get_tag_posts(
    current: PostData,
    all_posts: Sequence[PostData],
    limit: int = LIMIT_DEFAULT,
    *,
    config: Optional[BlogSettings] = None,
) -> List[RelatedPost]:
    """Posts sharing at least one tag with ``current``, by tag similarity."""
    config = config or get_blog_settings()
    current_tags = {tag.lower() for tag in current.front_matter.tags}

    matches = []
    for post in _candidates(current, all_posts, config):
        if not any(tag.lower() in current_tags for tag in post.front_matter.tags):
            continue
        score = calculate_tag_similarity(current.front_matter.tags, post.front_matter.tags)
        matches.append(RelatedPost.from_post(post, score))

    matches.sort(key=lambda related: related.score, reverse=True)
    return matches[:limit]
