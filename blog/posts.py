"""
Markdown posts on disk.

Posts live under the posts root (and, outside production, the drafts root)
as ``{category}/{year}/{month}/{day}/{filename}.md``, each starting with a
YAML frontmatter block. Nothing is cached: every call reads and parses the
files again.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml
from dateutil import parser as date_parser

from .conf import BlogSettings, get_blog_settings
from .markdown import build_table_of_contents, generate_excerpt, render_markdown

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "Uncategorized"
# Opening and closing delimiters must each be a whole "---" line
FRONTMATTER_RE = re.compile(r"\A---[ \t]*\n(.*?)^---[ \t]*$\n?", re.DOTALL | re.MULTILINE)


@dataclass(frozen=True)
class FrontMatter:
    category: str
    date: str
    title: str
    tags: List[str] = field(default_factory=list)
    featured_image: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category,
            "date": self.date,
            "title": self.title,
            "tags": list(self.tags),
            "featuredImage": self.featured_image,
        }


@dataclass(frozen=True)
class PostData:
    slug: str
    front_matter: FrontMatter
    content: str
    html_content: str
    excerpt: str
    path: str
    table_of_contents: str
    is_draft: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "slug": self.slug,
            "frontMatter": self.front_matter.to_dict(),
            "content": self.content,
            "htmlContent": self.html_content,
            "excerpt": self.excerpt,
            "path": self.path,
            "tableOfContents": self.table_of_contents,
            "isDraft": self.is_draft,
        }


def split_frontmatter(raw: str) -> Tuple[dict, str]:
    """
    Split a leading ``---`` YAML block from the markdown body.

    Text without a frontmatter block comes back whole with empty metadata.
    YAML errors propagate.
    """
    match = FRONTMATTER_RE.match(raw)
    if not match:
        return {}, raw

    metadata = yaml.safe_load(match.group(1)) or {}
    if not isinstance(metadata, dict):
        metadata = {}
    return metadata, raw[match.end():].lstrip("\n")


def _normalize_date(value) -> Optional[str]:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if value:
        return str(value)
    return None


def build_front_matter(metadata: dict, file_path: Path) -> FrontMatter:
    """Fill in defaults for missing or unusable frontmatter fields."""
    category = metadata.get("category") or DEFAULT_CATEGORY
    post_date = _normalize_date(metadata.get("date")) or date.today().isoformat()
    title = metadata.get("title") or file_path.stem

    tags = metadata.get("tags")
    tags = [str(tag) for tag in tags if tag] if isinstance(tags, list) else []

    missing = [name for name in ("category", "date", "title") if not metadata.get(name)]
    if missing:
        logger.debug("Defaulted frontmatter fields %s for %s", ", ".join(missing), file_path)

    return FrontMatter(
        category=str(category),
        date=post_date,
        title=str(title),
        tags=tags,
        featured_image=metadata.get("featuredImage") or None,
    )


def parse_markdown_file(
    file_path,
    config: Optional[BlogSettings] = None,
    *,
    root: Optional[Path] = None,
    is_draft: Optional[bool] = None,
) -> PostData:
    """
    Parse a markdown file into a ``PostData``.

    Args:
        file_path: Path to the markdown file
        config: Content settings (defaults to Django settings)
        root: Content root the file lives under; detected from ``config`` if omitted
        is_draft: Draft flag; detected from ``config`` if omitted

    Raises:
        OSError: The file cannot be read
        yaml.YAMLError: The frontmatter is malformed
        RuntimeError: Pandoc failed to convert the body
    """
    config = config or get_blog_settings()
    file_path = Path(file_path)

    if root is None:
        root, detected_draft = config.root_for(file_path)
        if is_draft is None:
            is_draft = detected_draft

    relative_path = file_path.resolve().relative_to(Path(root).resolve()).as_posix()

    raw = file_path.read_text(encoding="utf-8")
    metadata, content = split_frontmatter(raw)
    front_matter = build_front_matter(metadata, file_path)

    html = render_markdown(content, {"relative_path": relative_path})
    html, table_of_contents = build_table_of_contents(html)

    slug = relative_path[: -len(".md")] if relative_path.endswith(".md") else relative_path

    return PostData(
        slug=slug,
        front_matter=front_matter,
        content=content,
        html_content=html,
        excerpt=generate_excerpt(content, config.excerpt_length),
        path=relative_path,
        table_of_contents=table_of_contents,
        is_draft=bool(is_draft),
    )


def get_all_markdown_files(config: Optional[BlogSettings] = None) -> List[Tuple[Path, Path, bool]]:
    """Return ``(file, root, is_draft)`` for every markdown file under the content roots."""
    config = config or get_blog_settings()
    files = []
    for root, is_draft in config.content_roots():
        root = Path(root)
        if not root.is_dir():
            logger.debug("Content root %s does not exist, skipping", root)
            continue
        for file_path in sorted(root.glob("**/*.md")):
            files.append((file_path, root, is_draft))
    return files


def parse_post_date(value: str) -> Optional[datetime]:
    """Parse a frontmatter date as a naive datetime, or ``None`` if it is unusable."""
    try:
        return date_parser.parse(value).replace(tzinfo=None)
    except (ValueError, OverflowError):
        return None


def _date_sort_key(post: PostData) -> datetime:
    parsed = parse_post_date(post.front_matter.date)
    if parsed is None:
        logger.warning("Unparsable date %r in %s", post.front_matter.date, post.path)
        return datetime.min
    return parsed


def get_all_posts(config: Optional[BlogSettings] = None) -> List[PostData]:
    """Parse every post, newest first."""
    config = config or get_blog_settings()
    posts = [
        parse_markdown_file(file_path, config, root=root, is_draft=is_draft)
        for file_path, root, is_draft in get_all_markdown_files(config)
    ]
    return sorted(posts, key=_date_sort_key, reverse=True)


def get_post_by_slug(slug: str, config: Optional[BlogSettings] = None) -> Optional[PostData]:
    config = config or get_blog_settings()
    for file_path, root, is_draft in get_all_markdown_files(config):
        relative = file_path.relative_to(root).as_posix()
        if relative[: -len(".md")] == slug:
            return parse_markdown_file(file_path, config, root=root, is_draft=is_draft)
    return None


def get_all_categories(config: Optional[BlogSettings] = None) -> List[str]:
    return sorted({post.front_matter.category for post in get_all_posts(config)})


def get_all_tags(config: Optional[BlogSettings] = None) -> List[str]:
    """Tags and categories together; categories double as tags."""
    posts = get_all_posts(config)
    combined = {tag for post in posts for tag in post.front_matter.tags}
    combined.update(post.front_matter.category for post in posts)
    return sorted(combined)


def get_posts_by_category(category: str, config: Optional[BlogSettings] = None) -> List[PostData]:
    return [post for post in get_all_posts(config) if post.front_matter.category == category]


def get_posts_by_tag(tag: str, config: Optional[BlogSettings] = None) -> List[PostData]:
    return [
        post
        for post in get_all_posts(config)
        if tag in post.front_matter.tags or post.front_matter.category == tag
    ]
