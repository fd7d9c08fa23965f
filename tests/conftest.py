from pathlib import Path

import pytest

from blog.conf import BlogSettings


def write_post(root: Path, relative_path: str, body: str, frontmatter: str = "") -> Path:
    """Write a markdown post under ``root`` and return its path."""
    path = root / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    text = f"---\n{frontmatter.strip()}\n---\n{body}" if frontmatter else body
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def content_dirs(tmp_path):
    posts_dir = tmp_path / "_posts"
    drafts_dir = tmp_path / "_drafts"
    posts_dir.mkdir()
    drafts_dir.mkdir()
    return posts_dir, drafts_dir


@pytest.fixture
def blog_settings(content_dirs):
    posts_dir, drafts_dir = content_dirs
    return BlogSettings(posts_dir=posts_dir, drafts_dir=drafts_dir, environment="development")


@pytest.fixture
def django_blog_settings(settings, content_dirs):
    """Point the Django BLOG setting at the temporary content dirs."""
    posts_dir, drafts_dir = content_dirs
    settings.BLOG = {
        "POSTS_DIR": str(posts_dir),
        "DRAFTS_DIR": str(drafts_dir),
        "ENVIRONMENT": "development",
    }
    return settings
