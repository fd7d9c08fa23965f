"""Tests for post parsing and queries. These render through pandoc."""

from datetime import date, datetime
from pathlib import Path

import pytest
import yaml
from bs4 import BeautifulSoup

from blog.conf import BlogSettings
from blog.posts import (
    DEFAULT_CATEGORY,
    build_front_matter,
    get_all_categories,
    get_all_markdown_files,
    get_all_posts,
    get_all_tags,
    get_post_by_slug,
    get_posts_by_category,
    get_posts_by_tag,
    parse_markdown_file,
    parse_post_date,
    split_frontmatter,
)

from .conftest import write_post

POST_BODY = """```toc
```

## Intro

Hello :smile:

![diagram](images/x.png)

### Detail

Some detail.

## Outro

Bye.
"""


class TestSplitFrontmatter:
    def test_splits_yaml_block(self):
        metadata, body = split_frontmatter("---\ntitle: Hello\ntags: [a, b]\n---\n\nBody text\n")
        assert metadata == {"title": "Hello", "tags": ["a", "b"]}
        assert body == "Body text\n"

    def test_no_frontmatter(self):
        assert split_frontmatter("# Just markdown") == ({}, "# Just markdown")

    def test_empty_frontmatter(self):
        assert split_frontmatter("---\n---\nBody") == ({}, "Body")

    def test_dashes_inside_value(self):
        metadata, body = split_frontmatter("---\ntitle: A --- B\ncategory: dev\n---\nbody\n")
        assert metadata == {"title": "A --- B", "category": "dev"}
        assert body == "body\n"

    def test_horizontal_rule_in_body_kept(self):
        metadata, body = split_frontmatter("---\ntitle: T\n---\nintro\n\n---\n\noutro\n")
        assert metadata == {"title": "T"}
        assert body == "intro\n\n---\n\noutro\n"

    def test_unclosed_block_is_body(self):
        raw = "---\ntitle: T\nno closing line\n"
        assert split_frontmatter(raw) == ({}, raw)

    def test_malformed_yaml_raises(self):
        with pytest.raises(yaml.YAMLError):
            split_frontmatter("---\ntitle: [unclosed\n---\nBody")


class TestParsePostDate:
    def test_formats(self):
        assert parse_post_date("2024-01-15") == datetime(2024, 1, 15)
        assert parse_post_date("2024-01-15T10:30:00+09:00") == datetime(2024, 1, 15, 10, 30)

    def test_unusable(self):
        assert parse_post_date("not a date") is None
        assert parse_post_date("") is None


class TestBuildFrontMatter:
    def test_defaults(self):
        front_matter = build_front_matter({}, Path("dev/2024/01/15/my-post.md"))
        assert front_matter.category == DEFAULT_CATEGORY
        assert front_matter.title == "my-post"
        assert front_matter.date == date.today().isoformat()
        assert front_matter.tags == []
        assert front_matter.featured_image is None

    def test_date_objects_normalized(self):
        front_matter = build_front_matter({"date": date(2024, 1, 15)}, Path("p.md"))
        assert front_matter.date == "2024-01-15"

    def test_falsy_tags_filtered(self):
        front_matter = build_front_matter({"tags": ["python", "", None, "django"]}, Path("p.md"))
        assert front_matter.tags == ["python", "django"]

    def test_non_list_tags_ignored(self):
        assert build_front_matter({"tags": "python"}, Path("p.md")).tags == []

    def test_featured_image(self):
        front_matter = build_front_matter({"featuredImage": "/images/cover.png"}, Path("p.md"))
        assert front_matter.to_dict()["featuredImage"] == "/images/cover.png"


class TestParseMarkdownFile:
    @pytest.fixture
    def post(self, blog_settings):
        path = write_post(
            blog_settings.posts_dir,
            "dev/2024/01/15/example.md",
            POST_BODY,
            "title: Example\ncategory: dev\ndate: 2024-01-15\ntags: [python, pandoc]",
        )
        return parse_markdown_file(path, blog_settings)

    def test_slug_and_path(self, post):
        assert post.slug == "dev/2024/01/15/example"
        assert post.path == "dev/2024/01/15/example.md"
        assert post.is_draft is False

    def test_front_matter(self, post):
        assert post.front_matter.title == "Example"
        assert post.front_matter.category == "dev"
        assert post.front_matter.date == "2024-01-15"
        assert post.front_matter.tags == ["python", "pandoc"]

    def test_image_path_rewritten(self, post):
        soup = BeautifulSoup(post.html_content, "html.parser")
        assert soup.find("img")["src"] == "/images/dev/2024/01/15/images/x.png"

    def test_emoji_rendered(self, post):
        assert "😄" in post.html_content

    def test_headings_linked(self, post):
        soup = BeautifulSoup(post.html_content, "html.parser")
        for heading in soup.find_all(["h2", "h3"]):
            assert heading.get("id")
            assert heading.a["href"] == f"#{heading['id']}"

    def test_generated_toc_removed_from_body(self, post):
        assert "Table of Contents" not in post.html_content
        soup = BeautifulSoup(post.html_content, "html.parser")
        assert soup.find("ul") is None

    def test_table_of_contents(self, post):
        soup = BeautifulSoup(post.table_of_contents, "html.parser")
        assert [a["href"] for a in soup.find_all("a")] == ["#intro", "#detail", "#outro"]

    def test_excerpt(self, post):
        assert post.excerpt.startswith("Intro Hello :smile:")
        assert "#" not in post.excerpt

    def test_content_is_raw_body(self, post):
        assert post.content == POST_BODY

    def test_to_dict_keys(self, post):
        data = post.to_dict()
        assert set(data) == {
            "slug", "frontMatter", "content", "htmlContent",
            "excerpt", "path", "tableOfContents", "isDraft",
        }

    def test_draft_detected_from_root(self, blog_settings):
        path = write_post(blog_settings.drafts_dir, "dev/2024/02/01/draft.md", "Draft body", "title: Draft")
        post = parse_markdown_file(path, blog_settings)
        assert post.is_draft is True
        assert post.slug == "dev/2024/02/01/draft"

    def test_korean_heading_ids(self, blog_settings):
        path = write_post(blog_settings.posts_dir, "a/2024/01/01/ko.md", "## 소개\n\n본문\n\n## 설치 방법\n\n본문\n")
        post = parse_markdown_file(path, blog_settings)
        soup = BeautifulSoup(post.table_of_contents, "html.parser")
        assert [a.get_text() for a in soup.find_all("a")] == ["소개", "설치 방법"]

    def test_malformed_frontmatter_raises(self, blog_settings):
        path = write_post(blog_settings.posts_dir, "broken.md", "Body", "title: [unclosed")
        with pytest.raises(yaml.YAMLError):
            parse_markdown_file(path, blog_settings)


@pytest.fixture
def populated(blog_settings):
    posts_dir, drafts_dir = blog_settings.posts_dir, blog_settings.drafts_dir
    write_post(posts_dir, "dev/2024/01/15/older.md", "Old", "title: Older\ncategory: dev\ndate: 2024-01-15\ntags: [python]")
    write_post(posts_dir, "dev/2024/03/01/newer.md", "New", "title: Newer\ncategory: dev\ndate: 2024-03-01\ntags: [django]")
    write_post(posts_dir, "life/2023/12/24/xmas.md", "Xmas", "title: Xmas\ncategory: life\ndate: 2023-12-24")
    write_post(drafts_dir, "dev/2024/04/01/draft.md", "Draft", "title: Draft\ncategory: dev\ndate: 2024-04-01\ntags: [python]")
    return blog_settings


class TestQueries:
    def test_newest_first(self, populated):
        titles = [post.front_matter.title for post in get_all_posts(populated)]
        assert titles == ["Draft", "Newer", "Older", "Xmas"]

    def test_drafts_hidden_in_production(self, populated):
        production = BlogSettings(
            posts_dir=populated.posts_dir,
            drafts_dir=populated.drafts_dir,
            environment="production",
        )
        posts = get_all_posts(production)
        assert all(not post.is_draft for post in posts)
        assert "Draft" not in [post.front_matter.title for post in posts]
        assert get_post_by_slug("dev/2024/04/01/draft", production) is None

    def test_draft_flag_outside_production(self, populated):
        drafts = [post for post in get_all_posts(populated) if post.is_draft]
        assert [post.slug for post in drafts] == ["dev/2024/04/01/draft"]

    def test_get_post_by_slug(self, populated):
        post = get_post_by_slug("dev/2024/03/01/newer", populated)
        assert post.front_matter.title == "Newer"
        assert get_post_by_slug("missing/post", populated) is None

    def test_categories(self, populated):
        assert get_all_categories(populated) == ["dev", "life"]

    def test_tags_include_categories(self, populated):
        assert get_all_tags(populated) == ["dev", "django", "life", "python"]

    def test_posts_by_category(self, populated):
        slugs = [post.slug for post in get_posts_by_category("life", populated)]
        assert slugs == ["life/2023/12/24/xmas"]

    def test_posts_by_tag_matches_category(self, populated):
        assert [p.front_matter.title for p in get_posts_by_tag("python", populated)] == ["Draft", "Older"]
        assert len(get_posts_by_tag("dev", populated)) == 3

    def test_missing_drafts_root(self, tmp_path):
        config = BlogSettings(posts_dir=tmp_path / "_posts", drafts_dir=tmp_path / "none")
        assert get_all_markdown_files(config) == []
