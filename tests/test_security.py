"""Tests for safe text extraction and id sanitization."""

import re

from blog.security import (
    NO_ID,
    NO_TEXT,
    safe_extract_heading_text,
    safe_extract_text,
    safe_truncate,
    sanitize_id,
)


class TestSafeExtractText:
    def test_script_tag_removed(self):
        result = safe_extract_text('<script>alert("xss")</script>Hello')
        assert "Hello" in result
        assert "script" not in result
        assert "alert" not in result

    def test_nested_script_removed(self):
        result = safe_extract_text('<div><script>alert("xss")</script>Safe Text</div>')
        assert result == "Safe Text"

    def test_event_handler_attribute_dropped(self):
        result = safe_extract_text("<span onload=\"alert('xss')\">Text</span>")
        assert result == "Text"

    def test_protocols_scrubbed(self):
        result = safe_extract_text("click javascript:void vbscript:x data:text")
        assert "javascript:" not in result
        assert "vbscript:" not in result
        assert "data:" not in result

    def test_call_patterns_scrubbed(self):
        result = safe_extract_text("before eval(code) middle expression(1) after")
        assert "eval" not in result
        assert "expression" not in result
        assert result == "before middle after"

    def test_whitespace_collapsed(self):
        assert safe_extract_text("<p>one\n\n   two</p>\t three") == "one two three"

    def test_empty_input_returns_sentinel(self):
        assert safe_extract_text("") == NO_TEXT
        assert safe_extract_text(None) == NO_TEXT
        assert safe_extract_text(42) == NO_TEXT

    def test_markup_only_returns_sentinel(self):
        assert safe_extract_text("<script>alert(1)</script>") == NO_TEXT

    def test_truncates_with_ellipsis(self):
        result = safe_extract_text("a" * 60)
        assert result == "a" * 40 + "..."

    def test_min_length(self):
        assert safe_extract_text("<b>A</b>") == NO_TEXT
        assert safe_extract_text("<b>A</b>", min_length=1) == "A"
        assert safe_extract_text("<b> </b>", min_length=1) == NO_TEXT

    def test_truncation_disabled(self):
        assert safe_extract_text("a" * 60, max_length=None) == "a" * 60

    def test_korean_text_kept(self):
        assert safe_extract_text("<strong>안녕하세요</strong> 반갑습니다") == "안녕하세요 반갑습니다"


class TestSafeExtractHeadingText:
    def test_heading_content(self):
        assert safe_extract_heading_text('<h2 id="x">Getting <em>Started</em></h2>') == "Getting Started"

    def test_invalid_input(self):
        assert safe_extract_heading_text(None) == NO_TEXT


class TestSanitizeId:
    def test_script_removed(self):
        result = sanitize_id("test<script>alert(1)</script>")
        assert re.fullmatch(r"[A-Za-z0-9._-]+", result)
        assert "script" not in result
        assert "alert" not in result

    def test_invalid_characters_removed(self):
        assert sanitize_id("my id!@#with$chars") == "myidwithchars"

    def test_valid_id_unchanged(self):
        assert sanitize_id("section-1.2_a") == "section-1.2_a"

    def test_empty_results_in_sentinel(self):
        assert sanitize_id("") == NO_ID
        assert sanitize_id(None) == NO_ID
        assert sanitize_id("목차") == NO_ID


class TestSafeTruncate:
    def test_short_text_unchanged(self):
        assert safe_truncate("short", 10) == "short"

    def test_cuts_at_late_word_boundary(self):
        assert safe_truncate("hello world again", 15) == "hello world..."

    def test_cuts_mid_word_when_boundary_too_early(self):
        assert safe_truncate("hi abcdefghijklmnop", 10) == "hi abcdefg..."

    def test_invalid_input(self):
        assert safe_truncate(None, 10) == ""
