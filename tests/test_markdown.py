"""Tests for newsgather.extractors.markdown (conversion and folding)."""

from __future__ import annotations

from unittest.mock import patch

from newsgather.extractors.cleaner import SanitizationPolicy, clean_html_markup
from newsgather.extractors.markdown import ARTICLE_SEPARATOR, fold_articles, html_to_markdown

# ---------------------------------------------------------------------------
# html_to_markdown
# ---------------------------------------------------------------------------

class TestHtmlToMarkdown:
    def test_empty_input(self):
        assert html_to_markdown("") == ""
        assert html_to_markdown("   \n ") == ""

    def test_closed_atx_heading(self):
        assert html_to_markdown("<h4>Title</h4>") == "#### Title ####"

    def test_link_rendered_inline(self):
        md = html_to_markdown('<p><a href="./articles/abc">Story</a></p>')
        assert md == "[Story](./articles/abc)"

    def test_no_excessive_blank_lines(self):
        md = html_to_markdown("<p>a</p><br><br><br><br><p>b</p>")
        assert "\n\n\n" not in md

    def test_no_trailing_whitespace(self):
        md = html_to_markdown("<p>one   </p><p>two</p>")
        assert all(line == line.rstrip() for line in md.splitlines())

    def test_sanitized_article_keeps_text(self, article_html):
        cleaned = clean_html_markup(article_html, SanitizationPolicy.all())
        md = html_to_markdown(cleaned)
        assert "Battery Prices Fall Again" in md
        assert "a new industry report" in md
        assert "](" not in md  # anchors were stripped before conversion

    def test_fallback_to_plain_text(self):
        with patch("markdownify.markdownify", side_effect=RuntimeError("boom")):
            md = html_to_markdown("<p>Hello</p><p>World</p>")
        assert "Hello" in md
        assert "World" in md


# ---------------------------------------------------------------------------
# fold_articles
# ---------------------------------------------------------------------------

class TestFoldArticles:
    def test_empty_sequence(self):
        assert fold_articles([]) == ""

    def test_single_fragment_has_no_separator(self):
        assert fold_articles(["a"]) == "a"

    def test_two_fragments(self):
        assert fold_articles(["a", "b"]) == "a\n\nNEW ARTICLE: b"

    def test_order_preserved(self):
        folded = fold_articles(["first", "second", "third"])
        assert folded == f"first{ARTICLE_SEPARATOR}second{ARTICLE_SEPARATOR}third"

    def test_no_leading_or_trailing_separator(self):
        folded = fold_articles(["x", "y", "z"])
        assert not folded.startswith(ARTICLE_SEPARATOR)
        assert not folded.endswith(ARTICLE_SEPARATOR)
        assert folded.count(ARTICLE_SEPARATOR) == 2

    def test_leading_empty_fragments_add_no_separator(self):
        assert fold_articles(["", "b"]) == "b"
        assert fold_articles(["", "", "b"]) == "b"
        assert fold_articles(["", ""]) == ""

    def test_empty_fragment_after_text_keeps_separator(self):
        assert fold_articles(["a", ""]) == "a\n\nNEW ARTICLE: "
        assert fold_articles(["a", "", "b"]) == "a\n\nNEW ARTICLE: \n\nNEW ARTICLE: b"

    def test_accepts_generator(self):
        assert fold_articles(s for s in ("a", "b")) == "a\n\nNEW ARTICLE: b"
