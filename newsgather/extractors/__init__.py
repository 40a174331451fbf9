"""Extraction sub-package: sanitization, Markdown conversion, headline parsing."""

from .cleaner import SEARCH_POLICY, HtmlCleaner, SanitizationPolicy, clean_html_markup
from .headline import extract_url_headline
from .markdown import ARTICLE_SEPARATOR, fold_articles, html_to_markdown

__all__ = [
    "ARTICLE_SEPARATOR",
    "SEARCH_POLICY",
    "HtmlCleaner",
    "SanitizationPolicy",
    "clean_html_markup",
    "extract_url_headline",
    "fold_articles",
    "html_to_markdown",
]
