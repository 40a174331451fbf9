"""Convert sanitized HTML to Markdown and fold converted fragments together."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

logger = logging.getLogger(__name__)

_EXCESSIVE_BLANK_LINES_RE = re.compile(r"\n{3,}")
_TRAILING_WHITESPACE_RE = re.compile(r"[ \t]+$", re.MULTILINE)

# Inserted between consecutive fragments by fold_articles().
ARTICLE_SEPARATOR = "\n\nNEW ARTICLE: "


def html_to_markdown(html: str) -> str:
    """Convert *html* to Markdown.

    Uses markdownify with closed ATX headings (``#### Title ####``), which is
    the shape :func:`~newsgather.extractors.headline.extract_url_headline`
    looks for.  Post-processes to:
    - Strip trailing whitespace from lines
    - Remove excessive blank lines (>2 consecutive)

    Never raises; an empty result is a valid result.
    """
    if not html or not html.strip():
        return ""

    try:
        from markdownify import ATX_CLOSED, markdownify  # type: ignore[import-untyped]

        md = markdownify(html, heading_style=ATX_CLOSED, bullets="-")
    except Exception as exc:
        # Graceful fallback: strip tags and return plain text
        logger.debug("markdownify failed, falling back to plain text: %s", exc)
        from bs4 import BeautifulSoup

        soup = BeautifulSoup(html, "lxml")
        md = soup.get_text(separator="\n")

    md = _TRAILING_WHITESPACE_RE.sub("", md)
    md = _EXCESSIVE_BLANK_LINES_RE.sub("\n\n", md)
    return md.strip()


def fold_articles(articles: Iterable[str]) -> str:
    """Join converted fragments into one document.

    Fragments keep their order and are separated by :data:`ARTICLE_SEPARATOR`.
    A separator is only added once the document holds some text, so leading
    empty fragments (an image-only card, an unreadable element) never put one
    at the start.  An empty input gives an empty string.

    Example::

        >>> fold_articles(["a", "b"])
        'a\\n\\nNEW ARTICLE: b'
        >>> fold_articles(["", "b"])
        'b'
    """
    folded = ""
    for text in articles:
        if folded:
            folded += ARTICLE_SEPARATOR
        folded += text
    return folded
