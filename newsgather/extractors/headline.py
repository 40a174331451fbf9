"""Headline extraction from converted Google News result fragments.

A result card converts to Markdown roughly like::

    [](./articles/CBMi...?hl=en-US&gl=US&ceid=US%3Aen)

    WIRED

    [

    #### How to Use Google's Gemini AI Right Now ####

    ](./articles/CBMi...?hl=en-US&gl=US&ceid=US%3Aen)

The first link target and the first closed ``####`` heading are taken; any
later candidates are ignored.  This is a heuristic for that one informal
shape, not a Markdown parser.
"""

from __future__ import annotations

import logging
import re

from newsgather.items import NewsArticle
from newsgather.settings import GOOGLE_NEWS_ORIGIN

logger = logging.getLogger(__name__)

_LINK_RE = re.compile(r"\[.*?\]\((.*?)\)")
_HEADLINE_RE = re.compile(r"#### (.*?) ####")


def _first_group(pattern: re.Pattern[str], text: str) -> str | None:
    match = pattern.search(text)
    return match.group(1) if match else None


def extract_url_headline(text: str, base_url: str = GOOGLE_NEWS_ORIGIN) -> NewsArticle | None:
    """Return a :class:`NewsArticle` parsed from *text*, or ``None``.

    Link targets are relative (``./articles/...``); the leading character is
    dropped and the remainder appended to *base_url*.  Partial matches (a
    link without a headline or the reverse) produce no record.

    The headline is returned exactly as it appears in the Markdown, so any
    escapes the converter added (``\\*``, ``\\_``) are kept.
    """
    target = _first_group(_LINK_RE, text)
    headline = _first_group(_HEADLINE_RE, text)

    if target is None or headline is None:
        return None
    if not target[1:] or not headline:
        logger.debug("Discarding empty link target or headline: %r / %r", target, headline)
        return None

    return NewsArticle(url=f"{base_url}{target[1:]}", headline=headline)
