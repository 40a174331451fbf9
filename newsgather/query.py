"""newsgather.query - gather a page as one document, or search Google News.

Basic usage::

    from newsgather.query import gather_article, gather_google_articles

    # Single-document mode: every <article> on the page, folded together
    text = gather_article("https://example.com/news/some-story")

    # Multi-article mode: headline records from a Google News search
    for article in gather_google_articles("AI"):
        print(article.headline, article.url)

Both calls open their own browser session and close it before returning.
To reuse a remote browser, pass a factory::

    from functools import partial
    from newsgather.session import NewsScraper

    factory = partial(NewsScraper.open, endpoint="ws://localhost:3000/")
    text = gather_article(url, session_factory=factory)

Low-level access::

    from newsgather.query import clean_html, gather_article_elements

    fragments = gather_article_elements(url)
    markdown = clean_html(fragments, SanitizationPolicy.all())
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed

from newsgather import settings
from newsgather.extractors.cleaner import SEARCH_POLICY, HtmlCleaner, SanitizationPolicy
from newsgather.extractors.headline import extract_url_headline
from newsgather.extractors.markdown import fold_articles, html_to_markdown
from newsgather.items import NewsArticle
from newsgather.session import NewsScraper

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], NewsScraper]

# Scripts and images stripped, anchors and sources kept.
ARTICLE_POLICY = SanitizationPolicy(remove_script_tags=True, remove_img_tags=True)


# ---------------------------------------------------------------------------
# Fragment transformation (pure, no I/O)
# ---------------------------------------------------------------------------

def _transform(html: str, policy: SanitizationPolicy, to_markdown: bool) -> str:
    cleaned = HtmlCleaner(policy).clean(html)
    return html_to_markdown(cleaned) if to_markdown else cleaned


def clean_html(
    elements: Sequence[str],
    policy: SanitizationPolicy,
    *,
    to_markdown: bool = True,
    max_workers: int | None = None,
) -> list[str]:
    """Sanitize each fragment and optionally convert it to Markdown.

    Fragments are processed on a :class:`~concurrent.futures.ThreadPoolExecutor`,
    each with its own copy of *policy*.  Results are returned in the same
    order as *elements* regardless of which finishes first.

    Args:
        elements:    Raw HTML fragments, in document order.
        policy:      Tag categories to strip.
        to_markdown: Convert the sanitized HTML to Markdown (default ``True``).
        max_workers: Thread pool size (default ``settings.MAX_WORKERS``).

    Returns:
        One string per fragment.
    """
    logger.debug("Cleaning %d HTML elements", len(elements))
    if not elements:
        return []

    workers = max(1, min(max_workers or settings.MAX_WORKERS, len(elements)))

    # Preserve input order: slot results by original index
    results: list[str] = [""] * len(elements)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {
            executor.submit(_transform, html, policy.copy(), to_markdown): i
            for i, html in enumerate(elements)
        }
        for future in as_completed(futures):
            results[futures[future]] = future.result()
    return results


# ---------------------------------------------------------------------------
# Fetch stage
# ---------------------------------------------------------------------------

def gather_article_elements(
    url: str,
    *,
    session_factory: SessionFactory | None = None,
) -> list[str]:
    """Open a browser session, read the content elements of *url*, close it.

    Raises:
        SessionEstablishmentFailure: no browser session could be opened.
        SessionUnavailable: the session was closed underneath the fetch.
        CommandFailure: navigation or element lookup failed.
    """
    factory = session_factory or NewsScraper.open
    scraper = factory()
    try:
        elements = scraper.get_elements(url)
    finally:
        scraper.close()
    logger.debug("Found %d elements on %s", len(elements), url)
    return elements


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def gather_article(
    url: str,
    policy: SanitizationPolicy = ARTICLE_POLICY,
    *,
    session_factory: SessionFactory | None = None,
    max_workers: int | None = None,
) -> str:
    """Return the content of *url* as a single Markdown document.

    Every content element is sanitized with *policy*, converted, and folded
    together with ``"\\n\\nNEW ARTICLE: "`` between consecutive elements.

    Raises:
        GatherError: If the page could not be fetched.  No partial document
            is returned.
    """
    elements = gather_article_elements(url, session_factory=session_factory)
    parsed_text = clean_html(elements, policy, to_markdown=True, max_workers=max_workers)
    return fold_articles(parsed_text)


def build_search_url(search_query: str) -> str:
    """Return the Google News search URL for *search_query* (used verbatim)."""
    return settings.GOOGLE_NEWS_SEARCH_URL.format(query=search_query)


def gather_google_articles(
    search_query: str,
    *,
    session_factory: SessionFactory | None = None,
    max_workers: int | None = None,
    base_url: str = settings.GOOGLE_NEWS_ORIGIN,
) -> list[NewsArticle]:
    """Search Google News and return the articles found.

    Each result element is sanitized with :data:`SEARCH_POLICY`, converted to
    Markdown and parsed for its first link and headline.  Elements without
    both are skipped; the remaining articles keep their page order.

    Raises:
        GatherError: If the search page could not be fetched.
    """
    url = build_search_url(search_query)
    elements = gather_article_elements(url, session_factory=session_factory)

    parsed_text = clean_html(elements, SEARCH_POLICY, to_markdown=True, max_workers=max_workers)

    articles: list[NewsArticle] = []
    for text in parsed_text:
        article = extract_url_headline(text, base_url=base_url)
        if article is not None:
            articles.append(article)

    logger.debug(
        "Extracted %d articles from %d elements for %r",
        len(articles), len(parsed_text), search_query,
    )
    return articles
