"""newsgather - rendered news pages as Markdown, or as headline records.

Single-page usage::

    from newsgather import gather_article

    text = gather_article("https://example.com/news/some-story")

Google News search::

    from newsgather import gather_google_articles

    for article in gather_google_articles("AI"):
        print(article.headline, article.url)

Custom sanitization::

    from newsgather import SanitizationPolicy, gather_article

    policy = SanitizationPolicy.all()
    text = gather_article("https://example.com/news/some-story", policy)

A Playwright Chromium is required for anything that touches a page:
``pip install playwright && playwright install chromium``.
"""

from newsgather.errors import (
    CommandFailure,
    GatherError,
    SessionEstablishmentFailure,
    SessionUnavailable,
)
from newsgather.extractors.cleaner import SEARCH_POLICY, HtmlCleaner, SanitizationPolicy
from newsgather.extractors.headline import extract_url_headline
from newsgather.extractors.markdown import fold_articles, html_to_markdown
from newsgather.items import NewsArticle
from newsgather.profiles import load_policy
from newsgather.query import (
    ARTICLE_POLICY,
    build_search_url,
    clean_html,
    gather_article,
    gather_article_elements,
    gather_google_articles,
)
from newsgather.session import NewsScraper, SessionState

__version__ = "0.1.0"
__all__ = [
    "ARTICLE_POLICY",
    "SEARCH_POLICY",
    "CommandFailure",
    "GatherError",
    "HtmlCleaner",
    "NewsArticle",
    "NewsScraper",
    "SanitizationPolicy",
    "SessionEstablishmentFailure",
    "SessionState",
    "SessionUnavailable",
    "build_search_url",
    "clean_html",
    "extract_url_headline",
    "fold_articles",
    "gather_article",
    "gather_article_elements",
    "gather_google_articles",
    "html_to_markdown",
    "load_policy",
]
