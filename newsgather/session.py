"""newsgather.session - Playwright-backed browser session.

The session is the pipeline's only I/O boundary: it navigates to a page,
locates the content elements and hands back their outer HTML.  Everything
downstream works on plain strings.

Usage::

    from newsgather.session import NewsScraper

    with NewsScraper.open() as scraper:
        fragments = scraper.get_elements("https://news.google.com/search?q=AI")

A remote browser can be used instead of a local headless Chromium::

    NewsScraper.open(endpoint="ws://localhost:3000/")        # Playwright server
    NewsScraper.open(endpoint="http://localhost:9222")       # CDP

The session is a two-state machine (``OPEN`` → ``CLOSED``).  Every operation
on a closed session raises :class:`~newsgather.errors.SessionUnavailable`,
except :meth:`NewsScraper.close`, which is idempotent.
"""

from __future__ import annotations

import contextlib
import logging
from enum import Enum
from typing import Any

from newsgather import settings
from newsgather.errors import CommandFailure, SessionEstablishmentFailure, SessionUnavailable

logger = logging.getLogger(__name__)

_DEFAULT_UA = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/122.0.0.0 Safari/537.36"
)

_LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
]

_OUTER_HTML_JS = "el => el.outerHTML"


class SessionState(Enum):
    OPEN = "open"
    CLOSED = "closed"


class NewsScraper:
    """A single browser page plus the resources that keep it alive.

    Normally built with :meth:`open`.  The constructor takes an existing
    Playwright ``Page`` (or anything with the same ``goto`` / ``url`` /
    ``query_selector_all`` surface) so callers can drive a page they manage
    themselves; in that case only the objects passed in are closed.

    Args:
        page:       Playwright ``Page`` to drive.
        browser:    Browser to close on :meth:`close` (optional).
        playwright: Playwright driver to stop on :meth:`close` (optional).
        timeout:    Navigation timeout in seconds.
    """

    def __init__(
        self,
        page: Any,
        *,
        browser: Any = None,
        playwright: Any = None,
        timeout: float = settings.NAVIGATION_TIMEOUT,
    ) -> None:
        self._page = page
        self._browser = browser
        self._playwright = playwright
        self._timeout_ms = int(timeout * 1_000)
        self._state = SessionState.OPEN

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def open(
        cls,
        *,
        endpoint: str | None = None,
        headless: bool | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
    ) -> NewsScraper:
        """Start a browser session.

        Args:
            endpoint:   Remote browser to connect to.  ``ws://`` / ``wss://``
                        URLs are treated as Playwright browser servers, any
                        other URL as a CDP endpoint.  Defaults to
                        ``NEWSGATHER_BROWSER_ENDPOINT``; empty launches a
                        local Chromium.
            headless:   Launch headless (local launch only).
            timeout:    Navigation timeout in seconds.
            user_agent: Override the default browser User-Agent string.

        Raises:
            SessionEstablishmentFailure: playwright is missing, or the
                browser could not be launched or reached.
        """
        endpoint = settings.BROWSER_ENDPOINT if endpoint is None else endpoint
        headless = settings.HEADLESS if headless is None else headless
        timeout = settings.NAVIGATION_TIMEOUT if timeout is None else timeout

        try:
            from playwright.sync_api import sync_playwright
        except ImportError as exc:
            raise SessionEstablishmentFailure(
                "newsgather requires playwright: pip install playwright && "
                "playwright install chromium",
            ) from exc

        try:
            pw = sync_playwright().start()
        except Exception as exc:
            raise SessionEstablishmentFailure(f"Could not start playwright: {exc}") from exc

        try:
            if endpoint.startswith(("ws://", "wss://")):
                browser = pw.chromium.connect(endpoint, timeout=timeout * 1_000)
            elif endpoint:
                browser = pw.chromium.connect_over_cdp(endpoint, timeout=timeout * 1_000)
            else:
                browser = pw.chromium.launch(headless=headless, args=_LAUNCH_ARGS)
            ctx = browser.new_context(
                user_agent=user_agent or _DEFAULT_UA,
                java_script_enabled=True,
                viewport={"width": 1920, "height": 1080},
                extra_http_headers={"Accept-Language": "en-US,en;q=0.9"},
            )
            page = ctx.new_page()
        except Exception as exc:
            with contextlib.suppress(Exception):
                pw.stop()
            where = endpoint or "local chromium"
            raise SessionEstablishmentFailure(
                f"Could not open browser session ({where}): {exc}",
            ) from exc

        logger.debug("Opened browser session (%s)", endpoint or "local chromium")
        return cls(page, browser=browser, playwright=pw, timeout=timeout)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is SessionState.OPEN

    def _require_page(self, url: str = "") -> Any:
        if self._state is SessionState.CLOSED:
            raise SessionUnavailable("Browser session is closed", url=url)
        return self._page

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def navigate(self, url: str) -> None:
        page = self._require_page(url)
        try:
            page.goto(url, timeout=self._timeout_ms, wait_until="load")
        except Exception as exc:
            raise CommandFailure(f"Navigation to {url} failed: {exc}", url=url) from exc

    def current_url(self) -> str:
        page = self._require_page()
        try:
            return str(page.url)
        except Exception as exc:
            raise CommandFailure(f"Could not read current URL: {exc}") from exc

    def find_elements(self, selector: str) -> list[Any]:
        """Return every element matching CSS *selector*, in document order."""
        page = self._require_page()
        try:
            return list(page.query_selector_all(selector))
        except Exception as exc:
            raise CommandFailure(f"Lookup of {selector!r} failed: {exc}") from exc

    def outer_html(self, element: Any) -> str:
        self._require_page()
        try:
            return str(element.evaluate(_OUTER_HTML_JS))
        except Exception as exc:
            raise CommandFailure(f"Could not read element HTML: {exc}") from exc

    def get_elements(self, url: str) -> list[str]:
        """Load *url* and return the outer HTML of its content elements.

        All ``<article>`` elements are read; when there are none the
        ``<body>`` is used instead.  An element whose HTML cannot be read
        contributes an empty string, so the result keeps one entry per
        element found.

        Raises:
            SessionUnavailable: the session was already closed.
            CommandFailure: navigation or the ``body`` lookup failed.
        """
        self._require_page(url)
        self.navigate(url)

        try:
            current = self.current_url()
        except CommandFailure as exc:
            logger.debug("Could not check %s for a redirect: %s", url, exc)
        else:
            if current != url:
                logger.warning("URL redirect from %s to %s", url, current)

        try:
            elements = self.find_elements(settings.ARTICLE_SELECTOR)
        except CommandFailure as exc:
            logger.debug("Article lookup failed on %s: %s", url, exc)
            elements = []
        if not elements:
            logger.debug("Article not found on %s, using body", url)
            elements = self.find_elements(settings.FALLBACK_SELECTOR)

        html_contents: list[str] = []
        for element in elements:
            try:
                html_contents.append(self.outer_html(element))
            except CommandFailure as exc:
                logger.debug("Element read failed on %s: %s", url, exc)
                html_contents.append("")
        return html_contents

    # ------------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Release the page and browser.  Safe to call more than once.

        Close errors are logged and dropped; by the time a session is closed
        its results have already been read.
        """
        if self._state is SessionState.CLOSED:
            return
        self._state = SessionState.CLOSED

        for resource, method in (
            (self._page, "close"),
            (self._browser, "close"),
            (self._playwright, "stop"),
        ):
            if resource is None:
                continue
            try:
                getattr(resource, method)()
            except Exception as exc:
                logger.debug("Ignoring error during session %s: %s", method, exc)
        self._page = self._browser = self._playwright = None

    def __enter__(self) -> NewsScraper:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
