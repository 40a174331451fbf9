"""Shared pytest fixtures and a fake Playwright page."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from newsgather.session import NewsScraper

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def article_html() -> str:
    return _read_fixture("article.html")


@pytest.fixture
def search_result_html() -> str:
    return _read_fixture("search_results.html")


# ---------------------------------------------------------------------------
# Fake browser objects (same surface NewsScraper uses on Playwright)
# ---------------------------------------------------------------------------

class FakeElement:
    def __init__(self, html: str, fail: bool = False) -> None:
        self.html = html
        self.fail = fail

    def evaluate(self, script: str) -> str:
        if self.fail:
            raise RuntimeError("stale element")
        return self.html


class FakePage:
    """Records navigation and serves canned elements per CSS selector."""

    def __init__(
        self,
        elements: dict[str, list[Any]] | None = None,
        *,
        redirect_to: str | None = None,
        goto_error: Exception | None = None,
        lookup_errors: dict[str, Exception] | None = None,
        close_error: Exception | None = None,
        url_error: Exception | None = None,
    ) -> None:
        self.elements = elements or {}
        self.redirect_to = redirect_to
        self.goto_error = goto_error
        self.lookup_errors = lookup_errors or {}
        self.close_error = close_error
        self.url_error = url_error
        self.visited: list[str] = []
        self.closed = 0
        self._url = "about:blank"

    @property
    def url(self) -> str:
        if self.url_error is not None:
            raise self.url_error
        return self._url

    def goto(self, url: str, **kwargs: Any) -> None:
        if self.goto_error is not None:
            raise self.goto_error
        self.visited.append(url)
        self._url = self.redirect_to or url

    def query_selector_all(self, selector: str) -> list[Any]:
        if selector in self.lookup_errors:
            raise self.lookup_errors[selector]
        return list(self.elements.get(selector, []))

    def close(self) -> None:
        self.closed += 1
        if self.close_error is not None:
            raise self.close_error


def articles(*html: str) -> dict[str, list[Any]]:
    return {"article": [FakeElement(h) for h in html]}


@pytest.fixture
def make_scraper():
    """Return a factory building a NewsScraper around a FakePage."""

    def _make(page: FakePage) -> NewsScraper:
        return NewsScraper(page, timeout=5)

    return _make
