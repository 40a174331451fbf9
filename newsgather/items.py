"""Pydantic schema for headline records extracted from search results."""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class NewsArticle(BaseModel):
    """A search-result article: canonical URL plus its headline.

    Both fields are required to be non-empty; the extractor only builds a
    record once both a link target and a headline were found.
    """

    model_config = {"frozen": True}

    url: str
    headline: str

    @field_validator("url", "headline")
    @classmethod
    def _not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value

    def __str__(self) -> str:
        return self.headline
