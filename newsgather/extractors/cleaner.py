"""Pattern-based HTML sanitization.

Strips configured categories of tags from raw markup by regex substitution.
This is deliberately not an HTML parser: no tag balancing, no DOM, markup the
patterns do not match is left exactly as it was.

Usage::

    from newsgather.extractors.cleaner import HtmlCleaner, SanitizationPolicy

    policy = SanitizationPolicy(remove_script_tags=True, remove_img_tags=True)
    text = HtmlCleaner(policy).clean(raw_html)
"""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass

# Passes run in this order.  Script removal goes first because it is the only
# pass that deletes enclosed content rather than just the tag markers.
_SCRIPT_BLOCK_RE = re.compile(r"<script.*?</script>", re.IGNORECASE | re.DOTALL)
_A_TAG_RE = re.compile(r"<a\s+[^>]*>|</a>", re.IGNORECASE)
_IMG_TAG_RE = re.compile(r"<img\s+[^>]*>", re.IGNORECASE)
_SOURCE_TAG_RE = re.compile(r"<source\s+[^>]*>", re.IGNORECASE)


@dataclass(frozen=True)
class SanitizationPolicy:
    """Which tag categories to strip.

    Every combination is valid; the all-false policy is a no-op.

    Attributes:
        remove_script_tags: Remove whole ``<script>...</script>`` blocks.
        remove_a_tags:      Remove ``<a ...>`` / ``</a>`` markers, keep link text.
        remove_img_tags:    Remove ``<img ...>`` tags.
        remove_source_tags: Remove ``<source ...>`` tags.
    """

    remove_script_tags: bool = False
    remove_a_tags: bool = False
    remove_img_tags: bool = False
    remove_source_tags: bool = False

    @classmethod
    def none(cls) -> SanitizationPolicy:
        return cls()

    @classmethod
    def all(cls) -> SanitizationPolicy:
        return cls(
            remove_script_tags=True,
            remove_a_tags=True,
            remove_img_tags=True,
            remove_source_tags=True,
        )

    def copy(self) -> SanitizationPolicy:
        return dataclasses.replace(self)


# Scripts and images stripped; anchors kept so the markdown still carries the
# article links, sources kept.
SEARCH_POLICY = SanitizationPolicy(remove_script_tags=True, remove_img_tags=True)


class HtmlCleaner:
    """Applies a :class:`SanitizationPolicy` to markup strings."""

    def __init__(self, policy: SanitizationPolicy | None = None) -> None:
        self._policy = policy.copy() if policy is not None else SanitizationPolicy()

    @property
    def policy(self) -> SanitizationPolicy:
        return self._policy

    def apply_config(self, policy: SanitizationPolicy) -> HtmlCleaner:
        """Return a new cleaner that uses a copy of *policy*."""
        return HtmlCleaner(policy)

    def clean(self, markup: str) -> str:
        """Return *markup* with the configured tag categories removed."""
        policy = self._policy
        if policy.remove_script_tags:
            markup = _SCRIPT_BLOCK_RE.sub("", markup)
        if policy.remove_a_tags:
            markup = _A_TAG_RE.sub("", markup)
        if policy.remove_img_tags:
            markup = _IMG_TAG_RE.sub("", markup)
        if policy.remove_source_tags:
            markup = _SOURCE_TAG_RE.sub("", markup)
        return markup


def clean_html_markup(markup: str, policy: SanitizationPolicy) -> str:
    """Sanitize *markup* with *policy*.  Never raises."""
    return HtmlCleaner(policy).clean(markup)
