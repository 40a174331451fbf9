"""YAML-based sanitization profiles.

A profile file holds a ``default`` policy and optional per-domain overrides::

    default:
      remove_script_tags: true
      remove_img_tags: true
    domains:
      example.com:
        remove_a_tags: true
      blog.example.com:
        remove_source_tags: true

The most specific matching domain wins and is merged over ``default``.
Option values must be YAML booleans; a quoted ``"false"`` is rejected rather
than read as a truthy string.
"""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import yaml

from newsgather.extractors.cleaner import SanitizationPolicy

_POLICY_FIELDS = frozenset(f.name for f in dataclasses.fields(SanitizationPolicy))


def _validate_section(section: Any, where: str) -> dict[str, bool]:
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"{where}: expected a mapping of options, got {type(section).__name__}")

    unknown = set(section) - _POLICY_FIELDS
    if unknown:
        raise ValueError(f"{where}: unknown sanitization option(s): {', '.join(sorted(map(str, unknown)))}")

    for key, value in section.items():
        if not isinstance(value, bool):
            raise ValueError(f"{where}: {key} must be true or false, got {value!r}")
    return dict(section)


def _domain_override(domains: dict[str, Any], netloc: str) -> tuple[str, dict[str, bool]]:
    """Return ``(domain, options)`` for the longest domain covering *netloc*."""
    best: tuple[str, dict[str, bool]] = ("", {})
    for domain, section in domains.items():
        domain = str(domain).lower()
        covers = netloc == domain or netloc.endswith("." + domain)
        if covers and len(domain) > len(best[0]):
            best = (domain, _validate_section(section, f"domains.{domain}"))
    return best


def load_policy(path: str | Path, url: str = "") -> SanitizationPolicy:
    """Load the YAML profile at *path* and return the policy for *url*.

    Raises:
        ValueError: The file is not a mapping, or a section holds unknown
            options or non-boolean values.
    """
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: profile must be a mapping")

    options = _validate_section(data.get("default"), "default")

    domains = data.get("domains") or {}
    if not isinstance(domains, dict):
        raise ValueError(f"{path}: 'domains' must be a mapping")

    netloc = urlparse(url).netloc.lower() if url else ""
    if netloc:
        _, override = _domain_override(domains, netloc)
        options.update(override)

    return SanitizationPolicy(**options)
