"""Runtime configuration for newsgather.

Plain module constants.  The tunables can be overridden through
``NEWSGATHER_*`` environment variables, read once at import time.
"""

from __future__ import annotations

import os

# ---------------------------------------------------------------------------
# Google News
# ---------------------------------------------------------------------------
GOOGLE_NEWS_ORIGIN = "https://news.google.com"

# The query is substituted verbatim; locale parameters are fixed.
GOOGLE_NEWS_SEARCH_URL = GOOGLE_NEWS_ORIGIN + "/search?q={query}&hl=en-US&gl=US&ceid=US%3Aen"

# ---------------------------------------------------------------------------
# Element discovery
# ---------------------------------------------------------------------------
ARTICLE_SELECTOR = "article"
FALLBACK_SELECTOR = "body"

# ---------------------------------------------------------------------------
# Browser session
# ---------------------------------------------------------------------------
# ws://... connects to a Playwright browser server, http://... to a CDP
# endpoint.  Empty means launch a local headless Chromium.
BROWSER_ENDPOINT = os.getenv("NEWSGATHER_BROWSER_ENDPOINT", "")

HEADLESS = os.getenv("NEWSGATHER_HEADLESS", "1") != "0"

# Seconds; Playwright takes milliseconds.
NAVIGATION_TIMEOUT = float(os.getenv("NEWSGATHER_NAVIGATION_TIMEOUT", "60"))

# ---------------------------------------------------------------------------
# Fragment transformation
# ---------------------------------------------------------------------------
MAX_WORKERS = int(os.getenv("NEWSGATHER_MAX_WORKERS", "8"))
