"""newsgather.errors - failures raised at the fetch stage of the pipeline.

Only the browser-automation boundary raises.  Sanitization, conversion and
headline extraction never do: a fragment that cannot be converted or parsed
simply contributes nothing.
"""

from __future__ import annotations


class GatherError(RuntimeError):
    """Base class for every error surfaced by :mod:`newsgather`.

    Attributes:
        url -- the URL being gathered when the failure happened ("" if unknown)
    """

    def __init__(self, message: str, url: str = "") -> None:
        super().__init__(message)
        self.url = url


class SessionUnavailable(GatherError):
    """The browser session was already closed when an operation needed it."""


class CommandFailure(GatherError):
    """The browser reported an error executing navigate / find / read."""


class SessionEstablishmentFailure(GatherError):
    """A new browser session could not be opened or connected to."""
