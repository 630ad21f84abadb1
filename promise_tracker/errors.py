"""
Exceptions raised while bringing promise data into the dashboard.
"""

from __future__ import annotations

from typing import Optional


class PromiseTrackerError(Exception):
    """Base class for dashboard errors."""


class LoadFailure(PromiseTrackerError):
    """The data source was unreachable or its payload was malformed.

    Fatal for the session: the caller surfaces a notice and renders nothing else.
    """

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        super().__init__(message)
        self.source = source

    def __str__(self) -> str:
        base = super().__str__()
        if self.source:
            return f"{base} (source: {self.source})"
        return base
