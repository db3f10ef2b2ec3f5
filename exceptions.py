"""
Shared exception classes for the directory scraper.
"""

from __future__ import annotations


class NavigationError(Exception):
    """Raised when the page fetcher cannot load a directory page (timeout or network failure)."""

    def __init__(self, url: str, reason: str = "") -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Navigation to {url} failed: {reason}" if reason else f"Navigation to {url} failed")


class ContentTimeoutError(Exception):
    """Raised when recognizable page content does not appear within the bounded wait."""

    pass


class ExtractionError(Exception):
    """Raised for an unrecoverable failure while building one company record."""

    pass


__all__ = [
    "NavigationError",
    "ContentTimeoutError",
    "ExtractionError",
]
