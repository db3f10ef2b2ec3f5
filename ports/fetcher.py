from __future__ import annotations

from typing import Protocol


class PageFetcherPort(Protocol):
    def goto(self, url: str, *, timeout_ms: int) -> None:
        """Navigate to `url`; raises NavigationError on timeout or network failure."""
        ...

    def wait_for_content(self, selector: str, *, timeout_ms: int) -> None:
        """Block until `selector` matches; raises ContentTimeoutError after `timeout_ms`."""
        ...

    def content(self) -> str:
        """Rendered HTML of the current page."""
        ...
