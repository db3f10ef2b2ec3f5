from __future__ import annotations

import logging
from typing import Optional

from playwright.sync_api import Browser, Error as PlaywrightError, Page, Playwright, TimeoutError as PlaywrightTimeout, sync_playwright

from config.settings import Settings, get_settings
from exceptions import ContentTimeoutError, NavigationError


class PlaywrightPageFetcher:
    """Headless Chromium page fetcher. Use as a context manager so the browser is always closed."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._page: Optional[Page] = None

    def __enter__(self) -> "PlaywrightPageFetcher":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def open(self) -> None:
        logging.info("Initializing browser...")
        self._playwright = sync_playwright().start()
        try:
            self._browser = self._playwright.chromium.launch(
                headless=self.settings.headless,
                args=["--no-sandbox", "--disable-setuid-sandbox"],
            )
            context = self._browser.new_context(
                user_agent=self.settings.user_agent,
                viewport={"width": self.settings.viewport_width, "height": self.settings.viewport_height},
            )
            self._page = context.new_page()
        except Exception:
            # the driver was started, stop it before propagating
            self.close()
            raise

    def close(self) -> None:
        if self._browser is not None:
            self._browser.close()
            self._browser = None
        if self._playwright is not None:
            self._playwright.stop()
            self._playwright = None
        self._page = None

    @property
    def page(self) -> Page:
        if self._page is None:
            raise RuntimeError("Browser not initialized")
        return self._page

    def goto(self, url: str, *, timeout_ms: int) -> None:
        try:
            self.page.goto(url, wait_until="networkidle", timeout=timeout_ms)
        except PlaywrightTimeout as e:
            raise NavigationError(url, f"timed out after {timeout_ms} ms") from e
        except PlaywrightError as e:
            raise NavigationError(url, str(e)) from e

    def wait_for_content(self, selector: str, *, timeout_ms: int) -> None:
        try:
            self.page.wait_for_selector(selector, timeout=timeout_ms)
        except PlaywrightTimeout as e:
            raise ContentTimeoutError(f"No element matched {selector!r} within {timeout_ms} ms") from e

    def content(self) -> str:
        return self.page.content()
