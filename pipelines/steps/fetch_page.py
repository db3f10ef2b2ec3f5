from __future__ import annotations

import logging
import time
from typing import Callable

from exceptions import ContentTimeoutError
from models.scrape_config import ScrapeConfig
from pipelines.runner import RunContext, RunState
from ports.fetcher import PageFetcherPort
from ports.source import DirectorySourcePort


class FetchPage:
    """FETCHING -> WAITING_FOR_CONTENT. Navigation errors propagate and end the run."""

    def __init__(
        self,
        fetcher: PageFetcherPort,
        source: DirectorySourcePort,
        config: ScrapeConfig,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.fetcher = fetcher
        self.source = source
        self.config = config
        self.sleep = sleep

    def run(self, ctx: RunContext) -> RunContext:
        ctx.progress.current_page = ctx.page
        if ctx.page > 1 and self.config.delay:
            self.sleep(self.config.delay / 1000)

        url = self.source.page_url(ctx.page)
        logging.info(f"Extracting from page {ctx.page}: {url}", extra={"step": "fetch", "page": ctx.page})
        started = time.monotonic()
        self.fetcher.goto(url, timeout_ms=self.config.navigation_timeout_ms)
        ctx.meta.setdefault("pages_fetched", []).append(ctx.page)
        logging.debug(
            "Navigation finished",
            extra={"step": "fetch", "page": ctx.page, "duration_ms": int((time.monotonic() - started) * 1000)},
        )
        ctx.state = RunState.WAITING_FOR_CONTENT
        return ctx


class WaitForContent:
    """WAITING_FOR_CONTENT -> EXTRACTING. A timeout here is logged and tolerated."""

    def __init__(
        self,
        fetcher: PageFetcherPort,
        source: DirectorySourcePort,
        config: ScrapeConfig,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.fetcher = fetcher
        self.source = source
        self.config = config
        self.sleep = sleep

    def run(self, ctx: RunContext) -> RunContext:
        try:
            self.fetcher.wait_for_content(self.source.content_selector, timeout_ms=self.config.content_timeout_ms)
            logging.info("Page content loaded successfully", extra={"step": "wait", "page": ctx.page})
        except ContentTimeoutError:
            logging.warning(
                "Page content taking longer to load, proceeding anyway...",
                extra={"step": "wait", "page": ctx.page, "status": "timeout"},
            )
        if self.config.settle_delay_ms:
            self.sleep(self.config.settle_delay_ms / 1000)

        ctx.html = self.fetcher.content()
        ctx.state = RunState.EXTRACTING
        return ctx
