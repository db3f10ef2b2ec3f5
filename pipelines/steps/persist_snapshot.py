from __future__ import annotations

import logging

from models.scrape_config import ScrapeConfig
from pipelines.runner import RunContext, RunState
from ports.store import BlobStorePort
from services.output_writer import write_snapshot


class PersistSnapshot:
    """After every CONTINUE: rewrite the aggregate file and recompute statistics."""

    def __init__(self, store: BlobStorePort, config: ScrapeConfig) -> None:
        self.store = store
        self.config = config

    def run(self, ctx: RunContext) -> RunContext:
        if ctx.state != RunState.CONTINUE:
            return ctx
        write_snapshot(self.store, self.config, ctx.companies)
        logging.info(
            f"Processed {len(ctx.page_companies)} companies from current page",
            extra={"step": "persist", "page": ctx.page, "status": "ok"},
        )
        return ctx


class AdvancePage:
    """CONTINUE -> FETCHING(page + 1), or DONE once the page ceiling is reached."""

    def __init__(self, config: ScrapeConfig) -> None:
        self.config = config

    def run(self, ctx: RunContext) -> RunContext:
        if ctx.state != RunState.CONTINUE:
            return ctx
        if ctx.page >= self.config.max_pages:
            logging.info(f"Reached max pages ({self.config.max_pages}), stopping", extra={"step": "advance", "page": ctx.page})
            ctx.state = RunState.DONE
            return ctx
        ctx.page += 1
        ctx.state = RunState.FETCHING
        return ctx
