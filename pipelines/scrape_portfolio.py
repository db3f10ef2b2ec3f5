from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from models.scrape_config import ScrapeConfig
from pipelines.runner import Pipeline, RunContext, RunState
from pipelines.steps.extract_companies import ExtractCompanies
from pipelines.steps.fetch_page import FetchPage, WaitForContent
from pipelines.steps.merge_companies import MergeCompanies
from pipelines.steps.persist_snapshot import AdvancePage, PersistSnapshot
from ports.fetcher import PageFetcherPort
from ports.source import DirectorySourcePort
from ports.store import BlobStorePort
from services.output_writer import write_final_outputs, write_snapshot


def build_page_pipeline(
    fetcher: PageFetcherPort,
    store: BlobStorePort,
    source: DirectorySourcePort,
    config: ScrapeConfig,
    sleep: Callable[[float], None] = time.sleep,
    current_year: Optional[int] = None,
) -> Pipeline:
    return Pipeline([
        FetchPage(fetcher, source, config, sleep=sleep),
        WaitForContent(fetcher, source, config, sleep=sleep),
        ExtractCompanies(source, current_year=current_year),
        MergeCompanies(),
        PersistSnapshot(store, config),
        AdvancePage(config),
    ])


def scrape_portfolio(
    fetcher: PageFetcherPort,
    store: BlobStorePort,
    source: DirectorySourcePort,
    config: ScrapeConfig,
    sleep: Callable[[float], None] = time.sleep,
    current_year: Optional[int] = None,
) -> RunContext:
    """Walk the directory page by page until a page adds nothing, the ceiling is hit, or a page fails.

    Pages are strictly sequential. A failing page is never retried, whatever
    `config.retry_attempts` says; the records gathered so far are still written out.
    A failure while writing those outputs is recorded in `progress.errors` and ends the run in ERROR.
    """
    logging.info(
        f"Starting portfolio scraping: {config.base_url} "
        f"(max_pages={config.max_pages}, delay={config.delay}ms, retry_attempts={config.retry_attempts} [not used])"
    )
    pipeline = build_page_pipeline(fetcher, store, source, config, sleep=sleep, current_year=current_year)
    ctx = RunContext()

    while not ctx.finished:
        ctx.state = RunState.FETCHING
        try:
            ctx = pipeline.run(ctx)
        except Exception as e:
            logging.error(
                f"Error extracting from page {ctx.page}: {e}",
                extra={"step": ctx.state.value.lower(), "page": ctx.page, "status": "error", "error": type(e).__name__},
            )
            ctx.progress.errors.append(f"Page {ctx.page}: {e}")
            ctx.state = RunState.ERROR

    ctx.progress.total_companies = len(ctx.companies)
    try:
        if ctx.state == RunState.DONE:
            ctx.meta["stats"] = write_final_outputs(store, config, ctx.companies)
        else:
            ctx.meta["stats"] = write_snapshot(store, config, ctx.companies)
    except Exception as e:
        logging.error(
            f"Error writing outputs: {e}",
            extra={"step": "persist", "status": "error", "error": type(e).__name__},
        )
        ctx.progress.errors.append(f"Output: {e}")
        ctx.state = RunState.ERROR

    pages = ctx.meta.get("pages_fetched") or []
    logging.info(
        f"Successfully extracted {len(ctx.companies)} companies from {len(pages)} pages",
        extra={"status": ctx.state.value.lower()},
    )
    return ctx
