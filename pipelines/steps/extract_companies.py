from __future__ import annotations

import logging
from typing import Optional

from pipelines.runner import RunContext, RunState
from ports.source import DirectorySourcePort
from services.html_document import parse_document
from services.link_discovery import discover_candidate_links
from services.record_builder import build_page_records


class ExtractCompanies:
    """EXTRACTING -> MERGING: every candidate link on the page becomes zero or one record."""

    def __init__(self, source: DirectorySourcePort, current_year: Optional[int] = None) -> None:
        self.source = source
        self.current_year = current_year

    def run(self, ctx: RunContext) -> RunContext:
        document = parse_document(ctx.html or "")
        candidates = discover_candidate_links(document, self.source.excluded_domains)
        ctx.page_companies = build_page_records(candidates, self.source, self.current_year)
        logging.info(
            f"Extracted {len(ctx.page_companies)} companies from page {ctx.page}",
            extra={"step": "extract", "page": ctx.page},
        )
        ctx.html = None
        ctx.state = RunState.MERGING
        return ctx
