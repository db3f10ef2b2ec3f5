from __future__ import annotations

import logging
from typing import List

from models.company_record import CompanyRecord
from pipelines.runner import RunContext, RunState


class MergeCompanies:
    """MERGING -> CONTINUE | DONE.

    Records whose slug is already known are dropped, never merged. A page that
    yields nothing, or nothing new, ends pagination.
    """

    def run(self, ctx: RunContext) -> RunContext:
        page_companies = ctx.page_companies or []
        if not page_companies:
            logging.info(f"No companies found on page {ctx.page}, stopping", extra={"step": "merge", "page": ctx.page})
            ctx.state = RunState.DONE
            return ctx

        seen = ctx.known_slugs()
        new_companies: List[CompanyRecord] = []
        for company in page_companies:
            if company.slug in seen:
                continue
            seen.add(company.slug)
            new_companies.append(company)

        if not new_companies:
            logging.info(
                f"No new companies found on page {ctx.page}, stopping scraping",
                extra={"step": "merge", "page": ctx.page},
            )
            ctx.state = RunState.DONE
            return ctx

        duplicates = len(page_companies) - len(new_companies)
        if duplicates:
            logging.info(f"Filtered out {duplicates} duplicate companies", extra={"step": "merge", "page": ctx.page})

        ctx.companies.extend(new_companies)
        ctx.progress.processed_count += len(new_companies)
        ctx.page_companies = new_companies
        ctx.state = RunState.CONTINUE
        return ctx
