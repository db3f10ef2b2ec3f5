import argparse
import json
import logging
import os
import sys
import uuid as _uuid

from config.settings import get_settings
from models.company_record import CompanyRecord
from models.scrape_config import ScrapeConfig
from pipelines.runner import RunState
from pipelines.scrape_portfolio import scrape_portfolio
from services import browser_fetcher
from services.blob_store import JsonFileStore
from services.output_writer import aggregate_path, record_path
from services.reporting import print_summary
from services.stats import generate_company_stats
from sources.registry import get_source
from utils.logging_setup import init_logging
import sources  # noqa: F401 ensure registration


def _config_from_args(args) -> ScrapeConfig:
    return ScrapeConfig.from_settings(
        get_settings(),
        base_url=getattr(args, "base_url", None),
        max_pages=getattr(args, "max_pages", None),
        delay=getattr(args, "delay", None),
        retry_attempts=getattr(args, "retry_attempts", None),
        output_dir=getattr(args, "output_dir", None),
        meta_path=getattr(args, "meta_path", None),
        industries_dir=getattr(args, "industries_dir", None),
    )


def cmd_scrape(args):
    settings = get_settings()
    if not os.getenv("RUN_ID"):
        os.environ["RUN_ID"] = _uuid.uuid4().hex
    config = _config_from_args(args)
    source = get_source(args.source or settings.directory_source, config.base_url)
    store = JsonFileStore()

    with browser_fetcher.PlaywrightPageFetcher(settings) as fetcher:
        ctx = scrape_portfolio(fetcher, store, source, config)

    print_summary(
        ctx.progress,
        config,
        ctx.state.value,
        ctx.meta.get("stats"),
        pages_visited=len(ctx.meta.get("pages_fetched") or []),
    )
    if ctx.state == RunState.ERROR:
        logging.error(f"Scraping failed with {len(ctx.progress.errors)} error(s)")
        sys.exit(1)
    logging.info(f"Scraping completed! Total companies: {ctx.progress.total_companies}")


def cmd_report_stats(args):
    config = _config_from_args(args)
    stats = JsonFileStore().read(config.meta_path)
    if stats is None:
        print(f"No statistics found at {config.meta_path}")
        sys.exit(1)
    print(json.dumps(stats, indent=2, ensure_ascii=False))


def cmd_report_company(args):
    config = _config_from_args(args)
    record = JsonFileStore().read(record_path(config, args.slug))
    if record is None:
        print(f"No record found for slug {args.slug}")
        sys.exit(1)
    print(json.dumps(record, indent=2, ensure_ascii=False))


def cmd_rebuild_stats(args):
    config = _config_from_args(args)
    store = JsonFileStore()
    raw = store.read(aggregate_path(config))
    if not isinstance(raw, list):
        print(f"No aggregate collection found at {aggregate_path(config)}")
        sys.exit(1)
    companies = [CompanyRecord.model_validate(item) for item in raw]
    stats = generate_company_stats(companies)
    store.write(config.meta_path, stats.model_dump(by_alias=True))
    print(f"Rebuilt statistics for {stats.total_companies} companies -> {config.meta_path}")


def main():
    settings = get_settings()
    init_logging(settings.log_level)
    parser = argparse.ArgumentParser(description="Portfolio directory scraper")
    parser.add_argument("--output-dir", default=None, help="Directory for all.json and per-company files (default from settings)")
    parser.add_argument("--meta-path", default=None, help="Statistics file path (default from settings)")
    parser.add_argument("--industries-dir", default=None, help="Directory for per-sector files (default from settings)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_scr = sub.add_parser("scrape", help="Scrape the directory page by page and write JSON outputs")
    p_scr.add_argument("--source", "-s", default=None, help=f"Directory source (default: {settings.directory_source})")
    p_scr.add_argument("--base-url", default=None, help="Override the directory root URL")
    p_scr.add_argument("--max-pages", "-m", type=int, default=None, help="Hard page ceiling, inclusive")
    p_scr.add_argument("--delay", type=int, default=None, help="Milliseconds to wait between page fetches")
    p_scr.add_argument("--retry-attempts", type=int, default=None, help="Recorded in the run config; pages are never retried")
    p_scr.set_defaults(func=cmd_scrape)

    p_rs = sub.add_parser("report-stats", help="Print the persisted statistics file")
    p_rs.set_defaults(func=cmd_report_stats)

    p_rc = sub.add_parser("report-company", help="Print one persisted company record")
    p_rc.add_argument("--slug", required=True, help="Company slug, e.g. acme-corp")
    p_rc.set_defaults(func=cmd_report_company)

    p_rb = sub.add_parser("rebuild-stats", help="Recompute statistics from the aggregate collection")
    p_rb.set_defaults(func=cmd_rebuild_stats)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
