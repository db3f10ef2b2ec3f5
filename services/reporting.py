from __future__ import annotations

from typing import Optional

from models.company_stats import CompanyStats
from models.progress import ExtractionProgress
from models.scrape_config import ScrapeConfig


def _top(distribution: dict, limit: int = 5) -> list:
    return sorted(distribution.items(), key=lambda kv: (-kv[1], kv[0]))[:limit]


def print_summary(
    progress: ExtractionProgress,
    config: ScrapeConfig,
    state: str,
    stats: Optional[CompanyStats] = None,
    pages_visited: int = 0,
) -> None:
    """Print summary of the scrape run."""
    print("\n" + "="*60)
    print("PORTFOLIO SCRAPE - SUMMARY")
    print("="*60)
    print(f"Base URL: {config.base_url}")
    print(f"Final State: {state}")
    print(f"Last Page: {progress.current_page} (max {config.max_pages})")
    print(f"Pages Visited: {pages_visited}")
    print(f"Total Companies: {progress.total_companies}")
    print(f"Processed Companies: {progress.processed_count}")
    print(f"Retry Attempts (declared, not used): {config.retry_attempts}")
    if stats is not None:
        print()
        print("Top Sectors:")
        for sector, count in _top(stats.sector_distribution):
            print(f"  {sector}: {count}")
        print("Top Locations:")
        for location, count in _top(stats.location_distribution):
            print(f"  {location}: {count}")
    if progress.errors:
        print()
        print("Errors:")
        for err in progress.errors:
            print(f"  - {err}")
    print()
    print(f"Output Directory: {config.output_dir}")
    print(f"Statistics File: {config.meta_path}")
    print(f"Industries Directory: {config.industries_dir}")
    print("="*60)
