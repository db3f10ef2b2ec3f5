from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from models.company_record import CompanyRecord
from models.company_stats import CompanyStats
from models.scrape_config import ScrapeConfig
from ports.store import BlobStorePort
from services.stats import generate_company_stats
from utils.text_parsing import create_slug


AGGREGATE_FILENAME = "all.json"


def aggregate_path(config: ScrapeConfig) -> str:
    return f"{config.output_dir.rstrip('/')}/{AGGREGATE_FILENAME}"


def record_path(config: ScrapeConfig, slug: str) -> str:
    return f"{config.output_dir.rstrip('/')}/{slug}.json"


def industry_path(config: ScrapeConfig, sector_slug: str) -> str:
    return f"{config.industries_dir.rstrip('/')}/{sector_slug}.json"


def write_snapshot(store: BlobStorePort, config: ScrapeConfig, companies: Sequence[CompanyRecord]) -> CompanyStats:
    """Aggregate collection plus a freshly recomputed statistics file."""
    store.write(aggregate_path(config), [c.to_json() for c in companies])
    stats = generate_company_stats(companies)
    store.write(config.meta_path, stats.model_dump(by_alias=True))
    return stats


def group_by_sector(companies: Sequence[CompanyRecord]) -> Dict[str, List[CompanyRecord]]:
    groups: Dict[str, List[CompanyRecord]] = {}
    for company in companies:
        groups.setdefault(create_slug(company.sector), []).append(company)
    return groups


def write_final_outputs(store: BlobStorePort, config: ScrapeConfig, companies: Sequence[CompanyRecord]) -> CompanyStats:
    logging.info("Generating output files...")
    stats = write_snapshot(store, config, companies)

    for company in companies:
        store.write(record_path(config, company.slug), company.to_json())
        logging.debug(f"Saved {company.name} ({company.slug})")

    for sector_slug, members in group_by_sector(companies).items():
        store.write(industry_path(config, sector_slug), [c.to_json() for c in members])

    logging.info(f"Generated {len(companies)} individual company files")
    return stats
