from __future__ import annotations

import logging
from typing import List, Optional

from exceptions import ExtractionError
from models.company_record import CompanyRecord
from ports.document import DocumentNode
from ports.source import DirectorySourcePort
from services.card_resolution import resolve_card
from services.field_extractors import (
    extract_description,
    extract_founded_year,
    extract_location_and_sector,
    extract_logo_url,
    extract_name,
)
from utils.text_parsing import create_slug, normalize_location


UNKNOWN = "Unknown"
MIN_WEBSITE_LENGTH = 5


def _absolute_website(href: str) -> str:
    return href if href.startswith("http") else f"https://{href}"


def build_company_record(
    anchor: DocumentNode,
    source: DirectorySourcePort,
    current_year: Optional[int] = None,
) -> Optional[CompanyRecord]:
    """Build one record from a candidate anchor.

    Returns None for an expected heuristic miss (no usable website or name).
    Raises ExtractionError when extraction itself blows up.
    """
    website = anchor.attr("href") or ""
    if len(website) < MIN_WEBSITE_LENGTH:
        return None

    try:
        card = resolve_card(anchor)
        name = extract_name(card, website)
        if not name:
            return None

        description = extract_description(card, source.fallback_description(name))
        location, sector = extract_location_and_sector(card)
        slug = create_slug(name)

        return CompanyRecord(
            id=source.record_id(slug),
            name=name,
            slug=slug,
            website=_absolute_website(website),
            description=description.strip(),
            founded_year=extract_founded_year(card, current_year),
            location=normalize_location(location) or UNKNOWN,
            sector=sector or UNKNOWN,
            logo_url=extract_logo_url(card, source.origin),
            portfolio_url=source.portfolio_url(slug),
            api_url=source.api_url(slug),
        )
    except Exception as e:
        raise ExtractionError(f"Could not extract company from {website}: {e}") from e


def build_page_records(
    candidates: List[DocumentNode],
    source: DirectorySourcePort,
    current_year: Optional[int] = None,
) -> List[CompanyRecord]:
    records: List[CompanyRecord] = []
    for index, anchor in enumerate(candidates):
        try:
            record = build_company_record(anchor, source, current_year)
        except ExtractionError as e:
            logging.warning(f"Error extracting company at index {index}: {e}", extra={"step": "extract", "error": type(e.__cause__).__name__})
            continue
        if record is not None:
            records.append(record)
    logging.info(f"Processed {len(records)} unique companies from {len(candidates)} links")
    return records
