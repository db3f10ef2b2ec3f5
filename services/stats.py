from __future__ import annotations

from collections import Counter
from datetime import datetime, timezone
from typing import Iterable, Optional

from models.company_record import CompanyRecord
from models.company_stats import CompanyStats


def generate_company_stats(companies: Iterable[CompanyRecord], now: Optional[datetime] = None) -> CompanyStats:
    """Recompute the full distribution snapshot; unknown values count as their own bucket."""
    companies = list(companies)
    sectors = Counter(c.sector for c in companies)
    locations = Counter(c.location for c in companies)
    years = Counter(str(c.founded_year) for c in companies)
    return CompanyStats(
        total_companies=len(companies),
        sector_distribution=dict(sectors),
        location_distribution=dict(locations),
        year_distribution=dict(years),
        last_updated=(now or datetime.now(timezone.utc)).isoformat(),
    )
