from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CompanyStats(BaseModel):
    """Point-in-time distribution snapshot of the accumulated record set."""

    total_companies: int = Field(alias="totalCompanies")
    sector_distribution: dict[str, int] = Field(default_factory=dict, alias="sectorDistribution")
    location_distribution: dict[str, int] = Field(default_factory=dict, alias="locationDistribution")
    # JSON object keys are strings, so founded years are keyed as "2019", "0", ...
    year_distribution: dict[str, int] = Field(default_factory=dict, alias="yearDistribution")
    last_updated: str = Field(alias="lastUpdated")

    model_config = ConfigDict(populate_by_name=True)
