from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CompanyRecord(BaseModel):
    """One directory entry as persisted: immutable once built."""

    id: str
    name: str
    slug: str
    website: str
    description: str
    founded_year: int = 0
    location: str = "Unknown"
    sector: str = "Unknown"
    logo_url: str = ""
    portfolio_url: str = Field(alias="url")
    api_url: str = Field(alias="api")

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)
