from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ExtractionProgress(BaseModel):
    """Run progress; counters only grow and `errors` is append-only."""

    total_companies: int = Field(default=0, alias="totalCompanies")
    processed_count: int = Field(default=0, alias="processedCompanies")
    current_page: int = Field(default=0, alias="currentPage")
    errors: list[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)
