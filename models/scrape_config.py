from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from config.settings import Settings


class ScrapeConfig(BaseModel):
    """Recognized run options. `retry_attempts` is accepted and reported but never consulted."""

    base_url: str = Field(alias="baseUrl")
    max_pages: int = Field(default=20, ge=1, alias="maxPages")
    delay: int = Field(default=2000, ge=0, description="Milliseconds between page fetches")
    retry_attempts: int = Field(default=3, ge=0, alias="retryAttempts")
    output_dir: str = Field(default="./companies", alias="outputDir")

    # Ambient knobs, not part of the serialized surface
    meta_path: str = Field(default="./meta.json", exclude=True)
    industries_dir: str = Field(default="./industries", exclude=True)
    navigation_timeout_ms: int = Field(default=30000, exclude=True)
    content_timeout_ms: int = Field(default=15000, exclude=True)
    settle_delay_ms: int = Field(default=2000, exclude=True)

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @classmethod
    def from_settings(cls, settings: Settings, **overrides) -> "ScrapeConfig":
        values = {
            "base_url": settings.base_url,
            "max_pages": settings.max_pages,
            "delay": settings.page_delay_ms,
            "retry_attempts": settings.retry_attempts,
            "output_dir": settings.output_dir,
            "meta_path": settings.meta_path,
            "industries_dir": settings.industries_dir,
            "navigation_timeout_ms": settings.navigation_timeout_ms,
            "content_timeout_ms": settings.content_timeout_ms,
            "settle_delay_ms": settings.settle_delay_ms,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
