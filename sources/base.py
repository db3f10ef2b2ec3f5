from __future__ import annotations

from abc import ABC, abstractmethod
from typing import FrozenSet


# Hosts that are never a company's own website
SOCIAL_AND_MEDIA_DOMAINS: FrozenSet[str] = frozenset({
    "linkedin.com",
    "twitter.com",
    "facebook.com",
    "instagram.com",
    "youtube.com",
    "tiktok.com",
    "github.com",
    "medium.com",
    "apple.com",
    "google.com",
})


class DirectorySource(ABC):
    """A paginated directory site: page URLs plus the canonical URLs derived for each slug."""

    source_name: str = ""
    base_url: str = ""
    origin: str = ""
    self_domain: str = ""
    id_prefix: str = ""
    page_param: str = "page"
    content_selector: str = "main, body"

    def __init__(self, base_url: str | None = None) -> None:
        if base_url:
            self.base_url = base_url

    @property
    def excluded_domains(self) -> FrozenSet[str]:
        if self.self_domain:
            return SOCIAL_AND_MEDIA_DOMAINS | {self.self_domain}
        return SOCIAL_AND_MEDIA_DOMAINS

    def page_url(self, page: int) -> str:
        if page <= 1:
            return self.base_url
        return f"{self.base_url}?{self.page_param}={page}"

    def record_id(self, slug: str) -> str:
        return f"{self.id_prefix}{slug}"

    def portfolio_url(self, slug: str) -> str:
        return f"{self.base_url.rstrip('/')}/{slug}"

    @abstractmethod
    def api_url(self, slug: str) -> str:
        """Canonical JSON API location for one record."""

    def fallback_description(self, name: str) -> str:
        return f"{name} is a portfolio company."
