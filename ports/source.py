from __future__ import annotations

from typing import FrozenSet, Protocol


class DirectorySourcePort(Protocol):
    source_name: str
    base_url: str
    origin: str
    content_selector: str
    excluded_domains: FrozenSet[str]

    def page_url(self, page: int) -> str:
        ...

    def record_id(self, slug: str) -> str:
        ...

    def portfolio_url(self, slug: str) -> str:
        ...

    def api_url(self, slug: str) -> str:
        ...

    def fallback_description(self, name: str) -> str:
        ...
