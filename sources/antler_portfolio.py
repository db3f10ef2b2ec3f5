from __future__ import annotations

from sources.base import DirectorySource
from sources.registry import register


class AntlerPortfolioSource(DirectorySource):
    source_name = "antler_portfolio"
    base_url = "https://www.antler.co/portfolio"
    origin = "https://www.antler.co"
    self_domain = "antler.co"
    id_prefix = "antler-"
    # Webflow collection-list pagination parameter
    page_param = "8cea4155_page"
    content_selector = '[class*="portfolio"], main, body'

    def portfolio_url(self, slug: str) -> str:
        return f"https://www.antler.co/portfolio/{slug}"

    def api_url(self, slug: str) -> str:
        return f"https://antler-api.github.io/companies/{slug}.json"

    def fallback_description(self, name: str) -> str:
        return f"{name} is a portfolio company of Antler."


def _register():
    register(AntlerPortfolioSource.source_name, AntlerPortfolioSource)


_register()
