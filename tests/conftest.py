from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'pipelines.steps.merge_companies'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


def _card(
    name: str,
    website: str,
    location: str = "Singapore",
    sector: str = "FinTech",
    year: Optional[int] = 2019,
    description: Optional[str] = None,
) -> str:
    year_html = f'<div class="year-label">{year}</div>' if year else ""
    desc = description if description is not None else f"{name} builds software for small businesses."
    return (
        '<div class="company-card">'
        f'<img src="/images/{name.lower().replace(" ", "-")}.png" alt="{name} logo">{year_html}'
        f'<a href="#">{location}</a><a href="#">{sector}</a>'
        f"<h3>{name}</h3><p>{desc}</p>"
        f'<a href="{website}">Visit website</a>'
        "</div>"
    )


def _page(cards: Iterable[str]) -> str:
    return (
        "<html><body>"
        '<nav><a href="https://www.linkedin.com/company/antler">LinkedIn</a>'
        '<a href="https://www.antler.co/about">About</a></nav>'
        f'<div class="portfolio-grid">{"".join(cards)}</div>'
        '<footer><a href="https://twitter.com/antlerglobal">Twitter</a></footer>'
        "</body></html>"
    )


@pytest.fixture
def card_html():
    return _card


@pytest.fixture
def page_html():
    return _page


class ScriptedFetcher:
    """In-memory page fetcher: serves canned HTML per URL and can fail on demand."""

    def __init__(
        self,
        pages: Dict[str, str],
        fail_urls: Iterable[str] = (),
        slow_urls: Iterable[str] = (),
    ) -> None:
        self.pages = pages
        self.fail_urls = set(fail_urls)
        self.slow_urls = set(slow_urls)
        self.visited: List[str] = []
        self._current: Optional[str] = None

    def goto(self, url: str, *, timeout_ms: int) -> None:
        from exceptions import NavigationError

        self.visited.append(url)
        if url in self.fail_urls:
            raise NavigationError(url, "net::ERR_CONNECTION_RESET")
        self._current = url

    def wait_for_content(self, selector: str, *, timeout_ms: int) -> None:
        from exceptions import ContentTimeoutError

        if self._current in self.slow_urls:
            raise ContentTimeoutError(f"No element matched {selector!r} within {timeout_ms} ms")

    def content(self) -> str:
        return self.pages.get(self._current or "", "<html><body></body></html>")


@pytest.fixture
def scripted_fetcher():
    return ScriptedFetcher
