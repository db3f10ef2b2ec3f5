from __future__ import annotations

import logging
from typing import Iterable, List

from ports.document import DocumentNode


SECURE_LINK_SELECTOR = 'a[href^="https://"]'
PORTFOLIO_CONTAINER_SELECTOR = '[class*="portfolio"]'
MIN_HREF_LENGTH = 11


def _portfolio_links(document: DocumentNode) -> List[DocumentNode]:
    links: List[DocumentNode] = []
    for container in document.select(PORTFOLIO_CONTAINER_SELECTOR):
        for link in container.select(SECURE_LINK_SELECTOR):
            if link not in links:
                links.append(link)
    return links


def is_company_href(href: str | None, excluded_domains: Iterable[str]) -> bool:
    if not href or len(href) < MIN_HREF_LENGTH:
        return False
    if "mailto:" in href or "tel:" in href:
        return False
    return not any(domain in href for domain in excluded_domains)


def discover_candidate_links(document: DocumentNode, excluded_domains: Iterable[str]) -> List[DocumentNode]:
    """Anchors that plausibly point at a company's own website, one per distinct href."""
    links = document.select(SECURE_LINK_SELECTOR)
    logging.info(f"Found {len(links)} total links with https")

    portfolio_links = _portfolio_links(document)
    if portfolio_links:
        links = portfolio_links
        logging.info(f"Using portfolio container, found {len(links)} links")

    excluded = tuple(excluded_domains)
    candidates: List[DocumentNode] = []
    seen_hrefs: set[str] = set()
    for link in links:
        href = link.attr("href")
        if not is_company_href(href, excluded):
            continue
        if href in seen_hrefs:
            logging.debug(f"Skipping duplicate website: {href}")
            continue
        seen_hrefs.add(href)
        candidates.append(link)

    logging.info(f"Found {len(candidates)} company links on current page")
    return candidates
