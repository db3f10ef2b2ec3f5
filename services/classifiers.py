from __future__ import annotations

import re
from typing import Optional, Tuple


LOCATIONS: Tuple[str, ...] = (
    "Australia", "Brazil", "Canada", "Denmark", "Finland", "France", "Germany",
    "India", "Indonesia", "Japan", "Kenya", "Korea", "Malaysia", "Netherlands",
    "Nigeria", "Norway", "Saudi Arabia", "Singapore", "Sweden", "UK", "US",
    "United Arab Emirates", "Vietnam", "Spain", "Portugal",
)

SECTORS: Tuple[str, ...] = (
    "Energy and ClimateTech", "Climate", "B2B Software", "ConsumerTech", "FinTech",
    "Health and BioTech", "Real Estate and PropTech", "Industrials",
)

GENERIC_INDUSTRY_TOKENS: Tuple[str, ...] = ("tech", "software", "service", "platform")

_TITLE_CASE_WORDS = re.compile(r"^[A-Z][a-z]+( [A-Z][a-z]+)*$")

_LOCATIONS_LOWER = tuple(loc.lower() for loc in LOCATIONS)
_SECTORS_LOWER = tuple(sec.lower() for sec in SECTORS)


def is_location_text(text: str) -> bool:
    # Plain substring membership: short codes such as "US" also hit inside longer words
    low = (text or "").lower()
    return any(loc in low for loc in _LOCATIONS_LOWER)


def is_sector_text(text: str) -> bool:
    text = text or ""
    low = text.lower()
    if any(sec in low for sec in _SECTORS_LOWER):
        return True
    if any(tok in low for tok in GENERIC_INDUSTRY_TOKENS):
        return True
    return _TITLE_CASE_WORDS.match(text) is not None


def classify_tag(text: str) -> Optional[str]:
    """Return "location", "sector" or None. Location is always tested first."""
    if is_location_text(text):
        return "location"
    if is_sector_text(text):
        return "sector"
    return None
