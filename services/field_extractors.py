"""
Field inference for one directory card.

Every field is resolved by an ordered chain of strategy functions. Each strategy
returns a value or None and the first acceptable value wins, so the order of the
`*_STRATEGIES` tuples decides which markup is trusted first.
"""
from __future__ import annotations

import re
from datetime import datetime
from typing import Callable, Optional, Tuple

from ports.document import DocumentNode
from services.classifiers import classify_tag, is_location_text, is_sector_text


MIN_NAME_LENGTH = 2
MIN_DESCRIPTION_LENGTH = 10
MIN_KEPT_DESCRIPTION_LENGTH = 5
FIRST_FOUNDED_YEAR = 1940

_EXCLUDED_HINTS = ("tag", "badge", "year", "location", "sector")
_NOT_EXCLUDED = "".join(f':not([class*="{hint}"])' for hint in _EXCLUDED_HINTS)

HEADING_SELECTOR = "h1, h2, h3, h4, h5, h6"
NAME_HINT_SELECTOR = '[class*="name"], [class*="title"], [class*="company"]'
BOLD_SELECTOR = "strong, b"
PARAGRAPH_SELECTOR = f"p{_NOT_EXCLUDED}"
DESCRIPTION_HINT_SELECTOR = '[class*="description"], [class*="summary"], [class*="intro"]'
NESTED_PARAGRAPH_SELECTOR = f"div{_NOT_EXCLUDED} p"
PLACEHOLDER_ANCHOR_SELECTOR = 'a[href="#"]'

_SCAN_SKIP_TAGS = ("a", "img", "script", "style")
_BARE_YEAR = re.compile(r"^\d{4}$")
_BRACKET_TOKEN = re.compile(r"\[([^\]]+)\]")
_IMAGE_TAG = re.compile(r"<img[^>]*>")
_YEAR_TOKEN = re.compile(r"\b(19[4-9]\d|20\d{2})\b")


def _first_text(card: DocumentNode, selector: str) -> Optional[str]:
    found = card.select(selector)
    if not found:
        return None
    return found[0].text().strip() or None


def _first_attr(card: DocumentNode, selector: str, attr: str) -> Optional[str]:
    found = card.select(selector)
    if not found:
        return None
    return found[0].attr(attr) or None


# Name

def name_from_heading(card: DocumentNode, website: str) -> Optional[str]:
    return _first_text(card, HEADING_SELECTOR)


def name_from_class_hint(card: DocumentNode, website: str) -> Optional[str]:
    return _first_text(card, NAME_HINT_SELECTOR)


def name_from_bold_text(card: DocumentNode, website: str) -> Optional[str]:
    return _first_text(card, BOLD_SELECTOR)


def name_from_image_alt(card: DocumentNode, website: str) -> Optional[str]:
    alt = _first_attr(card, "img", "alt")
    return alt.strip() if alt and alt.strip() else None


def name_from_website_host(card: DocumentNode, website: str) -> Optional[str]:
    host = re.sub(r"^https?://", "", website or "").split("/")[0]
    labels = host.split(".")
    label = labels[0] if len(labels) > 1 else labels[-1]
    return label[:1].upper() + label[1:] if label else None


NAME_STRATEGIES: Tuple[Callable[[DocumentNode, str], Optional[str]], ...] = (
    name_from_heading,
    name_from_class_hint,
    name_from_bold_text,
    name_from_image_alt,
    name_from_website_host,
)


def extract_name(card: DocumentNode, website: str) -> Optional[str]:
    """First non-empty name from NAME_STRATEGIES; None when shorter than two characters."""
    for strategy in NAME_STRATEGIES:
        value = strategy(card, website)
        if value:
            name = value.strip()
            return name if len(name) >= MIN_NAME_LENGTH else None
    return None


# Description

def description_from_paragraph(card: DocumentNode) -> Optional[str]:
    return _first_text(card, PARAGRAPH_SELECTOR)


def description_from_class_hint(card: DocumentNode) -> Optional[str]:
    return _first_text(card, DESCRIPTION_HINT_SELECTOR)


def description_from_nested_paragraph(card: DocumentNode) -> Optional[str]:
    return _first_text(card, NESTED_PARAGRAPH_SELECTOR)


def description_from_text_scan(card: DocumentNode) -> Optional[str]:
    for node in card.select("*"):
        if node.tag_name in _SCAN_SKIP_TAGS:
            continue
        text = node.text().strip()
        if 20 < len(text) < 300 and "http" not in text and not _BARE_YEAR.match(text):
            return text
    return None


DESCRIPTION_STRATEGIES: Tuple[Callable[[DocumentNode], Optional[str]], ...] = (
    description_from_paragraph,
    description_from_class_hint,
    description_from_nested_paragraph,
    description_from_text_scan,
)


def extract_description(card: DocumentNode, fallback: str) -> str:
    short: Optional[str] = None
    for strategy in DESCRIPTION_STRATEGIES:
        value = strategy(card)
        if not value:
            continue
        if len(value) >= MIN_DESCRIPTION_LENGTH:
            return value
        short = short or value
    if short and len(short) >= MIN_KEPT_DESCRIPTION_LENGTH:
        return short
    return fallback


# Location / sector

def _classify_pair(first: str, second: str) -> Tuple[str, str]:
    kind = classify_tag(first)
    if kind == "location":
        return first, (second if is_sector_text(second) else "")
    if kind == "sector":
        return (second if is_location_text(second) else ""), first
    return "", ""


def _classify_single(text: str) -> Tuple[str, str]:
    kind = classify_tag(text)
    if kind == "location":
        return text, ""
    if kind == "sector":
        return "", text
    return "", ""


def _classify_bracket_tokens(card_text: str) -> Tuple[str, str]:
    location, sector = "", ""
    for raw in _BRACKET_TOKEN.findall(card_text):
        token = raw.strip()
        kind = classify_tag(token)
        if kind == "location" and not location:
            location = token
        elif kind == "sector" and not sector:
            sector = token
    return location, sector


def extract_location_and_sector(card: DocumentNode) -> Tuple[str, str]:
    """(location, sector), either possibly empty. Defaults are applied by the record builder."""
    anchors = [a.text().strip() for a in card.select(PLACEHOLDER_ANCHOR_SELECTOR)]
    location, sector = "", ""
    if len(anchors) == 2:
        location, sector = _classify_pair(anchors[0], anchors[1])
    elif len(anchors) == 1:
        location, sector = _classify_single(anchors[0])
    if not location and not sector:
        location, sector = _classify_bracket_tokens(card.text())
    return location, sector


# Logo

def extract_logo_url(card: DocumentNode, origin: str) -> str:
    src = _first_attr(card, "img", "src") or ""
    if not src or src.startswith("http"):
        return src
    if src.startswith("//"):
        return f"https:{src}"
    if src.startswith("/"):
        return f"{origin.rstrip('/')}{src}"
    return f"https://{src}"


# Founded year

def extract_founded_year(card: DocumentNode, current_year: Optional[int] = None) -> int:
    """First in-range year token after an <img> in the card markup, 0 when there is none."""
    ceiling = current_year or datetime.now().year
    markup = card.html() or ""
    image = _IMAGE_TAG.search(markup)
    if not image:
        return 0
    for token in _YEAR_TOKEN.finditer(markup, image.end()):
        year = int(token.group(1))
        if FIRST_FOUNDED_YEAR <= year <= ceiling:
            return year
    return 0
