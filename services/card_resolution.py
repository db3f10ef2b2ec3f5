from __future__ import annotations

from typing import Tuple

from ports.document import DocumentNode


# Tried in order; the first ancestor with more text than the anchor is the card
CARD_CONTAINER_SELECTORS: Tuple[str, ...] = (
    '[class*="card"]',
    '[class*="item"]',
    '[class*="company"]',
    "div",
    "li",
)


def resolve_card(anchor: DocumentNode) -> DocumentNode:
    """Widen a candidate anchor to its directory card, or return the anchor itself."""
    anchor_length = len(anchor.text().strip())
    for selector in CARD_CONTAINER_SELECTORS:
        parent = anchor.closest(selector)
        if parent is not None and len(parent.text().strip()) > anchor_length:
            return parent
    return anchor
