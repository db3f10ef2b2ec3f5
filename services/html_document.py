from __future__ import annotations

from typing import List, Optional

from bs4 import BeautifulSoup, Tag


class SoupNode:
    """`DocumentNode` backed by a BeautifulSoup tag. CSS selectors are evaluated by soupsieve."""

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SoupNode) and other._tag is self._tag

    def __hash__(self) -> int:
        return id(self._tag)

    def __repr__(self) -> str:
        return f"SoupNode(<{self.tag_name}>)"

    @property
    def tag_name(self) -> str:
        return self._tag.name or ""

    def select(self, selector: str) -> List["SoupNode"]:
        return [SoupNode(t) for t in self._tag.select(selector)]

    def select_one(self, selector: str) -> Optional["SoupNode"]:
        found = self._tag.select_one(selector)
        return SoupNode(found) if found is not None else None

    def text(self) -> str:
        return self._tag.get_text()

    def attr(self, name: str) -> Optional[str]:
        value = self._tag.get(name)
        if isinstance(value, list):
            # multi-valued attributes such as class
            return " ".join(value)
        return value

    def closest(self, selector: str) -> Optional["SoupNode"]:
        found = self._tag.css.closest(selector)
        return SoupNode(found) if found is not None else None

    def html(self) -> str:
        return self._tag.decode_contents()


def parse_document(html: str) -> SoupNode:
    return SoupNode(BeautifulSoup(html or "", "lxml"))
