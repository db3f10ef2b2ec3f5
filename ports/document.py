from __future__ import annotations

from typing import List, Optional, Protocol


class DocumentNode(Protocol):
    """Query capability over one element of a parsed HTML document."""

    @property
    def tag_name(self) -> str:
        ...

    def select(self, selector: str) -> List["DocumentNode"]:
        ...

    def text(self) -> str:
        ...

    def attr(self, name: str) -> Optional[str]:
        ...

    def closest(self, selector: str) -> Optional["DocumentNode"]:
        ...

    def html(self) -> str:
        ...
