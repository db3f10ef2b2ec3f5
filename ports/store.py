from __future__ import annotations

from typing import Any, Optional, Protocol


class BlobStorePort(Protocol):
    def write(self, path: str, value: Any) -> None:
        ...

    def read(self, path: str) -> Optional[Any]:
        ...
