from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional


class JsonFileStore:
    """Blob store over the local filesystem: one indented JSON document per path."""

    def __init__(self, root: str | Path | None = None) -> None:
        self.root = Path(root) if root else None

    def _resolve(self, path: str) -> Path:
        p = Path(path)
        if self.root is not None and not p.is_absolute():
            return self.root / p
        return p

    def write(self, path: str, value: Any) -> None:
        target = self._resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(value, indent=2, ensure_ascii=False), encoding="utf-8")

    def read(self, path: str) -> Optional[Any]:
        target = self._resolve(path)
        try:
            return json.loads(target.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return None
