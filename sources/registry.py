from __future__ import annotations

from typing import Any, Dict, Optional


_REGISTRY: Dict[str, Any] = {}


def register(name: str, factory) -> None:
    _REGISTRY[name] = factory


def get_source(name: str, base_url: Optional[str] = None):
    if name not in _REGISTRY:
        raise KeyError(f"Unknown source: {name}")
    return _REGISTRY[name](base_url)


def available_sources() -> Dict[str, Any]:
    return dict(_REGISTRY)
