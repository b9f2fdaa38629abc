from __future__ import annotations

import xml.etree.ElementTree as ET
from types import SimpleNamespace
from typing import Any

from football_api.cache.base import CacheStore
from football_api.core.errors import CacheError


def is_present(value: Any) -> bool:
    """True for a stored value worth returning: not None and not empty."""
    if value is None:
        return False
    if isinstance(value, ET.Element):
        # Element truthiness means "has children"; any element counts here
        return True
    if isinstance(value, SimpleNamespace):
        return bool(vars(value))
    if isinstance(value, (str, bytes, dict, list, tuple)):
        return len(value) > 0
    return value is not False


class CacheGateway:
    """Reads and writes decoded results keyed by the full request URL."""

    def __init__(self, store: CacheStore, ttl_s: int):
        self.store = store
        self.ttl_s = ttl_s

    @property
    def writes_enabled(self) -> bool:
        return self.ttl_s > 0

    def try_get(self, key: str) -> Any | None:
        try:
            value = self.store.get(key)
        except Exception as e:
            raise CacheError(f"Cache read failed: {e}\nURL: {key}", url=key) from e

        if not is_present(value):
            return None
        return value

    def set(self, key: str, value: Any) -> None:
        if not self.writes_enabled:
            return

        try:
            stored = self.store.set(key, value, self.ttl_s)
        except Exception as e:
            raise CacheError(f"Cache write failed: {e}\nURL: {key}", url=key) from e

        if not stored:
            raise CacheError(f"Cache store rejected write\nURL: {key}", url=key)
