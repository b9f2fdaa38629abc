from __future__ import annotations

from typing import Any, Protocol


class CacheStore(Protocol):
    def get(self, key: str) -> Any | None: ...
    def set(self, key: str, value: Any, ttl_s: int) -> bool: ...
