from __future__ import annotations

import copy
import time
from collections.abc import Callable
from typing import Any


class MemoryCacheStore:
    """In-process key/value store with per-entry expiry."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: dict[str, tuple[float | None, Any]] = {}

    def get(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None

        expires_at, value = entry
        if expires_at is not None and self._clock() >= expires_at:
            del self._entries[key]
            return None
        # callers get their own copy; cached results stay as decoded
        return copy.deepcopy(value)

    def set(self, key: str, value: Any, ttl_s: int) -> bool:
        # ttl 0 stores without expiry
        expires_at = self._clock() + ttl_s if ttl_s > 0 else None
        self._entries[key] = (expires_at, copy.deepcopy(value))
        return True

    def delete(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
