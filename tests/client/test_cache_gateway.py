from __future__ import annotations

import xml.etree.ElementTree as ET
from types import SimpleNamespace
from typing import Any

import pytest

from football_api.cache.memory import MemoryCacheStore
from football_api.client.cache import CacheGateway, is_present
from football_api.core.errors import CacheError


class RejectingStore(MemoryCacheStore):
    def set(self, key: str, value: Any, ttl_s: int) -> bool:
        return False


class BrokenStore(MemoryCacheStore):
    def set(self, key: str, value: Any, ttl_s: int) -> bool:
        raise OSError("disk full")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, False),
        ("", False),
        ({}, False),
        ([], False),
        (False, False),
        (SimpleNamespace(), False),
        (0, True),
        ("x", True),
        ({"ERROR": "OK"}, True),
        (SimpleNamespace(ERROR="OK"), True),
        # childless elements are falsy in ElementTree but still a stored result
        (ET.Element("root"), True),
    ],
)
def test_is_present(value: Any, expected: bool) -> None:
    assert is_present(value) is expected


def test_empty_stored_values_are_misses() -> None:
    store = MemoryCacheStore()
    store.set("k", {}, 60)
    gateway = CacheGateway(store, 60)

    assert gateway.try_get("k") is None


def test_zero_ttl_never_writes() -> None:
    store = MemoryCacheStore()
    gateway = CacheGateway(store, 0)

    gateway.set("k", {"ERROR": "OK"})

    assert gateway.writes_enabled is False
    assert len(store) == 0


def test_rejected_write_raises_cache_error() -> None:
    gateway = CacheGateway(RejectingStore(), 60)

    with pytest.raises(CacheError) as exc_info:
        gateway.set("http://x/?Action=today", {"ERROR": "OK"})

    assert exc_info.value.url == "http://x/?Action=today"


def test_store_exception_wrapped_in_cache_error() -> None:
    gateway = CacheGateway(BrokenStore(), 60)

    with pytest.raises(CacheError) as exc_info:
        gateway.set("k", {"ERROR": "OK"})

    assert isinstance(exc_info.value.__cause__, OSError)
