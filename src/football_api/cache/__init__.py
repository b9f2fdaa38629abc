from football_api.cache.base import CacheStore
from football_api.cache.database import DatabaseCacheStore
from football_api.cache.memory import MemoryCacheStore

__all__ = [
    "CacheStore",
    "DatabaseCacheStore",
    "MemoryCacheStore",
]
