from football_api.db.models.cache_entry import CacheEntry

__all__ = [
    "CacheEntry",
]
