from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.orm import Session, sessionmaker

from football_api.core.config import Settings
from football_api.db import DatabaseConfig, create_db_engine, create_schema, create_session_factory
from football_api.db.models import CacheEntry

logger = logging.getLogger(__name__)


def _utcnow_naive() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


class DatabaseCacheStore:
    """
    Key/value store backed by the ``cache_entries`` table.

    Each operation runs in its own session/transaction. Expired rows read
    as misses and are removed on the way out; ``purge_expired`` clears the
    rest in bulk.
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        *,
        now: Callable[[], datetime] = _utcnow_naive,
    ):
        self._session_factory = session_factory
        self._now = now

    @classmethod
    def from_config(cls, config: DatabaseConfig) -> DatabaseCacheStore:
        """Build a store on a fresh engine, creating the table if needed."""
        engine = create_db_engine(config)
        create_schema(engine)
        return cls(create_session_factory(engine))

    @classmethod
    def from_settings(cls, s: Settings) -> DatabaseCacheStore:
        return cls.from_config(DatabaseConfig(database_url=s.database_url, echo=s.db_echo))

    def get(self, key: str) -> Any | None:
        with self._session_factory() as session, session.begin():
            entry = session.scalar(select(CacheEntry).where(CacheEntry.key == key))
            if entry is None:
                return None

            if entry.expires_at is not None and entry.expires_at <= self._now():
                session.delete(entry)
                return None

            return entry.value

    def set(self, key: str, value: Any, ttl_s: int) -> bool:
        expires_at = self._now() + timedelta(seconds=ttl_s) if ttl_s > 0 else None

        with self._session_factory() as session, session.begin():
            entry = session.scalar(select(CacheEntry).where(CacheEntry.key == key))
            if entry:
                entry.value = value
                entry.expires_at = expires_at
            else:
                session.add(CacheEntry(key=key, value=value, expires_at=expires_at))
        return True

    def delete(self, key: str) -> bool:
        with self._session_factory() as session, session.begin():
            result = session.execute(delete(CacheEntry).where(CacheEntry.key == key))
            return bool(result.rowcount)

    def purge_expired(self) -> int:
        with self._session_factory() as session, session.begin():
            result = session.execute(
                delete(CacheEntry)
                .where(CacheEntry.expires_at.is_not(None))
                .where(CacheEntry.expires_at <= self._now())
            )
            purged = result.rowcount or 0

        if purged:
            logger.debug("Purged %d expired cache entries", purged)
        return purged
