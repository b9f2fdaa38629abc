from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import Index, PickleType, String
from sqlalchemy.orm import Mapped, mapped_column

from football_api.db.base import Base, TimestampMixin


class CacheEntry(Base, TimestampMixin):
    __tablename__ = "cache_entries"

    id: Mapped[int] = mapped_column(primary_key=True)

    # full request URL, API key included
    key: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    value: Mapped[Any] = mapped_column(PickleType, nullable=False)

    # naive UTC; NULL never expires
    expires_at: Mapped[datetime | None] = mapped_column(nullable=True)

    __table_args__ = (Index("ix_cache_entries_expires_at", "expires_at"),)
