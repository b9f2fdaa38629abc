from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from football_api.db.base import Base


@dataclass(frozen=True)
class DatabaseConfig:
    database_url: str
    echo: bool = False


def create_db_engine(config: DatabaseConfig, **kwargs) -> Engine:
    return create_engine(config.database_url, echo=config.echo, future=True, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, future=True, expire_on_commit=False)


def create_schema(engine: Engine) -> None:
    # register models on Base.metadata
    import football_api.db.models  # noqa: F401

    Base.metadata.create_all(engine)


__all__ = [
    "Base",
    "DatabaseConfig",
    "create_db_engine",
    "create_schema",
    "create_session_factory",
]
