from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from football_api.core.config import ClientConfig
from football_api.db import create_schema

SERVICE_URL = "http://football-api.test/api/"
API_KEY = "test-key"


class StubApi:
    """Programmable stand-in for the vendor endpoint, recording every request."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[Callable[[httpx.Request], httpx.Response]] = []

    def respond(self, body: str | dict[str, Any], status: int = 200) -> StubApi:
        text = json.dumps(body) if isinstance(body, dict) else body
        self._responses.append(lambda request: httpx.Response(status, text=text))
        return self

    def fail(self, exc_type: type[httpx.RequestError], message: str) -> StubApi:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc_type(message, request=request)

        self._responses.append(_raise)
        return self

    @property
    def calls(self) -> int:
        return len(self.requests)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        # the last programmed response repeats
        idx = min(len(self.requests), len(self._responses)) - 1
        return self._responses[idx](request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)


@pytest.fixture()
def stub_api() -> StubApi:
    return StubApi()


@pytest.fixture()
def make_config() -> Callable[..., ClientConfig]:
    def _make(**overrides: Any) -> ClientConfig:
        values: dict[str, Any] = {"service_url": SERVICE_URL, "api_key": API_KEY}
        values.update(overrides)
        return ClientConfig(**values)

    return _make


@pytest.fixture()
def session_factory():
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    create_schema(engine)

    try:
        yield sessionmaker(bind=engine, future=True, expire_on_commit=False)
    finally:
        engine.dispose()
