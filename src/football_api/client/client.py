from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace
from datetime import datetime
from typing import Any

import httpx

from football_api.cache.base import CacheStore
from football_api.client.cache import CacheGateway
from football_api.client.decoding import add_cached_marker, decode_response
from football_api.client.transport import fetch
from football_api.client.urls import build_url, redact_url
from football_api.core.config import ClientConfig, Settings
from football_api.core.errors import ConfigError
from football_api.enums import Action

logger = logging.getLogger(__name__)

DEFAULT_REMAINING_API_CALLS = 1000


class FootballApiClient:
    """
    Client for the football-api.com data API.

    ``call`` runs one vendor action through the request pipeline:
    build URL, check cache, fetch, decode and validate, store. The result
    shape depends on ``config.output_format``.

    The remaining-calls counter and the cache handle are per-instance state
    with no locking; share an instance across threads only behind your own
    synchronization.
    """

    def __init__(self, config: ClientConfig, *, transport: httpx.BaseTransport | None = None):
        self._config = config
        self._transport = transport
        self._remaining_api_calls = DEFAULT_REMAINING_API_CALLS
        self._cache = (
            CacheGateway(config.cache, config.cache_time) if config.cache is not None else None
        )

    @classmethod
    def from_settings(
        cls,
        s: Settings,
        *,
        cache: CacheStore | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> FootballApiClient:
        return cls(ClientConfig.from_settings(s, cache=cache), transport=transport)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def remaining_api_calls(self) -> int:
        return self._remaining_api_calls

    def get_remaining_api_calls(self) -> int:
        return self._remaining_api_calls

    def set_request_ip(self, ip: str) -> None:
        if not ip or not str(ip).strip():
            raise ConfigError("IP parameter cannot be empty.")
        self._config = replace(self._config, request_ip=ip)

    def call(self, action: Action | str, *param_groups: Mapping[str, Any]) -> Any:
        cfg = self._config

        url = build_url(cfg.service_url, cfg.api_key, cfg.output_format, action, param_groups)
        log_url = redact_url(url, cfg.api_key)

        if self._cache is not None:
            cached = self._cache.try_get(url)
            if cached is not None:
                logger.debug("Cache hit for %s", log_url)
                return cached
            logger.debug("Cache miss for %s", log_url)

        body = fetch(
            url,
            timeout_s=cfg.timeout_s,
            request_ip=cfg.request_ip,
            transport=self._transport,
            log_url=log_url,
        )

        decoded = decode_response(
            body,
            output_format=cfg.output_format,
            generate_hash=cfg.generate_hash,
            source_url=url,
        )
        if decoded.requests_remaining is not None:
            self._remaining_api_calls = decoded.requests_remaining

        data = decoded.value
        if self._cache is not None and self._cache.writes_enabled:
            data = add_cached_marker(data, datetime.now())
            self._cache.set(url, data)
            logger.debug("Cached %s for %ss", log_url, self._cache.ttl_s)

        return data

    # ---------------------------------------------------------
    # Known vendor actions
    # ---------------------------------------------------------

    def competitions(self) -> Any:
        return self.call(Action.COMPETITIONS)

    def standings(self, comp_id: int | str) -> Any:
        return self.call(Action.STANDINGS, {"comp_id": comp_id})

    def today(self, comp_id: int | str | None = None) -> Any:
        params = {"comp_id": comp_id} if comp_id is not None else {}
        return self.call(Action.TODAY, params)

    def fixtures(
        self,
        *,
        comp_id: int | str | None = None,
        match_date: str | None = None,
        from_date: str | None = None,
        to_date: str | None = None,
    ) -> Any:
        """
        Fixtures for one date (``match_date``) or a range (``from_date``/``to_date``).

        Dates use the vendor's ``dd.mm.yyyy`` format.
        """
        params: dict[str, Any] = {}
        if comp_id is not None:
            params["comp_id"] = comp_id
        if match_date is not None:
            params["match_date"] = match_date
        if from_date is not None:
            params["from_date"] = from_date
        if to_date is not None:
            params["to_date"] = to_date
        return self.call(Action.FIXTURES, params)

    def commentaries(self, match_id: int | str) -> Any:
        return self.call(Action.COMMENTARIES, {"match_id": match_id})
