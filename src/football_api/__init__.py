"""Client for the football-api.com sports data API."""

from football_api.cache import DatabaseCacheStore, MemoryCacheStore
from football_api.client import FootballApiClient
from football_api.core.config import ClientConfig, Settings
from football_api.core.errors import (
    CacheError,
    ConfigError,
    FootballApiError,
    GeneralError,
    InvalidParameterError,
    InvalidResponseError,
    RateLimitError,
    TransportError,
)
from football_api.enums import Action, OutputFormat

__all__ = [
    "Action",
    "CacheError",
    "ClientConfig",
    "ConfigError",
    "DatabaseCacheStore",
    "FootballApiClient",
    "FootballApiError",
    "GeneralError",
    "InvalidParameterError",
    "InvalidResponseError",
    "MemoryCacheStore",
    "OutputFormat",
    "RateLimitError",
    "Settings",
    "TransportError",
]
