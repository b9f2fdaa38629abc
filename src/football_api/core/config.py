from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from football_api.core.errors import ConfigError
from football_api.enums import OutputFormat

if TYPE_CHECKING:
    from football_api.cache.base import CacheStore

DEFAULT_SERVICE_URL = "http://football-api.com/api/"
DEFAULT_TIMEOUT_S = 30.0


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="FOOTBALL_API_"
    )

    # football-api.com
    service_url: str = DEFAULT_SERVICE_URL
    api_key: Optional[str] = Field(default=None, repr=False)
    output_type: str = OutputFormat.JSON.value
    request_ip: Optional[str] = None

    # caching / change detection
    cache_time: int = 0
    generate_hash: bool = False
    timeout_s: float = DEFAULT_TIMEOUT_S

    # DB-backed cache store
    database_url: str = "sqlite+pysqlite:///./football_api_cache.db"
    db_echo: bool = False

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigError(
                "FOOTBALL_API_API_KEY is not set. "
                "Set it in the environment or .env file."
            )
        return self.api_key


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    service_url: str = DEFAULT_SERVICE_URL
    output_format: OutputFormat = OutputFormat.JSON
    request_ip: str | None = None
    cache: CacheStore | None = None
    cache_time: int = 0
    generate_hash: bool = False
    timeout_s: float = DEFAULT_TIMEOUT_S

    def __post_init__(self) -> None:
        if not self.service_url or not self.service_url.strip():
            raise ConfigError("service_url cannot be empty. Please configure.")
        if not self.api_key or not self.api_key.strip():
            raise ConfigError("api_key cannot be empty. Please configure.")

        try:
            fmt = OutputFormat.parse(self.output_format)
        except ValueError as e:
            raise ConfigError(f"Unsupported output_type: {self.output_format!r}") from e
        # frozen: normalize through object.__setattr__
        object.__setattr__(self, "output_format", fmt)

        try:
            cache_time = int(self.cache_time)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"cache_time must be an integer, got {self.cache_time!r}") from e
        if cache_time < 0:
            raise ConfigError(f"cache_time must be >= 0, got {self.cache_time!r}")
        object.__setattr__(self, "cache_time", cache_time)

        if self.request_ip is not None and not str(self.request_ip).strip():
            object.__setattr__(self, "request_ip", None)

        if self.timeout_s <= 0:
            raise ConfigError(f"timeout_s must be > 0, got {self.timeout_s!r}")

    @classmethod
    def from_settings(cls, s: Settings, *, cache: CacheStore | None = None) -> ClientConfig:
        return cls(
            api_key=s.require_api_key(),
            service_url=s.service_url,
            output_format=s.output_type or OutputFormat.JSON,
            request_ip=s.request_ip,
            cache=cache,
            cache_time=s.cache_time,
            generate_hash=s.generate_hash,
            timeout_s=s.timeout_s,
        )
