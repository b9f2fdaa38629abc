"""
Exceptions raised by the football-api client.

Every failure surfaces to the caller of ``FootballApiClient.call`` as a
subclass of ``FootballApiError``. Errors tied to a request carry the URL
exactly as it was built, API key included.
"""

from __future__ import annotations


class FootballApiError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, *, url: str | None = None):
        super().__init__(message)
        self.url = url


# --- Caller / configuration errors ---

class ConfigError(FootballApiError):
    """Raised for missing or invalid client configuration."""


class InvalidParameterError(FootballApiError):
    """Raised when a parameter group is not a mapping of scalars."""


# --- Transport / response errors ---

class TransportError(FootballApiError):
    """Raised when the request never produced an HTTP response (DNS, connect, timeout)."""


class InvalidResponseError(FootballApiError):
    """Raised for a non-200 status or a body that cannot be parsed."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        body: str | None = None,
    ):
        super().__init__(message, url=url)
        self.status_code = status_code
        self.body = body


class GeneralError(FootballApiError):
    """Raised when the response envelope's ERROR field is not "OK"."""

    def __init__(self, message: str, *, url: str | None = None, error_text: str = ""):
        super().__init__(message, url=url)
        self.error_text = error_text


class RateLimitError(GeneralError):
    """Raised when the vendor reports the call quota as exhausted."""


# --- Cache errors ---

class CacheError(FootballApiError):
    """Raised when a decoded result could not be written to the cache store."""
