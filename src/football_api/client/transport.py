from __future__ import annotations

import logging

import httpx

from football_api.core.errors import ConfigError, InvalidResponseError, TransportError

logger = logging.getLogger(__name__)

_BODY_SNIPPET_CHARS = 200


def _snippet(text: str) -> str:
    if len(text) <= _BODY_SNIPPET_CHARS:
        return text
    return text[:_BODY_SNIPPET_CHARS] + "..."


def fetch(
    url: str,
    *,
    timeout_s: float,
    request_ip: str | None = None,
    transport: httpx.BaseTransport | None = None,
    log_url: str | None = None,
) -> str:
    """
    Issue a single GET and return the response body.

    One timeout value covers connect, read, write and pool acquisition.
    ``request_ip`` binds the outgoing socket when no custom transport is
    given. There are no retries here.
    """
    if transport is None and request_ip:
        transport = httpx.HTTPTransport(local_address=request_ip)

    logger.debug("GET %s (timeout=%ss, bind=%s)", log_url or url, timeout_s, request_ip)

    try:
        with httpx.Client(timeout=httpx.Timeout(timeout_s), transport=transport) as client:
            resp = client.get(url)
            body = resp.text
    except httpx.InvalidURL as e:
        raise ConfigError(f"Invalid request URL: {e}\nURL: {url}", url=url) from e
    except httpx.RequestError as e:
        raise TransportError(
            f"Transport error: {e} ({type(e).__name__})\nURL: {url}", url=url
        ) from e

    if resp.status_code != 200:
        logger.warning("HTTP %s from %s", resp.status_code, log_url or url)
        raise InvalidResponseError(
            f"Wrong HTTP status code: {resp.status_code} - {_snippet(body)}\nURL: {url}",
            url=url,
            status_code=resp.status_code,
            body=_snippet(body),
        )

    return body
