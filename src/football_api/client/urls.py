from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import quote

from football_api.core.errors import InvalidParameterError
from football_api.enums import Action, OutputFormat


def _encode(value: str) -> str:
    # RFC 3986: space becomes %20, only unreserved characters stay literal
    return quote(value, safe="")


def _scalar_text(key: str, value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, (str, int, float)):
        return str(value)
    raise InvalidParameterError(
        f"Parameter {key!r} must be a scalar value, got {type(value).__name__}"
    )


def build_url(
    service_url: str,
    api_key: str,
    output_format: OutputFormat,
    action: Action | str,
    param_groups: Iterable[Any] = (),
) -> str:
    """
    Compose the request URL for a vendor action.

    Action, APIKey and OutputType always come first, followed by each
    parameter group in the order supplied. Keys are lower-cased and values
    percent-encoded. The result doubles as the cache key, so the same
    inputs must always give the same string.
    """
    action_name = action.value if isinstance(action, Action) else str(action)

    parts = [
        f"Action={_encode(action_name)}",
        f"APIKey={_encode(api_key)}",
        f"OutputType={output_format.wire_value}",
    ]

    for i, group in enumerate(param_groups):
        if not isinstance(group, Mapping):
            raise InvalidParameterError(
                f"Arguments must be mappings; group {i} is {type(group).__name__}"
            )
        for key, value in group.items():
            parts.append(f"{_encode(str(key).lower())}={_encode(_scalar_text(key, value))}")

    return f"{service_url}?{'&'.join(parts)}"


def redact_url(url: str, api_key: str) -> str:
    """Return ``url`` with the API key masked, for log lines."""
    if not api_key:
        return url
    return url.replace(f"APIKey={_encode(api_key)}", "APIKey=***")
