"""
Format-specific decoding of football-api.com responses.

Structured formats (XML, JSON and the two client-side JSON shapes) are
parsed, the vendor envelope's ``ERROR`` field is checked before anything
else is read, and the ``APIRequestsRemaining`` quota counter is picked up.
With hashing enabled, a ``contentHash`` over the payload (minus the
volatile ``ComputationTime`` field) and the escaped ``sourceUrl`` are
attached to the result so callers can detect changes between calls.

Line-oriented formats (LINE, CONSOLE, VAR) are returned untouched.
"""

from __future__ import annotations

import copy
import hashlib
import html
import json
import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from datetime import datetime
from types import SimpleNamespace
from typing import Any

from football_api.core.errors import GeneralError, InvalidResponseError, RateLimitError
from football_api.enums import OutputFormat

logger = logging.getLogger(__name__)

ERROR_FIELD = "ERROR"
ERROR_OK = "OK"
REMAINING_FIELD = "APIRequestsRemaining"
COMPUTATION_TIME_FIELD = "ComputationTime"

HASH_ALGORITHM = "md5"
CACHED_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Text the vendor puts in ERROR once the call quota is used up
RATE_LIMIT_NOTICE = "To avoid misuse of the service"


@dataclass(frozen=True)
class DecodedResponse:
    value: Any
    requests_remaining: int | None = None


def _is_ok(value: Any) -> bool:
    if value is None:
        return False
    return str(value).strip() == ERROR_OK


def _check_envelope(value: Any, *, url: str) -> None:
    if _is_ok(value):
        return

    error_text = "missing ERROR field" if value is None else str(value).strip()
    logger.warning("API returned ERROR=%r", error_text)

    exc_type = RateLimitError if RATE_LIMIT_NOTICE in error_text else GeneralError
    raise exc_type(f"API error: {error_text}\nURL: {url}", url=url, error_text=error_text)


def _coerce_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def content_hash(payload: bytes) -> str:
    return hashlib.md5(payload).hexdigest()


def _canonical_json(payload: dict[str, Any]) -> bytes:
    return json.dumps(
        payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False
    ).encode("utf-8")


def _to_namespace(value: Any) -> Any:
    if isinstance(value, dict):
        return SimpleNamespace(**{str(k): _to_namespace(v) for k, v in value.items()})
    if isinstance(value, list):
        return [_to_namespace(v) for v in value]
    return value


# ---------------------------------------------------------
# XML
# ---------------------------------------------------------


def _xml_digest(root: ET.Element) -> str:
    stripped = copy.deepcopy(root)
    for child in stripped.findall(COMPUTATION_TIME_FIELD):
        stripped.remove(child)
    return content_hash(ET.tostring(stripped, encoding="utf-8"))


def _decode_xml(body: str, *, generate_hash: bool, source_url: str) -> DecodedResponse:
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        raise InvalidResponseError(
            f"Invalid XML: {e}\nURL: {source_url}", url=source_url, status_code=200, body=body[:200]
        ) from e

    _check_envelope(root.findtext(ERROR_FIELD), url=source_url)
    remaining = _coerce_int(root.findtext(REMAINING_FIELD))

    if generate_hash:
        digest = _xml_digest(root)
        ET.SubElement(root, "contentHash").text = digest
        ET.SubElement(root, "hashAlgorithm").text = HASH_ALGORITHM
        ET.SubElement(root, "sourceUrl").text = html.escape(source_url)

    return DecodedResponse(value=root, requests_remaining=remaining)


# ---------------------------------------------------------
# JSON
# ---------------------------------------------------------


def _decode_json(
    body: str, *, output_format: OutputFormat, generate_hash: bool, source_url: str
) -> DecodedResponse:
    try:
        raw: Any = json.loads(body)
    except ValueError as e:
        raise InvalidResponseError(
            f"Invalid JSON: {e}\nURL: {source_url}", url=source_url, status_code=200, body=body[:200]
        ) from e

    if not isinstance(raw, dict):
        raise InvalidResponseError(
            f"Expected a JSON object, got {type(raw).__name__}\nURL: {source_url}",
            url=source_url,
            status_code=200,
            body=body[:200],
        )

    _check_envelope(raw.get(ERROR_FIELD), url=source_url)
    remaining = _coerce_int(raw.get(REMAINING_FIELD))

    annotations: dict[str, str] = {}
    if generate_hash:
        # digest over the payload as received, annotations go on the decoded shape
        stripped = {k: v for k, v in raw.items() if k != COMPUTATION_TIME_FIELD}
        annotations = {
            "contentHash": content_hash(_canonical_json(stripped)),
            "hashAlgorithm": HASH_ALGORITHM,
            "sourceUrl": html.escape(source_url),
        }

    if output_format is OutputFormat.OBJECT:
        obj = _to_namespace(raw)
        for name, value in annotations.items():
            setattr(obj, name, value)
        return DecodedResponse(value=obj, requests_remaining=remaining)

    data = dict(raw)
    data.update(annotations)
    return DecodedResponse(value=data, requests_remaining=remaining)


def decode_response(
    body: str,
    *,
    output_format: OutputFormat,
    generate_hash: bool,
    source_url: str,
) -> DecodedResponse:
    if output_format is OutputFormat.XML:
        return _decode_xml(body, generate_hash=generate_hash, source_url=source_url)
    if output_format.is_structured:
        return _decode_json(
            body,
            output_format=output_format,
            generate_hash=generate_hash,
            source_url=source_url,
        )
    return DecodedResponse(value=body)


def add_cached_marker(value: Any, at: datetime) -> Any:
    """Append a ``cached`` timestamp child to XML results about to be stored."""
    if isinstance(value, ET.Element):
        ET.SubElement(value, "cached").text = at.strftime(CACHED_TIMESTAMP_FORMAT)
    return value
