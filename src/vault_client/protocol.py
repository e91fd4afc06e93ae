"""
vault_client.protocol

Wire protocol helpers: query-encoded requests, REST-JSON responses.

Responsibilities:
- Encode operation parameters as an `Action`/`Version` form body.
- Decode successful JSON responses into output shapes.
- Decode error responses (XML `ErrorResponse` or JSON envelopes) into `VaultServiceError`.
"""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from typing import Any, TypeVar
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel, ValidationError

from vault_client.errors import (
    KNOWN_ERROR_CODES,
    SerializationError,
    VaultServiceError,
    code_for_status,
)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=utf-8"

OutputT = TypeVar("OutputT", bound=BaseModel)


def encode_query_body(*, action: str, version: str, params: dict[str, Any]) -> bytes:
    fields: dict[str, str] = {"Action": action, "Version": version}
    for key, value in params.items():
        if isinstance(value, bool):
            fields[key] = "true" if value else "false"
        else:
            fields[key] = str(value)
    return urlencode(fields).encode("utf-8")


def unmarshal(response: httpx.Response, output_type: type[OutputT]) -> OutputT:
    text = response.text
    if not text.strip():
        data: Any = {}
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SerializationError(f"cannot decode vault response: {e}", raw=text) from e
    if not isinstance(data, dict):
        raise SerializationError("vault response is not a JSON object", raw=text)
    try:
        return output_type.model_validate(data)
    except ValidationError as e:
        raise SerializationError(f"cannot decode vault response: {e}", raw=text) from e


def unmarshal_error(response: httpx.Response) -> VaultServiceError:
    code, message, request_id = _error_fields(response.text)
    request_id = request_id or response.headers.get("x-amzn-requestid")

    code = code or code_for_status(response.status_code) or f"HTTP{response.status_code}"
    if not message:
        message = KNOWN_ERROR_CODES.get(code, (0, response.reason_phrase or "unknown error"))[1]

    return VaultServiceError(
        code=code,
        message=message,
        status_code=response.status_code,
        request_id=request_id,
    )


def _error_fields(body: str) -> tuple[str | None, str | None, str | None]:
    body = body.strip()
    if not body:
        return None, None, None
    if body.startswith("<"):
        return _xml_error_fields(body)
    try:
        data = json.loads(body)
    except json.JSONDecodeError:
        return None, None, None
    if not isinstance(data, dict):
        return None, None, None
    return _json_error_fields(data)


def _xml_error_fields(body: str) -> tuple[str | None, str | None, str | None]:
    try:
        root = ET.fromstring(body)
    except ET.ParseError:
        return None, None, None
    return (
        root.findtext(".//{*}Code"),
        root.findtext(".//{*}Message"),
        root.findtext(".//{*}RequestId"),
    )


def _json_error_fields(data: dict[str, Any]) -> tuple[str | None, str | None, str | None]:
    # Vault nests the error under "message": {"code": ..., "message": ...};
    # some endpoints return the flat form instead.
    envelope = data.get("message") if isinstance(data.get("message"), dict) else data
    code = envelope.get("code")
    message = envelope.get("message") or envelope.get("description")
    request_id = data.get("requestId") or data.get("RequestId")
    return (
        str(code) if code is not None and not isinstance(code, int) else None,
        str(message) if message else None,
        str(request_id) if request_id else None,
    )


# --- Module Notes -----------------------------------------------------------
# Integer `code` values in JSON envelopes are HTTP statuses, not error codes; the code
# is then derived from the response status instead.
