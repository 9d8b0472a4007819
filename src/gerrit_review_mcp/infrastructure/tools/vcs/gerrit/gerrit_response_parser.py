"""Helpers decoding Gerrit REST response bodies."""

import base64
import binascii
import json
from typing import Any

import httpx

from gerrit_review_mcp.core.application.tools.common.exceptions import GerritApiError

# Gerrit prefixes every JSON body with this line to defeat XSSI
XSSI_PREFIX = ")]}'"


def strip_xssi_prefix(body: str) -> str:
    if body.startswith(XSSI_PREFIX):
        return body[len(XSSI_PREFIX):].lstrip("\r\n")
    return body


def raise_for_gerrit_status(response: httpx.Response, action: str) -> None:
    if response.is_success:
        return
    detail = response.text.strip() or response.reason_phrase
    raise GerritApiError(
        message=f"{action}: {detail}",
        status_code=response.status_code,
        retryable=response.status_code >= 500,
    )


def parse_json_body(response: httpx.Response, action: str) -> Any:
    try:
        return json.loads(strip_xssi_prefix(response.text))
    except json.JSONDecodeError as exc:
        raise GerritApiError(
            message=f"{action}: invalid JSON response: {exc}",
            status_code=response.status_code,
        ) from exc


def decode_patch_body(response: httpx.Response, action: str) -> str | None:
    """Return the patch text, or None when the server sent an empty body."""
    body = response.text
    if not body.strip():
        return None
    if response.headers.get("X-FYI-Content-Encoding", "").lower() != "base64":
        return body
    try:
        return base64.b64decode(body.strip()).decode("utf-8", errors="replace")
    except (binascii.Error, ValueError) as exc:
        raise GerritApiError(
            message=f"{action}: invalid base64 patch payload: {exc}",
            status_code=response.status_code,
        ) from exc
