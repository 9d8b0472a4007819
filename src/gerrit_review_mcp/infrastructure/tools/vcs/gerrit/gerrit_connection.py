"""Shared HTTP session to one Gerrit server.

Holds the active authentication scheme. Gerrit serves authenticated REST
calls under the ``/a/`` prefix, so the prefix is added whenever a scheme is
active and dropped again when the connection is reset to anonymous.
"""

from __future__ import annotations

from collections.abc import Generator
from enum import StrEnum
from typing import Any

import httpx
import structlog

from gerrit_review_mcp.core.application.tools.common.exceptions import GerritConnectivityError

logger = structlog.get_logger()


class AuthScheme(StrEnum):
    NONE = "none"
    DIGEST = "digest"
    BASIC = "basic"
    COOKIE = "cookie"


class CookieAuth(httpx.Auth):
    """Present credentials as a cookie named after the user, valued with the password."""

    def __init__(self, name: str, value: str) -> None:
        self._cookie = f"{name}={value}"

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Cookie"] = self._cookie
        yield request


class GerritConnection:
    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = http_client or httpx.AsyncClient(timeout=timeout)
        self._auth: httpx.Auth | None = None
        self._auth_scheme = AuthScheme.NONE

    @property
    def auth_scheme(self) -> AuthScheme:
        return self._auth_scheme

    @property
    def is_authenticated(self) -> bool:
        return self._auth_scheme is not AuthScheme.NONE

    # ── Authentication strategies ──

    def set_digest_auth(self, username: str, password: str) -> None:
        self._set_auth(AuthScheme.DIGEST, httpx.DigestAuth(username, password))

    def set_basic_auth(self, username: str, password: str) -> None:
        self._set_auth(AuthScheme.BASIC, httpx.BasicAuth(username, password))

    def set_cookie_auth(self, username: str, password: str) -> None:
        self._set_auth(AuthScheme.COOKIE, CookieAuth(username, password))

    def reset_auth(self) -> None:
        self._set_auth(AuthScheme.NONE, None)

    def _set_auth(self, scheme: AuthScheme, auth: httpx.Auth | None) -> None:
        self._auth_scheme = scheme
        self._auth = auth

    # ── HTTP ──

    def build_url(self, path: str) -> str:
        prefix = "a/" if self.is_authenticated else ""
        return f"{self.base_url}/{prefix}{path.lstrip('/')}"

    async def get(self, path: str, params: Any = None) -> httpx.Response:
        """GET a REST path. Raises GerritConnectivityError when no response arrives."""
        url = self.build_url(path)
        try:
            return await self._client.get(url, params=params, auth=self._auth)
        except httpx.TransportError as exc:
            logger.error(
                "Gerrit unreachable",
                processing_status="ERROR",
                error_type=type(exc).__name__,
                error_details=str(exc),
                error_retryable=True,
                source_system="Gerrit",
            )
            raise GerritConnectivityError(message=f"request to {url} failed: {exc}") from exc

    async def aclose(self) -> None:
        await self._client.aclose()
