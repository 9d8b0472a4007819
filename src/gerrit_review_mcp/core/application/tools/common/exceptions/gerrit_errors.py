"""Gerrit provider failures, split by what the caller can do about them."""

from __future__ import annotations

from dataclasses import dataclass

from gerrit_review_mcp.core.application.tools.common.exceptions.provider_error import (
    ProviderError,
)

GERRIT_PROVIDER = "Gerrit"


@dataclass(frozen=False)
class GerritApiError(ProviderError):
    """Gerrit answered, but with a non-success HTTP status."""

    provider: str = GERRIT_PROVIDER
    message: str = ""


@dataclass(frozen=False)
class GerritConnectivityError(ProviderError):
    """No HTTP response at all: DNS failure, refused connection, timeout."""

    provider: str = GERRIT_PROVIDER
    message: str = ""
    retryable: bool = True


@dataclass(frozen=False)
class GerritAuthenticationError(ProviderError):
    """Every authentication scheme was rejected by the server."""

    provider: str = GERRIT_PROVIDER
    message: str = "authentication failed"
