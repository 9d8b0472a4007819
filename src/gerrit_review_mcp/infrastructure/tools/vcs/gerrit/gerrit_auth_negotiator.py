"""Startup negotiation of the authentication scheme a Gerrit server accepts.

Digest goes first since it is Gerrit's default, then basic, then cookie.
Each scheme is probed against ``/a/accounts/self``; the first 200 wins.
"""

from collections.abc import Callable
from enum import StrEnum

import httpx
import structlog

from gerrit_review_mcp.core.application.tools.common.exceptions import (
    GerritAuthenticationError,
)
from gerrit_review_mcp.infrastructure.tools.vcs.gerrit.gerrit_connection import (
    AuthScheme,
    GerritConnection,
)
from gerrit_review_mcp.infrastructure.tools.vcs.gerrit.gerrit_response_parser import (
    raise_for_gerrit_status,
)

logger = structlog.get_logger()

IDENTITY_PATH = "accounts/self"

_AUTH_STRATEGIES: list[tuple[AuthScheme, Callable[[GerritConnection, str, str], None]]] = [
    (AuthScheme.DIGEST, GerritConnection.set_digest_auth),
    (AuthScheme.BASIC, GerritConnection.set_basic_auth),
    (AuthScheme.COOKIE, GerritConnection.set_cookie_auth),
]


class ProbeOutcome(StrEnum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    CHALLENGE_MISSING = "challenge_missing"


async def probe_identity(connection: GerritConnection) -> ProbeOutcome:
    """Issue one identity lookup under the connection's current scheme.

    Raises GerritConnectivityError when the server cannot be reached and
    GerritApiError for any status other than 200 or 401.
    """
    response = await connection.get(IDENTITY_PATH)
    if response.status_code == httpx.codes.OK:
        return ProbeOutcome.ACCEPTED
    if response.status_code == httpx.codes.UNAUTHORIZED:
        if connection.auth_scheme is AuthScheme.DIGEST and not _has_digest_challenge(response):
            return ProbeOutcome.CHALLENGE_MISSING
        return ProbeOutcome.REJECTED
    raise_for_gerrit_status(response, "identity probe")
    # 2xx other than 200 is not proof of identity
    return ProbeOutcome.REJECTED


async def negotiate_auth(connection: GerritConnection, username: str, password: str) -> None:
    """Leave the connection on the first accepted scheme, or reset it and raise.

    An empty username means anonymous access and skips negotiation entirely.
    A missing digest challenge counts as a rejection, the same as a 401.
    """
    if not username:
        logger.info("No Gerrit username configured, using anonymous access")
        return

    for scheme, apply_auth in _AUTH_STRATEGIES:
        apply_auth(connection, username, password)
        outcome = await probe_identity(connection)
        logger.info("Gerrit auth probe finished", auth_scheme=scheme.value, outcome=outcome.value)
        if outcome is ProbeOutcome.ACCEPTED:
            return

    connection.reset_auth()
    raise GerritAuthenticationError(
        message=f"all authentication schemes were rejected for user {username}",
        status_code=httpx.codes.UNAUTHORIZED,
    )


def _has_digest_challenge(response: httpx.Response) -> bool:
    return any(
        header.lower().startswith("digest")
        for header in response.headers.get_list("www-authenticate")
    )
