from gerrit_review_mcp.infrastructure.tools.vcs.gerrit.gerrit_auth_negotiator import (
    ProbeOutcome,
    negotiate_auth,
    probe_identity,
)
from gerrit_review_mcp.infrastructure.tools.vcs.gerrit.gerrit_connection import (
    AuthScheme,
    GerritConnection,
)
from gerrit_review_mcp.infrastructure.tools.vcs.gerrit.gerrit_rest_client import GerritRestClient

__all__ = [
    "AuthScheme",
    "GerritConnection",
    "GerritRestClient",
    "ProbeOutcome",
    "negotiate_auth",
    "probe_identity",
]
