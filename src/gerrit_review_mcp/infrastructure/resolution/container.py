import structlog

from gerrit_review_mcp.core.application.services.change_patch_fetcher import ChangePatchFetcher
from gerrit_review_mcp.core.application.tools.gerrit_change_tool_handler import (
    GerritChangeToolHandler,
)
from gerrit_review_mcp.infrastructure.configuration import GerritSettings
from gerrit_review_mcp.infrastructure.tools.vcs.gerrit import (
    GerritConnection,
    GerritRestClient,
    negotiate_auth,
)

logger = structlog.get_logger()


async def build_connection(settings: GerritSettings) -> GerritConnection:
    """Validate settings, open the shared connection and negotiate auth once.

    Startup failures (configuration, connectivity, authentication) propagate
    to the caller, which terminates the process.
    """
    settings.validate_base_url()
    connection = GerritConnection(settings.base_url, timeout=settings.timeout_seconds)
    try:
        await negotiate_auth(connection, settings.username, settings.password_value())
    except Exception:
        await connection.aclose()
        raise

    if settings.has_credentials:
        logger.info(
            "Gerrit client successfully authenticated and ready",
            auth_scheme=connection.auth_scheme.value,
        )
    return connection


def build_tool_handler(connection: GerritConnection) -> GerritChangeToolHandler:
    return GerritChangeToolHandler(ChangePatchFetcher(GerritRestClient(connection)))
