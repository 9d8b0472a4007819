import asyncio
import sys

from pydantic import ValidationError

from gerrit_review_mcp.core.application.tools.common.exceptions import (
    ConfigurationError,
    InfraError,
)
from gerrit_review_mcp.infrastructure.configuration import AppConfig, GerritSettings
from gerrit_review_mcp.infrastructure.entrypoints.mcp.gerrit_mcp_server import (
    build_server,
    serve_stdio,
)
from gerrit_review_mcp.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)
from gerrit_review_mcp.infrastructure.resolution.container import (
    build_connection,
    build_tool_handler,
)

logger = get_logger(__name__)


def load_config() -> AppConfig:
    """Read settings from the environment and .env; malformed values are a ConfigurationError."""
    try:
        return AppConfig()
    except ValidationError as exc:
        raise ConfigurationError(f"invalid configuration: {exc}") from exc


async def run(settings: GerritSettings) -> None:
    """Negotiate auth once, then serve tool calls until stdin closes."""
    connection = await build_connection(settings)
    try:
        await serve_stdio(build_server(build_tool_handler(connection)))
    finally:
        await connection.aclose()


def main() -> None:
    """Console entry point."""
    try:
        config = load_config()
    except ConfigurationError as exc:
        # Settings are unusable, so log with the default renderer
        configure_logging()
        _log_startup_failure(exc)
        sys.exit(1)

    configure_logging(config.logging)
    try:
        asyncio.run(run(config.gerrit))
    except InfraError as exc:
        _log_startup_failure(exc, username=config.gerrit.username or None)
        sys.exit(1)
    except Exception as exc:
        logger.exception("Server error", error_type=type(exc).__name__, error_details=str(exc))
        sys.exit(1)


def _log_startup_failure(exc: InfraError, username: str | None = None) -> None:
    logger.critical(
        "Gerrit MCP server failed to start",
        error_type=type(exc).__name__,
        error_details=str(exc),
        username=username,
    )


if __name__ == "__main__":
    main()
