from gerrit_review_mcp.infrastructure.configuration.app_config import AppConfig
from gerrit_review_mcp.infrastructure.configuration.gerrit_settings import GerritSettings
from gerrit_review_mcp.infrastructure.configuration.logging_settings import LoggingSettings

__all__ = ["AppConfig", "GerritSettings", "LoggingSettings"]
