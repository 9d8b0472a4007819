from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from gerrit_review_mcp.infrastructure.configuration.gerrit_settings import GerritSettings
from gerrit_review_mcp.infrastructure.configuration.logging_settings import LoggingSettings


class AppConfig(BaseSettings):
    """
    Master configuration class combining all sub-settings.
    """

    gerrit: GerritSettings = Field(default_factory=GerritSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
