from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Log level and renderer selection. Output always goes to stderr."""

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="", alias="LOG_FORMAT")
    app_env: str = Field(default="local", alias="APP_ENV")
    service_name: str = Field(default="gerrit-review-mcp", alias="SERVICE_NAME")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
