from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gerrit_review_mcp.core.application.tools.common.exceptions import ConfigurationError


class GerritSettings(BaseSettings):
    """Settings for the Gerrit server connection."""

    # ── Core Gerrit settings ──
    base_url: str = Field(default="", alias="GERRIT_BASE_URL")
    username: str = Field(default="", alias="GERRIT_USERNAME")
    password: SecretStr | None = Field(default=None, alias="GERRIT_PASSWORD")

    # ── HTTP client ──
    timeout_seconds: float = Field(default=30.0, alias="GERRIT_TIMEOUT_SECONDS", gt=0)

    @field_validator("base_url", "username", mode="before")
    @classmethod
    def strip_blank(cls, value: object) -> object:
        """Treat whitespace-only values from .env the same as unset."""
        if isinstance(value, str):
            return value.strip()
        return value

    @property
    def has_credentials(self) -> bool:
        return bool(self.username)

    def password_value(self) -> str:
        return self.password.get_secret_value() if self.password else ""

    def validate_base_url(self) -> None:
        if not self.base_url:
            raise ConfigurationError("GERRIT_BASE_URL environment variable is required")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
