"""Application configuration loaded from environment variables with Pydantic validation."""

from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Dribbble API
    dribbble_base_url: str = "https://api.dribbble.com/v1"
    dribbble_oauth_url: str = "https://dribbble.com"

    # OAuth application constants, only used by the token exchange
    dribbble_client_id: str = ""
    dribbble_client_secret: SecretStr = SecretStr("")

    # Token for the command line front end; the client itself never stores one
    dribbble_access_token: SecretStr | None = None

    request_timeout_seconds: float = Field(default=30.0, gt=0)

    # Logging
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"


def load_settings() -> Settings:
    """Load and validate settings from environment."""
    return Settings()
