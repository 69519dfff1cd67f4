"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

CONNECTION_STRING_NAME = "FoodRescueDb"


class ConfigurationError(RuntimeError):
    """Raised when required configuration is missing at startup."""


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    food_rescue_db: str
    database_timeout_seconds: float = 30.0
    seed_donation_count: int = 0
    dev_auth_enabled: bool = False
    dev_user_name: str = "Developer"
    dev_user_email: str = "dev@foodrescue.local"
    dev_user_roles: str | None = None
    openai_api_key: str | None = None
    openai_model: str = "gpt-5.2"
    openai_reasoning_effort: str = "medium"
    openai_store: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_roles(raw: str | None) -> frozenset[str]:
    """Parse a comma separated role list."""
    if raw is None:
        return frozenset()
    return frozenset(chunk.strip() for chunk in raw.split(",") if chunk.strip())
