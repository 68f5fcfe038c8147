"""Runtime settings for the onboarding service.

Read from the process environment and an optional .env file. The only
identity source is DEFAULT_USER_ID; sign-in lives in another service.
"""

import uuid

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Shipped in the dev compose file; refused when ENVIRONMENT=production
_DEV_DATABASE_PASSWORD = "placement_dev_password"  # nosec B105


class Settings(BaseSettings):
    """Onboarding service settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    database_host: str = "localhost"
    database_port: int = 5432
    database_name: str = "placement"
    database_user: str = "placement_user"
    database_password: str = _DEV_DATABASE_PASSWORD

    # Origins of the onboarding wizard
    allowed_origins: list[str] = ["http://localhost:5173"]

    environment: str = "development"
    log_level: str = "INFO"

    # User whose onboarding the API reconciles; unset means every call is 401
    default_user_id: uuid.UUID | None = None

    @property
    def database_url(self) -> str:
        """asyncpg URL built from the database_* fields."""
        return (
            f"postgresql+asyncpg://{self.database_user}:{self.database_password}"
            f"@{self.database_host}:{self.database_port}/{self.database_name}"
        )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @model_validator(mode="after")
    def reject_unsafe_values(self) -> "Settings":
        """Refuse a wildcard CORS origin, and the dev password in production."""
        if "*" in self.allowed_origins:
            msg = (
                "ALLOWED_ORIGINS cannot contain '*': the wizard sends "
                "credentialed requests, so each origin must be listed."
            )
            raise ValueError(msg)
        if self.is_production and self.database_password == _DEV_DATABASE_PASSWORD:
            msg = (
                "DATABASE_PASSWORD is still the development default; "
                "set a real password before running with ENVIRONMENT=production."
            )
            raise ValueError(msg)
        return self


settings = Settings()
