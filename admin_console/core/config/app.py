"""
Application-specific settings.
"""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """
    Defines application-wide settings like project name, environment and logging.

    Performance Note:
        - LOG_JSON should be enabled when the command runs under a log shipper
          (cron, CI jobs) so entries stay machine-readable.
    """
    PROJECT_NAME: str = "admin-console"
    VERSION: str = "0.1.0"
    APP_ENV: str = "development"
    DEBUG: bool = False

    LOG_LEVEL: str = Field(default="INFO")
    LOG_JSON: bool = False

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """
        Upper-cases the configured level so ``info`` and ``INFO`` are equivalent.

        Args:
            v: Raw level name.

        Returns:
            Normalized level name.
        """
        return str(v).strip().upper()
