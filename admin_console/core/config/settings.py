"""Main application settings and configuration management.

This module composes all the application settings from the different modules
(app, database, password policy) into a single, accessible `Settings` class.

It loads settings from environment variables and .env files, validates them,
and provides a single `settings` object for use throughout the application.

Environment Support:
- Development: Uses .env
- Test: Uses .env.test when present
- Staging: Uses .env.staging when present
- Production: Uses .env.production when present
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import SettingsConfigDict

from .app import AppSettings
from .auth import PasswordPolicySettings
from .database import DatabaseSettings

logger = logging.getLogger(__name__)
logging.getLogger("passlib").setLevel(logging.ERROR)


class Settings(AppSettings, DatabaseSettings, PasswordPolicySettings):
    """The main settings class that aggregates all application configurations.

    It inherits from all the specialized settings classes, providing a unified
    interface to all configuration parameters.

    Usage:
        - Access settings via the singleton instance `settings` throughout the application.
        - Tests and embedding code may build their own `Settings(...)` with overrides.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )


ENV_FILES = {
    "development": ".env",
    "test": ".env.test",
    "staging": ".env.staging",
    "production": ".env.production",
}


def create_settings() -> Settings:
    """Create settings instance with environment-specific configuration.

    Returns:
        Settings: Configured settings instance
    """
    # Exported variables win over .env; APP_ENV may come from .env itself.
    load_dotenv(Path(".env"), override=False)

    env = os.getenv("APP_ENV", "development")
    env_file = ENV_FILES.get(env, ".env")

    if env != "development" and Path(env_file).exists():
        logger.debug("Loading environment configuration from %s", env_file)
        return Settings(_env_file=env_file)

    if not Path(".env").exists():
        logger.debug("No .env file found, using environment variables only (environment: %s)", env)
    return Settings()


# Create a singleton instance of the settings to be used across the application.
settings = create_settings()
