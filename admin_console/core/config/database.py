"""
Database connection settings.
"""
from pydantic import Field
from pydantic_settings import BaseSettings


class DatabaseSettings(BaseSettings):
    """
    Defines settings for connecting to the admin user store.

    Security Note:
        - DATABASE_URL may embed credentials; it must never be logged or
          committed to version control
          (OWASP A02:2021 - Cryptographic Failures).
    Performance Note:
        - Pool settings only apply to server databases; SQLite URLs ignore them.
    """
    DATABASE_URL: str = "sqlite:///./admin_console.db"
    DATABASE_ECHO: bool = False
    DATABASE_POOL_SIZE: int = Field(ge=1, default=5)
    DATABASE_MAX_OVERFLOW: int = Field(ge=0, default=5)
    DATABASE_POOL_TIMEOUT: float = Field(ge=1.0, default=5.0)
