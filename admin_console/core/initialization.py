"""Application initialization and setup.

This module handles the initialization tasks required before a command runs.
Environment variables and .env files are loaded when `settings` is created;
this step configures logging from them.
"""

from typing import Optional

from admin_console.core.config.settings import settings
from admin_console.core.logging import configure_logging


def initialize_application(log_level: Optional[str] = None, json_logs: Optional[bool] = None) -> None:
    """Initialize the application with all necessary setup tasks.

    Configures logging, command-line overrides taking precedence over settings.
    """
    configure_logging(
        log_level=log_level or settings.LOG_LEVEL,
        json_logs=settings.LOG_JSON if json_logs is None else json_logs,
    )
