"""
Logging configuration module for structured logging.

This module configures the application's logging system using structlog.
It provides structured logging with JSON formatting for log shippers and
human-readable console output for operators.

The logging configuration includes:
- Context variables (e.g. the active area code)
- Timestamp formatting
- Log level inclusion and filtering
- JSON/Console output based on settings
- Logger caching

All log output goes to stderr so it never mixes with command results on stdout.
"""

import logging
import sys

import structlog


def configure_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """
    Configures the application's logging system.

    This function sets up structlog with:
    1. Context variables merged into every entry
    2. Level filtering through the standard library logger
    3. ISO format timestamps
    4. JSON formatting when ``json_logs`` is set, console formatting otherwise
    5. Standard library logger factory writing to stderr
    6. Logger caching for performance

    Args:
        log_level: Minimum level name, e.g. ``"INFO"``.
        json_logs: Render entries as JSON lines.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        format="%(message)s",
        level=level,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_log_level,
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(colors=False),
    ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


# Create a singleton logger instance for the application
logger = structlog.get_logger()
