"""
Synchronous Database Connection Module

This module manages database connections using SQLModel and SQLAlchemy.
Admin console commands are short-lived and single-threaded, so every command
invocation opens one session, uses it, and closes it.

**Security Note**: Avoid logging sensitive information such as connection
strings or credentials to prevent information disclosure (OWASP A09:2021 -
Security Logging and Monitoring Failures).

Key Components:
    - build_engine: Creates an engine from settings or an explicit URL.
    - engine: The process-wide engine built from settings.DATABASE_URL.
    - get_db_session: A context manager for creating database sessions with logging.
    - check_database_health: Verifies connectivity with retry logic.
    - create_db_and_tables: Creates the tables of all registered models.
"""

import time
from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.sql import text
from sqlmodel import Session, SQLModel, create_engine
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from admin_console.core.config.settings import settings
from admin_console.core.logging import logger
from admin_console.domain.entities.user import AdminUser  # noqa: F401  registers the table


def build_engine(database_url: Optional[str] = None, echo: Optional[bool] = None) -> Engine:
    """
    Create a SQLAlchemy engine.

    Pool sizing settings are applied to server databases only; SQLite uses
    its own pool classes which do not accept them.

    Args:
        database_url: Overrides settings.DATABASE_URL.
        echo: Overrides settings.DATABASE_ECHO.

    Returns:
        Engine: A lazily-connecting engine.
    """
    url = database_url or settings.DATABASE_URL
    kwargs = {
        "echo": settings.DATABASE_ECHO if echo is None else echo,
        "pool_pre_ping": True,  # Check connection health before use
    }
    if not url.startswith("sqlite"):
        kwargs.update(
            pool_size=settings.DATABASE_POOL_SIZE,
            max_overflow=settings.DATABASE_MAX_OVERFLOW,
            pool_timeout=settings.DATABASE_POOL_TIMEOUT,
        )
    return create_engine(url, **kwargs)


engine = build_engine()


@contextmanager
def get_db_session(bind: Optional[Engine] = None) -> Generator[Session, None, None]:
    """
    Context manager for database sessions with logging.

    Uncommitted work is rolled back if the block raises.

    Args:
        bind: Engine to use; defaults to the module engine.

    Yields:
        Session: A database session
    """
    bind = bind or engine
    start_time = time.time()
    session = Session(bind)
    logger.debug("database_session_created")
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
        logger.debug(
            "database_session_closed",
            execution_time=time.time() - start_time,
        )


@retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=5),
    retry=retry_if_exception_type(OperationalError),
    reraise=True,
)
def _ping(bind: Engine) -> None:
    with bind.connect() as connection:
        connection.execute(text("SELECT 1"))


def check_database_health(bind: Optional[Engine] = None) -> bool:
    """
    Performs a health check on the database connection.

    Transient connection errors are retried up to three times.

    Returns:
        bool: True if database is healthy and responsive, False otherwise.
    """
    bind = bind or engine
    start_time = time.time()
    try:
        _ping(bind)
    except Exception as e:
        logger.error(
            "database_health_check_failed",
            error=str(e),
            execution_time=time.time() - start_time,
        )
        return False

    logger.info(
        "database_health_check_success",
        execution_time=time.time() - start_time,
    )
    return True


def create_db_and_tables(bind: Optional[Engine] = None) -> None:
    """
    Creates database tables with logging.
    """
    bind = bind or engine
    start_time = time.time()
    SQLModel.metadata.create_all(bind)
    logger.info(
        "database_tables_created",
        execution_time=time.time() - start_time,
        tables=list(SQLModel.metadata.tables.keys()),
    )
