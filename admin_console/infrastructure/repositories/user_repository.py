"""Admin user repository implementation using SQLModel.

This module provides the repository pattern implementation for `AdminUser`
operations, abstracting database access away from the domain services.
Lookups never raise for a missing user; writes wrap driver errors in
`DatabaseError` after rolling the session back.
"""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select
from structlog import get_logger

from admin_console.core.exceptions import DatabaseError
from admin_console.domain.entities.user import AdminUser
from admin_console.domain.interfaces.repositories import IUserRepository
from admin_console.domain.security.masking import mask_username

logger = get_logger(__name__)


class UserRepository(IUserRepository):
    """SQLModel implementation of `IUserRepository`.

    The session is injected and owned by the caller; the repository commits
    on `save` but never closes the session.
    """

    def __init__(self, db_session: Session):
        """Initialize repository with database session.

        Args:
            db_session: SQLModel session for database operations
        """
        self.db_session = db_session

    def get_by_username(self, username: str) -> Optional[AdminUser]:
        """Get an admin user by username, ignoring case and surrounding whitespace.

        Args:
            username: Username to search for

        Returns:
            AdminUser if found, None otherwise

        Raises:
            ValueError: If username is empty or whitespace-only
            DatabaseError: If the query fails or more than one user matches
        """
        if not username or not username.strip():
            logger.warning(
                "Invalid username provided",
                username_provided=bool(username),
                error_type="validation_error",
            )
            raise ValueError("Username cannot be empty or whitespace-only")

        username_value = username.strip().lower()

        try:
            statement = select(AdminUser).where(func.lower(AdminUser.username) == username_value)
            # At most one row matches while lower(username) is unique.
            user = self.db_session.exec(statement).one_or_none()
        except SQLAlchemyError as e:
            logger.error(
                "Error retrieving admin user by username",
                username=mask_username(username_value),
                error=str(e),
                error_type=type(e).__name__,
                operation="get_by_username",
            )
            raise DatabaseError(str(e)) from e

        logger.debug(
            "Admin user lookup by username completed",
            username=mask_username(username_value),
            found=user is not None,
            operation="get_by_username",
        )
        return user

    def save(self, user: AdminUser) -> AdminUser:
        """Save changes to an admin user with transaction management.

        Args:
            user: AdminUser entity to save

        Returns:
            The saved AdminUser, refreshed from the database

        Raises:
            ValueError: If user is None
            DatabaseError: If the commit fails; the session is rolled back first
        """
        if user is None:
            logger.warning("Attempted to save None user", error_type="validation_error")
            raise ValueError("User entity cannot be None")

        try:
            self.db_session.add(user)
            self.db_session.commit()
            self.db_session.refresh(user)
        except SQLAlchemyError as e:
            self.db_session.rollback()
            logger.error(
                "Error saving admin user",
                user_id=user.id,
                username=user.masked_username,
                error=str(e),
                error_type=type(e).__name__,
                operation="save",
            )
            raise DatabaseError(str(e)) from e

        logger.debug(
            "Admin user saved",
            user_id=user.id,
            username=user.masked_username,
            operation="save",
        )
        return user
