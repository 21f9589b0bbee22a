"""Repository interfaces for abstracting data persistence in the domain layer.

The domain layer uses these interfaces to interact with persistence without
being coupled to a specific store. Concrete implementations live in the
`infrastructure` layer.
"""

from abc import ABC, abstractmethod
from typing import Optional

from admin_console.domain.entities.user import AdminUser


class IUserRepository(ABC):
    """An interface defining the contract for admin user persistence operations."""

    @abstractmethod
    def get_by_username(self, username: str) -> Optional[AdminUser]:
        """Retrieves an admin user by username (case-insensitively).

        Args:
            username: The username to search for.

        Returns:
            An optional `AdminUser`. Returns `None` if no user is found; a
            missing user is not an error.
        """
        raise NotImplementedError

    @abstractmethod
    def save(self, user: AdminUser) -> AdminUser:
        """Persists changes to an admin user.

        Args:
            user: The `AdminUser` entity to persist.

        Returns:
            The persisted `AdminUser`, refreshed from the store.

        Raises:
            DatabaseError: If the write fails.
        """
        raise NotImplementedError
