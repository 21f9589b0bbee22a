"""Service interfaces for domain services.

These interfaces define contracts for the collaborators of the credential
update service, enabling dependency inversion and testability.
"""

from abc import ABC, abstractmethod
from typing import List


class IPasswordPolicyValidator(ABC):
    """Interface for password complexity rules."""

    @abstractmethod
    def validate(self, password: str) -> List[str]:
        """Check a plaintext password against every configured rule.

        Args:
            password: Candidate password.

        Returns:
            List[str]: One message per violated rule; empty when the password passes.
        """
        pass


class IPasswordHasher(ABC):
    """Interface for one-way password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Hash a plaintext password with a fresh salt."""
        pass

    @abstractmethod
    def verify(self, password: str, hashed_password: str) -> bool:
        """Check a plaintext password against a stored hash."""
        pass
