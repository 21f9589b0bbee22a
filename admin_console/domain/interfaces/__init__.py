"""Domain interfaces for dependency inversion.

The credential update service depends on these abstractions only; the
infrastructure layer supplies the implementations.
"""

from .repositories import IUserRepository
from .services import IPasswordHasher, IPasswordPolicyValidator

__all__ = ["IUserRepository", "IPasswordHasher", "IPasswordPolicyValidator"]
