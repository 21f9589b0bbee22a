"""Repository implementations for the infrastructure layer."""

from .user_repository import UserRepository
from admin_console.domain.interfaces.repositories import IUserRepository

__all__ = ["UserRepository", "IUserRepository"]
