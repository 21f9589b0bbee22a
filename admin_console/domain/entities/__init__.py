"""Export admin domain entities for use across the application."""

from .user import AdminUser

__all__ = ["AdminUser"]
