"""Console commands available to `admin-console`."""

from typing import List

from .base import FAILURE, SUCCESS, BaseCommand
from .db_init import DatabaseInitCommand
from .set_password import AdminUserSetPasswordCommand


def get_commands() -> List[BaseCommand]:
    """Instantiate every registered command with its default dependencies."""
    return [AdminUserSetPasswordCommand(), DatabaseInitCommand()]


__all__ = [
    "AdminUserSetPasswordCommand",
    "BaseCommand",
    "DatabaseInitCommand",
    "FAILURE",
    "SUCCESS",
    "get_commands",
]
