"""`admin:db:init`: create the admin user tables."""

import argparse
from typing import Optional, TextIO

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from admin_console.adapters.cli.commands.base import FAILURE, SUCCESS, BaseCommand
from admin_console.core.exceptions import DatabaseError
from admin_console.infrastructure.database.database import check_database_health, create_db_and_tables


class DatabaseInitCommand(BaseCommand):
    """Creates missing tables in the configured database.

    Existing tables are left untouched. Production schemas are managed with
    Alembic; this command is for local setups and throwaway databases.
    """

    name = "admin:db:init"
    help = "Creates the admin user tables in the configured database"

    def __init__(self, bind: Optional[Engine] = None, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None):
        super().__init__(stdout=stdout, stderr=stderr)
        self._bind = bind

    def run(self, options: argparse.Namespace, interactive: bool = True) -> int:
        if not check_database_health(self._bind):
            self.stderr.write("Database is not reachable.\n")
            return FAILURE

        try:
            create_db_and_tables(self._bind)
        except SQLAlchemyError as e:
            raise DatabaseError(str(e)) from e

        self.stdout.write("Database tables created.\n")
        return SUCCESS
