"""Dependency wiring for the credential update service.

Builds the concrete infrastructure behind the domain interfaces so commands
only depend on `CredentialUpdateService`.
"""

from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy.engine import Engine
from sqlmodel import Session

from admin_console.domain.services.auth.credential_update import CredentialUpdateService
from admin_console.domain.services.auth.password_policy import PasswordPolicyValidator
from admin_console.infrastructure.database.database import get_db_session
from admin_console.infrastructure.repositories.user_repository import UserRepository
from admin_console.infrastructure.services.password_hasher import BcryptPasswordHasher


def get_credential_update_service(db_session: Session) -> CredentialUpdateService:
    """Factory for a `CredentialUpdateService` bound to one session."""
    return CredentialUpdateService(
        user_repository=UserRepository(db_session),
        password_policy=PasswordPolicyValidator(),
        password_hasher=BcryptPasswordHasher(),
    )


@contextmanager
def credential_update_service_scope(bind: Optional[Engine] = None) -> Generator[CredentialUpdateService, None, None]:
    """Open a session for one command invocation and yield the service using it."""
    with get_db_session(bind) as session:
        yield get_credential_update_service(session)
