"""Credential Update Service.

Forcefully replaces the password of an existing admin user. Validation runs
sequentially and stops at the first failure; only a fully valid request
reaches the store, and it does so with exactly one save.

The lookup and the save are separate round trips with no lock between them,
so a concurrent update to the same row in that window is overwritten.
"""

from dataclasses import dataclass
from typing import Optional

import structlog

from admin_console.core.exceptions import (
    PasswordPolicyError,
    PasswordRequiredError,
    PersistenceError,
    UsernameRequiredError,
    UserNotFoundError,
    ValidationError,
)
from admin_console.domain.entities.user import AdminUser
from admin_console.domain.interfaces.repositories import IUserRepository
from admin_console.domain.interfaces.services import IPasswordHasher, IPasswordPolicyValidator
from admin_console.domain.security.masking import mask_username

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PasswordUpdateReport:
    """Outcome of a successful password update. Never holds the password."""

    user_id: int
    username: str
    force_new_password: bool


class CredentialUpdateService:
    """Validates and applies forced admin password changes.

    Collaborators are injected so the service can run against a real database
    or against test doubles:

    - ``user_repository`` looks users up by username and persists them,
    - ``password_policy`` lists every complexity rule a password breaks,
    - ``password_hasher`` turns the accepted plaintext into the stored hash.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        password_policy: IPasswordPolicyValidator,
        password_hasher: IPasswordHasher,
    ):
        self._user_repository = user_repository
        self._password_policy = password_policy
        self._password_hasher = password_hasher

    @property
    def password_policy(self) -> IPasswordPolicyValidator:
        return self._password_policy

    def set_password(self, username: str, password: str) -> PasswordUpdateReport:
        """Replace the password of an existing admin user.

        On success the user's hash is replaced, ``force_new_password`` is set
        and the user is saved once.

        Args:
            username: Username of the admin user.
            password: New plaintext password.

        Returns:
            PasswordUpdateReport: Identity of the updated user.

        Raises:
            UsernameRequiredError: If the username is blank.
            UserNotFoundError: If no admin user has that username.
            PasswordRequiredError: If the password is blank.
            PasswordPolicyError: If the password breaks policy rules; carries every violation.
            PersistenceError: If hashing or saving fails.
        """
        request_logger = logger.bind(
            operation="admin_password_reset",
            username=mask_username(username),
        )
        request_logger.info("Admin password reset initiated")

        try:
            user = self._validate(username, password)
        except ValidationError as e:
            request_logger.warning(
                "Admin password reset rejected",
                error_type=type(e).__name__,
                error_code=e.code,
            )
            raise

        try:
            user.hashed_password = self._password_hasher.hash(password)
            user.force_new_password = True
            saved = self._user_repository.save(user)
        except Exception as e:
            request_logger.error(
                "Admin password reset failed to persist",
                user_id=user.id,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise PersistenceError(str(e)) from e

        request_logger.info("Admin password reset completed", user_id=saved.id)
        return PasswordUpdateReport(
            user_id=saved.id,
            username=saved.username,
            force_new_password=saved.force_new_password,
        )

    def _validate(self, username: str, password: str) -> AdminUser:
        # Order matters: first failure wins.
        if not username or not username.strip():
            raise UsernameRequiredError()

        user = self._get_user(username)
        if user is None:
            raise UserNotFoundError()

        if not password or not password.strip():
            raise PasswordRequiredError()

        violations = self._password_policy.validate(password)
        if violations:
            raise PasswordPolicyError(violations)

        return user

    def _get_user(self, username: str) -> Optional[AdminUser]:
        user = self._user_repository.get_by_username(username)
        if user is None or not user.exists:
            return None
        return user
