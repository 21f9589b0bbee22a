"""Password hashing using passlib's bcrypt backend."""

from typing import Optional

from passlib.context import CryptContext

from admin_console.core.config.settings import settings
from admin_console.domain.interfaces.services import IPasswordHasher


class BcryptPasswordHasher(IPasswordHasher):
    """Hashes passwords with bcrypt at the configured work factor.

    Every call to `hash` uses a new salt, so hashing the same password twice
    yields different strings that both verify.
    """

    def __init__(self, rounds: Optional[int] = None):
        self.rounds = rounds or settings.BCRYPT_WORK_FACTOR
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=self.rounds,
        )

    def hash(self, password: str) -> str:
        return self.pwd_context.hash(password)

    def verify(self, password: str, hashed_password: str) -> bool:
        """Constant-time check of `password` against `hashed_password`.

        Malformed hashes verify as False instead of raising.
        """
        try:
            return self.pwd_context.verify(password, hashed_password)
        except ValueError:
            return False
