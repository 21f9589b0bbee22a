"""Password policy and hashing settings.
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class PasswordPolicySettings(BaseSettings):
    """Defines the complexity rules applied to new admin passwords and the
    bcrypt work factor used to hash them.

    Security Note:
        - Lowering BCRYPT_WORK_FACTOR below 12 is only acceptable in tests
          (OWASP A02:2021 - Cryptographic Failures).
    """

    PASSWORD_MIN_LENGTH: int = Field(ge=1, default=8)
    PASSWORD_MAX_LENGTH: int = Field(ge=1, default=128)
    PASSWORD_REQUIRE_UPPERCASE: bool = True
    PASSWORD_REQUIRE_LOWERCASE: bool = True
    PASSWORD_REQUIRE_DIGIT: bool = True
    PASSWORD_REQUIRE_SPECIAL_CHAR: bool = True

    BCRYPT_WORK_FACTOR: int = Field(ge=4, le=31, default=12)

    @model_validator(mode="after")
    def _check_length_bounds(self) -> "PasswordPolicySettings":
        """Rejects a policy whose minimum length exceeds its maximum.

        Returns:
            Self instance.
        """
        if self.PASSWORD_MIN_LENGTH > self.PASSWORD_MAX_LENGTH:
            raise ValueError("PASSWORD_MIN_LENGTH cannot be greater than PASSWORD_MAX_LENGTH")
        return self
