import re
from typing import List, Optional

from admin_console.core.config.auth import PasswordPolicySettings
from admin_console.core.config.settings import settings
from admin_console.domain.interfaces.services import IPasswordPolicyValidator

SPECIAL_CHARS = "!@#$%^&*()_+-=[]{}|;:,.<>?"


class PasswordPolicyValidator(IPasswordPolicyValidator):
    """Validates passwords against a defined security policy.

    The policy requires passwords to fall within a length range and include a
    mix of uppercase letters, lowercase letters, numbers, and special
    characters. Unlike a fail-fast check, every violated rule is reported so
    the operator can fix them all in one go.
    """

    def __init__(self, policy: Optional[PasswordPolicySettings] = None):
        policy = policy or settings
        self.min_length = policy.PASSWORD_MIN_LENGTH
        self.max_length = policy.PASSWORD_MAX_LENGTH
        self.require_uppercase = policy.PASSWORD_REQUIRE_UPPERCASE
        self.require_lowercase = policy.PASSWORD_REQUIRE_LOWERCASE
        self.require_digit = policy.PASSWORD_REQUIRE_DIGIT
        self.require_special_char = policy.PASSWORD_REQUIRE_SPECIAL_CHAR

    def validate(self, password: str) -> List[str]:
        """Validates the given password against the policy.

        Args:
            password (str): The password to validate.

        Returns:
            List[str]: Violation messages, empty if the password is acceptable.
        """
        errors: List[str] = []

        if len(password) < self.min_length:
            errors.append(f"Password must be at least {self.min_length} characters long")

        if len(password) > self.max_length:
            errors.append(f"Password must not exceed {self.max_length} characters")

        if self.require_uppercase and not re.search(r"[A-Z]", password):
            errors.append("Password must contain at least one uppercase letter")

        if self.require_lowercase and not re.search(r"[a-z]", password):
            errors.append("Password must contain at least one lowercase letter")

        if self.require_digit and not re.search(r"\d", password):
            errors.append("Password must contain at least one digit")

        if self.require_special_char and not any(char in SPECIAL_CHARS for char in password):
            errors.append("Password must contain at least one special character")

        return errors
