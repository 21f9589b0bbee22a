from __future__ import annotations

"""Centralized, structured exception hierarchy for admin-console.

Each exception carries a machine-readable `code` for programmatic handling and
a human-readable `message` for operators and logs.

The hierarchy separates:
- Validation errors: bad operator input. Reported, never retried.
- Persistence errors: the store could not be written. Reported, never retried.
- Lifecycle errors: process context set up twice, or prompting aborted.
"""

from typing import Final, Iterable

__all__: Final = [
    "AdminConsoleError",
    "ValidationError",
    "UsernameRequiredError",
    "UserNotFoundError",
    "PasswordRequiredError",
    "PasswordPolicyError",
    "PersistenceError",
    "DatabaseError",
    "AreaCodeAlreadySetError",
    "PromptAbortedError",
]


class AdminConsoleError(Exception):
    """Base exception class for all custom errors in admin-console.

    Attributes:
        message (str): A human-readable error message, suitable for operators.
        code (str): A unique, machine-readable error code.
    """

    message: str
    code: str = "generic_error"

    def __init__(self, message: str, code: str = "generic_error"):
        self.message = message
        self.code = code
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Validation errors (operator input; exit code 1)
# ---------------------------------------------------------------------------


class ValidationError(AdminConsoleError):
    """Raised when operator input fails validation.

    A validation error may carry several messages (the password policy reports
    every violated rule at once). `message` is the messages joined by newlines.

    Attributes:
        messages (list[str]): Individual human-readable messages, never empty.
    """

    def __init__(self, messages: str | Iterable[str], code: str = "validation_error"):
        if isinstance(messages, str):
            messages = [messages]
        self.messages = list(messages)
        if not self.messages:
            raise ValueError("A validation error needs at least one message")
        super().__init__("\n".join(self.messages), code)


class UsernameRequiredError(ValidationError):
    """Raised when the admin username is missing or whitespace-only."""

    def __init__(self, messages: str | Iterable[str] = "Admin username is required.", code: str = "username_required"):
        super().__init__(messages, code)


class UserNotFoundError(ValidationError):
    """Raised when no admin user matches the given username."""

    def __init__(self, messages: str | Iterable[str] = "Admin user was not found.", code: str = "user_not_found"):
        super().__init__(messages, code)


class PasswordRequiredError(ValidationError):
    """Raised when the new password is missing or whitespace-only."""

    def __init__(self, messages: str | Iterable[str] = "Admin password is required.", code: str = "password_required"):
        super().__init__(messages, code)


class PasswordPolicyError(ValidationError):
    """Raised when a password violates one or more complexity rules.

    `messages` holds every violation reported by the policy validator.
    """

    def __init__(self, messages: str | Iterable[str], code: str = "password_policy_error"):
        super().__init__(messages, code)


# ---------------------------------------------------------------------------
# Persistence errors (infrastructure; exit code 1)
# ---------------------------------------------------------------------------


class DatabaseError(AdminConsoleError):
    """Raised for low-level database interaction errors.

    Wraps driver and ORM errors so callers do not depend on SQLAlchemy types.
    """

    def __init__(self, message: str, code: str = "database_error"):
        super().__init__(message, code)


class PersistenceError(AdminConsoleError):
    """Raised when the new credential could not be written back to storage.

    The message is the underlying error's message. The operation is not retried.
    """

    def __init__(self, message: str, code: str = "persistence_error"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Lifecycle errors
# ---------------------------------------------------------------------------


class AreaCodeAlreadySetError(AdminConsoleError):
    """Raised when the process area code is initialized a second time."""

    def __init__(self, message: str = "Area code is already set", code: str = "area_code_already_set"):
        super().__init__(message, code)


class PromptAbortedError(AdminConsoleError):
    """Raised when the operator aborts a prompt or exhausts its attempts."""

    def __init__(self, message: str = "Prompt aborted", code: str = "prompt_aborted"):
        super().__init__(message, code)
