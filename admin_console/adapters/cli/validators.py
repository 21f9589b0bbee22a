"""Prompt validators for admin credential commands."""

from admin_console.adapters.cli.prompt import Accepted, PromptResult, Rejected, Validator
from admin_console.domain.interfaces.services import IPasswordPolicyValidator


def not_empty(value: str) -> PromptResult:
    if not value or not value.strip():
        return Rejected("The value cannot be empty.")
    return Accepted(value)


def password_validator(policy: IPasswordPolicyValidator) -> Validator:
    """Build a validator that requires a password and checks it against `policy`.

    It never looks the user up: an unknown username is reported once, by the
    command's own validation after prompting.
    """

    def validate(value: str) -> PromptResult:
        if not value or not value.strip():
            return Rejected("A password is required.")
        violations = policy.validate(value)
        if violations:
            return Rejected("\n".join(violations))
        return Accepted(value)

    return validate
