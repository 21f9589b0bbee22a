"""Admin credential services."""

from .credential_update import CredentialUpdateService, PasswordUpdateReport
from .password_policy import PasswordPolicyValidator

__all__ = ["CredentialUpdateService", "PasswordUpdateReport", "PasswordPolicyValidator"]
