"""Domain services for admin account management.

- Credential Update: validates and applies forced password changes
- Password Policy: complexity rules for new passwords
"""

from .auth.credential_update import CredentialUpdateService, PasswordUpdateReport
from .auth.password_policy import PasswordPolicyValidator

__all__ = ["CredentialUpdateService", "PasswordUpdateReport", "PasswordPolicyValidator"]
