from datetime import datetime  # For timestamp fields
from typing import Optional  # For optional fields

from sqlalchemy import Boolean, DateTime, false, func, text  # For SQL expressions and explicit column types
from sqlmodel import Column, Field, Index, SQLModel, String  # For ORM and table definition

from admin_console.domain.security.masking import mask_username


class AdminUser(SQLModel, table=True):
    """Represents an administrative user account.

    The console never creates or deletes admin users; it only replaces the
    password hash of an existing row and raises its force-change flag.

    Attributes:
        id: The unique identifier for the user (primary key). ``None`` until persisted.
        username: A unique username for login.
        email: Contact address, informational only.
        hashed_password: The bcrypt hash of the password. Plaintext is never stored.
        is_active: Inactive users cannot log in.
        force_new_password: When set, the user must change the password at next login.
        created_at: The timestamp of when the account was created.
        updated_at: The timestamp of the last update to the account.
    """

    __tablename__ = "admin_users"

    id: Optional[int] = Field(
        default=None,  # Auto-incremented by database
        primary_key=True,
        description="The unique identifier for the admin user.",
    )
    username: str = Field(
        sa_column=Column(String(50), unique=True, index=True, nullable=False),
        min_length=1,
        max_length=50,
        description="Unique username for login, compared without regard to case.",
    )
    email: Optional[str] = Field(
        default=None,
        max_length=255,
        description="Contact email address.",
    )
    hashed_password: str = Field(
        max_length=255,  # Sufficient for bcrypt hashes
        description="Bcrypt-hashed password.",
    )
    is_active: bool = Field(
        default=True,
        description="Indicates if the account is active.",
    )
    force_new_password: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, server_default=false()),
        description="Forces a password change at next login.",
    )
    created_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(
            DateTime,
            server_default=func.now(),  # Database timestamp
            nullable=False,
        ),
        description="The timestamp of when the account was created.",
    )
    updated_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(
            DateTime,
            onupdate=func.now(),  # Refreshed on every UPDATE
            nullable=True,
        ),
        description="The timestamp of the last update to the account.",
    )

    __table_args__ = (
        Index("ix_admin_users_username_lower", text("lower(username)"), unique=True),  # Case-insensitive uniqueness
        {"extend_existing": True},
    )

    @property
    def exists(self) -> bool:
        """Whether this instance represents a persisted row."""
        return bool(self.id)

    @property
    def masked_username(self) -> str:
        """Log-safe form of the username."""
        return mask_username(self.username)
