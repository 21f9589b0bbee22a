"""Masking helpers for values that must not appear verbatim in logs."""

from typing import Optional

USERNAME_MASK_LENGTH = 3


def mask_username(username: Optional[str]) -> str:
    """Keep the first characters of a username and hide the rest.

    Returns ``"[empty]"`` for missing usernames and short usernames unchanged.
    """
    if not username:
        return "[empty]"
    if len(username) <= USERNAME_MASK_LENGTH:
        return username
    return username[:USERNAME_MASK_LENGTH] + "***"
