"""Password hashing helpers."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash


def hash_password(password: str) -> str:
    """Hash a plain-text password for storage."""

    if not isinstance(password, str):
        raise TypeError("Password must be a string.")
    return generate_password_hash(password)


def check_password(password: str, password_hash: str | None) -> bool:
    """Verify a password. Accounts without a hash (OAuth-only) never match."""

    if not password_hash or not password:
        return False
    return check_password_hash(password_hash, password)
