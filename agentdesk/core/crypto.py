"""Password policy, hashing and verification for user accounts."""

from __future__ import annotations

import re

import bcrypt

MIN_PASSWORD_LENGTH = 8
_SPECIAL_CHARACTER = re.compile(r"[!@#$%^&*]")


def check_password_policy(password: str) -> str:
    """Return ``password`` unchanged, or raise ``ValueError`` when it is too weak."""
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")
    if not _SPECIAL_CHARACTER.search(password):
        raise ValueError("Password must contain at least one special character")
    return password


def hash_password(password: str) -> str:
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt())
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    # checkpw raises ValueError on a malformed stored hash
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


__all__ = ["MIN_PASSWORD_LENGTH", "check_password_policy", "hash_password", "verify_password"]
