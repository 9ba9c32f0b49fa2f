"""
Password hashing utilities.

Uses bcrypt directly; hashes are stored as UTF-8 strings.
"""

import bcrypt


def get_password_hash(password: str) -> str:
    """Hash a plain-text password with a fresh salt."""
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt())
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain-text password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False
