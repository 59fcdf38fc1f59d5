"""
Password hashing and the signup password policy
"""

from typing import Optional

from passlib.context import CryptContext

from clubify.config import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """
    Check a login attempt against the stored bcrypt hash

    A missing or unreadable hash counts as a mismatch rather than an error,
    so a damaged account row can't be logged into.
    """
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        return False


def password_problem(password: str) -> Optional[str]:
    """Reason a new password is unacceptable, or None if it is fine"""
    if len(password) < settings.PASSWORD_MIN_LENGTH:
        return f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters long"
    return None
