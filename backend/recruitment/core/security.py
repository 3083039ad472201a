"""
Password hashing for user accounts.

``contraseña`` values received from clients are only ever stored as bcrypt
hashes; comparisons go through ``verify_password``.
"""

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """True when ``plain_password`` hashes to ``hashed_password``."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """
    Hash a plaintext password.

    Returns:
        A salted bcrypt hash, different on every call for the same input
    """
    return pwd_context.hash(password)
