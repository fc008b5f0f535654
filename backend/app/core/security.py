"""
Password hashing utilities.
"""
from typing import Optional
import hashlib
import bcrypt
from app.core.config import settings


def _pre_hash_password(password: str) -> bytes:
    """
    Pre-hash password with SHA256 to support passwords longer than 72 bytes.
    Returns bytes (32 bytes) which is well under bcrypt's 72-byte limit.
    """
    return hashlib.sha256(password.encode('utf-8')).digest()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against a hash made by get_password_hash.

    Login lives outside this service; this is the check it pairs with.
    """
    pre_hashed = _pre_hash_password(plain_password)
    # hashed_password is a string starting with $2b$, convert to bytes for bcrypt
    return bcrypt.checkpw(pre_hashed, hashed_password.encode('utf-8'))


def get_password_hash(password: str, rounds: Optional[int] = None) -> str:
    """
    Hash a password with bcrypt.

    `rounds` is the bcrypt cost factor and defaults to settings.BCRYPT_ROUNDS.
    The result is a `$2b$` string ready for database storage.
    """
    pre_hashed = _pre_hash_password(password)
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    hashed = bcrypt.hashpw(pre_hashed, salt)
    return hashed.decode('utf-8')
