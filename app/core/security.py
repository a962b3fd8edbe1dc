"""Security utilities"""

import hashlib
import secrets
from datetime import datetime
from typing import Optional

from jose import jwt, JWTError
from passlib.context import CryptContext

from .config import settings


# Password context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def get_password_hash(password: str) -> str:
    """Hash password"""
    return pwd_context.hash(password)


# Checked against when no account matches, so every failed login costs one bcrypt round
DUMMY_PASSWORD_HASH = pwd_context.hash(secrets.token_hex(16))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password (constant-time comparison inside passlib)"""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


def generate_session_id() -> str:
    """Generate an opaque session identifier (256 bits)."""
    return secrets.token_hex(32)


def create_session_token(session_id: str, expires_at: datetime) -> str:
    """Sign a token that carries only the session id."""
    to_encode = {"sid": session_id, "exp": expires_at}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_session_token(token: str) -> Optional[str]:
    """Verify token signature and expiry and return the session id"""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
    session_id = payload.get("sid")
    return session_id if isinstance(session_id, str) else None


def generate_reset_token() -> str:
    """Generate a secure password reset secret."""
    return secrets.token_hex(32)


def hash_reset_token(token: str) -> str:
    """One-way hash used to store and look up reset secrets."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()
