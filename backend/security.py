"""Credential hashing and reset-token generation."""

import secrets

from passlib.context import CryptContext

from config import BCRYPT_ROUNDS

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    """Check a login attempt; called by the authentication layer in front of this service."""
    return pwd_context.verify(plain_password, password_hash)


def generate_reset_token() -> str:
    return secrets.token_urlsafe(32)
