"""Password hashing and access-token helpers."""
from datetime import datetime, timezone

import bcrypt
from jose import JWTError, jwt

from app.config import settings
from app.utils.exceptions import ForbiddenError

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode()[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(_password_bytes(password), salt).decode()


def verify_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(_password_bytes(password), password_hash.encode())


def signing_key() -> str:
    if not settings.jwt_secret:
        raise RuntimeError("JWT_SECRET is not configured")
    return settings.jwt_secret


def create_access_token(username: str) -> str:
    """Sign a token for ``username``.

    No ``exp`` claim is set: a token stays valid until the signing secret
    changes.
    """
    claims = {"username": username, "iat": datetime.now(timezone.utc)}
    return jwt.encode(claims, signing_key(), algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict:
    key = signing_key()
    try:
        payload = jwt.decode(token, key, algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        raise ForbiddenError("Invalid token") from exc
    if not payload.get("username"):
        raise ForbiddenError("Invalid token")
    return payload
