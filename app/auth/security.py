"""Password hashing and session tokens.

Passwords are stored as salted PBKDF2-SHA256 hashes (passlib). Sessions are
short HS256 JWTs whose ``sub`` claim is the local user id.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import jwt
from passlib.hash import pbkdf2_sha256 as hasher

from app.auth.exceptions import InvalidTokenError

_TOKEN_TYPE = "session"


def hash_password(password: str) -> str:
    return hasher.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Check ``password`` against a stored hash.

    A malformed stored hash counts as a mismatch rather than an error.
    """
    try:
        return hasher.verify(password, password_hash)
    except ValueError:
        return False


@dataclass(frozen=True)
class SessionClaims:
    """Decoded session token claims."""

    user_id: int
    expires_at: datetime


def create_session_token(
    user_id: int,
    secret_key: str,
    expires_in: timedelta,
    algorithm: str = "HS256",
) -> str:
    """Issue a signed session token for ``user_id``."""
    now = datetime.now(UTC)
    payload = {
        "sub": str(user_id),
        "typ": _TOKEN_TYPE,
        "iat": now,
        "exp": now + expires_in,
    }
    return jwt.encode(payload, secret_key, algorithm=algorithm)


def decode_session_token(
    token: str, secret_key: str, algorithm: str = "HS256"
) -> SessionClaims:
    """Verify a session token and return its claims.

    Raises:
        InvalidTokenError: If the token is malformed, tampered with or expired
    """
    try:
        payload = jwt.decode(
            token,
            secret_key,
            algorithms=[algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise InvalidTokenError("Session has expired") from e
    except jwt.InvalidTokenError as e:
        raise InvalidTokenError() from e

    if payload.get("typ") != _TOKEN_TYPE:
        raise InvalidTokenError()

    try:
        user_id = int(payload["sub"])
    except ValueError as e:
        raise InvalidTokenError() from e

    return SessionClaims(
        user_id=user_id,
        expires_at=datetime.fromtimestamp(payload["exp"], tz=UTC),
    )
