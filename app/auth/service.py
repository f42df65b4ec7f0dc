"""Auth domain service.

Account handlers (registration, password login, Google sign-in) and a thin
wrapper over the Firebase Admin SDK used to verify Google ID tokens.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Protocol

from firebase_admin import auth as firebase_admin_auth
from firebase_admin.exceptions import FirebaseError
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, or_, select

from app.auth.exceptions import InvalidTokenError
from app.auth.schemas import GoogleAuthInput, LoginRequest, RegisterRequest
from app.auth.security import hash_password, verify_password
from app.core.exceptions import ProviderError
from app.core.mixins import utc_now
from app.user.exceptions import EmailExistsError
from app.user.models import User

logger = logging.getLogger(__name__)


def register_user(session: Session, data: RegisterRequest) -> User:
    """Create a password account.

    Raises:
        EmailExistsError: If a user with exactly this email already exists
    """
    email_exists = session.exec(select(User).where(User.email == data.email)).first()
    if email_exists:
        raise EmailExistsError()

    user = User(
        email=data.email,
        password_hash=hash_password(data.password),
        google_id=None,
        name=data.name,
    )
    session.add(user)
    try:
        session.commit()
    except IntegrityError as e:
        # A concurrent registration won the race for the unique email.
        session.rollback()
        raise EmailExistsError() from e
    session.refresh(user)

    logger.info("User registered", extra={"user_id": user.id})
    return user


def login_user(session: Session, data: LoginRequest) -> User | None:
    """Check an email/password pair.

    Returns None for an unknown email, a Google-only account and a wrong
    password alike.
    """
    user = session.exec(select(User).where(User.email == data.email)).first()
    if user is None:
        return None

    if not user.password_hash:
        return None

    if not verify_password(data.password, user.password_hash):
        return None

    return user


def google_auth(session: Session, data: GoogleAuthInput) -> User:
    """Find or create the user behind a verified Google identity.

    An existing account is matched by Google id or email (first match wins).
    A missing Google id is linked and a changed name is copied over; when
    nothing differs the row is returned untouched, without bumping updated_at.
    """
    user = session.exec(
        select(User).where(
            or_(User.google_id == data.google_id, User.email == data.email)
        )
    ).first()

    if user is None:
        user = User(
            email=data.email,
            google_id=data.google_id,
            name=data.name,
            password_hash=None,
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        logger.info("User created from Google sign-in", extra={"user_id": user.id})
        return user

    changed = False

    if not user.google_id:
        user.google_id = data.google_id
        changed = True
        logger.info("Google identity linked", extra={"user_id": user.id})

    if user.name != data.name:
        user.name = data.name
        changed = True

    if changed:
        user.updated_at = utc_now()
        session.add(user)
        session.commit()
        session.refresh(user)

    return user


@dataclass(frozen=True)
class TokenClaims:
    """Decoded ID token claims from Firebase."""

    uid: str
    email: str | None = None
    name: str | None = None


class FirebaseAuthServiceProtocol(Protocol):
    """Protocol for Firebase authentication operations.

    Enables dependency inversion - code depends on this protocol,
    not the concrete implementation.
    """

    def verify_id_token(self, id_token: str) -> TokenClaims:
        """Verify ID token and return claims."""
        ...


class FirebaseAuthService:
    """Firebase Authentication Service implementation.

    Verifies ID tokens issued by Firebase Auth after a Google sign-in.
    """

    @staticmethod
    def _extract_token_claims(decoded: dict[str, Any]) -> TokenClaims:
        """Extract uid, email and display name from decoded token claims.

        Raises:
            InvalidTokenError: If uid is missing
        """
        uid = decoded.get("uid") or decoded.get("sub")
        if not uid:
            raise InvalidTokenError("Invalid token: missing uid")

        return TokenClaims(
            uid=uid,
            email=decoded.get("email"),
            name=decoded.get("name"),
        )

    def verify_id_token(self, id_token: str) -> TokenClaims:
        """Verify ID token and return claims.

        Raises:
            ProviderError: If Google's signing certificates cannot be fetched
            InvalidTokenError: If the token is invalid, expired or revoked
        """
        try:
            decoded = firebase_admin_auth.verify_id_token(id_token)
        except firebase_admin_auth.CertificateFetchError as e:
            raise ProviderError("Authentication provider unavailable") from e
        except (ValueError, FirebaseError) as e:
            raise InvalidTokenError("Invalid ID token") from e

        return self._extract_token_claims(decoded)


@lru_cache
def get_firebase_auth_service() -> FirebaseAuthService:
    """Get cached Firebase Auth Service instance.

    The service is cached for the application lifetime since
    its configuration doesn't change at runtime.
    """
    return FirebaseAuthService()
