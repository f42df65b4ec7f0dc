"""Auth domain dependencies.

Authentication dependencies for FastAPI routes including get_current_user
and type aliases for authenticated user injection.
"""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from app.auth.exceptions import InvalidCredentialsError
from app.auth.security import decode_session_token
from app.auth.service import FirebaseAuthService, get_firebase_auth_service
from app.core.constants import SESSION_COOKIE_NAME
from app.core.settings import Settings, get_settings
from app.db.engine import get_session
from app.user.exceptions import UserNotFoundError
from app.user.models import User

security = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    session: Annotated[Session, Depends(get_session)],
    settings: Annotated[Settings, Depends(get_settings)],
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(security)
    ] = None,
) -> User:
    """Verify the session token and return the local User.

    Supports two token carriers (in priority order):
    1. Session cookie (preferred for web apps)
    2. Bearer token (for API clients, mobile apps)

    Raises:
        InvalidTokenError: If the token is invalid or expired
        InvalidCredentialsError: If no token was sent
        UserNotFoundError: If the token's user no longer exists
    """
    token = request.cookies.get(SESSION_COOKIE_NAME)
    if not token and credentials is not None:
        token = credentials.credentials

    if not token:
        raise InvalidCredentialsError("Not authenticated")

    claims = decode_session_token(
        token, settings.session_secret_key, settings.session_algorithm
    )

    user = session.get(User, claims.user_id)
    if user is None:
        raise UserNotFoundError()

    return user


# Type aliases for dependency injection
CurrentUserDep = Annotated[User, Depends(get_current_user)]
FirebaseAuthDep = Annotated[FirebaseAuthService, Depends(get_firebase_auth_service)]


def require_auth(_user: CurrentUserDep) -> None:
    """Require authentication without injecting user into path operation.

    Use as a router-level dependency when all routes require auth:
        router = APIRouter(dependencies=[Depends(require_auth)])

    For endpoints that need the user object, still use CurrentUserDep directly.
    FastAPI caches dependencies, so there's no duplicate auth overhead.
    """
