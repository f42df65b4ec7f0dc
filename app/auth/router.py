"""Auth domain router.

Authentication routes for registration, password login, Google sign-in and
logout. Handlers stay thin and delegate to the auth service.
"""

import logging

from fastapi import APIRouter, Response, status
from pydantic import ValidationError

from app.auth.dependencies import CurrentUserDep, FirebaseAuthDep
from app.auth.exceptions import InvalidCredentialsError
from app.auth.schemas import (
    AuthMessage,
    AuthSession,
    GoogleAuthInput,
    GoogleLoginRequest,
    LoginRequest,
    RegisterRequest,
)
from app.auth.security import create_session_token
from app.auth.service import google_auth, login_user, register_user
from app.core.constants import SESSION_COOKIE_NAME, CommonResponses, Routes
from app.core.deps import SessionDep, SettingsDep
from app.core.exceptions import BadRequestError
from app.core.settings import Settings
from app.user.models import User
from app.user.schemas import UserRead

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix=Routes.AUTH.prefix,
    tags=[Routes.AUTH.tag],
    responses={**CommonResponses.UNPROCESSABLE},
)

# Matches the name limit enforced on registration
_MAX_NAME_LENGTH = 100


def _start_session(user: User, response: Response, settings: Settings) -> AuthSession:
    """Issue a session token, set it as a cookie and build the login response."""
    token = create_session_token(
        user.id,
        settings.session_secret_key,
        settings.session_expires_in,
        settings.session_algorithm,
    )
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=token,
        max_age=int(settings.session_expires_in.total_seconds()),
        httponly=True,
        secure=settings.is_secure_cookie,
        samesite="lax",
    )
    return AuthSession(user=UserRead.model_validate(user), access_token=token)


@router.post(
    "/register",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    responses={**CommonResponses.CONFLICT},
)
async def register(register_data: RegisterRequest, session: SessionDep):
    """Register a new email/password user.

    The email format is validated before this code runs; the address is
    stored exactly as sent.
    """
    return register_user(session, register_data)


@router.post(
    "/login",
    response_model=AuthSession,
    responses={**CommonResponses.UNAUTHORIZED},
)
async def login(
    payload: LoginRequest,
    response: Response,
    session: SessionDep,
    settings: SettingsDep,
):
    """Login with email/password and set the session cookie.

    Unknown email, Google-only account and wrong password all yield the same
    401 so that the endpoint cannot be used to discover registered emails.
    """
    user = login_user(session, payload)
    if user is None:
        raise InvalidCredentialsError()

    return _start_session(user, response, settings)


@router.post(
    "/google",
    response_model=AuthSession,
    responses={**CommonResponses.UNAUTHORIZED, **CommonResponses.BAD_REQUEST},
)
async def login_with_google(
    payload: GoogleLoginRequest,
    response: Response,
    session: SessionDep,
    firebase_auth: FirebaseAuthDep,
    settings: SettingsDep,
):
    """Sign in with a Google account.

    The Firebase ID token is verified server-side; the Google id, email and
    display name are taken from its claims, never from the request body.
    """
    claims = firebase_auth.verify_id_token(payload.id_token)

    if not claims.email:
        raise BadRequestError("Email not found in Google token")

    name = (claims.name or claims.email.split("@", 1)[0])[:_MAX_NAME_LENGTH]
    try:
        identity = GoogleAuthInput(
            google_id=claims.uid, email=claims.email, name=name
        )
    except ValidationError as e:
        raise BadRequestError("Invalid email in Google token") from e

    user = google_auth(session, identity)

    return _start_session(user, response, settings)


@router.post("/logout", response_model=AuthMessage)
async def logout(response: Response):
    """Clear the session cookie.

    Session tokens are stateless, so bearer-token clients simply discard theirs.
    """
    response.delete_cookie(key=SESSION_COOKIE_NAME)
    return AuthMessage(message="Logout successful")


@router.get(
    "/me",
    response_model=UserRead,
    responses={**CommonResponses.UNAUTHORIZED, **CommonResponses.NOT_FOUND},
)
async def get_me(user: CurrentUserDep):
    """Return the currently authenticated user."""
    return user
