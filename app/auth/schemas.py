"""Auth domain schemas.

Request and response schemas for authentication operations.
"""

from pydantic import BaseModel, Field

from app.user.schemas import Email, UserRead


class RegisterRequest(BaseModel):
    """Request schema for email/password registration."""

    email: Email
    password: str = Field(min_length=8)
    name: str = Field(min_length=1, max_length=100)


class LoginRequest(BaseModel):
    """Request schema for email/password login."""

    email: Email
    password: str


class GoogleLoginRequest(BaseModel):
    """Request schema for Google sign-in.

    The client signs in with Google through Firebase and forwards the ID token.
    """

    id_token: str = Field(min_length=1)


class GoogleAuthInput(BaseModel):
    """Verified Google identity used to find or create a local user."""

    google_id: str = Field(min_length=1)
    email: Email
    name: str = Field(min_length=1, max_length=100)


class AuthSession(BaseModel):
    """Response schema for a successful login."""

    user: UserRead
    access_token: str
    token_type: str = "bearer"


class AuthMessage(BaseModel):
    """Generic auth message response."""

    message: str
