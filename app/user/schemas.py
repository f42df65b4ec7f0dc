"""User domain schemas.

Security notes:
- password_hash and google_id are internal-only, never exposed in responses
"""

from datetime import UTC, datetime
from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, field_serializer
from sqlmodel import SQLModel


def _check_email(value: str) -> str:
    """Reject malformed addresses but keep the caller's exact spelling.

    Emails are matched case-sensitively, so the normalized form that
    email_validator computes is never stored.
    """
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(str(e)) from e
    return value


Email = Annotated[str, AfterValidator(_check_email)]


def serialize_utc(value: datetime) -> str:
    """Format datetime as ISO 8601 string in UTC.

    Converts datetime to UTC timezone and formats with microseconds and a Z
    suffix (e.g. 2026-01-19T12:34:56.123456Z), so two writes within the same
    second still order correctly on the wire.
    """
    if value.tzinfo is not None:
        utc_value = value.astimezone(UTC)
    else:
        # Naive datetime - SQLite drops tzinfo, values are stored as UTC
        utc_value = value.replace(tzinfo=UTC)

    return utc_value.isoformat(timespec="microseconds").replace("+00:00", "Z")


class UserRead(SQLModel):
    """Response schema for a user account."""

    id: int
    email: str
    name: str
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def serialize_datetime(self, value: datetime) -> str:
        return serialize_utc(value)
