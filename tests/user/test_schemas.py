"""Tests for app/user/schemas.py - email type and timestamp serialization."""

from datetime import UTC, datetime, timedelta, timezone

import pytest
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from app.user.schemas import Email, serialize_utc

email_adapter = TypeAdapter(Email)


@pytest.mark.parametrize(
    "email",
    ["Alice@Example.COM", "chi+places@example.org", "Trần@example.vn"],
)
def test_email_is_returned_unchanged(email: str):
    """Test valid addresses come back exactly as given."""
    assert email_adapter.validate_python(email) == email


@pytest.mark.parametrize("email", ["", "plain", "a@", "a@@example.com"])
def test_email_rejects_malformed(email: str):
    """Test malformed addresses fail validation."""
    with pytest.raises(PydanticValidationError):
        email_adapter.validate_python(email)


def test_serialize_utc_keeps_microseconds():
    """Test sub-second precision survives serialization."""
    value = datetime(2026, 1, 19, 12, 34, 56, 120000, tzinfo=UTC)

    assert serialize_utc(value) == "2026-01-19T12:34:56.120000Z"


def test_serialize_utc_fixed_width():
    """Test whole-second values still carry a microsecond field."""
    value = datetime(2026, 1, 19, 12, 34, 56, tzinfo=UTC)

    assert serialize_utc(value) == "2026-01-19T12:34:56.000000Z"


def test_serialize_utc_converts_offsets_and_naive_values():
    """Test aware values are shifted to UTC and naive ones are taken as UTC."""
    ict = timezone(timedelta(hours=7))

    aware = datetime(2026, 1, 19, 19, 0, 0, 5, tzinfo=ict)
    naive = datetime(2026, 1, 19, 12, 0, 0, 5)

    assert serialize_utc(aware) == "2026-01-19T12:00:00.000005Z"
    assert serialize_utc(naive) == "2026-01-19T12:00:00.000005Z"
