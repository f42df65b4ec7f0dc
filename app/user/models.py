"""User domain models.

SQLModel table definition for User.
"""

from sqlmodel import Field, SQLModel

from app.core.mixins import TimestampMixin


class User(TimestampMixin, SQLModel, table=True):
    """User database model.

    An account may carry a password hash, a Google subject id, or both.
    Neither is enforced at the table level.

    Note: password_hash and google_id are internal-only and should
    never be exposed in API responses.
    """

    __tablename__: str = "users"

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(index=True, unique=True, max_length=255)
    password_hash: str | None = Field(default=None)
    google_id: str | None = Field(default=None, index=True, unique=True)
    name: str = Field(max_length=100)
