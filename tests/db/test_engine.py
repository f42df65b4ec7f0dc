"""Tests for app/db/engine.py - Database engine and session management."""

import contextlib

from sqlalchemy import text
from sqlmodel import create_engine

from app.db.engine import enable_sqlite_foreign_keys, get_session


def test_get_session():
    """Test get_session() yields a database session."""
    gen = get_session()
    session = next(gen)

    # Verify we got a session object
    assert session is not None

    # Clean up - complete the generator
    with contextlib.suppress(StopIteration):
        next(gen)


def test_enable_sqlite_foreign_keys():
    """Test new SQLite connections have foreign key enforcement on."""
    engine = create_engine("sqlite://")
    enable_sqlite_foreign_keys(engine)

    with engine.connect() as connection:
        assert connection.execute(text("PRAGMA foreign_keys")).scalar() == 1
