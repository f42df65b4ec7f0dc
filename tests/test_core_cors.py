"""Tests for app/core/cors.py - CORS middleware configuration."""

from unittest.mock import MagicMock, patch

import pytest

from app.core.cors import add_cors_middleware
from app.core.settings import Settings


def _settings(cors_origins: str) -> Settings:
    return Settings(
        database_url="sqlite://",
        session_secret_key="secret",
        admin_username="admin",
        admin_password="admin-password",
        cors_origins=cors_origins,
    )


@pytest.mark.parametrize(
    "cors_origins,expected_origins,expected_credentials",
    [
        ("*", ["*"], False),
        (
            "http://localhost:3000, https://places.example.vn",
            ["http://localhost:3000", "https://places.example.vn"],
            True,
        ),
    ],
)
def test_add_cors_middleware(cors_origins, expected_origins, expected_credentials):
    """Test add_cors_middleware() only allows credentials for explicit origins."""
    mock_app = MagicMock()

    with patch("app.core.cors.get_settings", return_value=_settings(cors_origins)):
        add_cors_middleware(mock_app)

    mock_app.add_middleware.assert_called_once()
    call_kwargs = mock_app.add_middleware.call_args[1]
    assert call_kwargs["allow_origins"] == expected_origins
    assert call_kwargs["allow_credentials"] is expected_credentials
    assert "PATCH" in call_kwargs["allow_methods"]
    assert "Authorization" in call_kwargs["allow_headers"]


def test_cors_origins_list_parsing():
    """Test that Settings.cors_origins_list drops blanks and whitespace."""
    settings = _settings(" https://a.vn ,, https://b.vn ,")

    assert settings.cors_origins_list == ["https://a.vn", "https://b.vn"]
