"""Tests for app/main.py - Application lifespan and initialization."""

from unittest.mock import patch

import pytest
from fastapi import FastAPI

from app.main import app, lifespan


@pytest.mark.asyncio
async def test_lifespan_initialization():
    """Test lifespan context manager initializes Firebase."""
    mock_app = FastAPI()

    with patch("app.main.init_firebase") as mock_firebase:
        async with lifespan(mock_app):
            mock_firebase.assert_called_once()


def test_api_routes_registered():
    """Test the app exposes the health, auth and place routes."""
    paths = {route.path for route in app.routes}

    assert {
        "/health",
        "/auth/register",
        "/auth/login",
        "/auth/google",
        "/auth/logout",
        "/auth/me",
        "/places",
        "/places/stats",
        "/places/{place_id}",
    } <= paths
