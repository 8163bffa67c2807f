# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Builds apps from explicit Settings so CORS/environment can vary per test
# - Replaces the Supabase wrapper with a MagicMock
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret-for-hs256-signing")
os.environ.setdefault("ENVIRONMENT", "test")

import time
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import MagicMock, patch
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from supabase import AuthApiError

from app.config import Settings
from app.main import create_app


# =============================================================================
# Settings / App Fixtures
# =============================================================================

@pytest.fixture
def make_settings():
    """Factory for Settings with overrides (CORS_ORIGINS unset by default)."""
    def _make(**overrides):
        values = {"ENVIRONMENT": "test", "CORS_ORIGINS": None}
        values.update(overrides)
        return Settings(**values)
    return _make


@pytest.fixture
def app(make_settings):
    """App built with development settings (localhost CORS fallback)."""
    return create_app(make_settings(ENVIRONMENT="development"))


@pytest.fixture
def client(app):
    """TestClient for the development app, lifespan included."""
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# Supabase Fixtures
# =============================================================================

@pytest.fixture
def mock_supabase():
    """Replace SupabaseClient in the auth routes with a MagicMock."""
    mock = MagicMock()
    with patch("app.auth.sessions.SupabaseClient", mock), \
            patch("app.auth.registrations.SupabaseClient", mock):
        yield mock


@pytest.fixture
def supabase_user():
    """A Supabase User-like object."""
    return SimpleNamespace(
        id=str(uuid4()),
        email="jane@example.com",
        created_at=datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc),
        user_metadata={"display_name": "Jane"},
    )


@pytest.fixture
def auth_response(supabase_user):
    """A Supabase AuthResponse-like object with a live session."""
    return SimpleNamespace(
        user=supabase_user,
        session=SimpleNamespace(
            access_token="access-token-123",
            refresh_token="refresh-token-456",
            expires_in=3600,
        ),
    )


@pytest.fixture
def auth_api_error():
    """Factory for supabase AuthApiError instances."""
    class _AuthApiError(AuthApiError):
        def __init__(self, message: str, status: int):
            Exception.__init__(self, message)
            self.message = message
            self.status = status
            self.code = None
            self.name = "AuthApiError"

    return _AuthApiError


# =============================================================================
# Token Fixtures
# =============================================================================

@pytest.fixture
def make_token(supabase_user):
    """Factory for HS256 access tokens signed with the test secret."""
    def _make(sub=None, email="jane@example.com", expires_in=3600, **claims):
        payload = {
            "sub": sub if sub is not None else supabase_user.id,
            "email": email,
            "aud": "authenticated",
            "exp": int(time.time()) + expires_in,
            "iat": int(time.time()),
            "role": "authenticated",
        }
        payload.update(claims)
        return jwt.encode(payload, os.environ["SUPABASE_JWT_SECRET"], algorithm="HS256")
    return _make


@pytest.fixture
def auth_headers(make_token):
    """Authorization header for a valid token."""
    return {"Authorization": f"Bearer {make_token()}"}
