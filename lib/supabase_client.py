# =============================================================================
# lib/supabase_client.py - Supabase Auth Client Wrapper
# =============================================================================
# This module is the only place the API talks to Supabase Auth. It provides:
# - A service_role client singleton for admin operations (sign-out by token,
#   account update/delete)
# - Short-lived anon clients for user-facing calls (sign-in, sign-up), so no
#   auth session state is shared between requests
#
# Provider errors (supabase.AuthApiError) are passed through untouched; the
# HTTP layer decides how to render them.
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   result = SupabaseClient.sign_in("user@example.com", "secret")
#   token = result.session.access_token
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from supabase import Client, ClientOptions, create_client

from app.config import settings

# Set up logging for this module
logger = logging.getLogger(__name__)


class SupabaseClientError(Exception):
    """
    Error constructing or configuring a Supabase client.

    Carries a suggestion for how to fix the problem, not just what failed.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Typed wrapper for Supabase Auth operations.

    All methods are class methods for easy access without instantiation.
    The admin client is created once and reused.

    Example:
        response = SupabaseClient.sign_up(
            email="new@example.com",
            password="correct-horse",
            metadata={"display_name": "New User"},
        )
        user = response.user
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton service_role client.

        Uses service_role key which is required for the auth admin API.

        Returns:
            Client: Supabase client instance

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase admin client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                ) from e
        return cls._instance

    @classmethod
    def new_auth_client(cls) -> Client:
        """
        Create a fresh anon-key client for a single user-facing auth call.

        The client neither persists nor auto-refreshes its session.

        Raises:
            SupabaseClientError: If client creation fails
        """
        try:
            return create_client(
                settings.SUPABASE_URL,
                settings.SUPABASE_ANON_KEY,
                options=ClientOptions(
                    auto_refresh_token=False,
                    persist_session=False,
                ),
            )
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to create Supabase auth client: {e}",
                code="CLIENT_INIT_FAILED",
                suggestion="Check SUPABASE_URL and SUPABASE_ANON_KEY in your .env file"
            ) from e

    # -------------------------------------------------------------------------
    # Sessions
    # -------------------------------------------------------------------------

    @classmethod
    def sign_in(cls, email: str, password: str) -> Any:
        """
        Sign in with email and password.

        Returns:
            AuthResponse with `.user` and `.session` (access_token,
            refresh_token, expires_in)

        Raises:
            AuthApiError: If the credentials are rejected
        """
        client = cls.new_auth_client()
        response = client.auth.sign_in_with_password(
            {"email": email, "password": password}
        )
        logger.debug(f"Signed in user {response.user.id if response.user else None}")
        return response

    @classmethod
    def sign_out(cls, access_token: str) -> None:
        """
        Revoke the session the token belongs to.

        Uses the "local" scope: the user's sessions on other devices stay
        signed in.

        Raises:
            AuthApiError: If the token is not accepted by Supabase
        """
        cls.get_client().auth.admin.sign_out(access_token, "local")

    # -------------------------------------------------------------------------
    # Registrations
    # -------------------------------------------------------------------------

    @classmethod
    def sign_up(
        cls,
        email: str,
        password: str,
        metadata: dict[str, Any] | None = None,
    ) -> Any:
        """
        Register a new user.

        Returns:
            AuthResponse. `.session` is None when the project requires
            email confirmation before the first sign-in.

        Raises:
            AuthApiError: If Supabase rejects the registration
                (duplicate email, weak password, ...)
        """
        credentials: dict[str, Any] = {"email": email, "password": password}
        if metadata:
            credentials["options"] = {"data": metadata}

        client = cls.new_auth_client()
        return client.auth.sign_up(credentials)

    @classmethod
    def update_user(cls, user_id: str, attributes: dict[str, Any]) -> Any:
        """
        Update a user's email, password or metadata.

        Args:
            user_id: The auth user UUID
            attributes: Any of "email", "password", "user_metadata"

        Returns:
            The updated User
        """
        response = cls.get_client().auth.admin.update_user_by_id(user_id, attributes)
        return response.user

    @classmethod
    def delete_user(cls, user_id: str) -> None:
        """Permanently delete a user from Supabase Auth."""
        cls.get_client().auth.admin.delete_user(user_id)
