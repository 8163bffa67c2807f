# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
#
# Request bodies nest the credentials under a "user" key:
#   {"user": {"email": "a@b.co", "password": "secret"}}
# The outer key is checked with require_param(); these models validate what
# is inside it.
# =============================================================================

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator


class AuthUser(BaseModel):
    """
    Authenticated user extracted from a Supabase JWT.

    This is the minimal user info available from the token itself.
    """
    model_config = ConfigDict(frozen=True)

    id: UUID
    email: Optional[str] = None
    token: str = Field(repr=False)


class UserCredentials(BaseModel):
    """Email/password pair for POST /login."""
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)


def _check_confirmation(password: Optional[str], confirmation: Optional[str]) -> None:
    if confirmation is not None and password != confirmation:
        raise ValueError("password_confirmation doesn't match password")


class SignupParams(BaseModel):
    """Registration payload for POST /signup."""
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=6)
    password_confirmation: Optional[str] = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def passwords_match(self) -> "SignupParams":
        _check_confirmation(self.password, self.password_confirmation)
        return self


class AccountUpdateParams(BaseModel):
    """
    Account changes for PATCH/PUT /signup.

    current_password is always required; the other fields are applied
    only when present.
    """
    current_password: str = Field(..., min_length=1)
    email: Optional[str] = Field(default=None, min_length=3)
    password: Optional[str] = Field(default=None, min_length=6)
    password_confirmation: Optional[str] = None
    metadata: Optional[dict[str, Any]] = None

    @model_validator(mode="after")
    def passwords_match(self) -> "AccountUpdateParams":
        _check_confirmation(self.password, self.password_confirmation)
        return self

    def to_attributes(self) -> dict[str, Any]:
        """Attributes to send to the auth admin API."""
        attributes: dict[str, Any] = {}
        if self.email is not None:
            attributes["email"] = self.email
        if self.password is not None:
            attributes["password"] = self.password
        if self.metadata is not None:
            attributes["user_metadata"] = self.metadata
        return attributes


class UserResponse(BaseModel):
    """User representation returned by the auth endpoints."""
    id: UUID
    email: Optional[str] = None
    created_at: Optional[datetime] = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_supabase(cls, user: Any) -> "UserResponse":
        """Build from a supabase User object."""
        return cls(
            id=user.id,
            email=user.email,
            created_at=getattr(user, "created_at", None),
            metadata=getattr(user, "user_metadata", None) or {},
        )
