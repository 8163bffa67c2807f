# =============================================================================
# app/auth/errors.py - Auth Provider Error Translation
# =============================================================================
# Supabase Auth failures keep the provider's status code and message and are
# rendered by FastAPI's default HTTPException handler ({"detail": ...}).
# =============================================================================

from fastapi import HTTPException, status
from supabase import AuthApiError


def provider_error(exc: AuthApiError) -> HTTPException:
    """Convert a Supabase AuthApiError to an HTTPException."""
    status_code = getattr(exc, "status", None) or status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=status_code, detail=exc.message)
