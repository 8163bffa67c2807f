# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Login, logout and signup backed by Supabase Auth, plus JWT verification
# for endpoints that act on the signed-in user.
#
# Usage:
#   from app.auth import get_current_user, AuthUser
#
#   @router.get("/protected")
#   async def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

from app.auth.dependencies import get_bearer_token, get_current_user
from app.auth.models import AuthUser, UserResponse

__all__ = [
    "get_bearer_token",
    "get_current_user",
    "AuthUser",
    "UserResponse",
]
