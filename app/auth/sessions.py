# =============================================================================
# app/auth/sessions.py - Login / Logout
# =============================================================================
# POST   /login   - exchange email + password for an access token
# DELETE /logout  - revoke the caller's token
#
# Credential checks and token issuing are done by Supabase Auth. On a
# successful login the access token is returned in the Authorization
# response header (exposed to browsers by the CORS policy).
# =============================================================================

import logging
from typing import Any, Optional

from fastapi import Body, Depends, Response, status
from supabase import AuthApiError

from app.auth.dependencies import get_bearer_token
from app.auth.errors import provider_error
from app.auth.models import UserCredentials, UserResponse
from app.exceptions import require_param
from app.routers.base import create_api_router, load_params
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)

router = create_api_router()


@router.post("/login", response_model=UserResponse)
def create_session(
    response: Response,
    params: Optional[dict[str, Any]] = Body(default=None),
) -> UserResponse:
    """
    Sign in with email and password.

    Body:
        {"user": {"email": "...", "password": "..."}}

    Returns:
        UserResponse, with `Authorization: Bearer <access_token>` set on
        the response

    Raises:
        400: If the "user" parameter is missing
        422: If email/password fail validation
        Provider status (usually 400): If Supabase rejects the credentials
    """
    credentials = load_params(UserCredentials, require_param(params, "user"))

    try:
        result = SupabaseClient.sign_in(credentials.email, credentials.password)
    except AuthApiError as e:
        logger.warning(f"Login rejected: {e.message}")
        raise provider_error(e) from e

    response.headers["Authorization"] = f"Bearer {result.session.access_token}"
    logger.info(f"User {result.user.id} logged in")
    return UserResponse.from_supabase(result.user)


@router.delete(
    "/logout",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def destroy_session(token: str = Depends(get_bearer_token)) -> Response:
    """
    Sign out, revoking the sessions tied to the bearer token.

    Raises:
        401/403: If no bearer token is sent
        Provider status: If Supabase rejects the token
    """
    try:
        SupabaseClient.sign_out(token)
    except AuthApiError as e:
        logger.warning(f"Logout rejected: {e.message}")
        raise provider_error(e) from e

    logger.info("User logged out")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
