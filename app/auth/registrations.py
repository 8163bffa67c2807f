# =============================================================================
# app/auth/registrations.py - Signup and Account Management
# =============================================================================
# POST         /signup  - create an account
# PATCH / PUT  /signup  - change email, password or metadata (signed in)
# DELETE       /signup  - delete the account (signed in)
#
# Account changes require the current password, re-checked against Supabase
# before anything is updated.
# =============================================================================

import logging
from typing import Any, Optional

from fastapi import Body, Depends, HTTPException, Response, status
from supabase import AuthApiError

from app.auth.dependencies import get_current_user
from app.auth.errors import provider_error
from app.auth.models import AccountUpdateParams, AuthUser, SignupParams, UserResponse
from app.exceptions import require_param
from app.routers.base import create_api_router, load_params
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)

router = create_api_router()


@router.post(
    "/signup",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_registration(
    response: Response,
    params: Optional[dict[str, Any]] = Body(default=None),
) -> UserResponse:
    """
    Register a new account.

    Body:
        {"user": {"email": "...", "password": "...",
                  "password_confirmation": "...", "metadata": {...}}}

    When the Supabase project does not require email confirmation the user
    is signed in immediately and the access token is returned in the
    Authorization header.
    """
    signup = load_params(SignupParams, require_param(params, "user"))

    try:
        result = SupabaseClient.sign_up(signup.email, signup.password, signup.metadata)
    except AuthApiError as e:
        logger.warning(f"Signup rejected: {e.message}")
        raise provider_error(e) from e

    if result.session is not None:
        response.headers["Authorization"] = f"Bearer {result.session.access_token}"
    else:
        logger.info(f"User {result.user.id} signed up, awaiting email confirmation")

    return UserResponse.from_supabase(result.user)


@router.api_route(
    "/signup",
    methods=["PATCH", "PUT"],
    response_model=UserResponse,
)
def update_registration(
    params: Optional[dict[str, Any]] = Body(default=None),
    user: AuthUser = Depends(get_current_user),
) -> UserResponse:
    """
    Update the signed-in account.

    Body:
        {"user": {"current_password": "...", "email": "...",
                  "password": "...", "password_confirmation": "..."}}

    Raises:
        400: If the "user" parameter is missing
        401: If the bearer token is missing or invalid
        422: If validation fails or current_password is wrong
    """
    changes = load_params(AccountUpdateParams, require_param(params, "user"))

    current = _verify_current_password(user, changes.current_password)

    attributes = changes.to_attributes()
    if not attributes:
        return UserResponse.from_supabase(current)

    try:
        updated = SupabaseClient.update_user(str(user.id), attributes)
    except AuthApiError as e:
        logger.warning(f"Account update rejected for {user.id}: {e.message}")
        raise provider_error(e) from e

    logger.info(f"User {user.id} updated {', '.join(sorted(attributes))}")
    return UserResponse.from_supabase(updated)


@router.delete(
    "/signup",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def destroy_registration(user: AuthUser = Depends(get_current_user)) -> Response:
    """Delete the signed-in account and all of its sessions."""
    try:
        SupabaseClient.delete_user(str(user.id))
    except AuthApiError as e:
        logger.warning(f"Account deletion rejected for {user.id}: {e.message}")
        raise provider_error(e) from e

    logger.info(f"User {user.id} deleted their account")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _verify_current_password(user: AuthUser, password: str) -> Any:
    """
    Re-authenticate the user; returns the Supabase User on success.

    The session created by the check is revoked immediately.
    """
    if not user.email:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Current password is invalid",
        )

    try:
        result = SupabaseClient.sign_in(user.email, password)
    except AuthApiError:
        logger.warning(f"Current password check failed for {user.id}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Current password is invalid",
        )

    if result.session is not None:
        try:
            SupabaseClient.sign_out(result.session.access_token)
        except AuthApiError as e:
            logger.warning(f"Could not revoke password check session for {user.id}: {e.message}")
            raise provider_error(e) from e

    return result.user
