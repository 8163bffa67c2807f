# =============================================================================
# app/cors.py - Cross-Origin Resource Sharing Policy
# =============================================================================
# Computes the origin allow-list once at startup and installs Starlette's
# CORSMiddleware with the fixed API policy:
# - every HTTP method the API uses, on every path
# - any request header
# - the Authorization response header exposed (carries the access token)
# - credentialed requests allowed
#
# Origins not in the list simply get no Access-Control-Allow-Origin header;
# the browser does the blocking.
# =============================================================================

import logging
from typing import Optional, Sequence

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)

# Common frontend dev servers (CRA / Next on 3000-3001, Vite on 5173-5174)
DEVELOPMENT_ORIGINS = (
    "http://localhost:3000",
    "http://localhost:3001",
    "http://localhost:5173",
    "http://localhost:5174",
)

ALLOWED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]
EXPOSED_HEADERS = ["Authorization"]


def resolve_cors_origins(env_value: Optional[str], development: bool) -> list[str]:
    """
    Compute the allowed origins.

    Args:
        env_value: Raw CORS_ORIGINS value (comma-separated), or None if unset
        development: Whether the app runs in development mode

    Returns:
        The explicit list when env_value is non-blank (in any mode),
        the localhost dev origins in development, otherwise an empty list.
    """
    if env_value and env_value.strip():
        return [origin.strip() for origin in env_value.split(",") if origin.strip()]

    if development:
        return list(DEVELOPMENT_ORIGINS)

    return []


def install_cors(app: FastAPI, origins: Sequence[str]) -> None:
    """Register CORSMiddleware on the app for the given allow-list."""
    if not origins:
        logger.warning("CORS allow-list is empty; cross-origin browser requests will be blocked")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(origins),
        allow_credentials=True,
        allow_methods=ALLOWED_METHODS,
        allow_headers=["*"],
        expose_headers=EXPOSED_HEADERS,
    )
