# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# Builds the FastAPI application: CORS, error handlers and the route table.
#
# Route table:
#   /api/v1/login, /api/v1/logout, /api/v1/signup  - Supabase-backed auth
#   /up                                            - liveness check
#
# Usage:
#   poetry run uvicorn app.main:app --reload
#   poetry run python -m app.main          (binds API_HOST:API_PORT)
# =============================================================================

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from app import __version__
from app.config import Settings, settings as default_settings
from app.cors import install_cors
from app.exceptions import APIException, api_exception_handler
from app.auth import routes as auth_routes
from app.routers import health

API_V1_PREFIX = "/api/v1"

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if default_settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the effective configuration on startup."""
    app_settings: Settings = app.state.settings
    logger.info(f"Starting API in {app_settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {app.state.cors_origins}")

    yield

    logger.info("Shutting down API")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    The CORS allow-list is resolved here, once, and is fixed for the
    lifetime of the returned app.

    Args:
        settings: Settings to build the app with (defaults to the
            environment-loaded settings)
    """
    settings = settings or default_settings

    app = FastAPI(
        title="API",
        description="Versioned JSON API with Supabase-backed authentication.",
        version=__version__,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Auth",
                "description": "Login, logout and signup",
            },
            {
                "name": "Health",
                "description": "Liveness check",
            },
        ],
    )

    app.state.settings = settings
    app.state.cors_origins = tuple(settings.cors_origins_list)

    # =========================================================================
    # Middleware
    # =========================================================================

    install_cors(app, app.state.cors_origins)

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(APIException, api_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    # Authentication endpoints (directly under the namespace)
    app.include_router(auth_routes.router, prefix=API_V1_PREFIX)

    # Resource routers go here, e.g.:
    # app.include_router(posts.router, prefix=f"{API_V1_PREFIX}/posts")

    # Health check
    app.include_router(health.router, tags=["Health"])

    return app


app = create_app()


def run() -> None:
    """Serve the app on API_HOST:API_PORT."""
    uvicorn.run(
        "app.main:app",
        host=default_settings.API_HOST,
        port=default_settings.API_PORT,
        reload=default_settings.DEBUG,
    )


if __name__ == "__main__":
    run()
