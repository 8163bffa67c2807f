# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# Combines the session and registration endpoints. Mounted in main.py
# directly under /api/v1, so the paths are:
#
#   POST   /api/v1/login
#   DELETE /api/v1/logout
#   POST   /api/v1/signup
#   PATCH  /api/v1/signup   (also PUT)
#   DELETE /api/v1/signup
# =============================================================================

from app.auth import registrations, sessions
from app.routers.base import create_api_router

router = create_api_router(tags=["Auth"])

router.include_router(sessions.router)
router.include_router(registrations.router)
