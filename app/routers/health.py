# =============================================================================
# app/routers/health.py - Health Check Endpoint
# =============================================================================
# Liveness endpoint for load balancers and uptime monitors. Mounted at the
# root (GET /up), outside the versioned namespace, and never authenticated.
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter, Request
from pydantic import BaseModel

from app import __version__

router = APIRouter()


class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    version: str


@router.get("/up", response_model=HealthResponse)
async def health_check(request: Request):
    """
    Liveness check.

    Returns 200 as long as the process is up and serving requests.
    """
    return HealthResponse(
        status="up",
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=request.app.state.settings.ENVIRONMENT,
        version=__version__,
    )
