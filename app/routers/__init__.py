# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# - base.py: create_api_router() shared by every JSON endpoint group
# - health.py: GET /up liveness check
#
# Each router is mounted in main.py. New resource routers go under the
# /api/v1 prefix there.
# =============================================================================

from . import base
from . import health

__all__ = [
    "base",
    "health",
]
