# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains integrations that don't depend on FastAPI:
# - supabase_client.py: Typed Supabase Auth wrapper (sign-in, sign-up,
#   sign-out, account update/delete)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError

__all__ = [
    "SupabaseClient",
    "SupabaseClientError",
]
