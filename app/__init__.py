# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, middleware setup, error handlers, route table
# - config.py: Environment variable loading and settings
# - cors.py: CORS allow-list resolution and middleware
# - exceptions.py: {"error": ...} JSON error kinds and handler
# - auth/: login / logout / signup endpoints backed by Supabase Auth
# - routers/: base router factory and the /up health check
#
# The app layer is thin - authentication itself is delegated to the
# lib/ Supabase wrapper.
# =============================================================================

__version__ = "1.0.0"
