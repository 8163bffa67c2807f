# =============================================================================
# tests/ - Test Suite
# =============================================================================
# - test_cors.py: allow-list resolution and CORS headers
# - test_exceptions.py: {"error": ...} responses and require_param()
# - test_health.py: GET /up
# - test_auth_*.py: login / logout / signup endpoints and JWT verification
# - test_supabase_client.py: Supabase Auth wrapper
#
# Run tests with: poetry run pytest
# =============================================================================
