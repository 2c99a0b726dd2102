# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Tenant Scaffold API:
# - fakes.py: In-memory stand-in for the Supabase query builder
# - test_models.py: Validation messages, partial updates, result envelope
# - test_repositories.py / test_services.py / test_actions.py: the layers
# - test_routers.py: HTTP endpoints through FastAPI's TestClient
#
# Run tests with: pytest
# =============================================================================
