# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides an in-memory Supabase double and a request context bound to it
# =============================================================================

import os
from uuid import UUID, uuid4

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret-with-enough-length")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest

from core.context import RequestContext
from lib.view_cache import view_cache
from tests.fakes import FakeSupabase


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def clear_view_cache():
    """Cached views must not leak between tests."""
    view_cache.clear()
    yield
    view_cache.clear()


@pytest.fixture
def fake_client():
    return FakeSupabase()


@pytest.fixture
def owner_id():
    return uuid4()


@pytest.fixture
def organization_row(fake_client, owner_id):
    """An organization owned by `owner_id`."""
    return fake_client.seed("organizations", owner_id=str(owner_id), name="Acme")


@pytest.fixture
def ctx(fake_client, owner_id, organization_row):
    """Request context for the organization owner."""
    return RequestContext(
        user_id=owner_id,
        organization_id=UUID(organization_row["id"]),
        client=fake_client,
    )


@pytest.fixture
def seed_example(fake_client, organization_row):
    """Factory inserting example rows straight into storage."""
    def _seed(name="Widget", value="10.10", is_active=True, organization_id=None):
        return fake_client.seed(
            "examples",
            name=name,
            value=value,
            is_active=is_active,
            organization_id=organization_id or organization_row["id"],
        )
    return _seed
