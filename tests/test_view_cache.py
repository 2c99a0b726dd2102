# =============================================================================
# tests/test_view_cache.py - View Cache Tests
# =============================================================================

from unittest.mock import patch

from lib.view_cache import ViewCache


class TestViewCache:

    def test_get_set(self):
        cache = ViewCache(ttl_seconds=60)
        cache.set("/examples", [1, 2])
        assert cache.get("/examples") == [1, 2]
        assert cache.get("/missing") is None

    def test_expiry(self):
        cache = ViewCache(ttl_seconds=10)
        with patch("lib.view_cache.time.monotonic", return_value=100.0):
            cache.set("/examples", "view")
        with patch("lib.view_cache.time.monotonic", return_value=111.0):
            assert cache.get("/examples") is None

    def test_zero_ttl_disables_caching(self):
        cache = ViewCache(ttl_seconds=0)
        cache.set("/examples", "view")
        assert cache.get("/examples") is None

    def test_revalidate_path_drops_children(self):
        cache = ViewCache(ttl_seconds=60)
        cache.set("/examples", "list")
        cache.set("/examples?organization_id=1", "org list")
        cache.set("/examples/abc", "detail")
        cache.set("/examples-archive", "other")
        cache.set("/organizations/1/summary", "summary")

        removed = cache.revalidate_path("/examples/")

        assert removed == 3
        assert cache.get("/examples-archive") == "other"
        assert cache.get("/organizations/1/summary") == "summary"
