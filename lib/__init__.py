# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Elevated and user-scoped Supabase client handles
# - money.py: Exact decimal arithmetic for monetary values
# - view_cache.py: Cached read views with path invalidation
# - utils.py: Shared utilities (base error, UUID normalization)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.money import quantize, scale, to_decimal
from lib.view_cache import ViewCache, view_cache
from lib.utils import ApplicationError, normalize_uuid

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    # Money
    "quantize",
    "scale",
    "to_decimal",
    # View cache
    "ViewCache",
    "view_cache",
    # Utils
    "ApplicationError",
    "normalize_uuid",
]
