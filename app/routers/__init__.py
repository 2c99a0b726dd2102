# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - organizations.py: The caller's organization and its summary
# - examples.py: Example CRUD, markup and CSV export
# - webhooks.py: Externally-initiated calls (user registration)
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import examples
from . import health
from . import organizations
from . import webhooks

__all__ = [
    "examples",
    "health",
    "organizations",
    "webhooks",
]
