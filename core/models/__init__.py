# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - organization.py: Tenant records and the organization summary
# - example.py: The illustrative domain entity (create/update/record)
# - result.py: The uniform success/failure envelope returned by actions
#
# These models define the "contract" between the layers and clients.
# =============================================================================

from .organization import (
    Organization,
    OrganizationSummary,
    OrganizationUpdate,
)

from .example import (
    Example,
    ExampleCreate,
    ExampleUpdate,
)

from .result import ActionResult

__all__ = [
    # Organization
    "Organization",
    "OrganizationSummary",
    "OrganizationUpdate",
    # Example
    "Example",
    "ExampleCreate",
    "ExampleUpdate",
    # Envelope
    "ActionResult",
]
