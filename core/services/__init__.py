# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .example_service import ExampleService
from .organization_service import OrganizationService

__all__ = [
    "ExampleService",
    "OrganizationService",
]
