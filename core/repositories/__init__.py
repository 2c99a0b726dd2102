# =============================================================================
# core/repositories/__init__.py - Repository Layer Exports
# =============================================================================

from .base import RepositoryError, is_not_found
from .example_repository import ExampleRepository
from .organization_repository import OrganizationRepository

__all__ = [
    "ExampleRepository",
    "OrganizationRepository",
    "RepositoryError",
    "is_not_found",
]
