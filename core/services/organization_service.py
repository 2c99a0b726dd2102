# =============================================================================
# core/services/organization_service.py - Organization Business Logic
# =============================================================================
# Operations spanning the organization and its domain entities.
#
# Multi-step operations here are not wrapped in a transaction: each
# repository call commits on its own, so a failure midway leaves the
# earlier writes in place.
# =============================================================================

import logging
from decimal import Decimal
from uuid import UUID

from core.models.organization import Organization, OrganizationSummary
from core.repositories.example_repository import ExampleRepository
from core.repositories.organization_repository import OrganizationRepository
from lib.money import quantize

logger = logging.getLogger(__name__)

DEFAULT_ORGANIZATION_NAME = "Minha Organização"


class OrganizationService:
    """Service for tenant-level operations."""

    def __init__(
        self,
        organizations: OrganizationRepository | None = None,
        examples: ExampleRepository | None = None,
    ):
        self.organizations = organizations or OrganizationRepository()
        self.examples = examples or ExampleRepository()

    def ensure_for_owner(
        self,
        owner_id: str | UUID,
        name: str | None = None,
    ) -> Organization:
        """
        Return the organization a user owns, creating it if missing.

        Called when a user registers. Running it twice for the same user
        returns the existing organization.
        """
        existing = self.organizations.get_by_owner(owner_id)
        if existing is not None:
            return existing

        organization_name = (name or "").strip() or DEFAULT_ORGANIZATION_NAME
        return self.organizations.create(owner_id, organization_name)

    def get_summary(self, organization_id: str | UUID) -> OrganizationSummary | None:
        """
        Organization plus its active example count and exact total value.

        Returns:
            The summary, or None if the organization doesn't exist
        """
        organization = self.organizations.get_by_id(organization_id)
        if organization is None:
            return None

        examples = self.examples.list_by_organization(organization.id)
        total = sum((example.value for example in examples), Decimal("0"))

        return OrganizationSummary(
            organization=organization,
            active_examples=len(examples),
            total_value=quantize(total),
        )
