# =============================================================================
# core/repositories/organization_repository.py - Organization Data Access
# =============================================================================
# Table contract (organizations):
#   id uuid, owner_id uuid -> auth.users.id, name text,
#   created_at / updated_at timestamptz
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from core.models.organization import Organization
from core.repositories.base import BaseRepository, RepositoryError, is_not_found
from lib.utils import normalize_uuid

logger = logging.getLogger(__name__)


class OrganizationRepository(BaseRepository):
    """Queries against the `organizations` table."""

    table = "organizations"

    def _fetch_one(self, column: str, value: str) -> Organization | None:
        try:
            response = (
                self.query()
                .select("*")
                .eq(column, value)
                .single()
                .execute()
            )
        except Exception as e:
            if is_not_found(e):
                return None
            logger.error(f"Failed to fetch organization by {column}={value}: {e}")
            raise RepositoryError(
                f"Failed to fetch organization: {e}",
                details={column: value},
            )

        if not response.data:
            return None
        return Organization.model_validate(response.data)

    def get_by_id(self, organization_id: str | UUID) -> Organization | None:
        return self._fetch_one("id", normalize_uuid(organization_id))

    def get_by_owner(self, owner_id: str | UUID) -> Organization | None:
        """
        The organization a user owns, or None before registration completes.

        Two concurrent bootstraps can leave an owner with more than one
        row; the oldest one is returned.
        """
        owner_id_str = normalize_uuid(owner_id)

        try:
            response = (
                self.query()
                .select("*")
                .eq("owner_id", owner_id_str)
                .order("created_at")
                .limit(2)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to fetch organization by owner_id={owner_id_str}: {e}")
            raise RepositoryError(
                f"Failed to fetch organization: {e}",
                details={"owner_id": owner_id_str},
            )

        if not response.data:
            return None
        if len(response.data) > 1:
            logger.warning(f"Owner {owner_id_str} has more than one organization, using the oldest")
        return Organization.model_validate(response.data[0])

    def create(self, owner_id: str | UUID, name: str) -> Organization:
        owner_id_str = normalize_uuid(owner_id)

        try:
            response = (
                self.query()
                .insert({"owner_id": owner_id_str, "name": name})
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to create organization for {owner_id_str}: {e}")
            raise RepositoryError(
                f"Failed to create organization: {e}",
                details={"owner_id": owner_id_str},
            )

        if not response.data:
            raise RepositoryError("Insert returned no data")

        organization = Organization.model_validate(response.data[0])
        logger.info(f"Created organization {organization.id} for owner {owner_id_str}")
        return organization

    def update(self, organization_id: str | UUID, changes: dict[str, Any]) -> Organization:
        """
        Raises:
            RepositoryError: If the query fails or no row matched
        """
        org_id = normalize_uuid(organization_id)

        try:
            response = (
                self.query()
                .update(changes)
                .eq("id", org_id)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to update organization {org_id}: {e}")
            raise RepositoryError(
                f"Failed to update organization: {e}",
                details={"organization_id": org_id},
            )

        if not response.data:
            raise RepositoryError(
                f"Organization not found: {org_id}",
                code="NOT_FOUND",
                details={"organization_id": org_id},
            )

        logger.info(f"Updated organization {org_id}")
        return Organization.model_validate(response.data[0])
