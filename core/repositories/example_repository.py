# =============================================================================
# core/repositories/example_repository.py - Example Data Access
# =============================================================================
# One method per access pattern the actions need. No pagination: callers
# receive the full result set.
#
# Table contract (examples):
#   id uuid, organization_id uuid -> organizations.id, name text,
#   value numeric(12,2), is_active boolean default true,
#   created_at / updated_at timestamptz (updated_at refreshed by trigger)
# =============================================================================

import logging
from uuid import UUID

from core.models.example import Example, ExampleCreate, ExampleUpdate
from core.repositories.base import BaseRepository, RepositoryError, is_not_found
from lib.utils import normalize_uuid

logger = logging.getLogger(__name__)


class ExampleRepository(BaseRepository):
    """Queries against the `examples` table."""

    table = "examples"

    def list_by_organization(self, organization_id: str | UUID) -> list[Example]:
        """
        Active examples of one organization, newest first.

        Soft-deleted rows are excluded.
        """
        org_id = normalize_uuid(organization_id)

        try:
            response = (
                self.query()
                .select("*")
                .eq("organization_id", org_id)
                .eq("is_active", True)
                .order("created_at", desc=True)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to list examples for organization {org_id}: {e}")
            raise RepositoryError(
                f"Failed to list examples: {e}",
                details={"organization_id": org_id},
            )

        rows = response.data or []
        logger.debug(f"Fetched {len(rows)} examples for organization {org_id}")
        return [Example.model_validate(row) for row in rows]

    def get_by_id(self, example_id: str | UUID) -> Example | None:
        """
        Fetch one example, active or not.

        Returns:
            The example, or None if no row matches
        """
        example_id_str = normalize_uuid(example_id)

        try:
            response = (
                self.query()
                .select("*")
                .eq("id", example_id_str)
                .single()
                .execute()
            )
        except Exception as e:
            if is_not_found(e):
                return None
            logger.error(f"Failed to fetch example {example_id_str}: {e}")
            raise RepositoryError(
                f"Failed to fetch example: {e}",
                details={"example_id": example_id_str},
            )

        if not response.data:
            return None
        return Example.model_validate(response.data)

    def create(self, data: ExampleCreate) -> Example:
        """Insert a new example; the database assigns id, is_active and timestamps."""
        payload = data.model_dump(mode="json")

        try:
            response = self.query().insert(payload).execute()
        except Exception as e:
            logger.error(f"Failed to create example: {e}")
            raise RepositoryError(f"Failed to create example: {e}")

        if not response.data:
            raise RepositoryError("Insert returned no data")

        example = Example.model_validate(response.data[0])
        logger.info(f"Created example {example.id} in organization {example.organization_id}")
        return example

    def update(self, example_id: str | UUID, data: ExampleUpdate) -> Example:
        """
        Write only the fields set on `data`.

        Raises:
            RepositoryError: If the query fails or no row matched
        """
        example_id_str = normalize_uuid(example_id)
        changes = data.changes()

        try:
            response = (
                self.query()
                .update(changes)
                .eq("id", example_id_str)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to update example {example_id_str}: {e}")
            raise RepositoryError(
                f"Failed to update example: {e}",
                details={"example_id": example_id_str},
            )

        if not response.data:
            raise RepositoryError(
                f"Example not found: {example_id_str}",
                code="NOT_FOUND",
                details={"example_id": example_id_str},
            )

        logger.info(f"Updated example {example_id_str}: {sorted(changes)}")
        return Example.model_validate(response.data[0])

    def soft_delete(self, example_id: str | UUID) -> None:
        """
        Mark an example inactive. The row stays in storage.

        Raises:
            RepositoryError: If the query fails or no row matched
        """
        example_id_str = normalize_uuid(example_id)

        try:
            response = (
                self.query()
                .update({"is_active": False})
                .eq("id", example_id_str)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to delete example {example_id_str}: {e}")
            raise RepositoryError(
                f"Failed to delete example: {e}",
                details={"example_id": example_id_str},
            )

        if not response.data:
            raise RepositoryError(
                f"Example not found: {example_id_str}",
                code="NOT_FOUND",
                details={"example_id": example_id_str},
            )

        logger.info(f"Soft-deleted example {example_id_str}")
