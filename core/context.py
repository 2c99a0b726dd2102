# =============================================================================
# core/context.py - Request Context
# =============================================================================
# Who is calling and on behalf of which organization, passed explicitly to
# every action instead of living in process-wide state.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from supabase import Client

from core.repositories.example_repository import ExampleRepository
from core.repositories.organization_repository import OrganizationRepository


@dataclass(frozen=True)
class RequestContext:
    """
    Request-scoped state for one action invocation.

    Attributes:
        user_id: Authenticated user
        organization_id: The user's organization (None before bootstrap)
        client: Data client to query through (user-scoped in requests)
    """

    user_id: UUID
    organization_id: UUID | None
    client: Client | Any = field(repr=False)

    def example_repository(self) -> ExampleRepository:
        return ExampleRepository(self.client)

    def organization_repository(self) -> OrganizationRepository:
        return OrganizationRepository(self.client)
