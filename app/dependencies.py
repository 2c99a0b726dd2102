# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# Builds the request-scoped context every action receives:
# authenticated user + user-scoped Supabase client + the user's organization.
# =============================================================================

import logging
from typing import Annotated

from fastapi import Depends
from supabase import Client

from app.auth import AuthUser, get_current_user
from app.exceptions import OrganizationNotFoundError
from core.context import RequestContext
from core.repositories.organization_repository import OrganizationRepository
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)


def get_user_client(user: AuthUser = Depends(get_current_user)) -> Client:
    """Supabase client acting as the caller, so RLS policies apply."""
    return SupabaseClient.get_user_client(user.access_token)


def get_request_context(
    user: AuthUser = Depends(get_current_user),
    client: Client = Depends(get_user_client),
) -> RequestContext:
    """
    Resolve the caller's organization and bundle it with the client.

    Raises:
        OrganizationNotFoundError: If the user has no organization yet
    """
    organization = OrganizationRepository(client).get_by_owner(user.id)
    if organization is None:
        raise OrganizationNotFoundError(str(user.id))

    return RequestContext(
        user_id=user.id,
        organization_id=organization.id,
        client=client,
    )


# Type alias for dependency injection
ContextDep = Annotated[RequestContext, Depends(get_request_context)]
