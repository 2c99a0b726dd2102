# =============================================================================
# app/routers/organizations.py - Organization Endpoints
# =============================================================================
# The caller's own organization. There is no cross-tenant listing.
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body

from app.dependencies import ContextDep
from app.exceptions import OrganizationNotFoundError
from core.actions import organization_actions
from lib.view_cache import view_cache

router = APIRouter()


@router.get("/current")
async def get_current_organization(ctx: ContextDep):
    organization = organization_actions.get_current_organization(ctx)
    if organization is None:
        raise OrganizationNotFoundError(str(ctx.user_id))
    return organization.model_dump(mode="json")


@router.get("/current/summary")
async def get_organization_summary(ctx: ContextDep):
    """
    Active example count and exact total value for the caller's organization.

    Served from the view cache until an example or organization mutation
    revalidates it.
    """
    cache_key = f"{organization_actions.ORGANIZATIONS_PATH}/{ctx.organization_id}/summary"
    cached = view_cache.get(cache_key)
    if cached is not None:
        return cached

    summary = organization_actions.get_organization_summary(ctx)
    if summary is None:
        raise OrganizationNotFoundError(str(ctx.user_id))

    payload = summary.model_dump(mode="json")
    view_cache.set(cache_key, payload)
    return payload


@router.patch("/current")
async def update_current_organization(
    ctx: ContextDep,
    data: Annotated[dict[str, Any], Body(examples=[{"name": "Acme Ltda"}])],
):
    """Rename the caller's organization. Answers with the action envelope."""
    result = organization_actions.update_organization(ctx, data)
    return result.model_dump(mode="json")
