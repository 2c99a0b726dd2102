# =============================================================================
# core/actions/organization_actions.py - Organization Entry Points
# =============================================================================

import logging
from typing import Any

from pydantic import ValidationError

from core.actions.example_actions import INVALID_INPUT_MESSAGE, first_error_message, parse_input
from core.context import RequestContext
from core.models.organization import Organization, OrganizationSummary, OrganizationUpdate
from core.models.result import ActionResult
from core.services.organization_service import OrganizationService
from lib.view_cache import view_cache

logger = logging.getLogger(__name__)

ORGANIZATIONS_PATH = "/organizations"

NOT_FOUND_MESSAGE = "Organização não encontrada"
UPDATE_FAILED_MESSAGE = "Erro ao atualizar organização"


def get_current_organization(ctx: RequestContext) -> Organization | None:
    if ctx.organization_id is None:
        return None
    return ctx.organization_repository().get_by_id(ctx.organization_id)


def get_organization_summary(ctx: RequestContext) -> OrganizationSummary | None:
    if ctx.organization_id is None:
        return None
    service = OrganizationService(
        ctx.organization_repository(),
        ctx.example_repository(),
    )
    return service.get_summary(ctx.organization_id)


def update_organization(ctx: RequestContext, data: Any) -> ActionResult[Organization]:
    """Rename the caller's organization."""
    try:
        payload = parse_input(OrganizationUpdate, data)
    except ValidationError as e:
        return ActionResult.fail(first_error_message(e))
    except TypeError:
        return ActionResult.fail(INVALID_INPUT_MESSAGE)

    if ctx.organization_id is None:
        return ActionResult.fail(NOT_FOUND_MESSAGE)

    repository = ctx.organization_repository()

    try:
        changes = payload.changes()
        if not changes:
            current = repository.get_by_id(ctx.organization_id)
            if current is None:
                return ActionResult.fail(NOT_FOUND_MESSAGE)
            return ActionResult.ok(current)

        organization = repository.update(ctx.organization_id, changes)
    except Exception as e:
        logger.error(f"update_organization failed for {ctx.organization_id}: {e}")
        return ActionResult.fail(UPDATE_FAILED_MESSAGE)

    view_cache.revalidate_path(ORGANIZATIONS_PATH)
    return ActionResult.ok(organization)
