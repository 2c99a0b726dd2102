# =============================================================================
# app/routers/webhooks.py - Externally-Initiated Calls
# =============================================================================
# The HTTP surface is reserved for callers outside the app. This endpoint
# receives Supabase database webhooks for new auth users and bootstraps
# their organization with the elevated client.
#
# Expected payload (Supabase "INSERT" webhook on auth.users):
#   {
#     "type": "INSERT",
#     "table": "users",
#     "schema": "auth",
#     "record": {"id": "...", "email": "...", "raw_user_meta_data": {...}}
#   }
# =============================================================================

import hmac
import logging
from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Header
from pydantic import BaseModel, Field

from app.config import settings
from app.exceptions import WebhookUnauthorizedError
from core.services.organization_service import OrganizationService

logger = logging.getLogger(__name__)

router = APIRouter()


class AuthUserRecord(BaseModel):
    id: UUID
    email: str | None = None
    raw_user_meta_data: dict[str, Any] = Field(default_factory=dict)


class UserCreatedEvent(BaseModel):
    type: str = Field(..., description="Database event type (INSERT)")
    table: str = "users"
    record: AuthUserRecord


def _verify_secret(provided: str | None) -> None:
    expected = settings.WEBHOOK_SECRET
    if not expected or not provided or not hmac.compare_digest(provided.encode(), expected.encode()):
        raise WebhookUnauthorizedError()


@router.post("/user-created")
async def user_created(
    event: UserCreatedEvent,
    x_webhook_secret: Annotated[str | None, Header()] = None,
):
    """
    Create the organization for a newly registered user.

    Idempotent: replays for the same user return the existing organization.
    """
    _verify_secret(x_webhook_secret)

    if event.type != "INSERT":
        logger.debug(f"Ignoring {event.type} event for user {event.record.id}")
        return {"status": "ignored"}

    name = event.record.raw_user_meta_data.get("organization_name")
    organization = OrganizationService().ensure_for_owner(event.record.id, name)

    return {
        "status": "ok",
        "organization_id": str(organization.id),
    }
