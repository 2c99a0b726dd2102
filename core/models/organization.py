# =============================================================================
# core/models/organization.py - Organization Schemas
# =============================================================================
# The organization is the tenant boundary: every domain row carries an
# organization_id, and row-level policies only expose rows whose
# organization is owned by the requesting user.
#
# One organization is created per user at registration time.
# =============================================================================

from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

ORGANIZATION_NAME_MAX_LENGTH = 255


class Organization(BaseModel):
    """An organization row as stored in the `organizations` table."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    owner_id: UUID
    name: str
    created_at: datetime
    updated_at: datetime | None = None


class OrganizationUpdate(BaseModel):
    """
    Partial update for the current organization.

    Example:
        {"name": "Acme Ltda"}
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> str:
        if v is None or (isinstance(v, str) and not v.strip()):
            raise PydanticCustomError("name_required", "Nome obrigatório")
        if not isinstance(v, str):
            raise PydanticCustomError("name_invalid", "Nome inválido")
        v = v.strip()
        if len(v) > ORGANIZATION_NAME_MAX_LENGTH:
            raise PydanticCustomError("name_too_long", "Nome muito longo")
        return v

    def changes(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_unset=True)


class OrganizationSummary(BaseModel):
    """
    Dashboard figures for one organization.

    `total_value` is an exact decimal sum of the active examples.
    """

    organization: Organization
    active_examples: int = Field(default=0, ge=0)
    total_value: Decimal = Field(default=Decimal("0"))
