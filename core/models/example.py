# =============================================================================
# core/models/example.py - Example Schemas
# =============================================================================
# "Example" is the stand-in domain entity every new feature copies:
# - ExampleCreate: validated input for creation (no server-assigned fields)
# - ExampleUpdate: partial variant of the same shape
# - Example: the stored record as returned by the repository
#
# Validation messages are user-facing (pt-BR) and only the first one is
# surfaced by the actions layer, so field order matters: name, value,
# organization_id.
# =============================================================================

from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from lib.money import quantize, to_decimal

NAME_MAX_LENGTH = 255

# Exclusive upper bound of the numeric(12, 2) value column
VALUE_MAX = Decimal("1e10")


# -----------------------------------------------------------------------------
# Field checks shared by create and update
# -----------------------------------------------------------------------------

def _check_name(value: Any) -> str:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise PydanticCustomError("name_required", "Nome obrigatório")
    if not isinstance(value, str):
        raise PydanticCustomError("name_invalid", "Nome inválido")

    value = value.strip()
    if len(value) > NAME_MAX_LENGTH:
        raise PydanticCustomError("name_too_long", "Nome muito longo")
    return value


def _check_value(value: Any) -> Decimal:
    if value is None:
        raise PydanticCustomError("value_required", "Valor obrigatório")
    try:
        amount = to_decimal(value)
    except (TypeError, ValueError):
        raise PydanticCustomError("value_invalid", "Valor inválido")

    if amount < 0:
        raise PydanticCustomError("value_negative", "Valor deve ser maior ou igual a zero")

    try:
        amount = quantize(amount)
    except ValueError:
        raise PydanticCustomError("value_too_large", "Valor muito alto")
    if amount >= VALUE_MAX:
        raise PydanticCustomError("value_too_large", "Valor muito alto")
    return amount


def _check_organization_id(value: Any) -> UUID:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        raise PydanticCustomError("organization_invalid", "Organização inválida")


# -----------------------------------------------------------------------------
# Input schemas
# -----------------------------------------------------------------------------

class ExampleCreate(BaseModel):
    """
    Input for creating an example.

    `id`, `is_active`, `created_at` and `updated_at` are assigned by the
    database; if a caller sends them they are ignored.

    Example:
        {
            "name": "Widget",
            "value": 10.10,
            "organization_id": "550e8400-e29b-41d4-a716-446655440000"
        }
    """

    model_config = ConfigDict(extra="ignore")

    name: str = Field(default=None, validate_default=True, description="Display name")
    value: Decimal = Field(default=None, validate_default=True, description="Monetary value (>= 0)")
    organization_id: UUID = Field(default=None, validate_default=True, description="Owning organization")

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> str:
        return _check_name(v)

    @field_validator("value", mode="before")
    @classmethod
    def validate_value(cls, v: Any) -> Decimal:
        return _check_value(v)

    @field_validator("organization_id", mode="before")
    @classmethod
    def validate_organization_id(cls, v: Any) -> UUID:
        return _check_organization_id(v)


class ExampleUpdate(BaseModel):
    """
    Partial update for an example.

    Only the fields the caller actually sent are written; anything omitted
    keeps its stored value. Use `changes()` to get the write payload.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    value: Decimal | None = None

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> str:
        return _check_name(v)

    @field_validator("value", mode="before")
    @classmethod
    def validate_value(cls, v: Any) -> Decimal:
        return _check_value(v)

    def changes(self) -> dict[str, Any]:
        """JSON-ready dict of the fields that were explicitly set."""
        return self.model_dump(mode="json", exclude_unset=True)


# -----------------------------------------------------------------------------
# Stored record
# -----------------------------------------------------------------------------

class Example(BaseModel):
    """
    An example row as stored in the `examples` table.

    Soft-deleted rows keep existing with `is_active = false`.
    """

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    organization_id: UUID
    name: str
    value: Decimal
    is_active: bool = True
    created_at: datetime
    updated_at: datetime | None = None

    @field_validator("value", mode="before")
    @classmethod
    def normalize_value(cls, v: Any) -> Decimal:
        # PostgREST returns numeric columns as JSON numbers
        return quantize(to_decimal(v))
