# =============================================================================
# core/actions/example_actions.py - Example Entry Points
# =============================================================================
# The only layer that catches errors. Each mutation:
# 1. Validates the untrusted input (first message returned on failure)
# 2. Delegates to the repository or service
# 3. Revalidates the cached views that show examples
# 4. Returns an ActionResult envelope
#
# Lower-layer failures are logged and replaced by a fixed message per
# operation; internal details never reach the envelope.
# =============================================================================

import logging
from collections.abc import Mapping
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ValidationError

from core.context import RequestContext
from core.models.example import Example, ExampleCreate, ExampleUpdate
from core.models.result import ActionResult
from core.services.example_service import ExampleService
from lib.view_cache import view_cache

logger = logging.getLogger(__name__)

EXAMPLES_PATH = "/examples"
ORGANIZATIONS_PATH = "/organizations"

INVALID_INPUT_MESSAGE = "Dados inválidos"
NOT_FOUND_MESSAGE = "Exemplo não encontrado"
CREATE_FAILED_MESSAGE = "Erro ao criar exemplo"
UPDATE_FAILED_MESSAGE = "Erro ao atualizar exemplo"
DELETE_FAILED_MESSAGE = "Erro ao excluir exemplo"
MARKUP_FAILED_MESSAGE = "Erro ao aplicar reajuste"


def first_error_message(exc: ValidationError) -> str:
    """The message of the first validation error, or a generic fallback."""
    errors = exc.errors()
    if not errors:
        return INVALID_INPUT_MESSAGE
    return errors[0].get("msg") or INVALID_INPUT_MESSAGE


def parse_input(model: type[BaseModel], raw: Any) -> BaseModel:
    """
    Validate untrusted action input against `model`.

    Accepts an instance of the model, another model, or any Mapping.

    Raises:
        ValidationError: If a field fails validation
        TypeError: If the input is not a mapping
    """
    if isinstance(raw, model):
        return raw
    if isinstance(raw, BaseModel):
        raw = raw.model_dump(exclude_unset=True)
    if not isinstance(raw, Mapping):
        raise TypeError(f"Expected a mapping, got {type(raw).__name__}")
    return model.model_validate(dict(raw))


def _revalidate_example_views() -> None:
    view_cache.revalidate_path(EXAMPLES_PATH)
    # Summaries aggregate example values
    view_cache.revalidate_path(ORGANIZATIONS_PATH)


# =============================================================================
# Reads
# =============================================================================

def get_examples(ctx: RequestContext, organization_id: str | UUID) -> list[Example]:
    """Active examples of an organization. Errors propagate to the caller."""
    return ctx.example_repository().list_by_organization(organization_id)


def get_example_by_id(ctx: RequestContext, example_id: str | UUID) -> Example | None:
    """One example (including soft-deleted ones), or None."""
    return ctx.example_repository().get_by_id(example_id)


# =============================================================================
# Mutations
# =============================================================================

def create_example(ctx: RequestContext, data: Any) -> ActionResult[Example]:
    try:
        payload = parse_input(ExampleCreate, data)
    except ValidationError as e:
        return ActionResult.fail(first_error_message(e))
    except TypeError:
        return ActionResult.fail(INVALID_INPUT_MESSAGE)

    try:
        example = ctx.example_repository().create(payload)
    except Exception as e:
        logger.error(f"create_example failed for user {ctx.user_id}: {e}")
        return ActionResult.fail(CREATE_FAILED_MESSAGE)

    _revalidate_example_views()
    return ActionResult.ok(example)


def update_example(
    ctx: RequestContext,
    example_id: str | UUID,
    data: Any,
) -> ActionResult[Example]:
    """
    Partially update an example. Fields absent from `data` keep their
    stored values; an empty update returns the current record.
    """
    try:
        payload = parse_input(ExampleUpdate, data)
    except ValidationError as e:
        return ActionResult.fail(first_error_message(e))
    except TypeError:
        return ActionResult.fail(INVALID_INPUT_MESSAGE)

    repository = ctx.example_repository()

    try:
        if not payload.changes():
            current = repository.get_by_id(example_id)
            if current is None:
                return ActionResult.fail(NOT_FOUND_MESSAGE)
            return ActionResult.ok(current)

        example = repository.update(example_id, payload)
    except Exception as e:
        logger.error(f"update_example failed for {example_id}: {e}")
        return ActionResult.fail(UPDATE_FAILED_MESSAGE)

    _revalidate_example_views()
    return ActionResult.ok(example)


def delete_example(ctx: RequestContext, example_id: str | UUID) -> ActionResult[dict]:
    """Soft delete: the row is kept with is_active = false."""
    try:
        ctx.example_repository().soft_delete(example_id)
    except Exception as e:
        logger.error(f"delete_example failed for {example_id}: {e}")
        return ActionResult.fail(DELETE_FAILED_MESSAGE)

    _revalidate_example_views()
    return ActionResult.ok({"id": str(example_id)})


def apply_example_markup(ctx: RequestContext, example_id: str | UUID) -> ActionResult[Example]:
    """Raise an example's value by the default markup (x1.1)."""
    service = ExampleService(ctx.example_repository())

    try:
        example = service.apply_markup(example_id)
    except Exception as e:
        logger.error(f"apply_example_markup failed for {example_id}: {e}")
        return ActionResult.fail(MARKUP_FAILED_MESSAGE)

    if example is None:
        return ActionResult.fail(NOT_FOUND_MESSAGE)

    _revalidate_example_views()
    return ActionResult.ok(example)
