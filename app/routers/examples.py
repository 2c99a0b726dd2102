# =============================================================================
# app/routers/examples.py - Example Endpoints
# =============================================================================
# Thin HTTP wrappers around core.actions.example_actions.
# - Reads return data (404 when a record is absent)
# - Mutations always answer 200 with the action's envelope:
#     {"success": true, "data": ...} | {"success": false, "error": "..."}
# =============================================================================

import io
import logging
from typing import Annotated, Any
from uuid import UUID

import pandas as pd
from fastapi import APIRouter, Body, Path
from fastapi.responses import StreamingResponse

from app.dependencies import ContextDep
from app.exceptions import ExampleNotFoundError
from core.actions import example_actions
from lib.view_cache import view_cache

logger = logging.getLogger(__name__)

router = APIRouter()

EXPORT_COLUMNS = ["id", "name", "value", "is_active", "created_at", "updated_at"]


def _list_cache_key(organization_id: UUID) -> str:
    return f"{example_actions.EXAMPLES_PATH}?organization_id={organization_id}"


# =============================================================================
# Reads
# =============================================================================

@router.get("")
async def list_examples(ctx: ContextDep):
    """
    List the organization's active examples, newest first.

    Served from the view cache until a mutation revalidates it.
    """
    cache_key = _list_cache_key(ctx.organization_id)
    cached = view_cache.get(cache_key)
    if cached is not None:
        return cached

    examples = example_actions.get_examples(ctx, ctx.organization_id)
    payload = {
        "examples": [e.model_dump(mode="json") for e in examples],
        "total": len(examples),
    }
    view_cache.set(cache_key, payload)
    return payload


@router.get("/export")
async def export_examples(ctx: ContextDep):
    """Download the organization's active examples as CSV."""
    examples = example_actions.get_examples(ctx, ctx.organization_id)

    df = pd.DataFrame(
        [e.model_dump(mode="json") for e in examples],
        columns=EXPORT_COLUMNS,
    )
    csv_buffer = io.StringIO()
    df.to_csv(csv_buffer, index=False)
    csv_buffer.seek(0)

    filename = f"examples_{str(ctx.organization_id)[:8]}.csv"
    logger.info(f"Exporting {len(df)} examples for organization {ctx.organization_id}")

    return StreamingResponse(
        iter([csv_buffer.getvalue()]),
        media_type="text/csv",
        headers={
            "Content-Disposition": f"attachment; filename={filename}",
        }
    )


@router.get("/{example_id}")
async def get_example(
    example_id: Annotated[UUID, Path(description="Example UUID")],
    ctx: ContextDep,
):
    """
    Get one example.

    Soft-deleted examples are still returned, with is_active = false.
    """
    example = example_actions.get_example_by_id(ctx, example_id)
    if example is None:
        raise ExampleNotFoundError(str(example_id))
    return example.model_dump(mode="json")


# =============================================================================
# Mutations
# =============================================================================

@router.post("")
async def create_example(
    ctx: ContextDep,
    data: Annotated[dict[str, Any], Body(examples=[{"name": "Widget", "value": 10.10}])],
):
    """
    Create an example in the caller's organization.

    `organization_id` defaults to the caller's organization.
    """
    data.setdefault("organization_id", str(ctx.organization_id))
    result = example_actions.create_example(ctx, data)
    return result.model_dump(mode="json")


@router.patch("/{example_id}")
async def update_example(
    example_id: Annotated[UUID, Path(description="Example UUID")],
    ctx: ContextDep,
    data: Annotated[dict[str, Any], Body(examples=[{"value": 12.5}])],
):
    """Partially update an example; omitted fields keep their values."""
    result = example_actions.update_example(ctx, example_id, data)
    return result.model_dump(mode="json")


@router.delete("/{example_id}")
async def delete_example(
    example_id: Annotated[UUID, Path(description="Example UUID")],
    ctx: ContextDep,
):
    """Soft-delete an example (is_active = false, row retained)."""
    result = example_actions.delete_example(ctx, example_id)
    return result.model_dump(mode="json")


@router.post("/{example_id}/markup")
async def apply_markup(
    example_id: Annotated[UUID, Path(description="Example UUID")],
    ctx: ContextDep,
):
    """Raise the example's value by 10% using exact decimal arithmetic."""
    result = example_actions.apply_example_markup(ctx, example_id)
    return result.model_dump(mode="json")
