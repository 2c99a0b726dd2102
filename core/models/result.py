# =============================================================================
# core/models/result.py - Action Result Envelope
# =============================================================================
# Every mutating action returns exactly one of:
#   {"success": true,  "data": <T>}
#   {"success": false, "error": "<message>"}
#
# Callers branch on `success` and never see internal error details.
# =============================================================================

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, model_serializer, model_validator

T = TypeVar("T")


class ActionResult(BaseModel, Generic[T]):
    """
    Uniform success/failure wrapper returned by actions.

    Example:
        ActionResult.ok(example)            # success, carries the record
        ActionResult.fail("Nome obrigatório")
    """

    success: bool
    data: T | None = None
    error: str | None = None

    @model_validator(mode="after")
    def check_exactly_one(self) -> "ActionResult[T]":
        if self.success and self.error is not None:
            raise ValueError("A successful result cannot carry an error")
        if not self.success and not self.error:
            raise ValueError("A failed result must carry an error message")
        if not self.success and self.data is not None:
            raise ValueError("A failed result cannot carry data")
        return self

    @model_serializer(mode="wrap")
    def serialize(self, handler) -> dict[str, Any]:
        payload = handler(self)
        if self.success:
            payload.pop("error", None)
        else:
            payload.pop("data", None)
        return payload

    @classmethod
    def ok(cls, data: T) -> "ActionResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "ActionResult[T]":
        return cls(success=False, error=error)
