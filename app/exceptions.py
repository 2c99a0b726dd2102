# =============================================================================
# app/exceptions.py - HTTP Exceptions and Handlers
# =============================================================================
# Errors raised by the HTTP layer itself (missing tenant, unknown record,
# bad webhook secret). Action failures never raise: they come back as
# ActionResult envelopes with status 200.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class ScaffoldException(Exception):
    """
    Base exception for the HTTP layer.

    Carries an HTTP status and renders as:
        {"detail": ..., "code": ..., "suggestion"?: ..., "details"?: ...}
    """

    def __init__(
        self,
        message: str,
        code: str = "SCAFFOLD_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Tenant Exceptions
# =============================================================================

class OrganizationNotFoundError(ScaffoldException):
    """Raised when the caller has no organization yet."""

    def __init__(self, user_id: str):
        super().__init__(
            message=f"No organization found for user: {user_id}",
            code="ORGANIZATION_NOT_FOUND",
            status_code=404,
            suggestion="Organizations are created at registration; check the user-created webhook",
            details={"user_id": user_id},
        )


# =============================================================================
# Example Exceptions
# =============================================================================

class ExampleNotFoundError(ScaffoldException):
    """Raised when an example ID doesn't exist or isn't visible to the caller."""

    def __init__(self, example_id: str):
        super().__init__(
            message=f"Example not found: {example_id}",
            code="EXAMPLE_NOT_FOUND",
            status_code=404,
            details={"example_id": example_id},
        )


# =============================================================================
# Webhook Exceptions
# =============================================================================

class WebhookUnauthorizedError(ScaffoldException):
    """Raised when a webhook call carries a missing or wrong secret."""

    def __init__(self):
        super().__init__(
            message="Invalid webhook secret",
            code="WEBHOOK_UNAUTHORIZED",
            status_code=401,
            suggestion="Send the configured WEBHOOK_SECRET in the X-Webhook-Secret header",
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def scaffold_exception_handler(
    request: Request,
    exc: ScaffoldException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )
