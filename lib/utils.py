# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Identifier normalization and the base error type every layer builds on.
# =============================================================================

from typing import Any
from uuid import UUID


# =============================================================================
# UUID Utilities
# =============================================================================

def normalize_uuid(value: str | UUID) -> str:
    """
    Return the string form of an identifier.

    PostgREST filters take strings, while pydantic models hand us UUID
    objects. Both are accepted here.

    Example:
        normalize_uuid(UUID("550e8400-e29b-41d4-a716-446655440000"))
        # "550e8400-e29b-41d4-a716-446655440000"
    """
    return str(value) if isinstance(value, UUID) else value


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error for the scaffold's internal layers.

    Attributes:
        code: Machine-readable category
        message: Human-readable message (the underlying cause for storage errors)
        suggestion: What the operator can do about it
        details: Extra context for logs
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "suggestion": self.suggestion,
            "details": self.details,
        }
