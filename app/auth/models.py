# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class AuthUser(BaseModel):
    """
    Authenticated user extracted from a Supabase JWT.

    The raw access token is kept so a user-scoped database client can be
    built for the request.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID
    email: Optional[str] = None
    access_token: str = Field(default="", repr=False)
