# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# Produces the session-bound handles repositories use to issue queries.
# Two variants exist:
# - Elevated (service_role key): server-trusted code, bypasses Row Level Security
# - User-scoped (anon key + user JWT): every query is filtered by RLS policies
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   client = SupabaseClient.get_client()
#   client = SupabaseClient.get_user_client(access_token)
# =============================================================================

from __future__ import annotations

import logging

from supabase import create_client, Client

from app.config import settings
from lib.utils import ApplicationError

logger = logging.getLogger(__name__)


class SupabaseClientError(ApplicationError):
    """Raised when a Supabase client cannot be created."""

    def __init__(self, message: str, suggestion: str | None = None):
        super().__init__(
            message,
            code="CLIENT_INIT_FAILED",
            suggestion=suggestion,
        )


class SupabaseClient:
    """
    Factory for Supabase client handles.

    The elevated client is created lazily and reused for the life of the
    process. User-scoped clients are created per call because they carry
    the caller's access token.
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the shared service_role client.

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY,
                )
                logger.info("Supabase service client initialized")
            except Exception as e:
                raise SupabaseClientError(
                    f"Failed to create Supabase client: {e}",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file",
                )
        return cls._instance

    @classmethod
    def get_user_client(cls, access_token: str) -> Client:
        """
        Create a client bound to an end user's session.

        Queries run as the `authenticated` role with the user's JWT, so the
        database applies row-level policies (organization ownership).

        Args:
            access_token: The user's Supabase access token

        Raises:
            SupabaseClientError: If client creation fails
        """
        try:
            client = create_client(settings.SUPABASE_URL, settings.SUPABASE_ANON_KEY)
            client.postgrest.auth(access_token)
        except Exception as e:
            raise SupabaseClientError(
                f"Failed to create user-scoped Supabase client: {e}",
                suggestion="Check SUPABASE_URL and SUPABASE_ANON_KEY in your .env file",
            )
        logger.debug("Created user-scoped Supabase client")
        return client

    @classmethod
    def reset(cls) -> None:
        """Drop the cached service client (used by tests)."""
        cls._instance = None
