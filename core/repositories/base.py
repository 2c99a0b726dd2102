# =============================================================================
# core/repositories/base.py - Shared Repository Plumbing
# =============================================================================
# Repositories issue one filtered query per method and map the raw rows to
# typed records. Two failure shapes exist:
# - "not found" on a single-row lookup -> the method returns None
# - anything else -> RepositoryError carrying the underlying message
# =============================================================================

import logging
from typing import Any

from supabase import Client

from lib.supabase_client import SupabaseClient
from lib.utils import ApplicationError

logger = logging.getLogger(__name__)

# PostgREST error code for ".single()" matching zero rows
NO_ROWS_CODE = "PGRST116"


class RepositoryError(ApplicationError):
    """Generic storage failure; `message` is the underlying cause."""

    def __init__(
        self,
        message: str,
        code: str = "REPOSITORY_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, details=details)


def is_not_found(error: Exception) -> bool:
    """True when a PostgREST error means the single-row query matched nothing."""
    return getattr(error, "code", None) == NO_ROWS_CODE or NO_ROWS_CODE in str(error)


class BaseRepository:
    """
    Holds the client handle a repository queries through.

    Pass a user-scoped client to have row-level policies applied; leave it
    out to run with the elevated service client.
    """

    table: str = ""

    def __init__(self, client: Client | None = None):
        self._client = client

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = SupabaseClient.get_client()
        return self._client

    def query(self):
        return self.client.table(self.table)
