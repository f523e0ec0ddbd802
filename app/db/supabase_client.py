"""Supabase client initialization and store error classification."""

from enum import Enum
from functools import lru_cache

from postgrest.exceptions import APIError
from supabase import Client, create_client

from app.core.config import get_settings

# Postgres SQLSTATE codes surfaced by PostgREST
UNIQUE_VIOLATION = "23505"
CHECK_VIOLATION = "23514"


class StoreErrorKind(str, Enum):
    UNIQUE_VIOLATION = "unique_violation"
    CHECK_VIOLATION = "check_violation"
    OTHER = "other"


class StoreNotConfiguredError(RuntimeError):
    """Raised when Supabase credentials are missing."""


class RecordStoreError(Exception):
    """A failed write or read against the record store."""

    def __init__(self, kind: StoreErrorKind, message: str, code: str | None = None):
        super().__init__(message)
        self.kind = kind
        self.code = code


def classify_api_error(error: APIError) -> RecordStoreError:
    """Wrap a PostgREST APIError, keeping its code and a coarse kind."""
    code = error.code
    if code == UNIQUE_VIOLATION:
        kind = StoreErrorKind.UNIQUE_VIOLATION
    elif code == CHECK_VIOLATION:
        kind = StoreErrorKind.CHECK_VIOLATION
    else:
        kind = StoreErrorKind.OTHER
    return RecordStoreError(kind, error.message or str(error), code=code)


@lru_cache(maxsize=1)
def get_supabase() -> Client:
    """
    Get Supabase client instance (cached singleton).

    Returns:
        Supabase client configured with service role key

    Raises:
        StoreNotConfiguredError: If SUPABASE_URL or the service role key is unset
        RuntimeError: If client initialization fails
    """
    settings = get_settings()
    if not settings.supabase_configured:
        raise StoreNotConfiguredError("Missing Supabase environment variables")
    try:
        return create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)
    except Exception as e:
        raise RuntimeError(f"Failed to initialize Supabase client: {e}") from e
