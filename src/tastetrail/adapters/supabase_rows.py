"""Row parsing helpers shared by the Supabase adapters."""

from datetime import datetime

from supabase import PostgrestAPIError

_UNIQUE_VIOLATION = "23505"


def parse_timestamp(raw: object) -> datetime | None:
    """Parse an ISO timestamp column, tolerating nulls."""
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None


def is_unique_violation(error: PostgrestAPIError) -> bool:
    """Return true when PostgREST reports a unique-key violation."""
    return getattr(error, "code", None) == _UNIQUE_VIOLATION
