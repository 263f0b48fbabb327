"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client, PostgrestAPIError

from tastetrail.adapters.supabase_rows import is_unique_violation, parse_timestamp
from tastetrail.domain.errors import DuplicateRecordError
from tastetrail.domain.users import DEFAULT_ROLE, UserRecord
from tastetrail.services.users import UserRepository

_COLUMNS = "id, name, email, password, role, profile_picture, created_at"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user with an exact email match, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def create_user(self, payload: dict[str, object]) -> UserRecord:
        """Create a new user row and return it."""
        try:
            response = self.client.table("users").insert(payload).execute()
        except PostgrestAPIError as exc:
            if is_unique_violation(exc):
                raise DuplicateRecordError(str(payload.get("email"))) from exc
            raise
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=UUID(row["id"]),
        name=str(row.get("name", "")),
        email=str(row["email"]),
        password_hash=str(row.get("password", "")),
        role=str(row.get("role") or DEFAULT_ROLE),
        profile_picture=str(row.get("profile_picture") or ""),
        created_at=parse_timestamp(row.get("created_at")),
    )
