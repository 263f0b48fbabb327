"""Supabase implementation for categories."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client, PostgrestAPIError

from tastetrail.adapters.supabase_rows import is_unique_violation
from tastetrail.domain.errors import DuplicateRecordError
from tastetrail.domain.recipes import Category
from tastetrail.services.categories import CategoryRepository


@dataclass
class SupabaseCategoryRepository(CategoryRepository):
    """Supabase-backed repository for categories."""

    client: Client

    def create_category(self, name: str) -> Category:
        """Create a category and return it."""
        try:
            response = self.client.table("categories").insert({"name": name}).execute()
        except PostgrestAPIError as exc:
            if is_unique_violation(exc):
                raise DuplicateRecordError(name) from exc
            raise
        if not response.data:
            raise RuntimeError("Failed to create category")
        return _parse_category(response.data[0])

    def list_categories(self) -> list[Category]:
        """Return all categories sorted by name."""
        response = (
            self.client.table("categories").select("id, name").order("name").execute()
        )
        return [_parse_category(row) for row in response.data or []]

    def get_category(self, category_id: UUID) -> Category | None:
        """Return a category by id, if present."""
        response = (
            self.client.table("categories")
            .select("id, name")
            .eq("id", str(category_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_category(response.data[0])

    def get_by_name(self, name: str) -> Category | None:
        """Return a category by exact name, if present."""
        response = (
            self.client.table("categories")
            .select("id, name")
            .eq("name", name)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_category(response.data[0])

    def delete_category(self, category_id: UUID) -> None:
        """Delete a category."""
        self.client.table("categories").delete().eq("id", str(category_id)).execute()


def _parse_category(row: dict[str, object]) -> Category:
    return Category(id=UUID(row["id"]), name=str(row["name"]))
