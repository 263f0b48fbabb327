"""Supabase implementation for saved recipes."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client, PostgrestAPIError

from tastetrail.adapters.supabase_rows import is_unique_violation, parse_timestamp
from tastetrail.domain.errors import DuplicateRecordError
from tastetrail.domain.saved_recipes import SavedRecipe
from tastetrail.services.saved_recipes import SavedRecipeRepository

_COLUMNS = "id, user_id, recipe_id, created_at, updated_at"


@dataclass
class SupabaseSavedRecipeRepository(SavedRecipeRepository):
    """Supabase-backed repository for saved recipes."""

    client: Client

    def find(self, user_id: UUID, recipe_id: UUID) -> SavedRecipe | None:
        """Return the saved entry for a user and recipe, if present."""
        response = (
            self.client.table("saved_recipes")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("recipe_id", str(recipe_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_saved(response.data[0])

    def create_saved_recipe(self, user_id: UUID, recipe_id: UUID) -> SavedRecipe:
        """Create a saved entry and return it."""
        try:
            response = (
                self.client.table("saved_recipes")
                .insert({"user_id": str(user_id), "recipe_id": str(recipe_id)})
                .execute()
            )
        except PostgrestAPIError as exc:
            if is_unique_violation(exc):
                raise DuplicateRecordError(str(recipe_id)) from exc
            raise
        if not response.data:
            raise RuntimeError("Failed to save recipe")
        return _parse_saved(response.data[0])

    def list_for_user(self, user_id: UUID) -> list[SavedRecipe]:
        """Return all saved entries for a user."""
        response = (
            self.client.table("saved_recipes")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("created_at")
            .execute()
        )
        return [_parse_saved(row) for row in response.data or []]

    def get_for_user(self, saved_id: UUID, user_id: UUID) -> SavedRecipe | None:
        """Return a saved entry owned by the user, if present."""
        response = (
            self.client.table("saved_recipes")
            .select(_COLUMNS)
            .eq("id", str(saved_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_saved(response.data[0])

    def delete_saved_recipe(self, saved_id: UUID) -> None:
        """Delete a saved entry."""
        self.client.table("saved_recipes").delete().eq("id", str(saved_id)).execute()


def _parse_saved(row: dict[str, object]) -> SavedRecipe:
    return SavedRecipe(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        recipe_id=UUID(row["recipe_id"]),
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
    )
