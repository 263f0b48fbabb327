"""Supabase implementation for recipes."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from tastetrail.adapters.supabase_rows import parse_timestamp
from tastetrail.domain.recipes import Recipe
from tastetrail.services.recipes import RecipeRepository


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase-backed repository for recipes."""

    client: Client

    def create_recipe(self, payload: dict[str, object]) -> Recipe:
        """Create a recipe and return it."""
        response = self.client.table("recipes").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create recipe")
        return parse_recipe(response.data[0])

    def list_recipes(self) -> list[Recipe]:
        """Return all recipes, newest first."""
        response = (
            self.client.table("recipes")
            .select("*")
            .order("created_at", desc=True)
            .execute()
        )
        return [parse_recipe(row) for row in response.data or []]

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe by id, if present."""
        response = (
            self.client.table("recipes")
            .select("*")
            .eq("id", str(recipe_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_recipe(response.data[0])

    def get_recipes(self, recipe_ids: list[UUID]) -> list[Recipe]:
        """Return the recipes matching any of the ids."""
        response = (
            self.client.table("recipes")
            .select("*")
            .in_("id", [str(recipe_id) for recipe_id in recipe_ids])
            .execute()
        )
        return [parse_recipe(row) for row in response.data or []]

    def update_recipe(self, recipe_id: UUID, payload: dict[str, object]) -> Recipe:
        """Overwrite the given fields of a recipe and return it."""
        response = (
            self.client.table("recipes")
            .update({**payload, "updated_at": datetime.now(tz=UTC).isoformat()})
            .eq("id", str(recipe_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update recipe")
        return parse_recipe(response.data[0])

    def delete_recipe(self, recipe_id: UUID) -> None:
        """Delete a recipe."""
        self.client.table("recipes").delete().eq("id", str(recipe_id)).execute()

    def exists_with_category(self, category: str) -> bool:
        """Return true when any recipe uses the category name."""
        response = (
            self.client.table("recipes")
            .select("id")
            .eq("category", category)
            .limit(1)
            .execute()
        )
        return bool(response.data)


def parse_recipe(row: dict[str, object]) -> Recipe:
    """Parse a recipe row into a domain model."""
    calories = row.get("calories")
    return Recipe(
        id=UUID(row["id"]),
        title=str(row.get("title", "")),
        category=row.get("category"),
        cuisine=row.get("cuisine"),
        ingredients=[str(item) for item in row.get("ingredients") or []],
        instructions=row.get("instructions"),
        calories=float(calories) if calories is not None else None,
        cooking_time=row.get("cooking_time"),
        image=str(row.get("image") or ""),
        created_by=row.get("created_by"),
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
    )
