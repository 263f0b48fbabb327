"""Saved recipe (cookbook) business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from tastetrail.domain.errors import (
    AlreadyExistsError,
    BadRequestError,
    DuplicateRecordError,
    NotFoundError,
)
from tastetrail.domain.saved_recipes import SavedRecipe, SavedRecipeDetail
from tastetrail.identifiers import parse_id
from tastetrail.services.recipes import RecipeRepository

logger = logging.getLogger(__name__)


class SavedRecipeRepository(Protocol):
    """Persistence interface for saved recipes."""

    def find(self, user_id: UUID, recipe_id: UUID) -> SavedRecipe | None:
        """Return the saved entry for a user and recipe, if present."""

    def create_saved_recipe(self, user_id: UUID, recipe_id: UUID) -> SavedRecipe:
        """Create a saved entry and return it."""

    def list_for_user(self, user_id: UUID) -> list[SavedRecipe]:
        """Return all saved entries for a user."""

    def get_for_user(self, saved_id: UUID, user_id: UUID) -> SavedRecipe | None:
        """Return a saved entry owned by the user, if present."""

    def delete_saved_recipe(self, saved_id: UUID) -> None:
        """Delete a saved entry."""


@dataclass
class SavedRecipeService:
    """Application service for a user's cookbook."""

    repository: SavedRecipeRepository
    recipe_repository: RecipeRepository

    def save(self, user_id: UUID, raw_recipe_id: str | None) -> SavedRecipe:
        """Bookmark a recipe for a user, at most once per recipe."""
        if not raw_recipe_id:
            raise BadRequestError("Recipe ID required")
        recipe_id = parse_id(raw_recipe_id, "recipe")
        if self.recipe_repository.get_recipe(recipe_id) is None:
            raise NotFoundError("Recipe not found")
        if self.repository.find(user_id, recipe_id):
            raise AlreadyExistsError("Already saved")
        try:
            return self.repository.create_saved_recipe(user_id, recipe_id)
        except DuplicateRecordError as exc:
            raise AlreadyExistsError("Already saved") from exc

    def list_for_user(self, user_id: UUID) -> list[SavedRecipeDetail]:
        """Return the user's saved entries with recipes joined."""
        saved = self.repository.list_for_user(user_id)
        recipe_ids = list(dict.fromkeys(entry.recipe_id for entry in saved))
        recipes = {}
        if recipe_ids:
            recipes = {
                recipe.id: recipe
                for recipe in self.recipe_repository.get_recipes(recipe_ids)
            }
        return [
            SavedRecipeDetail(saved=entry, recipe=recipes.get(entry.recipe_id))
            for entry in saved
        ]

    def remove(self, user_id: UUID, raw_id: str) -> None:
        """Delete a saved entry that belongs to the user."""
        saved_id = parse_id(raw_id, "saved recipe")
        if self.repository.get_for_user(saved_id, user_id) is None:
            raise NotFoundError("Saved recipe not found")
        self.repository.delete_saved_recipe(saved_id)
        logger.info("Removed saved recipe", extra={"saved_id": str(saved_id)})
