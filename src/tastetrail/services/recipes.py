"""Recipe business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from tastetrail.domain.errors import BadRequestError, NotFoundError
from tastetrail.domain.recipes import Recipe, normalize_category_name
from tastetrail.identifiers import parse_id

logger = logging.getLogger(__name__)


class RecipeRepository(Protocol):
    """Persistence interface for recipes."""

    def create_recipe(self, payload: dict[str, object]) -> Recipe:
        """Create a recipe and return it."""

    def list_recipes(self) -> list[Recipe]:
        """Return all recipes, newest first."""

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe by id, if present."""

    def get_recipes(self, recipe_ids: list[UUID]) -> list[Recipe]:
        """Return the recipes matching any of the ids."""

    def update_recipe(self, recipe_id: UUID, payload: dict[str, object]) -> Recipe:
        """Overwrite the given fields of a recipe and return it."""

    def delete_recipe(self, recipe_id: UUID) -> None:
        """Delete a recipe."""

    def exists_with_category(self, category: str) -> bool:
        """Return true when any recipe uses the category name."""


@dataclass
class RecipeService:
    """Application service for recipe operations."""

    repository: RecipeRepository

    def create(self, payload: dict[str, object]) -> Recipe:
        """Persist a new recipe as supplied."""
        return self.repository.create_recipe(payload)

    def list_all(self) -> list[Recipe]:
        """Return every recipe, newest first."""
        return self.repository.list_recipes()

    def get(self, raw_id: str) -> Recipe:
        """Return a recipe or raise when the id is malformed or unknown."""
        return self._load(parse_id(raw_id, "recipe"))

    def update(self, raw_id: str, payload: dict[str, object]) -> Recipe:
        """Shallow-merge the supplied fields onto an existing recipe."""
        recipe_id = parse_id(raw_id, "recipe")
        self._load(recipe_id)
        return self.repository.update_recipe(recipe_id, payload)

    def assign_category(self, raw_id: str, category: str | None) -> Recipe:
        """Set a recipe's category to the normalized name."""
        recipe_id = parse_id(raw_id, "recipe")
        if not category or not category.strip():
            raise BadRequestError("Category is required")
        self._load(recipe_id)
        return self.repository.update_recipe(
            recipe_id, {"category": normalize_category_name(category)}
        )

    def delete(self, raw_id: str) -> None:
        """Delete a recipe by id."""
        recipe_id = parse_id(raw_id, "recipe")
        self._load(recipe_id)
        self.repository.delete_recipe(recipe_id)
        logger.info("Deleted recipe", extra={"recipe_id": str(recipe_id)})

    def _load(self, recipe_id: UUID) -> Recipe:
        recipe = self.repository.get_recipe(recipe_id)
        if recipe is None:
            raise NotFoundError("Recipe not found")
        return recipe
