"""Category business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from tastetrail.domain.errors import (
    BadRequestError,
    ConflictError,
    DuplicateRecordError,
    NotFoundError,
)
from tastetrail.domain.recipes import Category, normalize_category_name
from tastetrail.identifiers import parse_id
from tastetrail.services.recipes import RecipeRepository

logger = logging.getLogger(__name__)


class CategoryRepository(Protocol):
    """Persistence interface for categories."""

    def create_category(self, name: str) -> Category:
        """Create a category and return it."""

    def list_categories(self) -> list[Category]:
        """Return all categories sorted by name."""

    def get_category(self, category_id: UUID) -> Category | None:
        """Return a category by id, if present."""

    def get_by_name(self, name: str) -> Category | None:
        """Return a category by exact name, if present."""

    def delete_category(self, category_id: UUID) -> None:
        """Delete a category."""


@dataclass
class CategoryService:
    """Application service for category operations."""

    repository: CategoryRepository
    recipe_repository: RecipeRepository

    def create(self, name: str | None) -> Category:
        """Create a category from a non-blank name."""
        if not name or not name.strip():
            raise BadRequestError("Category name is required")
        normalized = normalize_category_name(name)
        if self.repository.get_by_name(normalized):
            raise ConflictError("Category already exists")
        try:
            return self.repository.create_category(normalized)
        except DuplicateRecordError as exc:
            raise ConflictError("Category already exists") from exc

    def list_all(self) -> list[Category]:
        """Return categories in alphabetical order."""
        return sorted(self.repository.list_categories(), key=lambda item: item.name)

    def delete(self, raw_id: str) -> None:
        """Delete a category unless a recipe still refers to it.

        The in-use check and the delete are separate store calls, so a recipe
        created in between can still end up pointing at a removed category.
        """
        category_id = parse_id(raw_id, "category")
        category = self.repository.get_category(category_id)
        if category is None:
            raise NotFoundError("Category not found")
        if self.recipe_repository.exists_with_category(category.name):
            raise ConflictError("Category is used in recipes. Cannot delete.")
        self.repository.delete_category(category_id)
        logger.info("Deleted category", extra={"category": category.name})
