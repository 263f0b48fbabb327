"""Domain models for saved recipes."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from tastetrail.domain.recipes import Recipe


@dataclass(frozen=True)
class SavedRecipe:
    """A recipe bookmarked by a user."""

    id: UUID
    user_id: UUID
    recipe_id: UUID
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class SavedRecipeDetail:
    """A saved recipe with the recipe joined in."""

    saved: SavedRecipe
    recipe: Recipe | None
