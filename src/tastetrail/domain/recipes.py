"""Domain models for recipes and categories."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class Recipe:
    """Represents a stored recipe."""

    id: UUID
    title: str
    category: str | None = None
    cuisine: str | None = None
    ingredients: list[str] = field(default_factory=list)
    instructions: str | None = None
    calories: float | None = None
    cooking_time: str | None = None
    image: str = ""
    created_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class Category:
    """Represents a recipe category; names are stored trimmed and lowercase."""

    id: UUID
    name: str


def normalize_category_name(name: str) -> str:
    """Return the canonical form of a category name."""
    return name.strip().lower()
