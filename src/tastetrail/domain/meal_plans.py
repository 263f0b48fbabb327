"""Domain models for meal plans."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID

from tastetrail.domain.recipes import Recipe


class MealPlanStatus(StrEnum):
    """Cooking progress of a planned meal."""

    PLANNED = "Planned"
    COOKING = "Cooking"
    COOKED = "Cooked"


@dataclass(frozen=True)
class MealPlan:
    """Represents a recipe planned for a user on a given date."""

    id: UUID
    user_id: UUID
    recipe_id: UUID
    date: date
    day_of_week: str
    email: str
    status: MealPlanStatus = MealPlanStatus.PLANNED
    created_at: datetime | None = None


@dataclass(frozen=True)
class MealPlanEntry:
    """A meal plan with its recipe joined in."""

    plan: MealPlan
    recipe: Recipe | None
