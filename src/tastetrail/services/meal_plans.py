"""Meal plan business logic."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from tastetrail.domain.errors import BadRequestError, NotFoundError
from tastetrail.domain.meal_plans import MealPlan, MealPlanEntry, MealPlanStatus
from tastetrail.identifiers import parse_id
from tastetrail.services.recipes import RecipeRepository


class MealPlanRepository(Protocol):
    """Persistence interface for meal plans."""

    def create_meal_plans(self, plans: list[dict[str, object]]) -> list[MealPlan]:
        """Insert all plans in one batch and return them."""

    def list_by_email(self, email: str) -> list[MealPlan]:
        """Return all plans for an email."""

    def get_meal_plan(self, plan_id: UUID) -> MealPlan | None:
        """Return a plan by id, if present."""

    def update_status(self, plan_id: UUID, status: MealPlanStatus) -> MealPlan:
        """Overwrite the status of a plan and return it."""


@dataclass
class MealPlanService:
    """Application service for meal plans."""

    repository: MealPlanRepository
    recipe_repository: RecipeRepository

    def create_plans(self, plans: list[dict[str, object]]) -> list[MealPlan]:
        """Insert a non-empty batch of plans."""
        if not plans:
            raise BadRequestError("No meal plans provided")
        return self.repository.create_meal_plans(plans)

    def list_for_email(self, email: str | None) -> list[MealPlanEntry]:
        """Return plans for an email with recipes joined, earliest date first."""
        if not email or not email.strip():
            raise BadRequestError("Email is required")
        plans = sorted(self.repository.list_by_email(email), key=lambda p: p.date)
        recipe_ids = list(dict.fromkeys(plan.recipe_id for plan in plans))
        recipes = {}
        if recipe_ids:
            recipes = {
                recipe.id: recipe
                for recipe in self.recipe_repository.get_recipes(recipe_ids)
            }
        return [
            MealPlanEntry(plan=plan, recipe=recipes.get(plan.recipe_id))
            for plan in plans
        ]

    def update_status(self, raw_id: str, status: str | None) -> MealPlan:
        """Move a plan to another status from the allowed set."""
        plan_id = parse_id(raw_id, "meal plan")
        try:
            new_status = MealPlanStatus(status)
        except ValueError as exc:
            raise BadRequestError("Invalid status value") from exc
        if self.repository.get_meal_plan(plan_id) is None:
            raise NotFoundError("Meal plan not found")
        return self.repository.update_status(plan_id, new_status)
