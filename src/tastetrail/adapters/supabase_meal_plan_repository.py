"""Supabase implementation for meal plans."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from tastetrail.adapters.supabase_rows import parse_timestamp
from tastetrail.domain.meal_plans import MealPlan, MealPlanStatus
from tastetrail.services.meal_plans import MealPlanRepository

_COLUMNS = "id, user_id, recipe_id, date, day_of_week, email, status, created_at"


@dataclass
class SupabaseMealPlanRepository(MealPlanRepository):
    """Supabase-backed repository for meal plans."""

    client: Client

    def create_meal_plans(self, plans: list[dict[str, object]]) -> list[MealPlan]:
        """Insert all plans in one batch and return them."""
        response = self.client.table("meal_plans").insert(plans).execute()
        if not response.data:
            raise RuntimeError("Failed to create meal plans")
        return [_parse_meal_plan(row) for row in response.data]

    def list_by_email(self, email: str) -> list[MealPlan]:
        """Return all plans for an email, earliest date first."""
        response = (
            self.client.table("meal_plans")
            .select(_COLUMNS)
            .eq("email", email)
            .order("date")
            .execute()
        )
        return [_parse_meal_plan(row) for row in response.data or []]

    def get_meal_plan(self, plan_id: UUID) -> MealPlan | None:
        """Return a plan by id, if present."""
        response = (
            self.client.table("meal_plans")
            .select(_COLUMNS)
            .eq("id", str(plan_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal_plan(response.data[0])

    def update_status(self, plan_id: UUID, status: MealPlanStatus) -> MealPlan:
        """Overwrite the status of a plan and return it."""
        response = (
            self.client.table("meal_plans")
            .update({"status": status.value})
            .eq("id", str(plan_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update meal plan status")
        return _parse_meal_plan(response.data[0])


def _parse_meal_plan(row: dict[str, object]) -> MealPlan:
    raw_date = str(row["date"])
    return MealPlan(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        recipe_id=UUID(row["recipe_id"]),
        date=date.fromisoformat(raw_date[:10]),
        day_of_week=str(row.get("day_of_week", "")),
        email=str(row.get("email", "")),
        status=MealPlanStatus(row.get("status") or MealPlanStatus.PLANNED),
        created_at=parse_timestamp(row.get("created_at")),
    )
