"""Meal plan endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Body, Request, status

from tastetrail.api.models import MealPlanCreate, StatusUpdate
from tastetrail.api.serializers import serialize_meal_plan, serialize_meal_plan_entry

if TYPE_CHECKING:
    from tastetrail.containers import AppContainer

router = APIRouter(prefix="/meal-plans", tags=["meal-plans"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_meal_plans(
    request: Request, plans: list[MealPlanCreate] = Body(...)
) -> dict[str, object]:
    """Save a batch of planned meals."""
    container: AppContainer = request.app.state.container
    created = container.meal_plan_service.create_plans(
        [plan.to_row() for plan in plans]
    )
    return {
        "message": "Meal plans saved successfully",
        "data": [serialize_meal_plan(plan) for plan in created],
    }


@router.get("")
def list_meal_plans(
    request: Request, email: str | None = None
) -> list[dict[str, object]]:
    """Return a user's plans by email, earliest date first."""
    container: AppContainer = request.app.state.container
    return [
        serialize_meal_plan_entry(entry)
        for entry in container.meal_plan_service.list_for_email(email)
    ]


@router.patch("/{plan_id}")
def update_meal_plan_status(
    plan_id: str, payload: StatusUpdate, request: Request
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    plan = container.meal_plan_service.update_status(plan_id, payload.status)
    return {
        "message": "Status updated successfully",
        "mealPlan": serialize_meal_plan(plan),
    }
