"""Recipe endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status

from tastetrail.api.models import AssignCategoryRequest, RecipeCreate, RecipeUpdate
from tastetrail.api.serializers import serialize_recipe

if TYPE_CHECKING:
    from tastetrail.containers import AppContainer

router = APIRouter(prefix="/recipes", tags=["recipes"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_recipe(payload: RecipeCreate, request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    recipe = container.recipe_service.create(payload.to_payload())
    return {"message": "Recipe added successfully", "recipe": serialize_recipe(recipe)}


@router.get("")
def list_recipes(request: Request) -> list[dict[str, object]]:
    """Return all recipes, newest first."""
    container: AppContainer = request.app.state.container
    return [serialize_recipe(recipe) for recipe in container.recipe_service.list_all()]


@router.get("/{recipe_id}")
def get_recipe(recipe_id: str, request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    return serialize_recipe(container.recipe_service.get(recipe_id))


@router.delete("/{recipe_id}")
def delete_recipe(recipe_id: str, request: Request) -> dict[str, str]:
    container: AppContainer = request.app.state.container
    container.recipe_service.delete(recipe_id)
    return {"message": "Recipe deleted successfully"}


@router.patch("/{recipe_id}")
def update_recipe(
    recipe_id: str, payload: RecipeUpdate, request: Request
) -> dict[str, object]:
    """Overwrite only the fields present in the body."""
    container: AppContainer = request.app.state.container
    recipe = container.recipe_service.update(recipe_id, payload.to_payload())
    return {
        "message": "Recipe updated successfully",
        "recipe": serialize_recipe(recipe),
    }


@router.patch("/{recipe_id}/assign-category")
def assign_category(
    recipe_id: str, payload: AssignCategoryRequest, request: Request
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    recipe = container.recipe_service.assign_category(recipe_id, payload.category)
    return {
        "message": "Category assigned successfully",
        "recipe": serialize_recipe(recipe),
    }
