"""Saved recipe endpoints; every route requires a bearer token."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status

from tastetrail.api.auth import require_user_id
from tastetrail.api.models import SaveRecipeRequest
from tastetrail.api.serializers import (
    serialize_saved_recipe,
    serialize_saved_recipe_detail,
)

if TYPE_CHECKING:
    from tastetrail.containers import AppContainer

router = APIRouter(prefix="/saved-recipes", tags=["saved-recipes"])


@router.post("", status_code=status.HTTP_201_CREATED)
def save_recipe(
    payload: SaveRecipeRequest,
    request: Request,
    user_id: UUID = Depends(require_user_id),
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    saved = container.saved_recipe_service.save(user_id, payload.recipe_id)
    return serialize_saved_recipe(saved)


@router.get("")
def list_saved_recipes(
    request: Request, user_id: UUID = Depends(require_user_id)
) -> list[dict[str, object]]:
    """Return the caller's cookbook with recipes expanded."""
    container: AppContainer = request.app.state.container
    return [
        serialize_saved_recipe_detail(detail)
        for detail in container.saved_recipe_service.list_for_user(user_id)
    ]


@router.delete("/{saved_id}")
def remove_saved_recipe(
    saved_id: str, request: Request, user_id: UUID = Depends(require_user_id)
) -> dict[str, str]:
    container: AppContainer = request.app.state.container
    container.saved_recipe_service.remove(user_id, saved_id)
    return {"message": "Recipe removed from your cookbook"}
