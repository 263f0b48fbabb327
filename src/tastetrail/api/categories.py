"""Category endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status

from tastetrail.api.models import CategoryCreate
from tastetrail.api.serializers import serialize_category

if TYPE_CHECKING:
    from tastetrail.containers import AppContainer

router = APIRouter(prefix="/categories", tags=["categories"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_category(
    payload: CategoryCreate, request: Request
) -> dict[str, object]:
    """Create a category; names are stored trimmed and lowercase."""
    container: AppContainer = request.app.state.container
    return serialize_category(container.category_service.create(payload.name))


@router.get("")
def list_categories(request: Request) -> list[dict[str, object]]:
    container: AppContainer = request.app.state.container
    return [
        serialize_category(category)
        for category in container.category_service.list_all()
    ]


@router.delete("/{category_id}")
def delete_category(category_id: str, request: Request) -> dict[str, str]:
    """Delete a category that no recipe uses."""
    container: AppContainer = request.app.state.container
    container.category_service.delete(category_id)
    return {"message": "Category deleted successfully"}
