"""JSON views of domain objects."""

from datetime import datetime

from tastetrail.domain.meal_plans import MealPlan, MealPlanEntry
from tastetrail.domain.recipes import Category, Recipe
from tastetrail.domain.saved_recipes import SavedRecipe, SavedRecipeDetail
from tastetrail.domain.users import UserRecord


def serialize_user(user: UserRecord) -> dict[str, object]:
    """Return the user without its password hash."""
    return {
        "_id": str(user.id),
        "name": user.name,
        "email": user.email,
        "role": user.role,
        "profilePicture": user.profile_picture,
    }


def serialize_user_summary(user: UserRecord) -> dict[str, object]:
    """Return the short user view sent alongside a token."""
    return {
        "name": user.name,
        "role": user.role,
        "profilePicture": user.profile_picture,
    }


def serialize_recipe(recipe: Recipe) -> dict[str, object]:
    return {
        "_id": str(recipe.id),
        "title": recipe.title,
        "category": recipe.category,
        "cuisine": recipe.cuisine,
        "ingredients": list(recipe.ingredients),
        "instructions": recipe.instructions,
        "calories": recipe.calories,
        "cookingTime": recipe.cooking_time,
        "image": recipe.image,
        "createdBy": recipe.created_by,
        "createdAt": _isoformat(recipe.created_at),
        "updatedAt": _isoformat(recipe.updated_at),
    }


def serialize_category(category: Category) -> dict[str, object]:
    return {"_id": str(category.id), "name": category.name}


def serialize_meal_plan(plan: MealPlan) -> dict[str, object]:
    return {
        "_id": str(plan.id),
        "userId": str(plan.user_id),
        "recipeId": str(plan.recipe_id),
        "date": plan.date.isoformat(),
        "dayOfWeek": plan.day_of_week,
        "email": plan.email,
        "status": plan.status.value,
        "createdAt": _isoformat(plan.created_at),
    }


def serialize_meal_plan_entry(entry: MealPlanEntry) -> dict[str, object]:
    """Return the flattened calendar view of a plan."""
    return {
        "_id": str(entry.plan.id),
        "recipe": serialize_recipe(entry.recipe) if entry.recipe else None,
        "date": entry.plan.date.isoformat(),
        "dayOfWeek": entry.plan.day_of_week,
        "status": entry.plan.status.value,
    }


def serialize_saved_recipe(saved: SavedRecipe) -> dict[str, object]:
    return {
        "_id": str(saved.id),
        "userId": str(saved.user_id),
        "recipeId": str(saved.recipe_id),
        "createdAt": _isoformat(saved.created_at),
        "updatedAt": _isoformat(saved.updated_at),
    }


def serialize_saved_recipe_detail(detail: SavedRecipeDetail) -> dict[str, object]:
    return {
        **serialize_saved_recipe(detail.saved),
        "recipe": serialize_recipe(detail.recipe) if detail.recipe else None,
    }


def _isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value else None
