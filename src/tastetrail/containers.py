"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import timedelta

from supabase import create_client

from tastetrail.adapters.supabase_category_repository import (
    SupabaseCategoryRepository,
)
from tastetrail.adapters.supabase_meal_plan_repository import (
    SupabaseMealPlanRepository,
)
from tastetrail.adapters.supabase_recipe_repository import SupabaseRecipeRepository
from tastetrail.adapters.supabase_saved_recipe_repository import (
    SupabaseSavedRecipeRepository,
)
from tastetrail.adapters.supabase_user_repository import SupabaseUserRepository
from tastetrail.config import Settings
from tastetrail.services.categories import CategoryService
from tastetrail.services.meal_plans import MealPlanService
from tastetrail.services.passwords import PasswordHasher
from tastetrail.services.recipes import RecipeService
from tastetrail.services.saved_recipes import SavedRecipeService
from tastetrail.services.tokens import TokenService
from tastetrail.services.users import UserService

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    token_service: TokenService
    user_service: UserService
    recipe_service: RecipeService
    category_service: CategoryService
    meal_plan_service: MealPlanService
    saved_recipe_service: SavedRecipeService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    recipe_repository = SupabaseRecipeRepository(supabase_client)
    category_repository = SupabaseCategoryRepository(supabase_client)
    meal_plan_repository = SupabaseMealPlanRepository(supabase_client)
    saved_recipe_repository = SupabaseSavedRecipeRepository(supabase_client)
    token_service = TokenService(
        secret=resolved_settings.jwt_secret,
        algorithm=resolved_settings.jwt_algorithm,
        expires_in=timedelta(hours=resolved_settings.jwt_expires_hours),
    )
    user_service = UserService(
        repository=user_repository,
        token_service=token_service,
        password_hasher=PasswordHasher(rounds=resolved_settings.bcrypt_rounds),
    )

    async def close_resources() -> None:
        # supabase-py manages its HTTP sessions internally; nothing to release.
        logger.info("Shutting down")

    return AppContainer(
        settings=resolved_settings,
        token_service=token_service,
        user_service=user_service,
        recipe_service=RecipeService(recipe_repository),
        category_service=CategoryService(
            repository=category_repository,
            recipe_repository=recipe_repository,
        ),
        meal_plan_service=MealPlanService(
            repository=meal_plan_repository,
            recipe_repository=recipe_repository,
        ),
        saved_recipe_service=SavedRecipeService(
            repository=saved_recipe_repository,
            recipe_repository=recipe_repository,
        ),
        close_resources=close_resources,
    )
