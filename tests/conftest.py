"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime, timedelta
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from tastetrail.api.app import create_app
from tastetrail.config import Settings
from tastetrail.containers import AppContainer
from tastetrail.domain.errors import DuplicateRecordError
from tastetrail.domain.meal_plans import MealPlan, MealPlanStatus
from tastetrail.domain.recipes import Category, Recipe
from tastetrail.domain.saved_recipes import SavedRecipe
from tastetrail.domain.users import DEFAULT_ROLE, UserRecord
from tastetrail.services.categories import CategoryRepository, CategoryService
from tastetrail.services.meal_plans import MealPlanRepository, MealPlanService
from tastetrail.services.passwords import PasswordHasher
from tastetrail.services.recipes import RecipeRepository, RecipeService
from tastetrail.services.saved_recipes import (
    SavedRecipeRepository,
    SavedRecipeService,
)
from tastetrail.services.tokens import TokenService
from tastetrail.services.users import UserRepository, UserService


def _now() -> datetime:
    return datetime.now(tz=UTC)


# Mirrors the NOT NULL recipe columns in schema.sql.
_NOT_NULL_RECIPE_COLUMNS = ("title", "ingredients", "image")


def _reject_nulls(payload: dict[str, object]) -> None:
    for column in _NOT_NULL_RECIPE_COLUMNS:
        if column in payload and payload[column] is None:
            raise RuntimeError(f"null value in column \"{column}\"")


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)

    def get_by_email(self, email: str) -> UserRecord | None:
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        return self.users.get(user_id)

    def create_user(self, payload: dict[str, object]) -> UserRecord:
        if any(user.email == payload["email"] for user in self.users.values()):
            raise DuplicateRecordError(str(payload["email"]))
        user = UserRecord(
            id=uuid4(),
            name=str(payload["name"]),
            email=str(payload["email"]),
            password_hash=str(payload["password"]),
            role=str(payload.get("role", DEFAULT_ROLE)),
            profile_picture=str(payload.get("profile_picture") or ""),
            created_at=_now(),
        )
        self.users[user.id] = user
        return user


@dataclass
class InMemoryRecipeRepository(RecipeRepository):
    """In-memory recipe repository for tests."""

    recipes: dict[UUID, Recipe] = field(default_factory=dict)

    def create_recipe(self, payload: dict[str, object]) -> Recipe:
        _reject_nulls(payload)
        # Offset keeps creation times strictly increasing within a test.
        created_at = _now() + timedelta(microseconds=len(self.recipes))
        recipe = Recipe(
            id=uuid4(),
            title=str(payload["title"]),
            category=payload.get("category"),
            cuisine=payload.get("cuisine"),
            ingredients=list(payload.get("ingredients", [])),
            instructions=payload.get("instructions"),
            calories=payload.get("calories"),
            cooking_time=payload.get("cooking_time"),
            image=str(payload.get("image", "")),
            created_by=payload.get("created_by"),
            created_at=created_at,
            updated_at=created_at,
        )
        self.recipes[recipe.id] = recipe
        return recipe

    def list_recipes(self) -> list[Recipe]:
        return sorted(
            self.recipes.values(), key=lambda recipe: recipe.created_at, reverse=True
        )

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        return self.recipes.get(recipe_id)

    def get_recipes(self, recipe_ids: list[UUID]) -> list[Recipe]:
        return [self.recipes[rid] for rid in recipe_ids if rid in self.recipes]

    def update_recipe(self, recipe_id: UUID, payload: dict[str, object]) -> Recipe:
        _reject_nulls(payload)
        updated = replace(self.recipes[recipe_id], **payload, updated_at=_now())
        self.recipes[recipe_id] = updated
        return updated

    def delete_recipe(self, recipe_id: UUID) -> None:
        self.recipes.pop(recipe_id, None)

    def exists_with_category(self, category: str) -> bool:
        return any(recipe.category == category for recipe in self.recipes.values())


@dataclass
class InMemoryCategoryRepository(CategoryRepository):
    """In-memory category repository for tests."""

    categories: dict[UUID, Category] = field(default_factory=dict)

    def create_category(self, name: str) -> Category:
        if any(category.name == name for category in self.categories.values()):
            raise DuplicateRecordError(name)
        category = Category(id=uuid4(), name=name)
        self.categories[category.id] = category
        return category

    def list_categories(self) -> list[Category]:
        return list(self.categories.values())

    def get_category(self, category_id: UUID) -> Category | None:
        return self.categories.get(category_id)

    def get_by_name(self, name: str) -> Category | None:
        for category in self.categories.values():
            if category.name == name:
                return category
        return None

    def delete_category(self, category_id: UUID) -> None:
        self.categories.pop(category_id, None)


@dataclass
class InMemoryMealPlanRepository(MealPlanRepository):
    """In-memory meal plan repository for tests."""

    plans: dict[UUID, MealPlan] = field(default_factory=dict)

    def create_meal_plans(self, plans: list[dict[str, object]]) -> list[MealPlan]:
        created = []
        for row in plans:
            plan = MealPlan(
                id=uuid4(),
                user_id=UUID(str(row["user_id"])),
                recipe_id=UUID(str(row["recipe_id"])),
                date=date.fromisoformat(str(row["date"])),
                day_of_week=str(row["day_of_week"]),
                email=str(row["email"]),
                status=MealPlanStatus(row.get("status", MealPlanStatus.PLANNED)),
                created_at=_now(),
            )
            self.plans[plan.id] = plan
            created.append(plan)
        return created

    def list_by_email(self, email: str) -> list[MealPlan]:
        return [plan for plan in self.plans.values() if plan.email == email]

    def get_meal_plan(self, plan_id: UUID) -> MealPlan | None:
        return self.plans.get(plan_id)

    def update_status(self, plan_id: UUID, status: MealPlanStatus) -> MealPlan:
        updated = replace(self.plans[plan_id], status=status)
        self.plans[plan_id] = updated
        return updated


@dataclass
class InMemorySavedRecipeRepository(SavedRecipeRepository):
    """In-memory saved recipe repository for tests."""

    saved: dict[UUID, SavedRecipe] = field(default_factory=dict)

    def find(self, user_id: UUID, recipe_id: UUID) -> SavedRecipe | None:
        for entry in self.saved.values():
            if entry.user_id == user_id and entry.recipe_id == recipe_id:
                return entry
        return None

    def create_saved_recipe(self, user_id: UUID, recipe_id: UUID) -> SavedRecipe:
        if any(
            entry.user_id == user_id and entry.recipe_id == recipe_id
            for entry in self.saved.values()
        ):
            raise DuplicateRecordError(str(recipe_id))
        now = _now()
        entry = SavedRecipe(
            id=uuid4(),
            user_id=user_id,
            recipe_id=recipe_id,
            created_at=now,
            updated_at=now,
        )
        self.saved[entry.id] = entry
        return entry

    def list_for_user(self, user_id: UUID) -> list[SavedRecipe]:
        return [entry for entry in self.saved.values() if entry.user_id == user_id]

    def get_for_user(self, saved_id: UUID, user_id: UUID) -> SavedRecipe | None:
        entry = self.saved.get(saved_id)
        if entry and entry.user_id == user_id:
            return entry
        return None

    def delete_saved_recipe(self, saved_id: UUID) -> None:
        self.saved.pop(saved_id, None)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="eyJhbGciOiJIUzI1NiJ9.eyJyb2xlIjoic2VydmljZSJ9.c2ln",
        jwt_secret="test-secret",
        bcrypt_rounds=4,
    )


@pytest.fixture
def token_service(settings: Settings) -> TokenService:
    return TokenService(secret=settings.jwt_secret)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def recipe_repository() -> InMemoryRecipeRepository:
    return InMemoryRecipeRepository()


@pytest.fixture
def category_repository() -> InMemoryCategoryRepository:
    return InMemoryCategoryRepository()


@pytest.fixture
def meal_plan_repository() -> InMemoryMealPlanRepository:
    return InMemoryMealPlanRepository()


@pytest.fixture
def saved_recipe_repository() -> InMemorySavedRecipeRepository:
    return InMemorySavedRecipeRepository()


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    token_service: TokenService,
    user_repository: InMemoryUserRepository,
    recipe_repository: InMemoryRecipeRepository,
    category_repository: InMemoryCategoryRepository,
    meal_plan_repository: InMemoryMealPlanRepository,
    saved_recipe_repository: InMemorySavedRecipeRepository,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        token_service=token_service,
        user_service=UserService(
            repository=user_repository,
            token_service=token_service,
            password_hasher=PasswordHasher(rounds=settings.bcrypt_rounds),
        ),
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


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


def register_user(
    client: TestClient, email: str = "cook@example.com", password: str = "s3cret"
) -> str:
    """Register a user through the API and return its token."""
    response = client.post(
        "/register",
        json={"name": "Cook", "email": email, "password": password},
    )
    assert response.status_code == 201
    return response.json()["token"]


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
