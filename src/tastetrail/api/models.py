"""Pydantic models for request bodies."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tastetrail.domain.meal_plans import MealPlanStatus
from tastetrail.services.passwords import MAX_PASSWORD_BYTES

# Columns stored NOT NULL; an explicit null means "empty".
_EMPTY_RECIPE_VALUES = {"image": str, "ingredients": list}


class RegisterRequest(BaseModel):
    """Account registration payload."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
    profile_picture: str = Field(default="", alias="profilePicture")

    @field_validator("password")
    @classmethod
    def _password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class LoginRequest(BaseModel):
    """Login payload."""

    email: str
    password: str


class RecipeUpdate(BaseModel):
    """Recipe fields accepted by the API; unknown keys are dropped."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    category: str | None = None
    cuisine: str | None = None
    ingredients: list[str] | None = None
    instructions: str | None = None
    calories: float | None = None
    cooking_time: str | None = Field(default=None, alias="cookingTime")
    image: str | None = None
    created_by: str | None = Field(default=None, alias="createdBy")

    @field_validator("title")
    @classmethod
    def _title_not_null(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            raise ValueError("title must not be empty")
        return value

    def to_payload(self) -> dict[str, object]:
        """Return only the fields the client actually sent."""
        payload = self.model_dump(exclude_unset=True)
        for key, empty in _EMPTY_RECIPE_VALUES.items():
            if key in payload and payload[key] is None:
                payload[key] = empty()
        return payload


class RecipeCreate(RecipeUpdate):
    """Payload for a new recipe."""

    title: str


class AssignCategoryRequest(BaseModel):
    """Category assignment payload."""

    category: str | None = None


class CategoryCreate(BaseModel):
    """Category creation payload."""

    name: str | None = None


class MealPlanCreate(BaseModel):
    """One entry of a bulk meal plan submission."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: UUID = Field(alias="userId")
    recipe_id: UUID = Field(alias="recipeId")
    plan_date: date = Field(alias="date")
    day_of_week: str = Field(alias="dayOfWeek", min_length=1)
    email: str = Field(min_length=1)
    status: MealPlanStatus = MealPlanStatus.PLANNED

    @field_validator("plan_date", mode="before")
    @classmethod
    def _truncate_datetime(cls, value: object) -> object:
        if isinstance(value, str) and "T" in value:
            return datetime.fromisoformat(value).date()
        return value

    def to_row(self) -> dict[str, object]:
        """Return the store representation of the plan."""
        return {
            "user_id": str(self.user_id),
            "recipe_id": str(self.recipe_id),
            "date": self.plan_date.isoformat(),
            "day_of_week": self.day_of_week,
            "email": self.email,
            "status": self.status.value,
        }


class StatusUpdate(BaseModel):
    """Meal plan status payload."""

    status: str | None = None


class SaveRecipeRequest(BaseModel):
    """Saved recipe creation payload."""

    model_config = ConfigDict(populate_by_name=True)

    recipe_id: str | None = Field(default=None, alias="recipeId")
