"""Models for payloads returned by generative backends.

Envelopes keep their entries as raw values so a single malformed meal, item
or food can be dropped without rejecting the whole response.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

_MEAL_TYPE_ALIASES = {"snacks": "snack"}


class GeneratedMealItem(BaseModel):
    """Single food portion proposed by a backend."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1)
    quantity: float = Field(ge=0)
    unit: str = "grams"
    calories: float = Field(ge=0)
    protein: float = Field(default=0.0, ge=0)
    carbs: float = Field(default=0.0, ge=0)
    fats: float = Field(default=0.0, ge=0)

    @field_validator("unit", mode="before")
    @classmethod
    def _default_unit(cls, value: object) -> object:
        return "grams" if value is None else value

    @field_validator("protein", "carbs", "fats", mode="before")
    @classmethod
    def _default_macro(cls, value: object) -> object:
        return 0.0 if value is None else value


class GeneratedMeal(BaseModel):
    """Meal as proposed by a backend; items are validated one by one."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    meal_type: Literal["breakfast", "lunch", "dinner", "snack"] = Field(
        alias="mealType"
    )
    items: list[Any] = Field(default_factory=list)
    total_calories: float | None = Field(default=None, alias="totalCalories")
    notes: str | None = None

    @field_validator("meal_type", mode="before")
    @classmethod
    def _normalize_meal_type(cls, value: object) -> object:
        if isinstance(value, str):
            cleaned = value.strip().lower()
            return _MEAL_TYPE_ALIASES.get(cleaned, cleaned)
        return value

    @field_validator("items", mode="before")
    @classmethod
    def _default_items(cls, value: object) -> object:
        return [] if value is None else value

    @field_validator("total_calories", mode="before")
    @classmethod
    def _ignore_bad_total(cls, value: object) -> object:
        return _number_or_none(value)


class GeneratedPlan(BaseModel):
    """Structured plan output expected from a backend."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    meals: list[Any] = Field(default_factory=list)
    daily_calories: float | None = Field(default=None, alias="dailyCalories")
    daily_protein: float | None = Field(default=None, alias="dailyProtein")
    daily_carbs: float | None = Field(default=None, alias="dailyCarbs")
    daily_fats: float | None = Field(default=None, alias="dailyFats")

    @field_validator("meals", mode="before")
    @classmethod
    def _default_meals(cls, value: object) -> object:
        return [] if value is None else value

    @field_validator(
        "daily_calories", "daily_protein", "daily_carbs", "daily_fats", mode="before"
    )
    @classmethod
    def _ignore_bad_target(cls, value: object) -> object:
        # unusable targets are backfilled from the computed ones
        return _number_or_none(value)


class GeneratedFood(BaseModel):
    """Catalog entry proposed by a backend during seeding."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str = Field(min_length=1)
    category: str = "other"
    meal_type: list[str] = Field(default_factory=list, alias="mealType")
    calories: float = Field(ge=0)
    protein: float = Field(default=0.0, ge=0)
    carbs: float = Field(default=0.0, ge=0)
    fats: float = Field(default=0.0, ge=0)
    is_vegetarian: bool = Field(default=True, alias="isVegetarian")
    is_vegan: bool = Field(default=False, alias="isVegan")
    is_gluten_free: bool = Field(default=False, alias="isGlutenFree")
    is_dairy_free: bool = Field(default=False, alias="isDairyFree")
    allergens: list[str] = Field(default_factory=list)
    typical_serving: float = Field(default=100.0, ge=0, alias="typicalServing")
    serving_unit: str = Field(default="grams", alias="servingUnit")

    @field_validator("protein", "carbs", "fats", mode="before")
    @classmethod
    def _default_macro(cls, value: object) -> object:
        return 0.0 if value is None else value

    @field_validator("meal_type", "allergens", mode="before")
    @classmethod
    def _default_list(cls, value: object) -> object:
        return [] if value is None else value


class GeneratedFoodList(BaseModel):
    """Structured food list expected from a backend; foods are validated one by one."""

    model_config = ConfigDict(extra="ignore")

    foods: list[Any] = Field(default_factory=list)

    @field_validator("foods", mode="before")
    @classmethod
    def _default_foods(cls, value: object) -> object:
        return [] if value is None else value


def _number_or_none(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None
