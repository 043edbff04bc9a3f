"""Diet plan domain models."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

MEAL_TYPES = ("breakfast", "lunch", "dinner", "snack")


@dataclass(frozen=True)
class NutritionTargets:
    """Daily calorie and macro targets."""

    daily_calories: int
    daily_protein: int
    daily_carbs: int
    daily_fats: int


@dataclass(frozen=True)
class MealItem:
    """Food portion copied into a meal at generation time."""

    name: str
    quantity: float
    unit: str
    calories: float
    protein: float
    carbs: float
    fats: float


@dataclass(frozen=True)
class Meal:
    """One meal slot of a daily plan."""

    meal_type: str
    items: list[MealItem]
    total_calories: int
    notes: str | None = None


@dataclass(frozen=True)
class DietPlan:
    """Daily plan for a user, unique per (user, date)."""

    user_id: UUID
    plan_date: date
    meals: list[Meal]
    targets: NutritionTargets
    generated_by_ai: bool
    id: UUID | None = None
