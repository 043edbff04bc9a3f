"""Food catalog domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FoodItem:
    """Catalog entry with nutrition per 100g."""

    name: str
    calories: float
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0
    meal_types: tuple[str, ...] = ()
    category: str = "other"
    is_vegetarian: bool = True
    is_vegan: bool = False
    is_gluten_free: bool = False
    is_dairy_free: bool = False
    allergens: tuple[str, ...] = ()
    typical_serving: float = 100.0
    serving_unit: str = "grams"


@dataclass(frozen=True)
class FoodFilter:
    """Catalog query filter.

    ``any_flags`` holds dietary flag names (``is_vegetarian``, ``is_vegan``, ...)
    combined with OR. An empty filter matches every food.
    """

    any_flags: tuple[str, ...] = ()
    meal_types: tuple[str, ...] = ()
    limit: int | None = None
