"""Supabase implementation of the shared food catalog."""

from dataclasses import dataclass

from postgrest.exceptions import APIError
from supabase import Client

from diet_planner.domain.errors import DuplicateFoodError
from diet_planner.domain.foods import FoodFilter, FoodItem
from diet_planner.services.catalog import FoodCatalog

_UNIQUE_VIOLATION = "23505"


@dataclass
class SupabaseFoodCatalogRepository(FoodCatalog):
    """Supabase-backed food catalog."""

    client: Client

    def count(self) -> int:
        """Return the number of catalog rows."""
        response = (
            self.client.table("foods").select("id", count="exact").limit(1).execute()
        )
        if response.count is not None:
            return int(response.count)
        return len(response.data or [])

    def query(self, food_filter: FoodFilter) -> list[FoodItem]:
        """Return foods matching any of the flags and any of the meal types."""
        request = self.client.table("foods").select("*")
        if food_filter.any_flags:
            request = request.or_(
                ",".join(f"{flag}.eq.true" for flag in food_filter.any_flags)
            )
        if food_filter.meal_types:
            request = request.overlaps("meal_types", list(food_filter.meal_types))
        request = request.order("name")
        if food_filter.limit is not None:
            request = request.limit(food_filter.limit)
        response = request.execute()
        return [_parse_food(row) for row in response.data or []]

    def insert_many(self, foods: list[FoodItem]) -> int:
        """Insert foods, mapping unique-name collisions to DuplicateFoodError."""
        if not foods:
            return 0
        try:
            response = (
                self.client.table("foods")
                .insert([_food_row(food) for food in foods])
                .execute()
            )
        except APIError as exc:
            if exc.code == _UNIQUE_VIOLATION:
                raise DuplicateFoodError(exc.message or "duplicate food name") from exc
            raise
        return len(response.data or [])


def _food_row(food: FoodItem) -> dict[str, object]:
    return {
        "name": food.name,
        "calories": food.calories,
        "protein": food.protein,
        "carbs": food.carbs,
        "fats": food.fats,
        "meal_types": list(food.meal_types),
        "category": food.category,
        "is_vegetarian": food.is_vegetarian,
        "is_vegan": food.is_vegan,
        "is_gluten_free": food.is_gluten_free,
        "is_dairy_free": food.is_dairy_free,
        "allergens": list(food.allergens),
        "typical_serving": food.typical_serving,
        "serving_unit": food.serving_unit,
    }


def _parse_food(row: dict[str, object]) -> FoodItem:
    """Parse a catalog row into a domain model."""
    return FoodItem(
        name=str(row.get("name", "")),
        calories=float(row.get("calories") or 0.0),
        protein=float(row.get("protein") or 0.0),
        carbs=float(row.get("carbs") or 0.0),
        fats=float(row.get("fats") or 0.0),
        meal_types=tuple(row.get("meal_types") or ()),
        category=str(row.get("category") or "other"),
        is_vegetarian=bool(row.get("is_vegetarian", True)),
        is_vegan=bool(row.get("is_vegan", False)),
        is_gluten_free=bool(row.get("is_gluten_free", False)),
        is_dairy_free=bool(row.get("is_dairy_free", False)),
        allergens=tuple(row.get("allergens") or ()),
        typical_serving=float(row.get("typical_serving") or 100.0),
        serving_unit=str(row.get("serving_unit") or "grams"),
    )
