"""Catalog-driven meal composition used when every provider fails."""

import logging
import random
from dataclasses import dataclass, field

from diet_planner.domain.errors import FoodCatalogExhausted
from diet_planner.domain.foods import FoodItem
from diet_planner.domain.plans import Meal, MealItem, NutritionTargets
from diet_planner.services.metabolism import round_half_up

_logger = logging.getLogger(__name__)

SLOT_SHARES = (
    ("breakfast", 0.25),
    ("lunch", 0.35),
    ("dinner", 0.30),
    ("snack", 0.10),
)
SNACK_CATEGORIES = frozenset({"snack", "dessert"})
SNACK_NOTE = "Healthy snack option"
MAX_ITEMS = 4
MAX_SNACK_ITEMS = 2
SERVING_CAP_MULTIPLIER = 2
STOP_RATIO = 0.9
DEFICIT_RATIO = 0.8
MAX_BOOST_RATIO = 0.5


@dataclass
class RuleBasedMealComposer:
    """Greedy per-slot composer.

    The random source only decides the order in which candidates are offered,
    so a seeded ``rng`` makes the output fully reproducible.
    """

    rng: random.Random = field(default_factory=random.Random)

    def compose(self, targets: NutritionTargets, foods: list[FoodItem]) -> list[Meal]:
        """Compose the day's meals, omitting slots that end up empty."""
        if not foods:
            raise FoodCatalogExhausted("no foods available for rule-based generation")
        _logger.info("Using rule-based generation with %s foods", len(foods))
        meals: list[Meal] = []
        for meal_type, share in SLOT_SHARES:
            target = round_half_up(targets.daily_calories * share)
            meal = self.compose_meal(meal_type, target, foods)
            if meal.items:
                meals.append(meal)
            else:
                _logger.warning("No foods could be portioned for %s", meal_type)
        if not meals:
            raise FoodCatalogExhausted("rule-based generation produced no meals")
        return meals

    def compose_meal(
        self, meal_type: str, target_calories: int, foods: list[FoodItem]
    ) -> Meal:
        """Fill one meal slot towards its calorie target."""
        candidates = _candidates_for(meal_type, foods)
        self.rng.shuffle(candidates)
        max_items = MAX_SNACK_ITEMS if meal_type == "snack" else MAX_ITEMS

        items: list[MealItem] = []
        total = 0.0
        for food in candidates:
            if len(items) >= max_items:
                break
            serving = _serving_size(food, target_calories - total)
            if serving <= 0:
                continue
            item = _portion(food, serving)
            items.append(item)
            total += item.calories
            if total >= target_calories * STOP_RATIO:
                break

        if items and total < target_calories * DEFICIT_RATIO:
            items[0] = _boost(items[0], target_calories - total)
            total = sum(item.calories for item in items)

        return Meal(
            meal_type=meal_type,
            items=items,
            total_calories=round_half_up(total),
            notes=SNACK_NOTE if meal_type == "snack" else None,
        )


def _candidates_for(meal_type: str, foods: list[FoodItem]) -> list[FoodItem]:
    suitable = [
        food
        for food in foods
        if meal_type in food.meal_types
        or (meal_type == "snack" and food.category in SNACK_CATEGORIES)
    ]
    if not suitable:
        _logger.info("No foods tagged for %s, using all available foods", meal_type)
        return list(foods)
    return suitable


def _serving_size(food: FoodItem, remaining_calories: float) -> float:
    cap = food.typical_serving * SERVING_CAP_MULTIPLIER
    if food.calories <= 0:
        return cap if remaining_calories > 0 else 0
    return min(round_half_up(remaining_calories / food.calories * 100), cap)


def _portion(food: FoodItem, serving: float) -> MealItem:
    factor = serving / 100
    return MealItem(
        name=food.name,
        quantity=serving,
        unit=food.serving_unit or "grams",
        calories=round_half_up(food.calories * factor),
        protein=round_half_up(food.protein * factor),
        carbs=round_half_up(food.carbs * factor),
        fats=round_half_up(food.fats * factor),
    )


def _boost(item: MealItem, deficit: float) -> MealItem:
    """Scale a single item up by at most half of its own calories."""
    if item.calories <= 0:
        return item
    added = min(deficit, item.calories * MAX_BOOST_RATIO)
    multiplier = 1 + added / item.calories
    return MealItem(
        name=item.name,
        quantity=round_half_up(item.quantity * multiplier),
        unit=item.unit,
        calories=round_half_up(item.calories * multiplier),
        protein=round_half_up(item.protein * multiplier),
        carbs=round_half_up(item.carbs * multiplier),
        fats=round_half_up(item.fats * multiplier),
    )
