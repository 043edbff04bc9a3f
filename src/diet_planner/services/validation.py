"""Acceptance checks for backend responses."""

import logging
from dataclasses import dataclass

from pydantic import ValidationError

from diet_planner.domain.errors import InvalidAIOutput
from diet_planner.domain.foods import FoodItem
from diet_planner.domain.generation import (
    GeneratedFood,
    GeneratedFoodList,
    GeneratedMeal,
    GeneratedMealItem,
    GeneratedPlan,
)
from diet_planner.domain.plans import Meal, MealItem, NutritionTargets
from diet_planner.services.metabolism import round_half_up

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidatedPlan:
    """Meals and targets accepted from a backend response."""

    meals: list[Meal]
    targets: NutritionTargets


def validate_plan(raw: str, targets: NutritionTargets) -> ValidatedPlan:
    """Parse a plan response, rejecting it with InvalidAIOutput when unusable.

    The response is rejected only when it does not parse, has no meals, or
    has no meal left with items. Malformed meals and items are dropped on
    their own, meal totals are recomputed from the surviving items, and
    missing daily targets are filled in from ``targets``. Item calories are
    taken as given.
    """
    try:
        payload = GeneratedPlan.model_validate_json(raw)
    except ValidationError as exc:
        raise InvalidAIOutput(f"unparseable plan: {exc.error_count()} errors") from exc
    if not payload.meals:
        raise InvalidAIOutput("response contains no meals")
    meals: list[Meal] = []
    for raw_meal in payload.meals:
        meal = _parse_meal(raw_meal)
        if meal is not None and meal.items:
            meals.append(meal)
    if not meals:
        raise InvalidAIOutput("no meal with usable items")
    return ValidatedPlan(
        meals=meals,
        targets=NutritionTargets(
            daily_calories=_or_default(payload.daily_calories, targets.daily_calories),
            daily_protein=_or_default(payload.daily_protein, targets.daily_protein),
            daily_carbs=_or_default(payload.daily_carbs, targets.daily_carbs),
            daily_fats=_or_default(payload.daily_fats, targets.daily_fats),
        ),
    )


def validate_food_list(raw: str) -> list[FoodItem]:
    """Parse a generated catalog, keeping the first valid entry for each name."""
    try:
        payload = GeneratedFoodList.model_validate_json(raw)
    except ValidationError as exc:
        raise InvalidAIOutput(f"unparseable food list: {exc.error_count()} errors") from exc
    foods: list[FoodItem] = []
    seen: set[str] = set()
    for raw_food in payload.foods:
        try:
            food = GeneratedFood.model_validate(raw_food)
        except ValidationError as exc:
            _logger.warning("Dropping invalid generated food: %s", _summary(exc))
            continue
        key = food.name.strip().lower()
        if key in seen:
            continue
        seen.add(key)
        foods.append(
            FoodItem(
                name=food.name.strip(),
                calories=food.calories,
                protein=food.protein,
                carbs=food.carbs,
                fats=food.fats,
                meal_types=tuple(meal_type.lower() for meal_type in food.meal_type),
                category=food.category.lower(),
                is_vegetarian=food.is_vegetarian,
                is_vegan=food.is_vegan,
                is_gluten_free=food.is_gluten_free,
                is_dairy_free=food.is_dairy_free,
                allergens=tuple(allergen.lower() for allergen in food.allergens),
                typical_serving=food.typical_serving,
                serving_unit=food.serving_unit,
            )
        )
    if not foods:
        raise InvalidAIOutput("response contains no usable foods")
    return foods


def _parse_meal(raw_meal: object) -> Meal | None:
    try:
        meal = GeneratedMeal.model_validate(raw_meal)
    except ValidationError as exc:
        _logger.warning("Dropping invalid meal from plan: %s", _summary(exc))
        return None
    items: list[MealItem] = []
    for raw_item in meal.items:
        try:
            item = GeneratedMealItem.model_validate(raw_item)
        except ValidationError as exc:
            _logger.warning(
                "Dropping invalid %s item from plan: %s", meal.meal_type, _summary(exc)
            )
            continue
        items.append(
            MealItem(
                name=item.name,
                quantity=item.quantity,
                unit=item.unit,
                calories=item.calories,
                protein=item.protein,
                carbs=item.carbs,
                fats=item.fats,
            )
        )
    return Meal(
        meal_type=meal.meal_type,
        items=items,
        total_calories=round_half_up(sum(item.calories for item in items)),
        notes=meal.notes,
    )


def _summary(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc']) or 'value'}: {error['msg']}"
        for error in exc.errors()
    )


def _or_default(value: float | None, default: int) -> int:
    if value is None:
        return default
    return round_half_up(value)
