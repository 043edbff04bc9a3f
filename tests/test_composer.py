"""Tests for the rule-based meal composer."""

import random

import pytest

from diet_planner.domain.errors import FoodCatalogExhausted
from diet_planner.domain.foods import FoodItem
from diet_planner.domain.plans import NutritionTargets
from diet_planner.services.builtin_foods import builtin_foods
from diet_planner.services.composer import SNACK_NOTE, RuleBasedMealComposer
from diet_planner.services.metabolism import calculate_targets
from tests.conftest import reference_profile

TARGETS = NutritionTargets(
    daily_calories=2628, daily_protein=164, daily_carbs=296, daily_fats=88
)


def test_compose_respects_slot_order_and_item_caps() -> None:
    meals = RuleBasedMealComposer(rng=random.Random(1)).compose(TARGETS, builtin_foods())

    assert [meal.meal_type for meal in meals] == ["breakfast", "lunch", "dinner", "snack"]
    for meal in meals:
        cap = 2 if meal.meal_type == "snack" else 4
        assert 1 <= len(meal.items) <= cap
        assert meal.total_calories == round(sum(item.calories for item in meal.items))
    assert meals[-1].notes == SNACK_NOTE


def test_same_seed_gives_same_plan() -> None:
    first = RuleBasedMealComposer(rng=random.Random(42)).compose(TARGETS, builtin_foods())
    second = RuleBasedMealComposer(rng=random.Random(42)).compose(TARGETS, builtin_foods())

    assert first == second


def test_large_servings_land_within_tolerance() -> None:
    foods = [
        FoodItem(
            name="Khichdi",
            calories=100,
            protein=4,
            carbs=18,
            fats=2,
            meal_types=("breakfast", "lunch", "dinner", "snack"),
            typical_serving=1000,
        )
    ]

    meals = RuleBasedMealComposer(rng=random.Random(3)).compose(TARGETS, foods)

    total = sum(meal.total_calories for meal in meals)
    assert abs(total - TARGETS.daily_calories) <= TARGETS.daily_calories * 0.2
    assert [meal.total_calories for meal in meals] == [657, 920, 788, 263]


def test_short_meal_boosts_first_item() -> None:
    foods = [
        FoodItem(
            name="Boiled Egg",
            calories=100,
            protein=13,
            fats=10,
            meal_types=("breakfast",),
            typical_serving=50,
        )
    ]

    meal = RuleBasedMealComposer(rng=random.Random(0)).compose_meal(
        "breakfast", 500, foods
    )

    assert len(meal.items) == 1
    assert meal.items[0].quantity == 150
    assert meal.items[0].calories == 150
    assert meal.total_calories == 150


def test_untagged_slot_falls_back_to_all_foods() -> None:
    foods = [FoodItem(name="Raita", calories=60, meal_types=("side",))]

    meal = RuleBasedMealComposer(rng=random.Random(0)).compose_meal("lunch", 100, foods)

    assert [item.name for item in meal.items] == ["Raita"]


def test_snack_slot_admits_desserts() -> None:
    foods = [
        FoodItem(name="Kheer", calories=150, category="dessert", typical_serving=150),
        FoodItem(name="Biryani", calories=200, meal_types=("lunch",)),
    ]

    meal = RuleBasedMealComposer(rng=random.Random(0)).compose_meal("snack", 260, foods)

    assert [item.name for item in meal.items] == ["Kheer"]
    assert meal.notes == SNACK_NOTE


def test_empty_catalog_is_exhausted() -> None:
    with pytest.raises(FoodCatalogExhausted):
        RuleBasedMealComposer().compose(TARGETS, [])


@pytest.mark.parametrize(
    "health_goals", [(), ("weight_loss",), ("weight_gain",), ("muscle_gain",)]
)
def test_builtin_catalog_stays_within_a_fifth_of_target(health_goals) -> None:
    targets = calculate_targets(reference_profile(health_goals=health_goals))

    for seed in range(50):
        meals = RuleBasedMealComposer(rng=random.Random(seed)).compose(
            targets, builtin_foods()
        )

        assert 1 <= len(meals) <= 4
        assert all(meal.items for meal in meals)
        total = sum(meal.total_calories for meal in meals)
        assert abs(total - targets.daily_calories) <= targets.daily_calories * 0.2
