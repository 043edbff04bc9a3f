"""Candidate food selection with soft dietary and allergen filters."""

import asyncio
import logging

from diet_planner.domain.foods import FoodFilter, FoodItem
from diet_planner.domain.profile import ProfileSnapshot
from diet_planner.services.catalog import FoodCatalog

_logger = logging.getLogger(__name__)

PREFERENCE_FLAGS = {
    "vegetarian": "is_vegetarian",
    "vegan": "is_vegan",
    "gluten_free": "is_gluten_free",
    "dairy_free": "is_dairy_free",
}


async def select_candidate_foods(
    catalog: FoodCatalog, profile: ProfileSnapshot, limit: int | None = None
) -> list[FoodItem]:
    """Return the foods a plan may use for this profile.

    Both filters are soft: a filter that would leave no candidates is dropped.
    """
    foods = await asyncio.to_thread(catalog.query, FoodFilter(limit=limit))
    flags = preference_flags(profile.dietary_preferences)
    if flags:
        preferred = await asyncio.to_thread(
            catalog.query, FoodFilter(any_flags=flags, limit=limit)
        )
        if preferred:
            _logger.info("Found %s foods matching dietary preferences", len(preferred))
            foods = preferred
        else:
            _logger.info("No foods match dietary preferences, using all foods")
    return filter_allergens(foods, profile.allergy_names)


def preference_flags(preferences: frozenset[str] | set[str]) -> tuple[str, ...]:
    """Map dietary preferences to catalog flag names, in a stable order."""
    return tuple(
        flag for preference, flag in PREFERENCE_FLAGS.items() if preference in preferences
    )


def filter_allergens(foods: list[FoodItem], allergy_names: set[str]) -> list[FoodItem]:
    """Drop foods containing any of the user's allergens, unless none would remain."""
    if not allergy_names:
        return foods
    safe = [
        food
        for food in foods
        if not {allergen.lower() for allergen in food.allergens} & allergy_names
    ]
    _logger.info("After allergen filtering: %s foods available", len(safe))
    if not safe and foods:
        _logger.warning(
            "All %s foods contain user allergens; using them anyway", len(foods)
        )
        return foods
    return safe
