"""Tests for the diet plan generation pipeline."""

import asyncio
import json
import threading
from datetime import date
from uuid import uuid4

import pytest

from diet_planner.domain.errors import (
    FoodCatalogExhausted,
    InvalidProfile,
    ProfileNotFound,
)
from diet_planner.domain.foods import FoodItem
from diet_planner.domain.profile import Allergy
from tests.conftest import reference_profile

_PLAN_DATE = date(2024, 3, 1)
_AI_PLAN = json.dumps(
    {
        "meals": [
            {
                "mealType": "breakfast",
                "items": [
                    {
                        "name": "Paratha",
                        "quantity": 100,
                        "unit": "grams",
                        "calories": 326,
                        "protein": 6,
                        "carbs": 45,
                        "fats": 13,
                    }
                ],
                "totalCalories": 326,
            }
        ]
    }
)


def test_ai_plan_is_stored(diet_plan_service, profile_repository, providers) -> None:
    user_id = uuid4()
    profile_repository.profiles[user_id] = reference_profile()
    providers[0].responses.append(_AI_PLAN)

    plan = asyncio.run(diet_plan_service.generate_for_user(user_id, _PLAN_DATE))

    assert plan.generated_by_ai is True
    assert plan.id is not None
    assert plan.targets.daily_calories == 2628
    assert plan.meals[0].items[0].name == "Paratha"
    assert asyncio.run(diet_plan_service.get_plan(user_id, _PLAN_DATE)) == plan


def test_rule_based_fallback_when_providers_fail(
    diet_plan_service, profile_repository, providers
) -> None:
    user_id = uuid4()
    profile_repository.profiles[user_id] = reference_profile()
    providers[0].responses.append("{broken")
    providers[1].responses.append(json.dumps({"meals": []}))

    plan = asyncio.run(diet_plan_service.generate_for_user(user_id, _PLAN_DATE))

    assert plan.generated_by_ai is False
    assert plan.meals
    assert plan.targets.daily_calories == 2628
    assert len(providers[0].prompts) == 1
    assert len(providers[1].prompts) == 1


def test_regeneration_keeps_single_record(
    diet_plan_service, profile_repository, plan_repository, providers
) -> None:
    user_id = uuid4()
    profile_repository.profiles[user_id] = reference_profile()
    providers[0].responses.append(_AI_PLAN)

    first = asyncio.run(diet_plan_service.generate_for_user(user_id, _PLAN_DATE))
    second = asyncio.run(diet_plan_service.generate_for_user(user_id, _PLAN_DATE))

    assert len(plan_repository.plans) == 1
    assert second.id == first.id
    assert second.generated_by_ai is False


def test_plan_date_defaults_to_today_in_profile_timezone(
    diet_plan_service, profile_repository
) -> None:
    user_id = uuid4()
    profile_repository.profiles[user_id] = reference_profile(timezone="Asia/Karachi")

    plan = asyncio.run(diet_plan_service.generate_for_user(user_id))

    assert plan.plan_date is not None
    assert asyncio.run(diet_plan_service.get_plan(user_id, plan.plan_date)) == plan


def test_missing_profile_is_reported(diet_plan_service) -> None:
    with pytest.raises(ProfileNotFound):
        asyncio.run(diet_plan_service.generate_for_user(uuid4(), _PLAN_DATE))


def test_invalid_profile_fails_before_any_provider_call(
    diet_plan_service, profile_repository, plan_repository, providers
) -> None:
    user_id = uuid4()
    profile_repository.profiles[user_id] = reference_profile(weight=None)

    with pytest.raises(InvalidProfile):
        asyncio.run(diet_plan_service.generate_for_user(user_id, _PLAN_DATE))

    assert all(provider.prompts == [] for provider in providers)
    assert plan_repository.plans == {}


def test_unknown_timezone_is_invalid(diet_plan_service, profile_repository) -> None:
    user_id = uuid4()
    profile_repository.profiles[user_id] = reference_profile(timezone="Mars/Olympus")

    with pytest.raises(InvalidProfile):
        asyncio.run(diet_plan_service.generate_for_user(user_id, _PLAN_DATE))


def test_allergic_to_everything_still_gets_a_plan(
    diet_plan_service, profile_repository, catalog
) -> None:
    catalog.foods = [
        FoodItem(
            name="Roti",
            calories=297,
            meal_types=("breakfast", "lunch", "dinner", "snack"),
            allergens=("wheat",),
            typical_serving=500,
        )
    ]
    user_id = uuid4()
    profile_repository.profiles[user_id] = reference_profile(
        allergies=(Allergy(name="wheat"),)
    )

    plan = asyncio.run(diet_plan_service.generate_for_user(user_id, _PLAN_DATE))

    assert plan.generated_by_ai is False
    assert {item.name for meal in plan.meals for item in meal.items} == {"Roti"}


def test_empty_catalog_after_seeding_is_exhausted(
    diet_plan_service, profile_repository, catalog, plan_repository, providers
) -> None:
    catalog.foods = [FoodItem(name="Water", calories=0)]
    diet_plan_service.food_limit = 0
    user_id = uuid4()
    profile_repository.profiles[user_id] = reference_profile()

    with pytest.raises(FoodCatalogExhausted):
        asyncio.run(diet_plan_service.generate_for_user(user_id, _PLAN_DATE))

    assert all(provider.prompts == [] for provider in providers)
    assert plan_repository.plans == {}


def test_empty_catalog_is_seeded_first(
    diet_plan_service, profile_repository, catalog
) -> None:
    catalog.foods = []
    user_id = uuid4()
    profile_repository.profiles[user_id] = reference_profile()

    plan = asyncio.run(diet_plan_service.generate_for_user(user_id, _PLAN_DATE))

    assert len(catalog.foods) == 21
    assert plan.meals


def test_get_plan_reads_repository_off_the_event_loop(
    diet_plan_service, plan_repository, monkeypatch
) -> None:
    threads: list[int] = []
    original = plan_repository.get_plan

    def recording_get_plan(user_id, plan_date):  # type: ignore[no-untyped-def]
        threads.append(threading.get_ident())
        return original(user_id, plan_date)

    monkeypatch.setattr(plan_repository, "get_plan", recording_get_plan)

    async def lookup() -> int:
        await diet_plan_service.get_plan(uuid4(), _PLAN_DATE)
        return threading.get_ident()

    loop_thread = asyncio.run(lookup())

    assert len(threads) == 1
    assert threads[0] != loop_thread
