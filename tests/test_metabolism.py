"""Tests for nutrition target calculation."""

from datetime import date

import pytest

from diet_planner.domain.errors import InvalidProfile
from diet_planner.services.metabolism import (
    age_on,
    calculate_targets,
    height_in_cm,
    resolve_metrics,
    round_half_up,
    weight_in_kg,
)
from tests.conftest import reference_profile


def test_reference_profile_targets() -> None:
    targets = calculate_targets(reference_profile())

    assert targets.daily_calories == 2628
    assert targets.daily_protein == 164
    assert targets.daily_carbs == 296
    assert targets.daily_fats == 88


def test_weight_loss_goal_reduces_calories() -> None:
    targets = calculate_targets(reference_profile(health_goals=("weight_loss",)))
    assert targets.daily_calories == 2234


def test_only_first_matching_goal_applies() -> None:
    targets = calculate_targets(
        reference_profile(health_goals=("muscle_gain", "weight_loss"))
    )
    # weight_loss is checked before muscle_gain
    assert targets.daily_calories == 2234


def test_female_sedentary_targets() -> None:
    profile = reference_profile(
        gender="female", weight=60, height=165, activity_level="sedentary"
    )
    assert calculate_targets(profile).daily_calories == 1660


def test_unknown_activity_level_uses_moderate_factor() -> None:
    profile = reference_profile(activity_level="couch")
    assert calculate_targets(profile).daily_calories == 2628


def test_macros_stay_close_to_calories() -> None:
    for goals in ((), ("weight_loss",), ("weight_gain",), ("muscle_gain",)):
        targets = calculate_targets(reference_profile(health_goals=goals))
        macro_kcal = (
            targets.daily_protein * 4 + targets.daily_carbs * 4 + targets.daily_fats * 9
        )
        assert abs(macro_kcal - targets.daily_calories) <= 8.5


def test_imperial_units_match_metric() -> None:
    imperial = reference_profile(
        weight=70 / 0.453592, weight_unit="lbs", height=175 / 2.54, height_unit="inches"
    )
    assert calculate_targets(imperial) == calculate_targets(reference_profile())


def test_unit_conversions() -> None:
    assert weight_in_kg(100, "lbs") == pytest.approx(45.3592)
    assert height_in_cm(6, "ft") == pytest.approx(182.88)
    assert height_in_cm(70, "inches") == pytest.approx(177.8)
    with pytest.raises(InvalidProfile):
        weight_in_kg(70, "stone")


def test_age_derived_from_date_of_birth() -> None:
    profile = reference_profile(age=None, date_of_birth=date(1994, 6, 15))

    assert resolve_metrics(profile, today=date(2024, 6, 14)).age == 29
    assert resolve_metrics(profile, today=date(2024, 6, 15)).age == 30
    assert age_on(date(2000, 2, 29), date(2001, 2, 28)) == 0


@pytest.mark.parametrize(
    "overrides",
    [
        {"age": 0},
        {"age": None},
        {"age": 131},
        {"weight": 0},
        {"weight": None},
        {"weight": 600},
        {"height": -1},
        {"height": 400},
        {"height_unit": "furlong"},
    ],
)
def test_invalid_profiles_are_rejected(overrides: dict[str, object]) -> None:
    with pytest.raises(InvalidProfile):
        calculate_targets(reference_profile(**overrides))


def test_round_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.49) == 2
