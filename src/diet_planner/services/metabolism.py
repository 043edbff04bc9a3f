"""Calorie and macro targets from a profile snapshot."""

import math
from dataclasses import dataclass
from datetime import date, datetime
from zoneinfo import ZoneInfo

from diet_planner.domain.errors import InvalidProfile
from diet_planner.domain.plans import NutritionTargets
from diet_planner.domain.profile import ProfileSnapshot

LBS_TO_KG = 0.453592
FT_TO_CM = 30.48
INCH_TO_CM = 2.54

MAX_AGE_YEARS = 130
MAX_WEIGHT_KG = 500.0
MAX_HEIGHT_CM = 300.0

DEFAULT_ACTIVITY_FACTOR = 1.55
ACTIVITY_FACTORS = {
    "sedentary": 1.2,
    "lightly_active": 1.375,
    "moderately_active": 1.55,
    "very_active": 1.725,
    "extremely_active": 1.9,
}

# Checked in order; only the first matching goal applies.
GOAL_ADJUSTMENTS = (
    ("weight_loss", 0.85),
    ("weight_gain", 1.15),
    ("muscle_gain", 1.10),
)

PROTEIN_SHARE = 0.25
CARBS_SHARE = 0.45
FATS_SHARE = 0.30
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9


@dataclass(frozen=True)
class BodyMetrics:
    """Normalized body measurements."""

    age: int
    weight_kg: float
    height_cm: float

    @property
    def bmi(self) -> float:
        """Body mass index."""
        height_m = self.height_cm / 100
        return self.weight_kg / (height_m * height_m)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return math.floor(value + 0.5)


def calculate_targets(
    profile: ProfileSnapshot, today: date | None = None
) -> NutritionTargets:
    """Compute daily calorie and macro targets for a profile."""
    metrics = resolve_metrics(profile, today)
    bmr = basal_metabolic_rate(profile.gender, metrics)
    factor = ACTIVITY_FACTORS.get(profile.activity_level or "", DEFAULT_ACTIVITY_FACTOR)
    calories = round_half_up(bmr * factor)
    for goal, multiplier in GOAL_ADJUSTMENTS:
        if goal in profile.health_goals:
            calories = round_half_up(calories * multiplier)
            break
    return NutritionTargets(
        daily_calories=calories,
        daily_protein=round_half_up(calories * PROTEIN_SHARE / KCAL_PER_G_PROTEIN),
        daily_carbs=round_half_up(calories * CARBS_SHARE / KCAL_PER_G_CARBS),
        daily_fats=round_half_up(calories * FATS_SHARE / KCAL_PER_G_FAT),
    )


def basal_metabolic_rate(gender: str | None, metrics: BodyMetrics) -> float:
    """Harris-Benedict BMR."""
    if gender == "male":
        return (
            88.362
            + 13.397 * metrics.weight_kg
            + 4.799 * metrics.height_cm
            - 5.677 * metrics.age
        )
    return (
        447.593
        + 9.247 * metrics.weight_kg
        + 3.098 * metrics.height_cm
        - 4.330 * metrics.age
    )


def resolve_metrics(profile: ProfileSnapshot, today: date | None = None) -> BodyMetrics:
    """Validate the profile and normalize units."""
    age = resolve_age(profile, today)
    if age is None or age <= 0 or age > MAX_AGE_YEARS:
        raise InvalidProfile(f"age must be between 1 and {MAX_AGE_YEARS}")
    if profile.weight is None or profile.weight <= 0:
        raise InvalidProfile("weight must be positive")
    if profile.height is None or profile.height <= 0:
        raise InvalidProfile("height must be positive")

    weight_kg = weight_in_kg(profile.weight, profile.weight_unit)
    height_cm = height_in_cm(profile.height, profile.height_unit)
    if weight_kg > MAX_WEIGHT_KG:
        raise InvalidProfile(f"weight must be at most {MAX_WEIGHT_KG:g} kg")
    if height_cm > MAX_HEIGHT_CM:
        raise InvalidProfile(f"height must be at most {MAX_HEIGHT_CM:g} cm")
    return BodyMetrics(age=age, weight_kg=weight_kg, height_cm=height_cm)


def resolve_age(profile: ProfileSnapshot, today: date | None = None) -> int | None:
    """Return the explicit age, or derive it from the date of birth."""
    if profile.age is not None:
        return profile.age
    if profile.date_of_birth is None:
        return None
    if today is None:
        today = datetime.now(tz=ZoneInfo(profile.timezone)).date()
    return age_on(profile.date_of_birth, today)


def age_on(date_of_birth: date, today: date) -> int:
    """Completed years between a birth date and a given day."""
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


def weight_in_kg(weight: float, unit: str | None) -> float:
    """Convert a weight to kilograms."""
    normalized = (unit or "kg").lower()
    if normalized == "kg":
        return float(weight)
    if normalized in {"lbs", "lb"}:
        return weight * LBS_TO_KG
    raise InvalidProfile(f"unsupported weight unit: {unit}")


def height_in_cm(height: float, unit: str | None) -> float:
    """Convert a height to centimeters."""
    normalized = (unit or "cm").lower()
    if normalized == "cm":
        return float(height)
    if normalized == "ft":
        return height * FT_TO_CM
    if normalized in {"inches", "in"}:
        return height * INCH_TO_CM
    raise InvalidProfile(f"unsupported height unit: {unit}")
