"""Assemble the persisted plan value from whichever path succeeded."""

from datetime import date
from uuid import UUID

from diet_planner.domain.plans import DietPlan, Meal, NutritionTargets
from diet_planner.services.validation import ValidatedPlan


def assemble_ai_plan(user_id: UUID, plan_date: date, validated: ValidatedPlan) -> DietPlan:
    """Plan built from a validated backend response."""
    return DietPlan(
        user_id=user_id,
        plan_date=plan_date,
        meals=validated.meals,
        targets=validated.targets,
        generated_by_ai=True,
    )


def assemble_rule_based_plan(
    user_id: UUID, plan_date: date, meals: list[Meal], targets: NutritionTargets
) -> DietPlan:
    """Plan built by the rule-based composer."""
    return DietPlan(
        user_id=user_id,
        plan_date=plan_date,
        meals=meals,
        targets=targets,
        generated_by_ai=False,
    )


def meal_payload(meal: Meal) -> dict[str, object]:
    """Serialize a meal in the camelCase plan shape."""
    return {
        "mealType": meal.meal_type,
        "items": [
            {
                "name": item.name,
                "quantity": item.quantity,
                "unit": item.unit,
                "calories": item.calories,
                "protein": item.protein,
                "carbs": item.carbs,
                "fats": item.fats,
            }
            for item in meal.items
        ],
        "totalCalories": meal.total_calories,
        "notes": meal.notes,
    }


def plan_payload(plan: DietPlan) -> dict[str, object]:
    """Serialize a plan in the output shape returned to callers."""
    return {
        "id": str(plan.id) if plan.id else None,
        "date": plan.plan_date.isoformat(),
        "meals": [meal_payload(meal) for meal in plan.meals],
        "dailyCalories": plan.targets.daily_calories,
        "dailyProtein": plan.targets.daily_protein,
        "dailyCarbs": plan.targets.daily_carbs,
        "dailyFats": plan.targets.daily_fats,
        "generatedByAI": plan.generated_by_ai,
    }
