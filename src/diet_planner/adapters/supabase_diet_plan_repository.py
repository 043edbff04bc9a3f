"""Supabase repository for daily diet plans."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from uuid import UUID

from supabase import Client

from diet_planner.domain.plans import DietPlan, Meal, MealItem, NutritionTargets
from diet_planner.services.assembler import meal_payload
from diet_planner.services.diet_plans import DietPlanRepository


@dataclass
class SupabaseDietPlanRepository(DietPlanRepository):
    """Supabase implementation keyed by (user_id, plan_date)."""

    client: Client

    def get_plan(self, user_id: UUID, plan_date: date) -> DietPlan | None:
        """Return the plan for a user and day."""
        response = (
            self.client.table("diet_plans")
            .select("*")
            .eq("user_id", str(user_id))
            .eq("plan_date", plan_date.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_plan(response.data[0])

    def upsert_plan(self, plan: DietPlan) -> DietPlan:
        """Write the plan with a single ON CONFLICT upsert on (user_id, plan_date).

        The id column is never sent, so a regenerated plan keeps the id of the
        row it overwrites.
        """
        payload = {
            "user_id": str(plan.user_id),
            "plan_date": plan.plan_date.isoformat(),
            "meals": [meal_payload(meal) for meal in plan.meals],
            "daily_calories": plan.targets.daily_calories,
            "daily_protein": plan.targets.daily_protein,
            "daily_carbs": plan.targets.daily_carbs,
            "daily_fats": plan.targets.daily_fats,
            "generated_by_ai": plan.generated_by_ai,
            "updated_at": datetime.now(tz=UTC).isoformat(),
        }
        response = (
            self.client.table("diet_plans")
            .upsert(payload, on_conflict="user_id,plan_date")
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to upsert diet plan")
        return _parse_plan(response.data[0])


def _parse_plan(row: dict[str, object]) -> DietPlan:
    return DietPlan(
        id=UUID(str(row["id"])) if row.get("id") else None,
        user_id=UUID(str(row["user_id"])),
        plan_date=date.fromisoformat(str(row["plan_date"])[:10]),
        meals=[_parse_meal(meal) for meal in row.get("meals") or []],
        targets=NutritionTargets(
            daily_calories=int(row.get("daily_calories") or 0),
            daily_protein=int(row.get("daily_protein") or 0),
            daily_carbs=int(row.get("daily_carbs") or 0),
            daily_fats=int(row.get("daily_fats") or 0),
        ),
        generated_by_ai=bool(row.get("generated_by_ai", False)),
    )


def _parse_meal(raw: dict[str, object]) -> Meal:
    items = [
        MealItem(
            name=str(item.get("name", "")),
            quantity=float(item.get("quantity") or 0.0),
            unit=str(item.get("unit") or "grams"),
            calories=float(item.get("calories") or 0.0),
            protein=float(item.get("protein") or 0.0),
            carbs=float(item.get("carbs") or 0.0),
            fats=float(item.get("fats") or 0.0),
        )
        for item in raw.get("items") or []
    ]
    return Meal(
        meal_type=str(raw.get("mealType", "")),
        items=items,
        total_calories=int(raw.get("totalCalories") or 0),
        notes=raw.get("notes"),
    )
