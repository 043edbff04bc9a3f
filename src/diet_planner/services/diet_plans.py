"""Daily diet-plan generation pipeline."""

import asyncio
import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from diet_planner.domain.errors import (
    FoodCatalogExhausted,
    InvalidProfile,
    ProfileNotFound,
)
from diet_planner.domain.plans import DietPlan
from diet_planner.domain.profile import ProfileSnapshot
from diet_planner.services.assembler import assemble_ai_plan, assemble_rule_based_plan
from diet_planner.services.catalog import CatalogSeeder, FoodCatalog
from diet_planner.services.composer import RuleBasedMealComposer
from diet_planner.services.food_filters import select_candidate_foods
from diet_planner.services.metabolism import calculate_targets
from diet_planner.services.orchestrator import AIOrchestrator

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Read access to user profiles."""

    def get_profile(self, user_id: UUID) -> ProfileSnapshot | None:
        """Return the profile for a user, if present."""


class DietPlanRepository(Protocol):
    """Persistence interface for daily plans."""

    def get_plan(self, user_id: UUID, plan_date: date) -> DietPlan | None:
        """Return the plan for a user and day, if present."""

    def upsert_plan(self, plan: DietPlan) -> DietPlan:
        """Atomically insert or overwrite the plan for its (user, day) key."""


@dataclass
class DietPlanService:
    """Compute targets, try providers, fall back to rules, and store the plan."""

    profile_repository: ProfileRepository
    plan_repository: DietPlanRepository
    catalog: FoodCatalog
    seeder: CatalogSeeder
    orchestrator: AIOrchestrator
    composer: RuleBasedMealComposer
    food_limit: int | None = 200

    async def generate_for_user(
        self, user_id: UUID, plan_date: date | None = None
    ) -> DietPlan:
        """Generate and store the plan for a user's day (today by default)."""
        profile = await asyncio.to_thread(self.profile_repository.get_profile, user_id)
        if profile is None:
            raise ProfileNotFound(f"no profile for user {user_id}")
        today = local_today(profile.timezone)
        return await self.generate(user_id, profile, plan_date or today, today=today)

    async def generate(
        self,
        user_id: UUID,
        profile: ProfileSnapshot,
        plan_date: date,
        today: date | None = None,
    ) -> DietPlan:
        """Run the pipeline for an already loaded profile."""
        targets = calculate_targets(profile, today)
        await self.seeder.ensure_seeded()
        foods = await select_candidate_foods(self.catalog, profile, self.food_limit)
        if not foods:
            raise FoodCatalogExhausted("no foods available after filtering")

        validated = await self.orchestrator.generate_plan(profile, targets, foods)
        if validated is not None:
            plan = assemble_ai_plan(user_id, plan_date, validated)
        else:
            _logger.info("Falling back to rule-based plan for user %s", user_id)
            meals = self.composer.compose(targets, foods)
            plan = assemble_rule_based_plan(user_id, plan_date, meals, targets)

        stored = await asyncio.to_thread(self.plan_repository.upsert_plan, plan)
        _logger.info(
            "Stored diet plan for user %s on %s (ai=%s, meals=%s)",
            user_id,
            plan_date.isoformat(),
            stored.generated_by_ai,
            len(stored.meals),
        )
        return stored

    async def get_plan(self, user_id: UUID, plan_date: date) -> DietPlan | None:
        """Return a stored plan."""
        return await asyncio.to_thread(
            self.plan_repository.get_plan, user_id, plan_date
        )


def local_today(timezone_name: str) -> date:
    """Return today's date in the given IANA timezone."""
    try:
        tz = ZoneInfo(timezone_name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidProfile(f"unknown timezone: {timezone_name}") from exc
    return datetime.now(tz=tz).date()
