"""Priority-ordered fallback across generative backends."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from diet_planner.domain.errors import InvalidAIOutput, ProviderUnavailable
from diet_planner.domain.foods import FoodItem
from diet_planner.domain.plans import NutritionTargets
from diet_planner.domain.profile import ProfileSnapshot
from diet_planner.services.prompts import build_food_list_prompt, build_plan_prompt
from diet_planner.services.providers import ProviderAdapter
from diet_planner.services.validation import (
    ValidatedPlan,
    validate_food_list,
    validate_plan,
)

_logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class AIOrchestrator:
    """Try each enabled provider in order until one yields an accepted result.

    Providers are attempted one at a time. Any failure of a single provider,
    including transport errors its adapter did not translate, is logged and
    skipped. ``None`` means every
    provider was exhausted.
    """

    providers: list[ProviderAdapter]
    cuisine: str = "Pakistani"
    timeout_seconds: float = 45.0

    @property
    def enabled_providers(self) -> list[ProviderAdapter]:
        """Enabled providers in priority order."""
        return [provider for provider in self.providers if provider.enabled]

    async def generate_plan(
        self,
        profile: ProfileSnapshot,
        targets: NutritionTargets,
        foods: list[FoodItem],
    ) -> ValidatedPlan | None:
        """Generate a daily plan from the first provider that succeeds."""
        prompt = build_plan_prompt(profile, targets, foods, self.cuisine)
        return await self._first_success(
            prompt, lambda raw: validate_plan(raw, targets), purpose="diet plan"
        )

    async def generate_foods(self) -> list[FoodItem] | None:
        """Generate a regional food catalog from the first provider that succeeds."""
        prompt = build_food_list_prompt(self.cuisine)
        return await self._first_success(
            prompt, validate_food_list, purpose="food catalog"
        )

    async def _first_success(
        self, prompt: str, accept: Callable[[str], T], *, purpose: str
    ) -> T | None:
        for provider in self.enabled_providers:
            _logger.info(
                "Attempting %s generation with %s (%s)",
                purpose,
                provider.name,
                provider.model,
            )
            try:
                raw = await asyncio.wait_for(
                    provider.invoke(prompt), timeout=self.timeout_seconds
                )
                result = accept(raw)
            except TimeoutError:
                _logger.warning(
                    "%s timed out after %ss generating %s",
                    provider.name,
                    self.timeout_seconds,
                    purpose,
                )
                continue
            except (ProviderUnavailable, InvalidAIOutput) as exc:
                _logger.warning("%s failed generating %s: %s", provider.name, purpose, exc)
                continue
            except Exception:
                _logger.exception(
                    "%s raised unexpectedly generating %s", provider.name, purpose
                )
                continue
            _logger.info("Generated %s with %s", purpose, provider.name)
            return result
        _logger.info("All AI providers exhausted for %s", purpose)
        return None
