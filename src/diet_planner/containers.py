"""Dependency container wiring for the application."""

import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

import httpx
from supabase import create_client

from diet_planner.adapters.gemini_provider import GeminiProvider
from diet_planner.adapters.openai_compatible_provider import OpenAICompatibleProvider
from diet_planner.adapters.supabase_diet_plan_repository import (
    SupabaseDietPlanRepository,
)
from diet_planner.adapters.supabase_food_catalog_repository import (
    SupabaseFoodCatalogRepository,
)
from diet_planner.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from diet_planner.config import Settings, parse_provider_order
from diet_planner.services.catalog import CatalogSeeder
from diet_planner.services.composer import RuleBasedMealComposer
from diet_planner.services.diet_plans import DietPlanService
from diet_planner.services.orchestrator import AIOrchestrator
from diet_planner.services.prompts import system_prompt
from diet_planner.services.providers import ProviderAdapter


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    orchestrator: AIOrchestrator
    catalog_seeder: CatalogSeeder
    diet_plan_service: DietPlanService
    close_resources: Callable[[], Awaitable[None]]


def build_provider_adapters(
    settings: Settings, http_client: httpx.AsyncClient | None = None
) -> list[ProviderAdapter]:
    """Build adapters for every provider with an API key, in priority order."""
    prompt = system_prompt(settings.cuisine)
    adapters: dict[str, ProviderAdapter] = {}
    compatible = {
        "openai": (
            settings.openai_api_key,
            settings.openai_model,
            settings.openai_base_url,
        ),
        "deepseek": (
            settings.deepseek_api_key,
            settings.deepseek_model,
            settings.deepseek_base_url,
        ),
        "qwen": (settings.qwen_api_key, settings.qwen_model, settings.qwen_base_url),
    }
    for name, (api_key, model, base_url) in compatible.items():
        if api_key:
            adapters[name] = OpenAICompatibleProvider.create(
                name=name,
                api_key=api_key,
                model=model,
                system_prompt=prompt,
                temperature=settings.ai_temperature,
                base_url=base_url,
                http_client=http_client,
            )
    if settings.gemini_api_key:
        adapters["gemini"] = GeminiProvider.create(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            system_prompt=prompt,
            temperature=settings.ai_temperature,
        )
    return [
        adapters[name]
        for name in parse_provider_order(settings.ai_provider_order)
        if name in adapters
    ]


def build_container(
    settings: Settings | None = None, rng: random.Random | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    catalog = SupabaseFoodCatalogRepository(supabase_client)
    http_client = httpx.AsyncClient()
    orchestrator = AIOrchestrator(
        providers=build_provider_adapters(resolved_settings, http_client),
        cuisine=resolved_settings.cuisine,
        timeout_seconds=resolved_settings.ai_provider_timeout_seconds,
    )
    catalog_seeder = CatalogSeeder(catalog=catalog, generator=orchestrator)
    diet_plan_service = DietPlanService(
        profile_repository=SupabaseProfileRepository(supabase_client),
        plan_repository=SupabaseDietPlanRepository(supabase_client),
        catalog=catalog,
        seeder=catalog_seeder,
        orchestrator=orchestrator,
        composer=RuleBasedMealComposer(rng=rng or random.Random()),
        food_limit=resolved_settings.food_catalog_limit,
    )

    async def close_resources() -> None:
        for provider in orchestrator.providers:
            if isinstance(provider, GeminiProvider):
                await provider.close()
        await http_client.aclose()

    return AppContainer(
        settings=resolved_settings,
        orchestrator=orchestrator,
        catalog_seeder=catalog_seeder,
        diet_plan_service=diet_plan_service,
        close_resources=close_resources,
    )
