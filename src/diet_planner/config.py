"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

KNOWN_PROVIDERS = ("openai", "deepseek", "gemini", "qwen")


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    A provider is enabled when its API key is set.
    """

    supabase_url: str
    supabase_service_key: str
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o-mini"
    openai_base_url: str | None = None
    deepseek_api_key: str | None = None
    deepseek_model: str = "deepseek-chat"
    deepseek_base_url: str = "https://api.deepseek.com"
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.0-flash"
    qwen_api_key: str | None = None
    qwen_model: str = "qwen-turbo"
    qwen_base_url: str = "https://dashscope-intl.aliyuncs.com/compatible-mode/v1"
    ai_provider_order: str | None = None
    ai_provider_timeout_seconds: float = 45.0
    ai_temperature: float = 0.7
    food_catalog_limit: int = 200
    cuisine: str = "Pakistani"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_provider_order(raw: str | None) -> list[str]:
    """Parse the comma-separated provider priority list from env."""
    if raw is None:
        return list(KNOWN_PROVIDERS)
    order: list[str] = []
    for chunk in raw.split(","):
        value = chunk.strip().lower()
        if value in KNOWN_PROVIDERS and value not in order:
            order.append(value)
    return order or list(KNOWN_PROVIDERS)
