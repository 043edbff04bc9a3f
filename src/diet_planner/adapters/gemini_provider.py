"""Gemini provider using the google-genai SDK."""

import re
from dataclasses import dataclass

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types as genai_types

from diet_planner.domain.errors import ProviderUnavailable
from diet_planner.services.providers import ProviderAdapter

_FENCE_PATTERN = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


@dataclass
class GeminiProvider(ProviderAdapter):
    """Provider backed by Gemini's async generate_content."""

    model: str
    client: genai.Client
    system_prompt: str
    temperature: float = 0.7
    name: str = "gemini"
    enabled: bool = True

    @classmethod
    def create(
        cls, *, api_key: str, model: str, system_prompt: str, temperature: float
    ) -> "GeminiProvider":
        """Create a Gemini provider."""
        return cls(
            model=model,
            client=genai.Client(api_key=api_key),
            system_prompt=system_prompt,
            temperature=temperature,
        )

    async def invoke(self, prompt: str) -> str:
        """Request JSON output and strip any markdown fence around it."""
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=genai_types.GenerateContentConfig(
                    system_instruction=self.system_prompt,
                    response_mime_type="application/json",
                    temperature=self.temperature,
                ),
            )
        except (genai_errors.APIError, httpx.HTTPError) as exc:
            raise ProviderUnavailable(self.name, str(exc)) from exc
        text = response.text
        if not text or not text.strip():
            raise ProviderUnavailable(self.name, "empty response")
        return strip_markdown_fence(text)

    async def close(self) -> None:
        """Release the SDK's async transport."""
        await self.client.aio.aclose()


def strip_markdown_fence(text: str) -> str:
    """Return the body of a ```json fenced block, or the text unchanged."""
    cleaned = text.strip()
    match = _FENCE_PATTERN.match(cleaned)
    if match:
        return match.group(1)
    return cleaned
