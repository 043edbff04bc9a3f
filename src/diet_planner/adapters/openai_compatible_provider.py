"""Chat Completions provider for OpenAI and OpenAI-compatible backends."""

from dataclasses import dataclass

import httpx
from openai import AsyncOpenAI, OpenAIError

from diet_planner.domain.errors import ProviderUnavailable
from diet_planner.services.providers import ProviderAdapter


@dataclass
class OpenAICompatibleProvider(ProviderAdapter):
    """Provider backed by the Chat Completions API.

    DeepSeek and Qwen expose the same API under their own base URL, so one
    adapter covers all three backends.
    """

    name: str
    model: str
    client: AsyncOpenAI
    system_prompt: str
    temperature: float = 0.7
    enabled: bool = True

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        *,
        name: str,
        api_key: str,
        model: str,
        system_prompt: str,
        temperature: float,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> "OpenAICompatibleProvider":
        """Create a provider with its own SDK client."""
        return cls(
            name=name,
            model=model,
            client=AsyncOpenAI(
                api_key=api_key, base_url=base_url, http_client=http_client
            ),
            system_prompt=system_prompt,
            temperature=temperature,
        )

    async def invoke(self, prompt: str) -> str:
        """Request a JSON object completion for the prompt."""
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": self.system_prompt},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.temperature,
                response_format={"type": "json_object"},
            )
        except OpenAIError as exc:
            raise ProviderUnavailable(self.name, str(exc)) from exc
        if not response.choices:
            raise ProviderUnavailable(self.name, "response has no choices")
        content = response.choices[0].message.content
        if not content:
            raise ProviderUnavailable(self.name, "empty response")
        return content
