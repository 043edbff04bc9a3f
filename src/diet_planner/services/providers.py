"""Generative backend capability."""

from typing import Protocol


class ProviderAdapter(Protocol):
    """Uniform contract over one generative backend.

    Implementations raise ``ProviderUnavailable`` for network, auth and empty
    responses, and return text that should decode to JSON.
    """

    name: str
    model: str
    enabled: bool

    async def invoke(self, prompt: str) -> str:
        """Send a prompt and return the raw response text."""
