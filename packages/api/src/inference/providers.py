# This project was developed with assistance from AI tools.
"""Provider handlers -- one "generate text" capability per provider.

The provider set is closed, so handlers live in two fixed tables rather
than a plugin registry:

  - MOCK_HANDLERS simulate a provider with a random delay and canned text
  - LIVE_HANDLERS call the provider's OpenAI-compatible endpoint

LLM_PROVIDER_MODE picks the table at call time.
"""

import asyncio
import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from db.enums import ModelName, ModelProvider

from ..core.config import settings
from .client import get_completion


@dataclass(frozen=True)
class GenerationOptions:
    """Optional sampling parameters forwarded to the provider."""

    max_tokens: int | None = None
    temperature: float | None = None

    def as_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {}
        if self.max_tokens is not None:
            kwargs["max_tokens"] = self.max_tokens
        if self.temperature is not None:
            kwargs["temperature"] = self.temperature
        return kwargs


ProviderHandler = Callable[[ModelName, str, GenerationOptions], Awaitable[str]]


@dataclass(frozen=True)
class _MockProfile:
    label: str
    source: str
    target: str
    min_delay_ms: int
    jitter_ms: int


_MOCK_PROFILES: MappingProxyType[ModelProvider, _MockProfile] = MappingProxyType(
    {
        ModelProvider.OPENAI: _MockProfile(
            label="OpenAI Response",
            source="OpenAI",
            target="call the OpenAI API with proper authentication and parameters",
            min_delay_ms=500,
            jitter_ms=1000,
        ),
        ModelProvider.ANTHROPIC: _MockProfile(
            label="Claude Response",
            source="Anthropic's Claude",
            target="call the Claude API with proper authentication and parameters",
            min_delay_ms=400,
            jitter_ms=800,
        ),
        ModelProvider.GOOGLE: _MockProfile(
            label="Gemini Response",
            source="Google's Gemini",
            target="call the Gemini API with proper authentication and parameters",
            min_delay_ms=300,
            jitter_ms=600,
        ),
        ModelProvider.LOCAL: _MockProfile(
            label="Local Model Response",
            source="a local model",
            target="call a local LLM instance",
            min_delay_ms=200,
            jitter_ms=400,
        ),
    }
)

PROMPT_PREVIEW_CHARS = 100


def mock_delay_seconds(provider: ModelProvider) -> float:
    """Simulated round-trip time for ``provider``, scaled by MOCK_LATENCY_SCALE."""
    profile = _MOCK_PROFILES[provider]
    delay_ms = profile.min_delay_ms + random.random() * profile.jitter_ms
    return delay_ms * settings.MOCK_LATENCY_SCALE / 1000


def _make_mock_handler(provider: ModelProvider) -> ProviderHandler:
    profile = _MOCK_PROFILES[provider]

    async def _generate(model: ModelName, prompt: str, options: GenerationOptions) -> str:
        await asyncio.sleep(mock_delay_seconds(provider))
        return (
            f"[{profile.label}] {prompt[:PROMPT_PREVIEW_CHARS]}... "
            f"This is a mock response from {profile.source}. "
            f"The actual implementation would {profile.target}."
        )

    return _generate


def _make_live_handler(provider: ModelProvider) -> ProviderHandler:
    async def _generate(model: ModelName, prompt: str, options: GenerationOptions) -> str:
        return await get_completion(provider, model.value, prompt, **options.as_kwargs())

    return _generate


MOCK_HANDLERS: MappingProxyType[ModelProvider, ProviderHandler] = MappingProxyType(
    {provider: _make_mock_handler(provider) for provider in ModelProvider}
)
LIVE_HANDLERS: MappingProxyType[ModelProvider, ProviderHandler] = MappingProxyType(
    {provider: _make_live_handler(provider) for provider in ModelProvider}
)


def get_provider_handler(provider: ModelProvider) -> ProviderHandler:
    """Return the handler for ``provider`` in the configured mode."""
    handlers = LIVE_HANDLERS if settings.LLM_PROVIDER_MODE == "live" else MOCK_HANDLERS
    return handlers[provider]
