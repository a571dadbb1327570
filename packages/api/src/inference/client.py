# This project was developed with assistance from AI tools.
"""Thin OpenAI-compatible LLM client.

Wraps the openai Python SDK with a per-provider base_url so the same code
path reaches OpenAI, Anthropic and Google compatibility endpoints, or a
local vLLM server.
"""

import logging
from typing import Any

from db.enums import ModelProvider
from openai import AsyncOpenAI

from .config import get_provider_config, resolve_model_id

logger = logging.getLogger(__name__)

# Per-provider client cache (avoids re-creating HTTP connections)
_clients: dict[ModelProvider, AsyncOpenAI] = {}


def _get_client(provider: ModelProvider) -> AsyncOpenAI:
    """Return a cached AsyncOpenAI client for the given provider."""
    if provider not in _clients:
        provider_cfg = get_provider_config(provider)
        _clients[provider] = AsyncOpenAI(
            base_url=provider_cfg["base_url"],
            api_key=provider_cfg.get("api_key") or "not-needed",
            max_retries=0,
        )
    return _clients[provider]


def clear_client_cache() -> None:
    """Clear cached clients (useful after config reload)."""
    _clients.clear()


async def get_completion(
    provider: ModelProvider,
    model: str,
    prompt: str,
    **kwargs: Any,
) -> str:
    """Get a non-streaming completion for a single user prompt."""
    client = _get_client(provider)
    response = await client.chat.completions.create(
        model=resolve_model_id(provider, model),
        messages=[{"role": "user", "content": prompt}],
        **kwargs,
    )
    return response.choices[0].message.content or ""
