# This project was developed with assistance from AI tools.
"""LLM execution request/response schemas."""

from db.enums import ModelName
from pydantic import Field

from . import CamelModel


class LLMRequest(CamelModel):
    """A single model invocation."""

    model: ModelName
    prompt: str
    max_tokens: int | None = Field(None, ge=1)
    temperature: float | None = Field(None, ge=0, le=2)


class TokenUsage(CamelModel):
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class LLMResponse(CamelModel):
    """Model output plus estimated usage and measured wall-clock latency."""

    output: str
    usage: TokenUsage | None = None
    model: ModelName
    latency: int = Field(..., ge=0, description="Milliseconds spent in the provider call")
