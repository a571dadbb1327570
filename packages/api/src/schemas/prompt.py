# This project was developed with assistance from AI tools.
"""Prompt generation and refinement schemas."""

from db.enums import Complexity, IntentCategory, ModelName, Tone
from pydantic import Field

from . import CamelModel
from .intent import MAX_TEXT_LENGTH


class GeneratePromptRequest(CamelModel):
    model: ModelName
    intent: IntentCategory
    user_input: str = Field(..., min_length=1, max_length=MAX_TEXT_LENGTH)


class RefinePromptRequest(CamelModel):
    prompt: str = Field(..., min_length=1, max_length=MAX_TEXT_LENGTH)
    tone: Tone
    complexity: Complexity


class PromptGeneration(CamelModel):
    """A prompt before and after optimization, with the changes applied."""

    raw_prompt: str
    optimized_prompt: str
    improvements: list[str]
    estimated_tokens: int = Field(..., ge=0)
