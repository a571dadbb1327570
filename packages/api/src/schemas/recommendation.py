# This project was developed with assistance from AI tools.
"""Model recommendation schemas."""

from db.enums import IntentCategory, ModelName, ModelProvider, SpeedPreference
from pydantic import Field

from . import CamelModel


class RecommendModelRequest(CamelModel):
    intent_category: IntentCategory
    budget: float | None = Field(None, ge=0, description="Maximum acceptable estimated cost")
    speed: SpeedPreference = SpeedPreference.BALANCED


class ModelRecommendation(CamelModel):
    """A concrete model choice with cost and quality estimates."""

    model_name: ModelName
    provider: ModelProvider
    reasoning: str
    estimated_cost: float | None = Field(None, ge=0)
    performance_score: float = Field(..., ge=0, le=1)
