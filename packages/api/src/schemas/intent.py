# This project was developed with assistance from AI tools.
"""Intent analysis schemas."""

from db.enums import IntentCategory
from pydantic import Field

from . import CamelModel

MAX_TEXT_LENGTH = 10_000


class AnalyzeIntentRequest(CamelModel):
    """Free text whose purpose should be classified."""

    text: str = Field(..., min_length=1, max_length=MAX_TEXT_LENGTH)


class IntentAnalysis(CamelModel):
    """Classified intent with descriptive tags."""

    intent_category: IntentCategory
    tags: list[str]
    confidence: float = Field(..., ge=0, le=1)
