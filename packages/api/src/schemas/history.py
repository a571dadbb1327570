# This project was developed with assistance from AI tools.
"""Interaction history and analytics schemas."""

from datetime import datetime

from db.enums import Complexity, IntentCategory, ModelName, ModelProvider, Tone
from pydantic import ConfigDict, Field

from . import CamelModel


class InteractionMetadata(CamelModel):
    """Optional pipeline context captured alongside an interaction."""

    intent_category: IntentCategory | None = None
    tags: list[str] | None = None
    tone: Tone | None = None
    complexity: Complexity | None = None
    model_provider: ModelProvider | None = None


class LogHistoryRequest(CamelModel):
    """An interaction as submitted by the caller; user identity comes from auth."""

    model: ModelName
    prompt: str
    result: str
    metadata: InteractionMetadata | None = None


class InteractionLog(LogHistoryRequest):
    """A completed interaction attributed to a user."""

    user_id: str


class StoredMetadata(CamelModel):
    """Metadata as read back from the store.

    Values are kept as stored strings; rows written by other producers may
    carry models, intents or extra keys this service does not know.
    """

    model_config = ConfigDict(extra="allow")

    intent_category: str | None = None
    tags: list[str] | None = None
    tone: str | None = None
    complexity: str | None = None
    model_provider: str | None = None


class InteractionRecord(CamelModel):
    """An interaction as read back from the store."""

    id: int | str
    user_id: str
    model: str
    prompt: str
    result: str
    metadata: StoredMetadata | None = None
    timestamp: datetime


class LogHistoryResponse(CamelModel):
    success: bool


class UserAnalytics(CamelModel):
    """Usage aggregates recomputed from every stored record for one user."""

    total_interactions: int = Field(..., ge=0)
    model_usage: dict[str, int]
    intent_distribution: dict[str, int]
    last_interaction: datetime | None = None
