# This project was developed with assistance from AI tools.
"""
Domain enums for the prompt pipeline.

Shared domain types used by both SQLAlchemy models (db package)
and Pydantic schemas (api package).
"""

import enum


class IntentCategory(str, enum.Enum):
    CREATIVE_WRITING = "creative_writing"
    CODE_GENERATION = "code_generation"
    DATA_ANALYSIS = "data_analysis"
    CONTENT_SUMMARIZATION = "content_summarization"
    TRANSLATION = "translation"
    QUESTION_ANSWERING = "question_answering"
    BRAINSTORMING = "brainstorming"
    PROBLEM_SOLVING = "problem_solving"
    OTHER = "other"


class ModelProvider(str, enum.Enum):
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GOOGLE = "google"
    LOCAL = "local"


class ModelName(str, enum.Enum):
    GPT_4O = "gpt-4o"
    GPT_4O_MINI = "gpt-4o-mini"
    GPT_35_TURBO = "gpt-3.5-turbo"
    CLAUDE_3_OPUS = "claude-3-opus"
    CLAUDE_3_SONNET = "claude-3-sonnet"
    CLAUDE_3_HAIKU = "claude-3-haiku"
    GEMINI_PRO = "gemini-pro"
    GEMINI_FLASH = "gemini-flash"
    LLAMA_31_8B = "llama-3.1-8b"
    LLAMA_31_70B = "llama-3.1-70b"

    @property
    def provider(self) -> "ModelProvider":
        """Vendor hosting this model."""
        return MODEL_PROVIDERS[self]


class Tone(str, enum.Enum):
    PROFESSIONAL = "professional"
    CASUAL = "casual"
    CREATIVE = "creative"
    TECHNICAL = "technical"


class Complexity(str, enum.Enum):
    SIMPLE = "simple"
    DETAILED = "detailed"


class SpeedPreference(str, enum.Enum):
    FAST = "fast"
    BALANCED = "balanced"
    QUALITY = "quality"


class HistoryBackend(str, enum.Enum):
    SQL = "sql"
    MEMORY = "memory"


# Every model name maps to exactly one provider.
MODEL_PROVIDERS: dict[ModelName, ModelProvider] = {
    ModelName.GPT_4O: ModelProvider.OPENAI,
    ModelName.GPT_4O_MINI: ModelProvider.OPENAI,
    ModelName.GPT_35_TURBO: ModelProvider.OPENAI,
    ModelName.CLAUDE_3_OPUS: ModelProvider.ANTHROPIC,
    ModelName.CLAUDE_3_SONNET: ModelProvider.ANTHROPIC,
    ModelName.CLAUDE_3_HAIKU: ModelProvider.ANTHROPIC,
    ModelName.GEMINI_PRO: ModelProvider.GOOGLE,
    ModelName.GEMINI_FLASH: ModelProvider.GOOGLE,
    ModelName.LLAMA_31_8B: ModelProvider.LOCAL,
    ModelName.LLAMA_31_70B: ModelProvider.LOCAL,
}
