# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with sensible local dev defaults.
Provider endpoints live in config/providers.yaml (see inference/config.py);
everything else is grouped here.
"""

from pathlib import Path
from typing import Literal

from db.enums import HistoryBackend
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve project root .env regardless of CWD (matches inference/config.py approach)
_PROJECT_ROOT = Path(__file__).resolve().parents[4]
_ENV_FILE = _PROJECT_ROOT / ".env"

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "prompt-pipeline"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: Literal["development", "production", "test"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # -- CORS --
    ALLOWED_HOSTS: list[str] = ["http://localhost:3000", "http://localhost:3001"]

    # -- Auth --
    AUTH_DISABLED: bool = Field(
        default=False,
        description="Treat every request as the fixed dev user. For local runs only.",
    )
    USER_ID_HEADER: str = Field(
        default="x-user-id",
        description="Request header carrying the caller's user identifier.",
    )

    # -- History store --
    HISTORY_BACKEND: HistoryBackend = Field(
        default=HistoryBackend.SQL,
        description="'sql' persists to DATABASE_URL (see db.config); "
        "'memory' keeps records in-process.",
    )

    # -- LLM providers --
    LLM_PROVIDER_MODE: Literal["mock", "live"] = Field(
        default="mock",
        description="'mock' returns canned text after a simulated delay; "
        "'live' calls the endpoints in config/providers.yaml.",
    )
    MOCK_LATENCY_SCALE: float = Field(
        default=1.0,
        ge=0,
        description="Multiplier applied to simulated provider delays (0 disables them).",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in _VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {_VALID_LOG_LEVELS}, got '{v}'")
        return upper

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


settings = Settings()
