# This project was developed with assistance from AI tools.
"""Liveness and service description endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter

from ..core.config import settings
from ..schemas.health import HealthStatus, ServiceInfo

router = APIRouter()

FEATURES = [
    "Intent Analysis",
    "Model Recommendation",
    "Prompt Generation & Refinement",
    "LLM Execution",
    "Interaction History",
]

ENDPOINTS = {
    "health": "GET /health",
    "analyzeIntent": "POST /api/intent/analyze",
    "recommendModel": "POST /api/model/recommend",
    "generatePrompt": "POST /api/prompt/generate",
    "refinePrompt": "POST /api/prompt/refine",
    "runLLM": "POST /api/run/llm",
    "runLLMBatch": "POST /api/run/batch",
    "logHistory": "POST /api/history/log",
    "getUserHistory": "GET /api/history",
    "getAnalytics": "GET /api/history/analytics",
}


@router.get("/health", response_model=HealthStatus)
async def health() -> HealthStatus:
    """Liveness probe."""
    return HealthStatus(
        status="ok",
        timestamp=datetime.now(UTC),
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
    )


@router.get("/api", response_model=ServiceInfo)
async def service_info() -> ServiceInfo:
    return ServiceInfo(
        name=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="AI workflow API for intent analysis, model selection, "
        "prompt engineering and LLM execution",
        endpoints=ENDPOINTS,
        features=FEATURES,
    )
