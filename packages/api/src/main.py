# This project was developed with assistance from AI tools.
"""FastAPI application entry point.

Each pipeline stage is an independent endpoint; callers drive the sequence:

    POST /api/intent/analyze      text -> intent
    POST /api/model/recommend     intent (+ budget/speed) -> model
    POST /api/prompt/generate     model + intent + input -> prompt
    POST /api/prompt/refine       prompt + tone + complexity -> refined prompt
    POST /api/run/llm             model + prompt -> output
    POST /api/history/log         completed interaction -> stored record
"""

import logging
import uuid
from contextlib import asynccontextmanager

from db import get_db_service
from db.enums import HistoryBackend
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import settings
from .core.logging import setup_logging
from .routes import health, history, intent, model, prompt, run
from .schemas.error import ErrorResponse

setup_logging(settings.LOG_LEVEL)

logger = logging.getLogger(__name__)

_GENERIC_SERVER_ERROR = "An unexpected error occurred."


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application startup/shutdown lifecycle."""
    logger.info(
        "Starting %s %s (environment=%s)",
        settings.APP_NAME,
        settings.APP_VERSION,
        settings.ENVIRONMENT,
    )
    logger.warning("LLM provider mode: %s", settings.LLM_PROVIDER_MODE.upper())
    logger.info("History backend: %s", settings.HISTORY_BACKEND.value)
    yield
    if settings.HISTORY_BACKEND == HistoryBackend.SQL:
        await get_db_service().dispose()
    logger.info("Shutting down %s", settings.APP_NAME)


app = FastAPI(
    title="Prompt Pipeline API",
    description="Intent analysis, model recommendation, prompt engineering and LLM execution",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", settings.USER_ID_HEADER, "x-request-id"],
)


def _request_id(request: Request) -> str:
    return request.headers.get("x-request-id", str(uuid.uuid4()))


def _public_detail(status_code: int, detail: str) -> str:
    """Hide server-side failure detail from callers in production."""
    if status_code >= 500 and settings.is_production:
        return _GENERIC_SERVER_ERROR
    return detail


def _problem(request: Request, status_code: int, detail: str, headers=None) -> JSONResponse:
    body = ErrorResponse.build(
        status_code,
        _public_detail(status_code, detail),
        _request_id(request),
        instance=request.url.path,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Convert HTTPException to RFC 7807 Problem Details."""
    return _problem(request, exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Convert Pydantic validation errors to RFC 7807 Problem Details."""
    return _problem(request, 422, str(exc.errors()))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Catch-all for unhandled exceptions -- log and return 500."""
    request_id = _request_id(request)
    logger.exception("Unhandled exception (request_id=%s)", request_id)
    detail = _GENERIC_SERVER_ERROR if settings.is_production else str(exc) or _GENERIC_SERVER_ERROR
    body = ErrorResponse.build(500, detail, request_id, instance=request.url.path)
    return JSONResponse(status_code=500, content=body.model_dump())


# Include routers
app.include_router(health.router, tags=["health"])
app.include_router(intent.router, prefix="/api/intent", tags=["intent"])
app.include_router(model.router, prefix="/api/model", tags=["model"])
app.include_router(prompt.router, prefix="/api/prompt", tags=["prompt"])
app.include_router(run.router, prefix="/api/run", tags=["run"])
app.include_router(history.router, prefix="/api/history", tags=["history"])
