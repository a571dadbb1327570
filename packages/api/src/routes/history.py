# This project was developed with assistance from AI tools.
"""Interaction history endpoints -- caller identity required."""

from collections.abc import AsyncIterator

from db import get_db_service
from db.enums import HistoryBackend
from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..core.config import settings
from ..middleware.auth import CurrentUser
from ..schemas.history import (
    InteractionLog,
    InteractionRecord,
    LogHistoryRequest,
    LogHistoryResponse,
    UserAnalytics,
)
from ..services.history import (
    DEFAULT_HISTORY_LIMIT,
    HistoryStore,
    SqlHistoryStore,
    StoreError,
    get_analytics,
    get_memory_store,
    get_user_history,
    record_interaction,
)

router = APIRouter()


async def get_history_store() -> AsyncIterator[HistoryStore]:
    """FastAPI dependency: yield the configured store for this request.

    The SQL store shares one session per request. Writes commit inside the
    store; the session is rolled back here when the handler raises.
    """
    if settings.HISTORY_BACKEND == HistoryBackend.MEMORY:
        yield get_memory_store()
        return

    async with get_db_service().session() as session:
        try:
            yield SqlHistoryStore(session)
        except Exception:
            await session.rollback()
            raise


def _store_unavailable(exc: StoreError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))


@router.post("/log", response_model=LogHistoryResponse)
async def log_history(
    req: LogHistoryRequest,
    user: CurrentUser,
    store: HistoryStore = Depends(get_history_store),
) -> LogHistoryResponse:
    """Record a completed interaction for the calling user."""
    log = InteractionLog(user_id=user.user_id, **req.model_dump())
    try:
        result = await record_interaction(store, log)
    except StoreError as exc:
        raise _store_unavailable(exc) from exc
    return LogHistoryResponse(**result)


@router.get("", response_model=list[InteractionRecord])
async def user_history(
    user: CurrentUser,
    limit: int = Query(default=DEFAULT_HISTORY_LIMIT, ge=1, le=100),
    store: HistoryStore = Depends(get_history_store),
) -> list[InteractionRecord]:
    """The calling user's interactions, newest first."""
    try:
        return await get_user_history(store, user.user_id, limit=limit)
    except StoreError as exc:
        raise _store_unavailable(exc) from exc


@router.get("/analytics", response_model=UserAnalytics)
async def analytics(
    user: CurrentUser,
    store: HistoryStore = Depends(get_history_store),
) -> UserAnalytics:
    """Usage counts by model and intent across all of the user's interactions."""
    try:
        return await get_analytics(store, user.user_id)
    except StoreError as exc:
        raise _store_unavailable(exc) from exc
