# This project was developed with assistance from AI tools.
"""Interaction history service.

Appends completed interactions to an external store and derives per-user
analytics from the stored records. The store is passed in explicitly:
``SqlHistoryStore`` wraps a request-scoped AsyncSession, and
``InMemoryHistoryStore`` serves local runs without a database.

Analytics are recomputed from every record on each call -- there is no
incremental aggregate to keep in sync.
"""

import itertools
import logging
from collections import Counter
from datetime import UTC, datetime
from typing import Protocol

from db import InteractionHistory
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas.history import InteractionLog, InteractionRecord, UserAnalytics

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 50
UNKNOWN_INTENT = "unknown"


class StoreError(Exception):
    """Raised when the history store fails to read or write."""


class HistoryStore(Protocol):
    """Append-only interaction store keyed by (user_id, timestamp)."""

    async def append(self, log: InteractionLog) -> InteractionRecord: ...

    async def list_for_user(
        self, user_id: str, limit: int | None = None
    ) -> list[InteractionRecord]:
        """Return the user's records, newest first; all of them when limit is None."""
        ...


def _metadata_payload(log: InteractionLog) -> dict | None:
    if log.metadata is None:
        return None
    return log.metadata.model_dump(mode="json", by_alias=True, exclude_none=True)


class SqlHistoryStore:
    """HistoryStore backed by the ``interaction_history`` table."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def append(self, log: InteractionLog) -> InteractionRecord:
        row = InteractionHistory(
            user_id=log.user_id,
            model=log.model.value,
            prompt=log.prompt,
            result=log.result,
            interaction_metadata=_metadata_payload(log),
        )
        self._session.add(row)
        await self._session.commit()
        await self._session.refresh(row)
        return self._to_record(row)

    async def list_for_user(
        self, user_id: str, limit: int | None = None
    ) -> list[InteractionRecord]:
        stmt = (
            select(InteractionHistory)
            .where(InteractionHistory.user_id == user_id)
            .order_by(InteractionHistory.timestamp.desc(), InteractionHistory.id.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_record(row) for row in result.scalars().all()]

    @staticmethod
    def _to_record(row: InteractionHistory) -> InteractionRecord:
        return InteractionRecord(
            id=row.id,
            user_id=row.user_id,
            model=row.model,
            prompt=row.prompt,
            result=row.result,
            metadata=row.interaction_metadata,
            timestamp=row.timestamp,
        )


class InMemoryHistoryStore:
    """Process-local HistoryStore. Records are lost on restart."""

    def __init__(self) -> None:
        self._records: list[InteractionRecord] = []
        self._ids = itertools.count(1)

    async def append(self, log: InteractionLog) -> InteractionRecord:
        record = InteractionRecord(
            id=next(self._ids),
            timestamp=datetime.now(UTC),
            **log.model_dump(mode="json"),
        )
        self._records.append(record)
        return record

    async def list_for_user(
        self, user_id: str, limit: int | None = None
    ) -> list[InteractionRecord]:
        records = sorted(
            (r for r in self._records if r.user_id == user_id),
            key=lambda r: (r.timestamp, r.id),
            reverse=True,
        )
        return records if limit is None else records[:limit]


async def record_interaction(store: HistoryStore, log: InteractionLog) -> dict[str, bool]:
    """Persist one interaction.

    Raises:
        StoreError: The store rejected the write.
    """
    try:
        await store.append(log)
    except Exception as exc:
        logger.exception("Failed to log interaction for user %s", log.user_id)
        raise StoreError("Failed to log interaction") from exc
    return {"success": True}


async def get_user_history(
    store: HistoryStore, user_id: str, limit: int = DEFAULT_HISTORY_LIMIT
) -> list[InteractionRecord]:
    """Return up to ``limit`` of the user's records, newest first."""
    try:
        return await store.list_for_user(user_id, limit=limit)
    except Exception as exc:
        logger.exception("Failed to fetch history for user %s", user_id)
        raise StoreError("Failed to fetch user history") from exc


def summarize_interactions(records: list[InteractionRecord]) -> UserAnalytics:
    """Aggregate records (newest first) into usage counts.

    Models are counted by exact name; intents by ``metadata.intentCategory``,
    with records lacking one counted under "unknown".
    """
    model_usage = Counter(r.model for r in records)
    intent_distribution = Counter(
        r.metadata.intent_category
        if r.metadata and r.metadata.intent_category
        else UNKNOWN_INTENT
        for r in records
    )
    return UserAnalytics(
        total_interactions=len(records),
        model_usage=dict(model_usage),
        intent_distribution=dict(intent_distribution),
        last_interaction=records[0].timestamp if records else None,
    )


async def get_analytics(store: HistoryStore, user_id: str) -> UserAnalytics:
    """Compute usage analytics over every record the user has."""
    try:
        records = await store.list_for_user(user_id)
    except Exception as exc:
        logger.exception("Failed to fetch analytics for user %s", user_id)
        raise StoreError("Failed to fetch analytics") from exc
    return summarize_interactions(records)


# Module-level singleton for HISTORY_BACKEND=memory
_memory_store = InMemoryHistoryStore()


def get_memory_store() -> InMemoryHistoryStore:
    """Return the module-level InMemoryHistoryStore singleton."""
    return _memory_store
