"""Intent log persistence.

Rows are always written with parameterized SQL; citizen input is never interpolated into queries.
Both helpers commit before returning so pooled connections go back idle.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, LiteralString, cast

import psycopg
from psycopg import AsyncConnection

from src.intent.schema import IntentLogEntry

_INSERT_SQL = """
    INSERT INTO intent_logs (user_id,
                             input,
                             service,
                             action,
                             confidence,
                             route,
                             steps_saved,
                             was_confirmed,
                             created_at)
    VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
    RETURNING id
"""

_SELECT_SINCE_SQL = """
    SELECT user_id,
           input,
           service,
           action,
           confidence,
           route,
           steps_saved,
           was_confirmed,
           created_at
    FROM intent_logs
    WHERE created_at >= %s
    ORDER BY created_at, id
"""


class IntentLogError(RuntimeError):
    """Raised when an intent log row cannot be written or read."""


def _entry_params(entry: IntentLogEntry) -> tuple[Any, ...]:
    return (
        entry.user_id,
        entry.input,
        entry.service.value if entry.service is not None else None,
        entry.action.value if entry.action is not None else None,
        entry.confidence,
        entry.route,
        entry.steps_saved,
        entry.was_confirmed,
        entry.created_at,
    )


def _row_to_entry(row: tuple[Any, ...]) -> IntentLogEntry:
    user_id, text, service, action, confidence, route, steps_saved, was_confirmed, created_at = row
    return IntentLogEntry(
        user_id=user_id,
        input=text,
        service=service,
        action=action,
        confidence=confidence,
        route=route,
        steps_saved=steps_saved,
        was_confirmed=was_confirmed,
        created_at=created_at,
    )


async def insert_intent_log(conn: AsyncConnection, entry: IntentLogEntry) -> int:
    """Insert one log row and return its id."""

    try:
        async with conn.cursor() as cur:
            await cur.execute(cast(LiteralString, _INSERT_SQL), _entry_params(entry))
            row = await cur.fetchone()
        await conn.commit()
    except psycopg.Error as exc:
        raise IntentLogError(f"failed to write intent log: {exc}") from exc

    if not row:
        raise IntentLogError("intent log insert returned no id")
    return int(row[0])


async def fetch_intent_logs_since(conn: AsyncConnection, since: datetime) -> list[IntentLogEntry]:
    """Return all log rows created at or after `since`, oldest first."""

    try:
        async with conn.cursor() as cur:
            await cur.execute(cast(LiteralString, _SELECT_SINCE_SQL), (since,))
            rows = await cur.fetchall()
        await conn.commit()
    except psycopg.Error as exc:
        raise IntentLogError(f"failed to read intent logs: {exc}") from exc

    return [_row_to_entry(row) for row in rows]
