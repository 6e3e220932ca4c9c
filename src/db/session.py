"""Per-connection setup for the intent log pool.

`/stats` filters `intent_logs` by `created_at >= now - period`; the bound is computed in UTC, so
pooled sessions run in UTC too.
"""

from __future__ import annotations

from psycopg import AsyncConnection


async def ensure_utc(conn: AsyncConnection) -> None:
    """Pool `configure` hook: switch a fresh connection to UTC."""

    async with conn.cursor() as cur:
        await cur.execute("SET TIME ZONE 'UTC'", prepare=False)
    # Leave the connection idle, not INTRANS, when it goes back to the pool.
    await conn.commit()
