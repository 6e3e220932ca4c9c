"""Async Postgres connection pool for the intent log.

The chat handlers write and read intent logs through a psycopg3 async pool. Every acquired
connection runs with a UTC session timezone.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from dotenv import load_dotenv
from psycopg import AsyncConnection
from psycopg_pool import AsyncConnectionPool

from src.db.connection import require_database_url
from src.db.session import ensure_utc


def create_pool(
        database_url: str | None = None,
        *,
        min_size: int = 1,
        max_size: int | None = None,
        timeout: float = 10.0,
) -> AsyncConnectionPool:
    """Create an (unopened) async DB pool.

    Call `await pool.open()` at startup. Without `database_url`, `.env` is loaded and
    `DATABASE_URL` is used.
    """

    if database_url is None:
        load_dotenv(".env")
        database_url = require_database_url()

    return AsyncConnectionPool(
        conninfo=database_url,
        min_size=min_size,
        max_size=max_size,
        timeout=timeout,
        open=False,
        configure=ensure_utc,
    )


@asynccontextmanager
async def get_conn(pool: AsyncConnectionPool) -> AsyncIterator[AsyncConnection]:
    """Acquire a pooled connection; the pool's `configure` hook already set UTC."""

    async with pool.connection() as conn:
        yield conn
