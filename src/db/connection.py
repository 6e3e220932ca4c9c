"""Postgres helpers shared by the intent log pool and the migration runner.

`intent_logs.created_at` is `timestamptz` and analytics windows are computed in UTC, so every
session is switched to UTC before the first statement.
"""

from __future__ import annotations

import os

import psycopg


def require_database_url() -> str:
    """Return `DATABASE_URL`; neither the intent log nor migrations work without it."""

    database_url = os.getenv("DATABASE_URL")
    if not database_url:
        raise RuntimeError("DATABASE_URL is required (set it in .env or environment)")
    return database_url


def connect_utc(database_url: str) -> psycopg.Connection:
    """Open a migration connection with the session timezone set to UTC."""

    conn = psycopg.connect(database_url)
    conn.execute("SET TIME ZONE 'UTC'", prepare=False)
    return conn
