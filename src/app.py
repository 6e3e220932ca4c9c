"""Composition root for the assistant bot.

Handlers receive one `App` (injected by the dispatcher as `app`) carrying the settings that shape
replies (locale, confidence threshold, admin ids) and the pool the intent log writes to.
"""

from __future__ import annotations

from dataclasses import dataclass

from psycopg_pool import AsyncConnectionPool

from src.config.settings import Settings
from src.db.pool import create_pool


@dataclass(frozen=True)
class App:
    settings: Settings
    pool: AsyncConnectionPool


def create_app(settings: Settings) -> App:
    """Build the container; the intent log pool is returned unopened.

    The log writes one short row per message and `/stats` reads one period, so a small pool is
    enough. Open it with `await app.pool.open()` before polling starts.
    """

    pool = create_pool(settings.database_url, max_size=5)
    return App(settings=settings, pool=pool)
