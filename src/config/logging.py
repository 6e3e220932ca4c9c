"""Process logging for the assistant bot and the migration runner."""

from __future__ import annotations

import logging
import os


def configure_logging(level: str | None = None) -> None:
    """Set up root logging from `level` or `LOG_LEVEL` (default INFO).

    Handler log lines carry the detected service, action, confidence and latency, never the raw
    citizen text. Nothing logged here is ever sent to the chat.
    """

    log_level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    # Per-update dispatcher chatter and pool lifecycle messages drown the intent lines.
    logging.getLogger("aiogram.event").setLevel(logging.WARNING)
    logging.getLogger("psycopg.pool").setLevel(logging.WARNING)
