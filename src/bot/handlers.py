"""aiogram message handlers for the smart assistant.

Contract: every incoming message gets exactly one reply. Unrecognized input, unknown commands and
internal errors are answered with the bilingual fallback or the quick-phrase list, never with an
error. Intent logging happens after the reply and a logging failure never changes what the citizen
sees.
"""

from __future__ import annotations

import logging
from time import monotonic

from aiogram.filters import CommandObject
from aiogram.types import Message

from src.app import App
from src.bot.messages import format_analytics, format_intent_reply, format_quick_phrases
from src.db.intent_log import IntentLogError, fetch_intent_logs_since, insert_intent_log
from src.db.pool import get_conn
from src.intent.analytics import build_log_entry, parse_period, period_start, summarize_intent_logs
from src.intent.dictionaries import FALLBACK_MESSAGE
from src.intent.parser import parse_intent
from src.intent.schema import ParsedIntent, is_hindi

logger = logging.getLogger(__name__)

STATS_UNAVAILABLE = "Analytics are unavailable right now."
STATS_FORBIDDEN = "Analytics are available to administrators only."


def _is_command_text(text: str) -> bool:
    return text.lstrip().startswith("/")


def resolve_locale(message: Message, default_locale: str) -> str:
    """Display language for a chat user: Telegram's `language_code`, else the configured default."""

    user = getattr(message, "from_user", None)
    language_code = getattr(user, "language_code", None) if user is not None else None
    return "hi" if is_hindi(language_code) else default_locale


def _user_id(message: Message) -> str | None:
    user = getattr(message, "from_user", None)
    user_id = getattr(user, "id", None) if user is not None else None
    return str(user_id) if user_id is not None else None


async def _log_intent(app: App, parsed: ParsedIntent, user_id: str | None) -> None:
    entry = build_log_entry(parsed, user_id=user_id)

    # noinspection PyBroadException
    try:
        async with get_conn(app.pool) as conn:
            log_id = await insert_intent_log(conn, entry)
        logger.debug("intent logged id=%d", log_id)
    except IntentLogError as exc:
        logger.warning("intent log failed reason=%s", exc)
    except Exception:
        # Logging is best-effort; the citizen already has their reply.
        logger.exception("intent log failed")


async def handle_start(message: Message, app: App) -> None:
    """Greet the user and list quick phrases (`/start`, `/phrases`)."""

    locale = resolve_locale(message, app.settings.default_locale)
    await message.answer(format_quick_phrases(locale))


async def handle_stats(message: Message, app: App, command: CommandObject | None = None) -> None:
    """Reply with intent analytics for `/stats [24h|7d|30d]` (admins only)."""

    user = getattr(message, "from_user", None)
    user_id = getattr(user, "id", None) if user is not None else None
    if user_id is None or user_id not in app.settings.admin_user_ids:
        logger.info("stats refused user_id=%s", user_id)
        await message.answer(STATS_FORBIDDEN)
        return

    period = parse_period(command.args if command is not None else None)

    # noinspection PyBroadException
    try:
        async with get_conn(app.pool) as conn:
            entries = await fetch_intent_logs_since(conn, period_start(period))
    except IntentLogError as exc:
        logger.warning("analytics unavailable reason=%s", exc)
        await message.answer(STATS_UNAVAILABLE)
        return
    except Exception:
        logger.exception("analytics failed")
        await message.answer(STATS_UNAVAILABLE)
        return

    await message.answer(format_analytics(summarize_intent_logs(entries, period)))


async def handle_message(message: Message, app: App) -> None:
    """Handle any other incoming message and reply exactly once.

    Free text is parsed and answered with the confirmation, route and steps saved. Unknown
    commands get the quick-phrase list; empty input and internal errors get the fallback message.
    """

    started = monotonic()
    locale = resolve_locale(message, app.settings.default_locale)
    reply = FALLBACK_MESSAGE.for_locale(locale)
    parsed: ParsedIntent | None = None

    # noinspection PyBroadException
    try:
        raw_text = message.text or message.caption or ""
        if _is_command_text(raw_text):
            reply = format_quick_phrases(locale)
        elif raw_text.strip():
            parsed = parse_intent(raw_text)
            reply = format_intent_reply(
                parsed, locale, threshold=app.settings.confidence_threshold
            )

            latency_ms = int((monotonic() - started) * 1000)
            logger.info(
                "handled service=%s action=%s confidence=%.2f locale=%s latency_ms=%d",
                parsed.service,
                parsed.action,
                parsed.confidence,
                locale,
                latency_ms,
            )
    except Exception:
        # Handler boundary: the citizen still gets the fallback, details stay in the log.
        logger.exception("handler failed")
        reply = FALLBACK_MESSAGE.for_locale(locale)
        parsed = None

    await message.answer(reply)

    if parsed is not None and app.settings.intent_log_enabled:
        await _log_intent(app, parsed, _user_id(message))
