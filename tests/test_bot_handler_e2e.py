"""Tests for the aiogram handler reply contract.

Every incoming text gets exactly one reply in the user's language. Unrecognized input gets the
bilingual fallback; intent logging never changes the reply.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime
from types import SimpleNamespace
from typing import Any

import pytest

from src.bot.handlers import (
    STATS_FORBIDDEN,
    STATS_UNAVAILABLE,
    handle_message,
    handle_start,
    handle_stats,
    resolve_locale,
)
from src.bot.messages import format_quick_phrases
from src.bot.router import router
from src.db.intent_log import IntentLogError
from src.intent.dictionaries import FALLBACK_MESSAGE
from src.intent.schema import ActionType, IntentLogEntry, ServiceType


class _FakeMessage:
    def __init__(self, text: str | None, *, language_code: str | None = "en") -> None:
        self.text = text
        self.caption = None
        self.from_user = SimpleNamespace(id=1001, language_code=language_code)
        self.answers: list[str] = []

    async def answer(self, text: str) -> None:
        """Record the outgoing bot reply (aiogram's `Message.answer` substitute)."""
        self.answers.append(text)


def _make_app(
        *,
        intent_log_enabled: bool = False,
        default_locale: str = "en",
        admin_user_ids: tuple[int, ...] = (1001,),
) -> Any:
    return SimpleNamespace(
        settings=SimpleNamespace(
            intent_log_enabled=intent_log_enabled,
            confidence_threshold=0.5,
            default_locale=default_locale,
            admin_user_ids=admin_user_ids,
        ),
        pool=object(),
    )


@asynccontextmanager
async def _fake_get_conn(_pool: Any):
    yield object()


def test_resolve_locale() -> None:
    assert resolve_locale(_FakeMessage("x", language_code="hi"), "en") == "hi"  # type: ignore[arg-type]
    assert resolve_locale(_FakeMessage("x", language_code="ru"), "en") == "en"  # type: ignore[arg-type]
    assert resolve_locale(_FakeMessage("x", language_code=None), "hi") == "hi"  # type: ignore[arg-type]
    assert resolve_locale(_FakeMessage("x", language_code="HI-IN"), "en") == "hi"  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_handler_replies_fallback_for_empty_text() -> None:
    message = _FakeMessage(text=None)

    await handle_message(message, _make_app())  # type: ignore[arg-type]

    assert message.answers == [FALLBACK_MESSAGE.en]


@pytest.mark.asyncio
async def test_handler_replies_hindi_fallback_for_hindi_user() -> None:
    message = _FakeMessage(text="   ", language_code="hi")

    await handle_message(message, _make_app())  # type: ignore[arg-type]

    assert message.answers == [FALLBACK_MESSAGE.hi]


@pytest.mark.asyncio
async def test_handler_confident_reply_includes_route_and_steps() -> None:
    message = _FakeMessage(text="pay my electricity bill")

    await handle_message(message, _make_app())  # type: ignore[arg-type]

    assert message.answers == [
        "Understood (80% Confidence)\n"
        "We understood you want to pay your bill for electricity\n"
        "Saving 2 navigation steps\n"
        "Continue: /bills?service=ELECTRICITY"
    ]


@pytest.mark.asyncio
async def test_handler_unclear_reply_lists_recognized_words() -> None:
    message = _FakeMessage(text="gas", language_code="hi")

    await handle_message(message, _make_app())  # type: ignore[arg-type]

    assert len(message.answers) == 1
    reply = message.answers[0]
    assert reply.startswith("स्पष्ट नहीं")
    assert FALLBACK_MESSAGE.hi in reply
    assert "पहचाने गए शब्द: gas" in reply
    assert "/phrases" in reply


@pytest.mark.asyncio
async def test_handler_logs_intent(monkeypatch: pytest.MonkeyPatch) -> None:
    logged: list[IntentLogEntry] = []

    async def _fake_insert(_conn: Any, entry: IntentLogEntry) -> int:
        logged.append(entry)
        return 1

    monkeypatch.setattr("src.bot.handlers.get_conn", _fake_get_conn)
    monkeypatch.setattr("src.bot.handlers.insert_intent_log", _fake_insert)

    message = _FakeMessage(text="water not working")
    await handle_message(message, _make_app(intent_log_enabled=True))  # type: ignore[arg-type]

    assert len(message.answers) == 1
    assert len(logged) == 1
    assert logged[0].user_id == "1001"
    assert logged[0].service == ServiceType.WATER
    assert logged[0].action == ActionType.FILE_COMPLAINT
    assert logged[0].route == "/grievances/new?service=WATER"


@pytest.mark.asyncio
async def test_handler_log_failure_keeps_reply(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _failing_insert(_conn: Any, _entry: IntentLogEntry) -> int:
        raise IntentLogError("db down")

    monkeypatch.setattr("src.bot.handlers.get_conn", _fake_get_conn)
    monkeypatch.setattr("src.bot.handlers.insert_intent_log", _failing_insert)

    message = _FakeMessage(text="pay my electricity bill")
    await handle_message(message, _make_app(intent_log_enabled=True))  # type: ignore[arg-type]

    assert len(message.answers) == 1
    assert message.answers[0].endswith("Continue: /bills?service=ELECTRICITY")


@pytest.mark.asyncio
async def test_start_lists_quick_phrases_in_locale() -> None:
    message = _FakeMessage(text="/start", language_code="hi")

    await handle_start(message, _make_app())  # type: ignore[arg-type]

    assert len(message.answers) == 1
    lines = message.answers[0].split("\n")
    assert len(lines) == 9
    assert lines[1] == "⚡ मेरा बिजली बिल भुगतान करें"


@pytest.mark.asyncio
async def test_stats_reports_period(monkeypatch: pytest.MonkeyPatch) -> None:
    seen_since: list[datetime] = []

    async def _fake_fetch(_conn: Any, since: datetime) -> list[IntentLogEntry]:
        seen_since.append(since)
        return [
            IntentLogEntry(
                input="pay bill",
                service=ServiceType.GAS,
                action=ActionType.PAY_BILL,
                confidence=0.7,
                steps_saved=2,
            )
        ]

    monkeypatch.setattr("src.bot.handlers.get_conn", _fake_get_conn)
    monkeypatch.setattr("src.bot.handlers.fetch_intent_logs_since", _fake_fetch)

    message = _FakeMessage(text="/stats 24h")
    command = SimpleNamespace(args="24h")
    await handle_stats(message, _make_app(), command)  # type: ignore[arg-type]

    assert len(seen_since) == 1
    assert len(message.answers) == 1
    reply = message.answers[0]
    assert "Period: 24h" in reply
    assert "Total intents: 1" in reply
    assert "Top intents: PAY_BILL=1" in reply


@pytest.mark.asyncio
async def test_stats_unavailable_when_log_read_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _failing_fetch(_conn: Any, _since: datetime) -> list[IntentLogEntry]:
        raise IntentLogError("db down")

    monkeypatch.setattr("src.bot.handlers.get_conn", _fake_get_conn)
    monkeypatch.setattr("src.bot.handlers.fetch_intent_logs_since", _failing_fetch)

    message = _FakeMessage(text="/stats")
    await handle_stats(message, _make_app())  # type: ignore[arg-type]

    assert message.answers == [STATS_UNAVAILABLE]


@pytest.mark.asyncio
async def test_handler_replies_fallback_on_internal_error(monkeypatch: pytest.MonkeyPatch) -> None:
    logged: list[IntentLogEntry] = []

    def _boom(*_args: Any, **_kwargs: Any) -> str:
        raise KeyError("route")

    async def _fake_insert(_conn: Any, entry: IntentLogEntry) -> int:
        logged.append(entry)
        return 1

    monkeypatch.setattr("src.bot.handlers.format_intent_reply", _boom)
    monkeypatch.setattr("src.bot.handlers.get_conn", _fake_get_conn)
    monkeypatch.setattr("src.bot.handlers.insert_intent_log", _fake_insert)

    message = _FakeMessage(text="pay my electricity bill")
    await handle_message(message, _make_app(intent_log_enabled=True))  # type: ignore[arg-type]

    assert message.answers == [FALLBACK_MESSAGE.en]
    assert logged == []


@pytest.mark.asyncio
async def test_handler_replies_hindi_fallback_when_parser_fails(
        monkeypatch: pytest.MonkeyPatch,
) -> None:
    def _boom(_text: str) -> Any:
        raise RuntimeError("parser failed")

    monkeypatch.setattr("src.bot.handlers.parse_intent", _boom)

    message = _FakeMessage(text="बिल भरना है", language_code="hi")
    await handle_message(message, _make_app())  # type: ignore[arg-type]

    assert message.answers == [FALLBACK_MESSAGE.hi]


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["/help", "/unknown cmd", "  /foo"])
async def test_handler_answers_unknown_commands_with_quick_phrases(text: str) -> None:
    message = _FakeMessage(text=text)

    await handle_message(message, _make_app(intent_log_enabled=True))  # type: ignore[arg-type]

    assert message.answers == [format_quick_phrases("en")]


def test_router_falls_through_to_message_handler() -> None:
    catch_all = router.message.handlers[-1]

    assert catch_all.callback is handle_message
    assert not catch_all.filters


@pytest.mark.asyncio
async def test_stats_refused_for_non_admin(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[datetime] = []

    async def _fake_fetch(_conn: Any, since: datetime) -> list[IntentLogEntry]:
        calls.append(since)
        return []

    monkeypatch.setattr("src.bot.handlers.get_conn", _fake_get_conn)
    monkeypatch.setattr("src.bot.handlers.fetch_intent_logs_since", _fake_fetch)

    message = _FakeMessage(text="/stats")
    await handle_stats(message, _make_app(admin_user_ids=(42,)))  # type: ignore[arg-type]

    assert message.answers == [STATS_FORBIDDEN]
    assert calls == []
