"""Tests for the frozen intent models and their invariants."""

from __future__ import annotations

import pydantic
import pytest

from src.intent.dictionaries import FALLBACK_MESSAGE
from src.intent.parser import parse_intent
from src.intent.schema import (
    ActionType,
    BilingualText,
    IntentLogEntry,
    ParsedIntent,
    ServiceType,
    is_hindi,
)


def test_parsed_intent_is_frozen() -> None:
    parsed = parse_intent("pay gas bill")
    with pytest.raises(pydantic.ValidationError):
        parsed.confidence = 0.1  # type: ignore[misc]


def test_parsed_intent_rejects_out_of_range_confidence() -> None:
    with pytest.raises(ValueError):
        ParsedIntent(confidence=1.5, confirmation_message=FALLBACK_MESSAGE)


def test_parsed_intent_route_requires_action() -> None:
    with pytest.raises(ValueError):
        ParsedIntent(
            service=ServiceType.GAS,
            suggested_route="/bills",
            confirmation_message=FALLBACK_MESSAGE,
        )


def test_parsed_intent_serializes_enum_values() -> None:
    dumped = parse_intent("pay my electricity bill").model_dump(mode="json")
    assert dumped["service"] == "ELECTRICITY"
    assert dumped["action"] == "PAY_BILL"
    assert dumped["matched_keywords"] == ["electricity", "pay", "bill"]
    assert set(dumped["confirmation_message"]) == {"en", "hi"}


@pytest.mark.parametrize(
    ("locale", "expected"),
    [("hi", True), ("hi-IN", True), ("HI", True), ("en", False), ("", False), (None, False)],
)
def test_is_hindi(locale: str | None, expected: bool) -> None:
    assert is_hindi(locale) is expected


def test_bilingual_text_for_locale() -> None:
    text = BilingualText(en="water", hi="पानी")
    assert text.for_locale("hi") == "पानी"
    assert text.for_locale("en-GB") == "water"
    assert text.for_locale(None) == "water"


def test_intent_log_entry_validation() -> None:
    entry = IntentLogEntry(
        user_id=" 1001 ",
        input="  Pay Bill ",
        action=ActionType.PAY_BILL,
        confidence=0.7,
    )
    assert entry.input == "  Pay Bill "
    assert entry.user_id == "1001"
    assert IntentLogEntry(user_id="  ", input="x", confidence=0.5).user_id is None
    assert entry.created_at.tzinfo is not None

    with pytest.raises(ValueError):
        IntentLogEntry(input="x", confidence=0.5, steps_saved=-1)

    # Rows read back from Postgres carry plain strings.
    stored = IntentLogEntry(input="x", service="GAS", confidence=0.5)
    assert stored.service == ServiceType.GAS
