"""Intent log entries and usage analytics for the smart assistant.

Aggregation is done in Python over the rows of one analytics period; the log table is small and the
report needs first-seen ordering of the breakdowns, which is simpler to keep here than in SQL.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from datetime import UTC, datetime, timedelta

from src.intent.routing import calculate_steps_saved
from src.intent.schema import (
    ActionCount,
    ActionType,
    AnalyticsPeriod,
    IntentAnalytics,
    IntentLogEntry,
    ParsedIntent,
    ServiceType,
)

SECONDS_PER_STEP = 5
SUCCESS_CONFIDENCE = 0.5
TOP_INTENTS_LIMIT = 5

_PERIOD_DELTAS: dict[AnalyticsPeriod, timedelta] = {
    AnalyticsPeriod.last_24h: timedelta(hours=24),
    AnalyticsPeriod.last_7d: timedelta(days=7),
    AnalyticsPeriod.last_30d: timedelta(days=30),
}


def build_log_entry(
        parsed: ParsedIntent,
        *,
        user_id: str | None = None,
        was_confirmed: bool = False,
        created_at: datetime | None = None,
) -> IntentLogEntry:
    """Build an intent log entry from a parser result."""

    return IntentLogEntry(
        user_id=user_id,
        input=parsed.original_input,
        service=parsed.service,
        action=parsed.action,
        confidence=parsed.confidence,
        route=parsed.suggested_route,
        steps_saved=calculate_steps_saved(parsed.action, parsed.service),
        was_confirmed=was_confirmed,
        created_at=created_at or datetime.now(UTC),
    )


def parse_period(value: str | None) -> AnalyticsPeriod:
    """Parse a period such as `24h`; unknown or missing values mean the last 7 days."""

    try:
        return AnalyticsPeriod((value or "").strip().lower())
    except ValueError:
        return AnalyticsPeriod.last_7d


def period_start(period: AnalyticsPeriod, now: datetime | None = None) -> datetime:
    """Return the (UTC) start of the look-back window ending at `now`."""

    current = now or datetime.now(UTC)
    return current - _PERIOD_DELTAS[period]


def _round_half_up(value: float, digits: int) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def summarize_intent_logs(
        entries: Iterable[IntentLogEntry],
        period: AnalyticsPeriod,
) -> IntentAnalytics:
    """Aggregate log entries into an analytics report."""

    rows = list(entries)
    total = len(rows)

    total_steps = sum(row.steps_saved for row in rows)
    avg_confidence = sum(row.confidence for row in rows) / total if total else 0.0
    avg_steps = total_steps / total if total else 0.0
    successes = sum(1 for row in rows if row.confidence >= SUCCESS_CONFIDENCE)

    service_breakdown: dict[ServiceType, int] = {}
    action_breakdown: dict[ActionType, int] = {}
    for row in rows:
        if row.service is not None:
            service_breakdown[row.service] = service_breakdown.get(row.service, 0) + 1
        if row.action is not None:
            action_breakdown[row.action] = action_breakdown.get(row.action, 0) + 1

    # `sorted` is stable, so equal counts keep first-seen order.
    top = sorted(action_breakdown.items(), key=lambda item: -item[1])[:TOP_INTENTS_LIMIT]

    return IntentAnalytics(
        period=period,
        total_intents=total,
        avg_confidence=_round_half_up(avg_confidence, 2),
        total_steps_saved=total_steps,
        avg_steps_saved=_round_half_up(avg_steps, 1),
        estimated_time_saved=total_steps * SECONDS_PER_STEP,
        success_rate=successes / max(total, 1),
        service_breakdown=service_breakdown,
        action_breakdown=action_breakdown,
        top_intents=[ActionCount(action=action, count=count) for action, count in top],
    )
