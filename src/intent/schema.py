"""Intent schema (Pydantic models).

This schema is the contract between the keyword parser and its consumers (the chat surface, the
intent log and the analytics layer). Every model is frozen: a parsed intent is produced once per
user submission and never mutated afterwards.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ServiceType(StrEnum):
    """Civic utility domains the assistant can route to."""

    ELECTRICITY = "ELECTRICITY"
    GAS = "GAS"
    WATER = "WATER"
    MUNICIPAL = "MUNICIPAL"


class ActionType(StrEnum):
    """Citizen operations the assistant can route to."""

    PAY_BILL = "PAY_BILL"
    FILE_COMPLAINT = "FILE_COMPLAINT"
    CHECK_STATUS = "CHECK_STATUS"
    NEW_CONNECTION = "NEW_CONNECTION"
    METER_READING = "METER_READING"
    VIEW_BILLS = "VIEW_BILLS"


class AnalyticsPeriod(StrEnum):
    """Look-back windows supported by the intent analytics report."""

    last_24h = "24h"
    last_7d = "7d"
    last_30d = "30d"


def is_hindi(locale: str | None) -> bool:
    """Whether a locale tag (`hi`, `hi-IN`, ...) selects the Hindi variant."""

    return locale is not None and locale.strip().lower().startswith("hi")


class BilingualText(BaseModel):
    """A user-facing string rendered in both supported languages."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    en: str
    hi: str

    def for_locale(self, locale: str | None) -> str:
        """Pick the Hindi variant for `hi*` locales, English otherwise."""

        return self.hi if is_hindi(locale) else self.en


class QuickPhrase(BaseModel):
    """A pre-canned example utterance shown as a suggestion chip."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: int
    en: str
    hi: str
    icon: str

    def for_locale(self, locale: str | None) -> str:
        return self.hi if is_hindi(locale) else self.en


class ParsedIntent(BaseModel):
    """Result of parsing one free-text submission."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    service: ServiceType | None = None
    action: ActionType | None = None
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    original_input: str = ""
    matched_keywords: tuple[str, ...] = ()
    suggested_route: str | None = None
    confirmation_message: BilingualText

    @model_validator(mode="after")
    def validate_route(self) -> ParsedIntent:
        """A route is only ever derived from a detected action."""

        if self.action is None and self.suggested_route is not None:
            raise ValueError("suggested_route requires a detected action")
        return self

    def message_for(self, locale: str | None) -> str:
        """Return the confirmation message in the requested display language."""

        return self.confirmation_message.for_locale(locale)


class IntentLogEntry(BaseModel):
    """One assistant interaction as stored in the `intent_logs` table."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    user_id: str | None = None
    input: str
    service: ServiceType | None = None
    action: ActionType | None = None
    confidence: float = Field(ge=0.0, le=1.0)
    route: str | None = None
    steps_saved: int = Field(default=0, ge=0)
    was_confirmed: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @field_validator("user_id")
    @classmethod
    def strip_user_id(cls, value: str | None) -> str | None:
        """Blank user ids are stored as NULL; `input` is kept exactly as typed."""

        if value is None:
            return None
        return value.strip() or None


class ActionCount(BaseModel):
    """An action and how many logged intents resolved to it."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    action: ActionType
    count: int


class IntentAnalytics(BaseModel):
    """Aggregated assistant usage over an analytics period."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    period: AnalyticsPeriod
    total_intents: int = 0
    avg_confidence: float = 0.0
    total_steps_saved: int = 0
    avg_steps_saved: float = 0.0
    estimated_time_saved: int = 0
    success_rate: float = 0.0
    service_breakdown: dict[ServiceType, int] = Field(default_factory=dict)
    action_breakdown: dict[ActionType, int] = Field(default_factory=dict)
    top_intents: list[ActionCount] = Field(default_factory=list)
