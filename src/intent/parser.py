"""Keyword-based intent parser for the smart assistant.

The parser is deterministic and total: any string produces a valid `ParsedIntent`. Inputs with no
recognizable keywords simply come back with null detections, zero confidence and the fallback
message.
"""

from __future__ import annotations

import logging

from src.intent.dictionaries import ACTION_KEYWORDS, SERVICE_KEYWORDS
from src.intent.normalize import normalize_text, tokenize
from src.intent.routing import build_confirmation_message, resolve_route
from src.intent.schema import ParsedIntent
from src.intent.scoring import add_phrase_bonus, combine_confidence, score_tokens

logger = logging.getLogger(__name__)


def _unique(*groups: tuple[str, ...]) -> tuple[str, ...]:
    """Concatenate token groups, keeping first occurrences only."""

    seen: set[str] = set()
    ordered: list[str] = []
    for group in groups:
        for token in group:
            if token in seen:
                continue
            seen.add(token)
            ordered.append(token)
    return tuple(ordered)


def parse_intent(text: str) -> ParsedIntent:
    """Parse free text (English, Hindi or Romanized Hindi) into a `ParsedIntent`."""

    raw = text or ""
    tokens = tokenize(raw)

    service_result = score_tokens(tokens, SERVICE_KEYWORDS)
    action_result = add_phrase_bonus(
        score_tokens(tokens, ACTION_KEYWORDS),
        normalize_text(raw),
        ACTION_KEYWORDS,
    )

    service, service_score = service_result.best()
    action, action_score = action_result.best()

    confidence = combine_confidence(
        service_score=service_score,
        action_score=action_score,
        has_service=service is not None,
        has_action=action is not None,
    )

    parsed = ParsedIntent(
        service=service,
        action=action,
        confidence=confidence,
        original_input=raw,
        matched_keywords=_unique(service_result.matched, action_result.matched),
        suggested_route=resolve_route(action, service),
        confirmation_message=build_confirmation_message(service, action),
    )

    logger.debug(
        "parsed service=%s action=%s confidence=%.2f tokens=%d",
        parsed.service,
        parsed.action,
        parsed.confidence,
        len(tokens),
    )
    return parsed
