"""Keyword scoring for service/action detection.

Each keyword table is scored independently. A token earns 1.0 for an exact keyword hit, or the
similarity of the first fuzzy keyword (in table order) that clears `FUZZY_THRESHOLD`. Action scores
additionally get a flat `PHRASE_BONUS` for every action keyword found verbatim in the raw input, so
multi-word phrases like "not working" are not under-scored by tokenization.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Generic, TypeVar

EXACT_MATCH_SCORE = 1.0
SUBSTRING_SCORE = 0.9
PREFIX_SCORE = 0.8
FUZZY_THRESHOLD = 0.7
PHRASE_BONUS = 1.5

T = TypeVar("T")


def similarity(first: str, second: str) -> float:
    """Score how closely two strings match (containment based, not edit distance).

    Returns:
        1.0 when both are empty, 0.9 when the shorter string occurs inside the longer one,
        0.8 for a prefix relationship, otherwise 0.0.
    """

    if len(first) > len(second):
        longer, shorter = first, second
    else:
        longer, shorter = second, first

    if not longer:
        return 1.0

    if shorter in longer:
        return SUBSTRING_SCORE

    # Prefix implies containment, so this tier is normally shadowed by the one above.
    if longer.startswith(shorter) or shorter.startswith(longer):
        return PREFIX_SCORE

    return 0.0


@dataclass(frozen=True)
class TableScore(Generic[T]):
    """Accumulated scores for one keyword table plus the tokens that contributed."""

    scores: dict[T, float]
    matched: tuple[str, ...]

    def best(self) -> tuple[T | None, float]:
        """Return the strictly highest-scoring value (first one wins ties) and its score."""

        winner: T | None = None
        best_score = 0.0
        for value, score in self.scores.items():
            if score > best_score:
                winner = value
                best_score = score
        return winner, best_score


def _match_token(token: str, table: Mapping[str, T]) -> tuple[T, float] | None:
    if token in table:
        return table[token], EXACT_MATCH_SCORE

    for keyword, value in table.items():
        score = similarity(token, keyword)
        if score > FUZZY_THRESHOLD:
            return value, score

    return None


def score_tokens(tokens: Iterable[str], table: Mapping[str, T]) -> TableScore[T]:
    """Score every token against a keyword table."""

    scores: dict[T, float] = {}
    matched: list[str] = []

    for token in tokens:
        hit = _match_token(token, table)
        if hit is None:
            continue
        value, score = hit
        scores[value] = scores.get(value, 0.0) + score
        matched.append(token)

    return TableScore(scores=scores, matched=tuple(matched))


def add_phrase_bonus(result: TableScore[T], text: str, table: Mapping[str, T]) -> TableScore[T]:
    """Add `PHRASE_BONUS` for every keyword occurring as a substring of the lowercased text."""

    scores = dict(result.scores)
    for keyword, value in table.items():
        if keyword in text:
            scores[value] = scores.get(value, 0.0) + PHRASE_BONUS
    return TableScore(scores=scores, matched=result.matched)


def component_confidence(score: float) -> float:
    """Map a raw table score onto [0, 1]; two exact hits saturate."""

    if score <= 0:
        return 0.0
    return min(score / 2, 1.0)


def combine_confidence(
        *,
        service_score: float,
        action_score: float,
        has_service: bool,
        has_action: bool,
) -> float:
    """Blend service and action confidence, weighting the action more heavily."""

    service_confidence = component_confidence(service_score)
    action_confidence = component_confidence(action_score)

    if has_service and has_action:
        confidence = service_confidence * 0.4 + action_confidence * 0.6
    elif has_action:
        confidence = action_confidence * 0.7
    elif has_service:
        confidence = service_confidence * 0.5
    else:
        confidence = 0.0

    return round_confidence(confidence)


def round_confidence(value: float) -> float:
    """Round half-up to two decimals, clamped to [0, 1]."""

    rounded = math.floor(value * 100 + 0.5) / 100
    return min(max(rounded, 0.0), 1.0)
