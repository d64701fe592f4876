"""Field weights and per-record relevance scoring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable

from .normalizer import normalize_query
from .records import EmojiRecord

DEFAULT_RESULT_LIMIT = 50
DEFAULT_FALLBACK_LIMIT = 20
DEFAULT_FALLBACK_MAX_GROUP = 1


@dataclass(frozen=True)
class FieldWeights:
    """Points awarded for an exact, prefix or substring hit on one value."""

    exact: int
    prefix: int
    contains: int

    def score(self, normalized_value: str, normalized_query: str) -> int:
        """Return the single highest tier matched by ``normalized_value``."""

        if normalized_value == normalized_query:
            return self.exact
        if normalized_value.startswith(normalized_query):
            return self.prefix
        if normalized_query in normalized_value:
            return self.contains
        return 0


LABEL_WEIGHTS = FieldWeights(exact=100, prefix=80, contains=50)
TAG_WEIGHTS = FieldWeights(exact=90, prefix=70, contains=40)
SHORT_NAME_WEIGHTS = FieldWeights(exact=95, prefix=75, contains=45)
ALIAS_WEIGHT = 60


def _score_label(record: EmojiRecord, normalized_query: str) -> int:
    if not record.label:
        return 0
    return LABEL_WEIGHTS.score(normalize_query(record.label), normalized_query)


def _score_values(
    values: Iterable[object],
    weights: FieldWeights,
    normalized_query: str,
) -> int:
    total = 0
    for value in values or ():
        if not isinstance(value, str):
            continue
        total += weights.score(normalize_query(value), normalized_query)
    return total


def _score_alias(aliases: Iterable[object], raw_query: str) -> int:
    # Emoticons are punctuation; they are compared against the raw query text.
    # Each variant is tested on its own and the weight is awarded once.
    for alias in aliases or ():
        if isinstance(alias, str) and raw_query in alias:
            return ALIAS_WEIGHT
    return 0


def score_breakdown(
    record: EmojiRecord,
    normalized_query: str,
    raw_query: str,
) -> Dict[str, int]:
    """Return the contribution of every field plus their ``total``."""

    breakdown = {
        "label": _score_label(record, normalized_query),
        "tags": _score_values(record.tags, TAG_WEIGHTS, normalized_query),
        "short_names": _score_values(
            record.short_names, SHORT_NAME_WEIGHTS, normalized_query
        ),
        "alias": _score_alias(record.aliases, raw_query),
    }
    breakdown["total"] = sum(breakdown.values())
    return breakdown


def score_record(record: EmojiRecord, normalized_query: str, raw_query: str) -> int:
    """Score ``record`` against a query; field contributions are summed."""

    return (
        _score_label(record, normalized_query)
        + _score_values(record.tags, TAG_WEIGHTS, normalized_query)
        + _score_values(record.short_names, SHORT_NAME_WEIGHTS, normalized_query)
        + _score_alias(record.aliases, raw_query)
    )


__all__ = [
    "ALIAS_WEIGHT",
    "DEFAULT_FALLBACK_LIMIT",
    "DEFAULT_FALLBACK_MAX_GROUP",
    "DEFAULT_RESULT_LIMIT",
    "FieldWeights",
    "LABEL_WEIGHTS",
    "SHORT_NAME_WEIGHTS",
    "TAG_WEIGHTS",
    "score_breakdown",
    "score_record",
]
