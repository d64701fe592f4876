"""Query scoring, ranking and fallback policy over a loaded emoji collection.

Every function here is stateless: the caller passes the immutable record
collection on each call, and nothing is cached between queries.
"""

from __future__ import annotations

from itertools import islice
from typing import Any, List, Sequence

from .normalizer import normalize_query
from .records import EmojiRecord, ScoredMatch
from .scorer import (
    DEFAULT_FALLBACK_LIMIT,
    DEFAULT_FALLBACK_MAX_GROUP,
    DEFAULT_RESULT_LIMIT,
    score_record,
)


def is_empty_query(query: Any) -> bool:
    """Return whether ``query`` should bypass scoring entirely."""

    return not isinstance(query, str) or len(query) == 0


def fallback_records(
    records: Sequence[EmojiRecord],
    *,
    limit: int = DEFAULT_FALLBACK_LIMIT,
    max_group: int = DEFAULT_FALLBACK_MAX_GROUP,
) -> List[EmojiRecord]:
    """Return the leading records from the most common groups.

    Records without a group are never part of the fallback.
    """

    if limit <= 0:
        return []
    eligible = (
        record
        for record in records
        if record.group is not None and record.group <= max_group
    )
    return list(islice(eligible, limit))


def score_records(records: Sequence[EmojiRecord], query: str) -> List[ScoredMatch]:
    """Score every record and keep the ones that matched, in collection order."""

    normalized_query = normalize_query(query)
    raw_query = query if isinstance(query, str) else ""

    matches: List[ScoredMatch] = []
    for record in records:
        score = score_record(record, normalized_query, raw_query)
        if score > 0:
            matches.append(ScoredMatch(record=record, score=score))
    return matches


def rank_matches(
    matches: Sequence[ScoredMatch],
    limit: int = DEFAULT_RESULT_LIMIT,
) -> List[ScoredMatch]:
    """Order matches by score, highest first, and keep the top ``limit``.

    ``sorted`` is stable, so equal scores keep their collection order.
    """

    if limit <= 0:
        return []
    ranked = sorted(matches, key=lambda match: -match.score)
    return ranked[:limit]


def search_emojis(
    records: Sequence[EmojiRecord],
    query: Any,
    *,
    limit: int = DEFAULT_RESULT_LIMIT,
    fallback_limit: int = DEFAULT_FALLBACK_LIMIT,
    fallback_max_group: int = DEFAULT_FALLBACK_MAX_GROUP,
) -> List[EmojiRecord]:
    """Return the records that best match ``query`` in rank order.

    An empty (or non-string) query returns the fallback selection instead of
    scored results. A query that matches nothing returns an empty list.
    """

    if is_empty_query(query):
        return fallback_records(
            records, limit=fallback_limit, max_group=fallback_max_group
        )

    ranked = rank_matches(score_records(records, query), limit=limit)
    return [match.record for match in ranked]


__all__ = [
    "fallback_records",
    "is_empty_query",
    "rank_matches",
    "score_records",
    "search_emojis",
]
