"""Core normalization, scoring and ranking for emoji search."""

from .dataset_loader import DatasetLoadError, EmojibaseLoader, build_records, load_records
from .engine import (
    fallback_records,
    is_empty_query,
    rank_matches,
    score_records,
    search_emojis,
)
from .normalizer import deburr, normalize_query
from .records import EmojiRecord, ScoredMatch
from .scorer import (
    ALIAS_WEIGHT,
    DEFAULT_FALLBACK_LIMIT,
    DEFAULT_FALLBACK_MAX_GROUP,
    DEFAULT_RESULT_LIMIT,
    LABEL_WEIGHTS,
    SHORT_NAME_WEIGHTS,
    TAG_WEIGHTS,
    FieldWeights,
    score_breakdown,
    score_record,
)

__all__ = [
    "ALIAS_WEIGHT",
    "DEFAULT_FALLBACK_LIMIT",
    "DEFAULT_FALLBACK_MAX_GROUP",
    "DEFAULT_RESULT_LIMIT",
    "DatasetLoadError",
    "EmojiRecord",
    "EmojibaseLoader",
    "FieldWeights",
    "LABEL_WEIGHTS",
    "SHORT_NAME_WEIGHTS",
    "ScoredMatch",
    "TAG_WEIGHTS",
    "build_records",
    "deburr",
    "fallback_records",
    "is_empty_query",
    "load_records",
    "normalize_query",
    "rank_matches",
    "score_breakdown",
    "score_record",
    "score_records",
    "search_emojis",
]
