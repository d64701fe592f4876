"""Shared dataclasses for the emoji search engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class EmojiRecord:
    """A single searchable emoji entry from the loaded dataset."""

    label: str
    code: str
    payload: str
    tags: Tuple[str, ...] = ()
    short_names: Tuple[str, ...] = ()
    aliases: Tuple[str, ...] = ()
    group: Optional[int] = None

    @property
    def primary_short_name(self) -> str:
        """Return the first string short name, or ``""`` when none exist."""

        for short_name in self.short_names:
            if isinstance(short_name, str) and short_name:
                return short_name
        return ""


@dataclass(frozen=True)
class ScoredMatch:
    """Pairs a record with the score it earned for one query."""

    record: EmojiRecord
    score: int


__all__ = ["EmojiRecord", "ScoredMatch"]
