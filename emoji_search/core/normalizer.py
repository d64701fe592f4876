"""Case and accent folding shared by queries and searchable fields."""

from __future__ import annotations

import re
import unicodedata
from typing import Any, Dict

# Combining diacritical marks, their extensions and supplements, the marks
# for symbols, and the combining half marks.
_COMBINING_MARKS = re.compile(
    "[\u0300-\u036f\u1ab0-\u1aff\u1dc0-\u1dff\u20d0-\u20ff\ufe20-\ufe2f]"
)

# Latin letters with no canonical decomposition. Input is lower-cased first,
# so only lowercase forms are listed.
_LETTER_FOLDS: Dict[int, str] = str.maketrans(
    {
        "æ": "ae",
        "ø": "o",
        "ß": "ss",
        "đ": "d",
        "ł": "l",
        "þ": "th",
        "ð": "d",
        "ħ": "h",
        "ı": "i",
        "œ": "oe",
        "ŀ": "l",
        "ĳ": "ij",
        "ſ": "s",
        "ŉ": "'n",
        "ŧ": "t",
        "ŋ": "n",
        "ĸ": "k",
    }
)


def deburr(text: str) -> str:
    """Replace accented Latin letters with their unaccented base letters."""

    decomposed = unicodedata.normalize("NFD", text)
    stripped = _COMBINING_MARKS.sub("", decomposed).translate(_LETTER_FOLDS)
    return unicodedata.normalize("NFC", stripped)


def normalize_query(value: Any) -> str:
    """Fold ``value`` for comparison: lower-case, trimmed, accents removed.

    Non-string input yields ``""``. The result is stable under repeated
    application, so fields and queries can be normalized independently.
    """

    if not isinstance(value, str):
        return ""
    return deburr(value.lower().strip()).strip()


__all__ = ["deburr", "normalize_query"]
