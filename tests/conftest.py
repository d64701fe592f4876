import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from emoji_search.core import EmojiRecord


def make_record(label: str, code: str, payload: str = "?", **fields) -> EmojiRecord:
    """Build a record with sensible defaults for ranking tests."""

    return EmojiRecord(label=label, code=code, payload=payload, **fields)


@pytest.fixture
def thumbs_up() -> EmojiRecord:
    return EmojiRecord(
        label="thumbs up",
        code="1F44D",
        payload="👍",
        tags=("like", "good", "yes"),
        short_names=("thumbsup", "+1"),
        group=1,
    )


@pytest.fixture
def sample_records(thumbs_up: EmojiRecord) -> tuple:
    """Small collection in a fixed order covering every scored field."""

    return (
        EmojiRecord(
            label="grinning face",
            code="1F600",
            payload="😀",
            tags=("face", "grin"),
            short_names=("grinning",),
            aliases=(":D",),
            group=0,
        ),
        EmojiRecord(
            label="slightly smiling face",
            code="1F642",
            payload="🙂",
            tags=("face", "smile"),
            short_names=("slightly_smiling_face",),
            aliases=(":)",),
            group=0,
        ),
        thumbs_up,
        EmojiRecord(
            label="thumbs down",
            code="1F44E",
            payload="👎",
            tags=("bad", "dislike", "no"),
            short_names=("thumbsdown", "-1"),
            group=1,
        ),
        EmojiRecord(
            label="piñata",
            code="1FA85",
            payload="🪅",
            tags=("celebration", "party"),
            group=6,
        ),
        EmojiRecord(
            label="regional indicator A",
            code="1F1E6",
            payload="🇦",
        ),
        EmojiRecord(
            label="red heart",
            code="2764",
            payload="❤️",
            tags=("heart", "love"),
            short_names=("heart",),
            aliases=("<3",),
            group=0,
        ),
    )
