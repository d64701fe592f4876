"""Load emojibase-format datasets into immutable search records."""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from ..utils.observability import get_logger
from .records import EmojiRecord

PathLike = Union[str, Path]

_BUNDLED_PACKAGE = "emoji_search"
_BUNDLED_DATA = ("data", "emoji.json")
_BUNDLED_SHORTCODES = ("data", "shortcodes.json")


class DatasetLoadError(RuntimeError):
    """Raised when the emoji dataset or its shortcode table cannot be used."""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


def _read_json(path: Optional[PathLike], bundled: Tuple[str, str]) -> Tuple[Any, str]:
    if path is not None:
        location = str(path)
        try:
            with open(path, "r", encoding="utf-8") as handle:
                return json.load(handle), location
        except (OSError, UnicodeDecodeError) as exc:
            raise DatasetLoadError(
                f"Unable to read {location}: {exc}", path=location
            ) from exc
        except json.JSONDecodeError as exc:
            raise DatasetLoadError(
                f"Malformed JSON in {location}: {exc}", path=location
            ) from exc

    resource = resources.files(_BUNDLED_PACKAGE).joinpath(*bundled)
    location = "/".join((_BUNDLED_PACKAGE,) + bundled)
    try:
        with resource.open("r", encoding="utf-8") as handle:
            return json.load(handle), location
    except (OSError, UnicodeDecodeError) as exc:
        raise DatasetLoadError(
            f"Unable to read bundled {location}: {exc}", path=location
        ) from exc
    except json.JSONDecodeError as exc:
        raise DatasetLoadError(
            f"Malformed JSON in bundled {location}: {exc}", path=location
        ) from exc


def _as_strings(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,) if value else ()
    if isinstance(value, Sequence):
        return tuple(item for item in value if isinstance(item, str) and item)
    return ()


def _coerce_group(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def build_records(
    entries: Sequence[Any],
    shortcodes: Mapping[str, Any],
    *,
    source: str = "<memory>",
) -> Tuple[EmojiRecord, ...]:
    """Left-join ``shortcodes`` onto ``entries`` and validate the result.

    Each entry must carry ``hexcode``, ``label`` and a glyph (``emoji`` or the
    legacy ``unicode`` key); hexcodes must be unique.
    """

    records: List[EmojiRecord] = []
    seen_codes: Dict[str, int] = {}

    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise DatasetLoadError(
                f"Entry #{index} in {source} is not an object", path=source
            )

        code = entry.get("hexcode")
        label = entry.get("label")
        payload = entry.get("emoji") or entry.get("unicode")

        if not isinstance(code, str) or not code:
            raise DatasetLoadError(
                f"Entry #{index} in {source} has no hexcode", path=source
            )
        if not isinstance(label, str) or not label:
            raise DatasetLoadError(
                f"Entry {code} in {source} has no label", path=source
            )
        if not isinstance(payload, str) or not payload:
            raise DatasetLoadError(
                f"Entry {code} in {source} has no emoji glyph", path=source
            )
        if code in seen_codes:
            raise DatasetLoadError(
                f"Duplicate hexcode {code} in {source} "
                f"(entries #{seen_codes[code]} and #{index})",
                path=source,
            )
        seen_codes[code] = index

        records.append(
            EmojiRecord(
                label=label,
                code=code,
                payload=payload,
                tags=_as_strings(entry.get("tags")),
                short_names=_as_strings(shortcodes.get(code)),
                aliases=_as_strings(entry.get("emoticon")),
                group=_coerce_group(entry.get("group")),
            )
        )

    return tuple(records)


class EmojibaseLoader:
    """Read the primary emoji data and its shortcode table once."""

    def __init__(
        self,
        data_path: Optional[PathLike] = None,
        shortcodes_path: Optional[PathLike] = None,
    ) -> None:
        self.data_path = data_path
        self.shortcodes_path = shortcodes_path
        self._records: Optional[Tuple[EmojiRecord, ...]] = None
        self._logger = get_logger(__name__).bind(component="dataset_loader")

    def load(self) -> Tuple[EmojiRecord, ...]:
        """Return the merged record collection, loading it on first use."""

        if self._records is not None:
            return self._records

        try:
            entries, data_source = _read_json(self.data_path, _BUNDLED_DATA)
            shortcodes, shortcode_source = _read_json(
                self.shortcodes_path, _BUNDLED_SHORTCODES
            )
            if not isinstance(entries, list):
                raise DatasetLoadError(
                    f"Expected a list of emoji entries in {data_source}",
                    path=data_source,
                )
            if not isinstance(shortcodes, Mapping):
                raise DatasetLoadError(
                    f"Expected a hexcode mapping in {shortcode_source}",
                    path=shortcode_source,
                )
            records = build_records(entries, shortcodes, source=data_source)
        except DatasetLoadError as exc:
            self._logger.error(
                "Failed to load emoji data",
                context={"path": exc.path, "error": str(exc)},
            )
            raise

        self._logger.info(
            "Emoji data loaded",
            context={
                "data": data_source,
                "shortcodes": shortcode_source,
                "records": len(records),
            },
        )
        self._records = records
        return records


def load_records(
    data_path: Optional[PathLike] = None,
    shortcodes_path: Optional[PathLike] = None,
) -> Tuple[EmojiRecord, ...]:
    """Convenience wrapper returning the records from a fresh loader."""

    return EmojibaseLoader(data_path, shortcodes_path).load()


__all__ = [
    "DatasetLoadError",
    "EmojibaseLoader",
    "build_records",
    "load_records",
]
