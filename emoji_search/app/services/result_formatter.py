"""Render ranked emoji records as launcher script-filter items."""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Sequence

from emoji_search.core import EmojiRecord

NO_RESULTS_TITLE = "No emojis found"
DEFAULT_ICON = {"type": "default", "path": "icon.png"}

_WHITESPACE_RUN = re.compile(r"\s+")


class AlfredResultFormatter:
    """Build the ``{"items": [...]}`` payload an Alfred script filter expects.

    Items carry only the keys that have a value; optional fields are left out
    rather than emitted as ``null``.
    """

    def __init__(self, icon_dir: Optional[str] = None) -> None:
        self.icon_dir = icon_dir.rstrip("/") if icon_dir else None

    def format_results(
        self, query: Any, records: Sequence[EmojiRecord]
    ) -> Dict[str, List[Dict[str, Any]]]:
        """Map ``records`` 1:1 to items, or return the no-results sentinel."""

        if not records:
            return {"items": [self.no_results_item(query)]}
        return {"items": [self.format_item(record) for record in records]}

    def format_item(self, record: EmojiRecord) -> Dict[str, Any]:
        tags = ", ".join(record.tags)
        short_names = ", ".join(record.short_names)

        subtitle = record.label
        if tags:
            subtitle += f" ({tags})"
        if short_names:
            subtitle += f" :{short_names}:"

        shortcode = record.primary_short_name or _WHITESPACE_RUN.sub("_", record.label)
        item: Dict[str, Any] = {
            "uid": record.code,
            "title": f"{record.payload} {record.label}",
            "subtitle": subtitle,
            "arg": record.payload,
            "autocomplete": record.label,
            "valid": True,
            "mods": {
                "cmd": {
                    "subtitle": f'Copy "{record.label}" to clipboard',
                    "arg": record.label,
                    "valid": True,
                },
                "alt": {
                    "subtitle": f'Copy ":{shortcode}:" to clipboard',
                    "arg": f":{shortcode}:",
                    "valid": True,
                },
            },
            "text": {
                "copy": record.payload,
                "largetype": (
                    f"{record.payload}\n\n{record.label}\n\n"
                    f"Tags: {tags}\nShortcodes: {short_names}"
                ),
            },
        }
        if self.icon_dir:
            item["icon"] = {"path": f"{self.icon_dir}/{record.code}.svg"}
        return item

    @staticmethod
    def no_results_item(query: Any) -> Dict[str, Any]:
        shown = query if isinstance(query, str) else ""
        return {
            "title": NO_RESULTS_TITLE,
            "subtitle": f'No results for "{shown}"',
            "valid": False,
            "icon": dict(DEFAULT_ICON),
        }


__all__ = ["AlfredResultFormatter", "DEFAULT_ICON", "NO_RESULTS_TITLE"]
