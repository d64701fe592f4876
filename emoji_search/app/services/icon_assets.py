"""Generate SVG icon assets for the launcher result list."""

from __future__ import annotations

import json
from html import escape
from pathlib import Path
from typing import Dict, Iterable, Union

from emoji_search.core import EmojiRecord

from ...utils.observability import get_logger

ICONS_DIRNAME = "icons"
INDEX_FILENAME = "icon-index.json"

_FONT_STACK = "Apple Color Emoji, Segoe UI Emoji, Noto Color Emoji, system-ui"
_SVG_TEMPLATE = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<svg xmlns="http://www.w3.org/2000/svg" width="64" height="64" viewBox="0 0 64 64">\n'
    '  <text x="32" y="48" font-size="48" text-anchor="middle" '
    'font-family="{font_stack}">{glyph}</text>\n'
    "</svg>\n"
)

_logger = get_logger(__name__).bind(component="icon_assets")


def render_svg(glyph: str) -> str:
    """Return a 64x64 SVG document drawing ``glyph`` with an emoji font."""

    return _SVG_TEMPLATE.format(font_stack=_FONT_STACK, glyph=escape(glyph, quote=False))


def generate_icons(records: Iterable[EmojiRecord], out_dir: Union[str, Path]) -> int:
    """Write one SVG per record plus an ``icon-index.json`` lookup table.

    Returns the number of icons written. Existing files are overwritten.
    """

    root = Path(out_dir)
    icons_dir = root / ICONS_DIRNAME
    icons_dir.mkdir(parents=True, exist_ok=True)

    index: Dict[str, str] = {}
    for record in records:
        if not record.payload:
            continue
        filename = f"{record.code}.svg"
        (icons_dir / filename).write_text(render_svg(record.payload), encoding="utf-8")
        index[record.code] = f"{ICONS_DIRNAME}/{filename}"

    (root / INDEX_FILENAME).write_text(
        json.dumps(index, indent=2, ensure_ascii=False), encoding="utf-8"
    )

    _logger.info(
        "Emoji icons generated",
        context={"out_dir": str(root), "icons": len(index)},
    )
    return len(index)


__all__ = ["INDEX_FILENAME", "ICONS_DIRNAME", "generate_icons", "render_svg"]
