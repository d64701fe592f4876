"""Application wiring for the emoji search project."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

if __package__ in {None, ""}:
    import sys
    from pathlib import Path

    repo_root = Path(__file__).resolve().parents[2]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))

from emoji_search.core import EmojibaseLoader, EmojiRecord
from emoji_search.core.dataset_loader import PathLike
from emoji_search.utils import configure_logging
from emoji_search.utils.observability import get_logger

from emoji_search.app.services.result_formatter import AlfredResultFormatter
from emoji_search.app.services.search_service import EmojiSearchService


class EmojiSearchApp:
    """High-level application facade bundling dependencies."""

    def __init__(
        self,
        data_path: Optional[PathLike] = None,
        shortcodes_path: Optional[PathLike] = None,
        *,
        loader: Optional[EmojibaseLoader] = None,
        search_service: Optional[EmojiSearchService] = None,
        icon_dir: Optional[str] = None,
    ) -> None:
        self._logger = get_logger(__name__).bind(component="app_facade")
        self._logger.info(
            "Initialising application facade",
            context={
                "data_path": str(data_path) if data_path else None,
                "shortcodes_path": str(shortcodes_path) if shortcodes_path else None,
            },
        )

        if search_service is not None:
            self.loader = loader
            self.search_service = search_service
        else:
            self.loader = loader or EmojibaseLoader(data_path, shortcodes_path)
            records = self.loader.load()
            self.search_service = EmojiSearchService(
                records,
                formatter=AlfredResultFormatter(icon_dir=icon_dir),
            )

        self._logger.info(
            "Application dependencies wired",
            context={"records": len(self.search_service.records)},
        )

    # Public API ------------------------------------------------------------
    def search(self, query: Any) -> Dict[str, Any]:
        return self.search_service.search(query)

    def search_emojis(self, query: Any) -> List[EmojiRecord]:
        return self.search_service.search_emojis(query)

    def create_gradio_interface(self):
        from emoji_search.app.ui.gradio import create_interface

        return create_interface(self.search_service)


def main() -> None:
    configure_logging()
    app = EmojiSearchApp()
    interface = app.create_gradio_interface()
    interface.launch(
        server_name="0.0.0.0",
        server_port=7860,
    )


__all__ = ["EmojiSearchApp", "main"]


if __name__ == "__main__":
    main()
