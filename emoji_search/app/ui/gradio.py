"""User interface assembly for the Gradio front-end."""

from __future__ import annotations

from typing import Any, List, Tuple

import gradio as gr

from ..services.search_service import EmojiSearchService

RESULT_HEADERS = ["Emoji", "Label", "Tags", "Short names", "Score"]


def _result_rows(search_service: EmojiSearchService, query: str) -> List[List[Any]]:
    return [
        [
            row["emoji"],
            row["label"],
            ", ".join(row["tags"]),
            ", ".join(f":{name}:" for name in row["short_names"]),
            row["score"],
        ]
        for row in search_service.explain(query)
    ]


def _status_message(query: str, count: int) -> str:
    if not query:
        return f"Showing {count} popular emojis. Type to search."
    if count == 0:
        return f'No emojis found for "{query}".'
    noun = "match" if count == 1 else "matches"
    return f'{count} {noun} for "{query}".'


def create_interface(search_service: EmojiSearchService) -> gr.Blocks:
    """Construct the interactive Gradio Blocks UI."""

    def search_interface(query: str) -> Tuple[List[List[Any]], str]:
        query = query or ""
        rows = _result_rows(search_service, query)
        return rows, _status_message(query, len(rows))

    initial_rows, initial_status = search_interface("")

    with gr.Blocks(title="Emoji Search") as interface:
        gr.Markdown("# 🔎 Emoji Search")
        gr.Markdown(
            "Matches names, tags, shortcodes and emoticons. "
            "Exact matches rank above prefixes, prefixes above substrings."
        )

        with gr.Row():
            query_input = gr.Textbox(
                label="Search",
                placeholder="e.g. thumbs, heart, :) or pinata",
                lines=1,
                scale=4,
            )
            search_btn = gr.Button("Search", variant="primary", scale=1)

        status_md = gr.Markdown(value=initial_status)
        results_df = gr.Dataframe(
            headers=RESULT_HEADERS,
            value=initial_rows,
            label="Results",
            wrap=True,
            interactive=False,
        )

        query_input.change(
            fn=search_interface,
            inputs=[query_input],
            outputs=[results_df, status_md],
        )
        query_input.submit(
            fn=search_interface,
            inputs=[query_input],
            outputs=[results_df, status_md],
        )
        search_btn.click(
            fn=search_interface,
            inputs=[query_input],
            outputs=[results_df, status_md],
        )

    return interface


__all__ = ["RESULT_HEADERS", "create_interface"]
