"""Search service orchestrating emoji lookup and result formatting."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from emoji_search.core import (
    DEFAULT_FALLBACK_LIMIT,
    DEFAULT_FALLBACK_MAX_GROUP,
    DEFAULT_RESULT_LIMIT,
    EmojiRecord,
    fallback_records,
    is_empty_query,
    normalize_query,
    rank_matches,
    score_breakdown,
    score_records,
)

from ...utils.observability import (
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)
from .result_formatter import AlfredResultFormatter


class EmojiSearchService:
    """Run queries against one immutable record collection.

    The service owns no mutable search state; every call scores the same
    collection afresh. Logging, metrics and tracing wrap each request.
    """

    def __init__(
        self,
        records: Sequence[EmojiRecord],
        *,
        formatter: Optional[AlfredResultFormatter] = None,
        limit: int = DEFAULT_RESULT_LIMIT,
        fallback_limit: int = DEFAULT_FALLBACK_LIMIT,
        fallback_max_group: int = DEFAULT_FALLBACK_MAX_GROUP,
    ) -> None:
        self.records = tuple(records)
        self.formatter = formatter or AlfredResultFormatter()
        self.limit = limit
        self.fallback_limit = fallback_limit
        self.fallback_max_group = fallback_max_group

        self._logger = get_logger(__name__).bind(component="emoji_search_service")

        self._metric_request_total = create_counter(
            "emoji_search_requests_total",
            "Total emoji search requests received.",
        )
        self._metric_request_duration = create_histogram(
            "emoji_search_request_seconds",
            "Latency of emoji search requests.",
        )
        self._metric_fallback_events = create_counter(
            "emoji_search_fallback_events_total",
            "Fallback events triggered within the emoji search pipeline.",
            label_names=("stage",),
        )

        self._logger.info(
            "Emoji search service initialised",
            context={
                "records": len(self.records),
                "limit": limit,
                "fallback_limit": fallback_limit,
                "fallback_max_group": fallback_max_group,
            },
        )

    # Public API ------------------------------------------------------------
    def search_emojis(self, query: Any) -> List[EmojiRecord]:
        """Return the ranked records for ``query`` (or the fallback list)."""

        request_context = {
            "query": query if isinstance(query, str) else None,
            "query_type": type(query).__name__,
        }
        self._metric_request_total.inc()
        self._logger.debug("Search request received", context=request_context)

        with start_span(
            "emoji_search.request",
            {"query.length": len(query) if isinstance(query, str) else 0},
        ) as span:
            try:
                with self._metric_request_duration.time():
                    results = self._search_internal(query, span)
            except Exception as exc:
                failure_context = dict(request_context)
                failure_context["error"] = str(exc)
                self._logger.error("Search request failed", context=failure_context)
                record_exception(span, exc)
                raise

            add_span_attributes(span, {"result.total": len(results)})
            self._logger.debug(
                "Search request completed",
                context={"query": request_context["query"], "results": len(results)},
            )
            return results

    def format_results(self, query: Any, records: Sequence[EmojiRecord]) -> Dict[str, Any]:
        return self.formatter.format_results(query, records)

    def search(self, query: Any) -> Dict[str, Any]:
        """Return the full script-filter payload for ``query``."""

        return self.format_results(query, self.search_emojis(query))

    def explain(self, query: Any) -> List[Dict[str, Any]]:
        """Return one row per ranked result with its per-field scores.

        Fallback results for an empty query were never scored and report
        zero for every field.
        """

        if is_empty_query(query):
            return [
                self._explain_row(record, None)
                for record in fallback_records(
                    self.records,
                    limit=self.fallback_limit,
                    max_group=self.fallback_max_group,
                )
            ]

        normalized = normalize_query(query)
        ranked = rank_matches(score_records(self.records, query), limit=self.limit)
        return [
            self._explain_row(match.record, score_breakdown(match.record, normalized, query))
            for match in ranked
        ]

    # Internal helpers ------------------------------------------------------
    def _search_internal(self, query: Any, span: Any) -> List[EmojiRecord]:
        if is_empty_query(query):
            self._record_fallback("empty_query", span=span)
            return fallback_records(
                self.records,
                limit=self.fallback_limit,
                max_group=self.fallback_max_group,
            )

        ranked = rank_matches(score_records(self.records, query), limit=self.limit)
        if not ranked:
            self._record_fallback("no_match", span=span, details={"query": query})
        return [match.record for match in ranked]

    def _record_fallback(
        self,
        stage: str,
        *,
        span: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._metric_fallback_events.labels(stage=stage).inc()
        context: Dict[str, Any] = {"stage": stage}
        if details:
            context.update({key: value for key, value in details.items() if value is not None})
        self._logger.info("Fallback engaged", context=context)
        if span is not None:
            add_span_attributes(span, {f"fallback.{stage}": True})

    @staticmethod
    def _explain_row(
        record: EmojiRecord, breakdown: Optional[Dict[str, int]]
    ) -> Dict[str, Any]:
        fields = dict(breakdown) if breakdown else {}
        total = fields.pop("total", 0)
        return {
            "code": record.code,
            "emoji": record.payload,
            "label": record.label,
            "tags": list(record.tags),
            "short_names": list(record.short_names),
            "score": total,
            "fields": {
                name: fields.get(name, 0)
                for name in ("label", "tags", "short_names", "alias")
            },
        }


__all__ = ["EmojiSearchService"]
