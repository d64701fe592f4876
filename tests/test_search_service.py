"""Instrumentation and payload tests for :mod:`search_service`."""

from __future__ import annotations

import logging

import pytest
from prometheus_client import REGISTRY

from emoji_search.app.services.result_formatter import AlfredResultFormatter
from emoji_search.app.services.search_service import EmojiSearchService


def _sample(name: str, labels: dict | None = None) -> float:
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


@pytest.fixture
def service(sample_records) -> EmojiSearchService:
    return EmojiSearchService(sample_records)


def test_search_returns_script_filter_payload(service):
    payload = service.search("thumbsup")

    assert [item["uid"] for item in payload["items"]] == ["1F44D"]


def test_search_emojis_delegates_to_engine(service):
    assert [record.code for record in service.search_emojis("like")] == [
        "1F44D",
        "1F44E",
    ]


def test_no_match_search_returns_sentinel(service):
    payload = service.search("zzzz")

    assert len(payload["items"]) == 1
    assert payload["items"][0]["valid"] is False


def test_formatter_is_injectable(sample_records, thumbs_up):
    service = EmojiSearchService(
        sample_records, formatter=AlfredResultFormatter(icon_dir="icons")
    )

    item = service.format_results("thumbs", [thumbs_up])["items"][0]

    assert item["icon"] == {"path": "icons/1F44D.svg"}


def test_limits_are_configurable(sample_records):
    service = EmojiSearchService(sample_records, limit=1, fallback_limit=2)

    assert len(service.search_emojis("face")) == 1
    assert len(service.search_emojis("")) == 2


def test_request_counter_and_histogram_increment(service):
    requests_before = _sample("emoji_search_requests_total")
    latency_before = _sample("emoji_search_request_seconds_count")

    service.search_emojis("heart")
    service.search_emojis("")

    assert _sample("emoji_search_requests_total") == requests_before + 2
    assert _sample("emoji_search_request_seconds_count") == latency_before + 2


def test_fallback_events_are_labelled_by_stage(service):
    empty_before = _sample("emoji_search_fallback_events_total", {"stage": "empty_query"})
    miss_before = _sample("emoji_search_fallback_events_total", {"stage": "no_match"})

    service.search_emojis("")
    service.search_emojis(None)
    service.search_emojis("zzzz")
    service.search_emojis("heart")

    assert (
        _sample("emoji_search_fallback_events_total", {"stage": "empty_query"})
        == empty_before + 2
    )
    assert (
        _sample("emoji_search_fallback_events_total", {"stage": "no_match"})
        == miss_before + 1
    )


def test_second_service_reuses_registered_metrics(sample_records):
    first = EmojiSearchService(sample_records)
    second = EmojiSearchService(sample_records)
    before = _sample("emoji_search_requests_total")

    first.search_emojis("heart")
    second.search_emojis("heart")

    assert _sample("emoji_search_requests_total") == before + 2


def test_fallback_is_logged_with_stage(service, caplog):
    caplog.set_level(logging.INFO, logger="emoji_search.app.services.search_service")

    service.search_emojis("zzzz")

    messages = [record.message for record in caplog.records]
    assert any("Fallback engaged" in message for message in messages)
    assert any('"stage": "no_match"' in message for message in messages)
    assert any('"component": "emoji_search_service"' in message for message in messages)


def test_explain_reports_field_contributions(service):
    rows = service.explain("heart")

    assert rows == [
        {
            "code": "2764",
            "emoji": service.records[-1].payload,
            "label": "red heart",
            "tags": ["heart", "love"],
            "short_names": ["heart"],
            "score": 235,
            "fields": {"label": 50, "tags": 90, "short_names": 95, "alias": 0},
        }
    ]


def test_explain_follows_search_order(service):
    rows = service.explain("Thumbs")

    assert [row["code"] for row in rows] == [
        record.code for record in service.search_emojis("Thumbs")
    ]
    assert [row["score"] for row in rows] == [155, 155]


def test_explain_empty_query_lists_fallback_with_zero_scores(service):
    rows = service.explain("")

    assert [row["code"] for row in rows] == [
        record.code for record in service.search_emojis("")
    ]
    assert all(row["score"] == 0 for row in rows)
