from __future__ import annotations

import logging
import sys
import types

import pytest

from emoji_search.app.app import EmojiSearchApp
from emoji_search.app.services.search_service import EmojiSearchService
from emoji_search.core import DatasetLoadError, EmojibaseLoader


def test_app_wires_bundled_dataset():
    app = EmojiSearchApp()

    assert app.search_emojis("thumbsup")[0].code == "1F44D"
    assert app.search("thumbsup")["items"][0]["uid"] == "1F44D"


def test_app_passes_icon_dir_to_formatter():
    app = EmojiSearchApp(icon_dir="icons")

    assert app.search("rocket")["items"][0]["icon"] == {"path": "icons/1F680.svg"}


def test_app_uses_injected_service(sample_records):
    service = EmojiSearchService(sample_records)

    app = EmojiSearchApp(search_service=service)

    assert app.search_service is service
    assert [record.code for record in app.search_emojis(":)")] == ["1F642"]


def test_app_uses_injected_loader(sample_records):
    class DummyLoader(EmojibaseLoader):
        def load(self):
            return sample_records

    app = EmojiSearchApp(loader=DummyLoader())

    assert app.search_service.records == sample_records


def test_dataset_failure_is_fatal(tmp_path):
    with pytest.raises(DatasetLoadError):
        EmojiSearchApp(tmp_path / "missing.json")


def test_dataset_failure_is_logged_once(tmp_path, caplog):
    caplog.set_level(logging.INFO, logger="emoji_search")

    with pytest.raises(DatasetLoadError):
        EmojiSearchApp(tmp_path / "missing.json")

    errors = [record for record in caplog.records if record.levelno >= logging.ERROR]
    assert [record.name for record in errors] == ["emoji_search.core.dataset_loader"]


def test_create_gradio_interface_delegates(monkeypatch, sample_records):
    captured = {}

    def fake_create_interface(search_service):
        captured["service"] = search_service
        return "interface"

    fake_module = types.ModuleType("emoji_search.app.ui.gradio")
    fake_module.create_interface = fake_create_interface
    monkeypatch.setitem(sys.modules, "emoji_search.app.ui.gradio", fake_module)

    service = EmojiSearchService(sample_records)
    app = EmojiSearchApp(search_service=service)

    assert app.create_gradio_interface() == "interface"
    assert captured["service"] is service
