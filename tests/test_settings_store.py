"""Tests for audio_transcriber.infrastructure.settings_store."""

from __future__ import annotations

import json
import threading

import pytest
from pydantic import ValidationError

from audio_transcriber.config import TranscriptionSettings
from audio_transcriber.infrastructure import InMemorySettingsStore


class TestInMemorySettingsStore:
    def test_partial_update_keeps_other_fields(self, settings) -> None:
        store = InMemorySettingsStore(settings)

        updated = store.update({"max_file_size": 2048})

        assert updated.max_file_size == 2048
        assert updated.max_duration == settings.max_duration
        assert updated.supported_extensions == settings.supported_extensions
        assert updated.provider_api_key == "secret-key"
        assert store.get() is updated

    def test_none_values_are_ignored(self, settings) -> None:
        store = InMemorySettingsStore(settings)
        assert store.update({"max_duration": None}).max_duration == settings.max_duration

    def test_extensions_are_normalized(self, settings) -> None:
        store = InMemorySettingsStore(settings)
        updated = store.update({"supported_extensions": ["MP3", ".Wav", "mp3"]})
        assert updated.supported_extensions == (".mp3", ".wav")

    def test_invalid_update_leaves_snapshot_untouched(self, settings) -> None:
        store = InMemorySettingsStore(settings)

        with pytest.raises(ValidationError):
            store.update({"max_file_size": 0, "max_duration": 10})
        with pytest.raises(ValidationError):
            store.update({"supported_extensions": []})

        assert store.get() is settings

    def test_snapshot_is_immutable(self, settings) -> None:
        store = InMemorySettingsStore(settings)
        snapshot = store.get()
        store.update({"max_duration": 30})
        assert snapshot.max_duration == settings.max_duration
        with pytest.raises(ValidationError):
            snapshot.max_duration = 5

    def test_concurrent_updates_are_not_lost(self, settings) -> None:
        store = InMemorySettingsStore(settings)

        def set_size() -> None:
            for _ in range(200):
                store.update({"max_file_size": 4096})

        def set_duration() -> None:
            for _ in range(200):
                store.update({"max_duration": 42})

        threads = [threading.Thread(target=set_size), threading.Thread(target=set_duration)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        final = store.get()
        assert final.max_file_size == 4096
        assert final.max_duration == 42

    def test_persists_and_reloads(self, settings, tmp_path) -> None:
        path = tmp_path / "config" / "settings.json"
        InMemorySettingsStore(settings, path=str(path)).update({"max_duration": 99})

        saved = json.loads(path.read_text())
        assert saved["max_duration"] == 99
        assert saved["supported_extensions"] == [".mp3", ".wav"]

        reloaded = InMemorySettingsStore(TranscriptionSettings(), path=str(path))
        assert reloaded.get().max_duration == 99
        assert reloaded.get().provider_api_key == "secret-key"

    def test_unreadable_file_keeps_defaults(self, settings, tmp_path) -> None:
        path = tmp_path / "settings.json"
        path.write_text("{not json")

        store = InMemorySettingsStore(settings, path=str(path))

        assert store.get() is settings

    def test_invalid_file_values_keep_defaults(self, settings, tmp_path) -> None:
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"max_file_size": -1}))

        assert InMemorySettingsStore(settings, path=str(path)).get() is settings

    @pytest.mark.parametrize("extensions", [5, None, {"mp3": True}, 1.5])
    def test_wrongly_typed_extensions_in_file_keep_defaults(
        self, settings, tmp_path, extensions
    ) -> None:
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"supported_extensions": extensions, "max_duration": 7}))

        store = InMemorySettingsStore(settings, path=str(path))

        assert store.get().supported_extensions == settings.supported_extensions
