"""Tests for audio_transcriber.config."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from audio_transcriber.config import TranscriptionSettings, load_config


class TestTranscriptionSettings:
    def test_defaults(self) -> None:
        settings = TranscriptionSettings()
        assert settings.max_file_size == 25 * 1024 * 1024
        assert settings.max_duration == 1800
        assert settings.supported_extensions == (".mp3", ".wav", ".m4a", ".flac", ".ogg")
        assert not settings.has_api_key

    def test_rejects_non_positive_size(self) -> None:
        with pytest.raises(ValidationError):
            TranscriptionSettings(max_file_size=0)

    def test_rejects_empty_extensions(self) -> None:
        with pytest.raises(ValidationError):
            TranscriptionSettings(supported_extensions=[" ", ""])

    def test_accepts_comma_separated_extensions(self) -> None:
        settings = TranscriptionSettings(supported_extensions="mp3, .FLAC")
        assert settings.supported_extensions == (".mp3", ".flac")

    def test_non_string_extension_entries_are_skipped(self) -> None:
        settings = TranscriptionSettings(supported_extensions=[".mp3", None, 3, "WAV"])
        assert settings.supported_extensions == (".mp3", ".wav")

    @pytest.mark.parametrize("value", [5, 1.5, {"mp3": True}])
    def test_non_list_extensions_raise_validation_error(self, value) -> None:
        with pytest.raises(ValidationError):
            TranscriptionSettings(supported_extensions=value)

    def test_api_key_not_in_repr(self) -> None:
        assert "top-secret" not in repr(TranscriptionSettings(provider_api_key="top-secret"))


class TestLoadConfig:
    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("ASSEMBLYAI_API_KEY", "env-key")
        monkeypatch.setenv("TRANSCRIPTION_MAX_FILE_SIZE", "1000")
        monkeypatch.setenv("TRANSCRIPTION_SUPPORTED_EXTENSIONS", "wav,MP3")
        monkeypatch.setenv("TRANSCRIPTION_POLL_INTERVAL_SECONDS", "2")
        monkeypatch.setenv("TRANSCRIPTION_POLL_TIMEOUT_SECONDS", "0")
        monkeypatch.setenv("CORS_ORIGINS", "https://app.example")

        config = load_config()

        assert config.settings.provider_api_key == "env-key"
        assert config.settings.max_file_size == 1000
        assert config.settings.supported_extensions == (".wav", ".mp3")
        assert config.polling.interval_seconds == 2.0
        assert config.polling.timeout_seconds is None
        assert config.server.cors_origins == ("https://app.example",)

    def test_default_poll_settings(self, monkeypatch) -> None:
        monkeypatch.delenv("TRANSCRIPTION_POLL_INTERVAL_SECONDS", raising=False)
        monkeypatch.delenv("TRANSCRIPTION_POLL_TIMEOUT_SECONDS", raising=False)

        config = load_config()

        assert config.polling.interval_seconds == 5.0
        assert config.polling.timeout_seconds == 3600.0
