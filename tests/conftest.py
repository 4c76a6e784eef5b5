"""Shared fixtures for audio_transcriber tests."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any, BinaryIO

import pytest

from audio_transcriber.config import PollingConfig, TranscriptionSettings
from audio_transcriber.domain import UploadCandidate, UploadReference
from audio_transcriber.infrastructure.interfaces import FileStore, TranscriptionProvider


class FakeProvider(TranscriptionProvider):
    """Scripted provider that records every call."""

    def __init__(self, statuses: list[dict[str, Any]] | None = None):
        self.calls: list[str] = []
        self.uploaded: list[bytes] = []
        self.statuses = list(statuses or [])
        self.upload_error: Exception | None = None
        self.submit_error: Exception | None = None

    def upload_audio(
        self, audio: BinaryIO, settings: TranscriptionSettings
    ) -> UploadReference:
        self.calls.append("upload")
        if self.upload_error is not None:
            raise self.upload_error
        self.uploaded.append(audio.read())
        return UploadReference(upload_url="https://cdn.example/upload/abc")

    def submit_job(self, upload: UploadReference, settings: TranscriptionSettings) -> str:
        self.calls.append("submit")
        if self.submit_error is not None:
            raise self.submit_error
        return "job-123"

    def get_job(self, job_id: str, settings: TranscriptionSettings) -> dict[str, Any]:
        self.calls.append("get")
        status = self.statuses.pop(0)
        if isinstance(status, Exception):
            raise status
        return status


class RecordingFileStore(FileStore):
    """FileStore that writes to a temp dir and records releases."""

    def __init__(self, directory: str):
        self.directory = directory
        self.released: list[str] = []
        self._counter = 0

    def save(self, data: BinaryIO, suffix: str = "") -> str:
        self._counter += 1
        location = os.path.join(self.directory, f"upload-{self._counter}{suffix}")
        with open(location, "wb") as f:
            f.write(data.read())
        return location

    def release(self, location: str) -> None:
        self.released.append(location)
        if os.path.exists(location):
            os.remove(location)


class FakeClock:
    """Monotonic clock advanced only by ``sleep``."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


def completed_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "id": "job-123",
        "status": "completed",
        "language_code": "en",
        "text": "Hello there. Hi.",
        "audio_duration": 12,
        "utterances": [
            {"speaker": "A", "text": "Hello there.", "start": 0, "end": 1500, "confidence": 0.92},
            {"speaker": "B", "text": "Hi.", "start": 1500, "end": 4200, "confidence": 0.88},
        ],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def settings() -> TranscriptionSettings:
    return TranscriptionSettings(
        max_file_size=1024 * 1024,
        max_duration=600,
        supported_extensions=(".mp3", ".wav"),
        provider_api_key="secret-key",
    )


@pytest.fixture
def polling_config() -> PollingConfig:
    return PollingConfig(interval_seconds=5.0, timeout_seconds=60.0)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def file_store(tmp_path) -> RecordingFileStore:
    return RecordingFileStore(str(tmp_path))


@pytest.fixture
def make_candidate(tmp_path) -> Iterator:
    def _make(
        file_name: str = "meeting.mp3",
        content: bytes = b"ID3fake-audio",
        declared_size: int | None = None,
        declared_duration: float | None = None,
    ) -> UploadCandidate:
        location = tmp_path / f"stored-{file_name}"
        location.write_bytes(content)
        return UploadCandidate(
            file_name=file_name,
            declared_size=len(content) if declared_size is None else declared_size,
            location=str(location),
            declared_duration=declared_duration,
        )

    yield _make
