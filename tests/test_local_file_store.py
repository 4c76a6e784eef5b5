"""Tests for audio_transcriber.infrastructure.local_file_store."""

from __future__ import annotations

import io
import os
from unittest.mock import patch

from audio_transcriber.infrastructure import LocalFileStore


class TestLocalFileStore:
    def test_save_writes_unique_files(self, tmp_path) -> None:
        store = LocalFileStore(str(tmp_path / "uploads"))

        first = store.save(io.BytesIO(b"one"), ".mp3")
        second = store.save(io.BytesIO(b"two"), ".mp3")

        assert first != second
        assert first.endswith(".mp3")
        with open(first, "rb") as f:
            assert f.read() == b"one"
        with open(second, "rb") as f:
            assert f.read() == b"two"

    def test_release_deletes_file(self, tmp_path) -> None:
        store = LocalFileStore(str(tmp_path))
        location = store.save(io.BytesIO(b"data"))

        store.release(location)

        assert not os.path.exists(location)

    def test_release_of_missing_file_is_silent(self, tmp_path) -> None:
        LocalFileStore(str(tmp_path)).release(str(tmp_path / "gone.wav"))

    def test_release_failure_is_logged_not_raised(self, tmp_path, caplog) -> None:
        store = LocalFileStore(str(tmp_path))
        location = store.save(io.BytesIO(b"data"))

        with patch("os.remove", side_effect=PermissionError("locked")):
            store.release(location)

        assert "Error cleaning up file" in caplog.text
