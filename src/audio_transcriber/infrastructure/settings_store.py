"""Thread-safe runtime settings store with optional JSON persistence."""

import json
import os
import threading
from typing import Any

from pydantic import ValidationError

from audio_transcriber.config import TranscriptionSettings
from audio_transcriber.exceptions import SettingsPersistenceError
from audio_transcriber.logging import setup_logging

from .interfaces import SettingsStore

logger = setup_logging(__name__)


class InMemorySettingsStore(SettingsStore):
    """
    Holds the current settings snapshot and swaps it atomically on update.

    Readers never take the lock: they get whichever complete snapshot is
    current. Writers serialize on the lock so concurrent partial updates do
    not lose each other's fields. When ``path`` is set, overrides are loaded
    from that JSON file at start-up and the full settings are written back
    after every update.
    """

    def __init__(self, defaults: TranscriptionSettings, path: str | None = None):
        self._path = path
        self._lock = threading.Lock()
        self._settings = defaults

        if path:
            try:
                overrides = self._load(path)
            except SettingsPersistenceError:
                logger.exception("Error loading settings file", extra={"path": path})
            else:
                try:
                    self._settings = self._merge(defaults, overrides)
                except ValidationError:
                    logger.exception(
                        "Ignoring invalid settings file", extra={"path": path}
                    )

    def get(self) -> TranscriptionSettings:
        return self._settings

    def update(self, changes: dict[str, Any]) -> TranscriptionSettings:
        with self._lock:
            updated = self._merge(self._settings, changes)
            self._settings = updated

            if self._path:
                try:
                    self._save(self._path, updated)
                except SettingsPersistenceError:
                    logger.exception(
                        "Error saving settings file", extra={"path": self._path}
                    )

        logger.info(
            "Settings updated",
            extra={
                "fields": sorted(k for k in changes if k != "provider_api_key"),
                "has_api_key": updated.has_api_key,
            },
        )
        return updated

    @staticmethod
    def _merge(
        current: TranscriptionSettings, changes: dict[str, Any]
    ) -> TranscriptionSettings:
        merged = current.model_dump()
        merged.update(
            {
                key: value
                for key, value in changes.items()
                if key in TranscriptionSettings.model_fields and value is not None
            }
        )
        return TranscriptionSettings.model_validate(merged)

    @staticmethod
    def _load(path: str) -> dict[str, Any]:
        if not os.path.exists(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise SettingsPersistenceError(path, e) from e
        if not isinstance(data, dict):
            raise SettingsPersistenceError(path)
        return data

    @staticmethod
    def _save(path: str, settings: TranscriptionSettings) -> None:
        tmp_path = f"{path}.tmp"
        try:
            directory = os.path.dirname(path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(settings.model_dump(mode="json"), f, indent=2)
            os.replace(tmp_path, path)
        except OSError as e:
            raise SettingsPersistenceError(path, e) from e
