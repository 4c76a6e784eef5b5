"""Infrastructure interface exports."""

from .file_store import FileStore
from .settings_store import SettingsStore
from .transcription_provider import TranscriptionProvider

__all__ = ["FileStore", "SettingsStore", "TranscriptionProvider"]
