"""Abstract interface for runtime settings storage."""

from abc import ABC, abstractmethod
from typing import Any

from audio_transcriber.config import TranscriptionSettings


class SettingsStore(ABC):
    """Abstract base class for the read-mostly runtime settings."""

    @abstractmethod
    def get(self) -> TranscriptionSettings:
        """Returns the current immutable settings snapshot."""

    @abstractmethod
    def update(self, changes: dict[str, Any]) -> TranscriptionSettings:
        """
        Applies a partial update atomically.

        Args:
            changes: Field values to replace; absent fields keep prior values.

        Returns:
            The new settings snapshot.

        Raises:
            pydantic.ValidationError: If the merged settings are invalid.
        """
