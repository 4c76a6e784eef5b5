"""Abstract interface for the remote transcription provider."""

from abc import ABC, abstractmethod
from typing import Any, BinaryIO

from audio_transcriber.config import TranscriptionSettings
from audio_transcriber.domain.models import UploadReference


class TranscriptionProvider(ABC):
    """Abstract base class for remote speech-to-text backends."""

    @abstractmethod
    def upload_audio(
        self, audio: BinaryIO, settings: TranscriptionSettings
    ) -> UploadReference:
        """
        Uploads raw audio and exchanges it for an upload reference.

        Args:
            audio: Readable binary stream with the audio payload.
            settings: Settings snapshot holding the credential.

        Returns:
            Opaque reference to the uploaded audio.

        Raises:
            AuthError: If the credential is missing or rejected.
            ProviderNetworkError: If the provider cannot be reached.
            ProviderError: If the provider reports a non-success status.
        """

    @abstractmethod
    def submit_job(
        self, upload: UploadReference, settings: TranscriptionSettings
    ) -> str:
        """
        Requests a diarized transcription job for uploaded audio.

        Args:
            upload: Reference returned by ``upload_audio``.
            settings: Settings snapshot holding the credential.

        Returns:
            The provider's job id.

        Raises:
            AuthError: If the credential is missing or rejected.
            ProviderNetworkError: If the provider cannot be reached.
            ProviderError: If the provider refuses the job.
        """

    @abstractmethod
    def get_job(self, job_id: str, settings: TranscriptionSettings) -> dict[str, Any]:
        """
        Reads the current state of a job. Idempotent.

        Args:
            job_id: The provider's job id.
            settings: Settings snapshot holding the credential.

        Returns:
            The raw status payload (status, progress and, once completed,
            utterances, language_code, text, audio_duration; error on failure).

        Raises:
            AuthError: If the credential is missing or rejected.
            ProviderNetworkError: If the provider cannot be reached.
            ProviderError: If the provider reports a non-success status.
        """
