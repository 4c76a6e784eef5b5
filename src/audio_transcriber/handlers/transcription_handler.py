"""Handler orchestrating one upload-to-transcript pipeline run."""

import time
from collections.abc import Callable

from audio_transcriber.config import TranscriptionSettings
from audio_transcriber.domain import (
    JobPoller,
    ProgressCallback,
    ProgressTracker,
    TranscriptionJob,
    TranscriptionResult,
    TranscriptNormalizer,
    UploadCandidate,
    UploadValidator,
)
from audio_transcriber.exceptions import ApiKeyNotConfiguredError, UploadStorageError
from audio_transcriber.infrastructure.interfaces import FileStore, TranscriptionProvider
from audio_transcriber.logging import setup_logging

logger = setup_logging(__name__)


class TranscriptionHandler:
    """Orchestrates validation, upload, job submission, polling and normalization."""

    def __init__(
        self,
        validator: UploadValidator,
        provider: TranscriptionProvider,
        poller: JobPoller,
        normalizer: TranscriptNormalizer,
        file_store: FileStore,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._validator = validator
        self._provider = provider
        self._poller = poller
        self._normalizer = normalizer
        self._file_store = file_store
        self._clock = clock

    def transcribe(
        self,
        candidate: UploadCandidate,
        settings: TranscriptionSettings,
        on_progress: ProgressCallback | None = None,
    ) -> TranscriptionResult:
        """
        Transcribes an uploaded file and releases its storage.

        The storage behind ``candidate`` is released exactly once, whether
        the run succeeds or fails at any stage.

        Args:
            candidate: The stored upload. Ownership passes to this call.
            settings: Settings snapshot used for the whole run.
            on_progress: Receives advisory progress estimates (0-100).

        Returns:
            The normalized transcript; ``processing_time_seconds`` is the
            measured wall-clock duration of upload through normalization.

        Raises:
            ValidationError: If the upload is rejected locally.
            AuthError: If the key is missing or rejected.
            ProviderNetworkError: If the provider cannot be reached.
            ProviderError: If the provider reports a failure.
            PollingTimeoutError: If the job does not finish in time.
            UploadStorageError: If the stored upload cannot be read.
        """
        try:
            return self._run(candidate, settings, ProgressTracker(on_progress))
        finally:
            self._file_store.release(candidate.location)

    def _run(
        self,
        candidate: UploadCandidate,
        settings: TranscriptionSettings,
        progress: ProgressTracker,
    ) -> TranscriptionResult:
        if not settings.has_api_key:
            raise ApiKeyNotConfiguredError()

        self._validator.validate(candidate, settings)

        logger.info(
            "Processing file",
            extra={"file_name": candidate.file_name, "size": candidate.declared_size},
        )
        started_at = self._clock()

        try:
            audio = open(candidate.location, "rb")
        except OSError as e:
            logger.exception(
                "Stored upload could not be read",
                extra={"location": candidate.location},
            )
            raise UploadStorageError(candidate.file_name, e) from e

        with audio:
            upload = self._provider.upload_audio(audio, settings)
        progress.advance()

        job_id = self._provider.submit_job(upload, settings)
        progress.advance()

        def on_poll(job: TranscriptionJob) -> None:
            progress.advance()

        raw_result = self._poller.await_completion(job_id, settings, on_poll=on_poll)
        result = self._normalizer.normalize(raw_result, job_id)

        processing_time = max(self._clock() - started_at, 0.0)
        result = result.model_copy(update={"processing_time_seconds": processing_time})

        reported_duration = raw_result.get("audio_duration")
        if (
            isinstance(reported_duration, (int, float))
            and reported_duration > settings.max_duration
        ):
            logger.warning(
                "Provider reported duration above configured ceiling",
                extra={
                    "job_id": job_id,
                    "audio_duration": reported_duration,
                    "max_duration": settings.max_duration,
                },
            )

        progress.complete()
        logger.info(
            "Transcription completed",
            extra={
                "job_id": job_id,
                "file_name": candidate.file_name,
                "segment_count": len(result.segments),
                "processing_time": round(processing_time, 2),
            },
        )
        return result
