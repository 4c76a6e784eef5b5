"""Polls a provider job until it reaches a terminal state."""

import time
from collections.abc import Callable
from typing import Any

from audio_transcriber.config import PollingConfig, TranscriptionSettings
from audio_transcriber.exceptions import PollingTimeoutError, ProviderError
from audio_transcriber.infrastructure.interfaces import TranscriptionProvider
from audio_transcriber.logging import setup_logging

from .models import JobStatus, TranscriptionJob

logger = setup_logging(__name__)


class JobPoller:
    """
    Re-reads job status at a constant interval until completion or failure.

    Only the last observed status is kept between polls, so an interrupted
    wait can be resumed by polling the same job id again. ``clock`` and
    ``sleep`` are injectable so deadlines can be exercised without waiting.
    """

    def __init__(
        self,
        provider: TranscriptionProvider,
        config: PollingConfig,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._provider = provider
        self._interval = config.interval_seconds
        self._timeout = config.timeout_seconds
        self._clock = clock
        self._sleep = sleep

    def await_completion(
        self,
        job_id: str,
        settings: TranscriptionSettings,
        on_poll: Callable[[TranscriptionJob], None] | None = None,
    ) -> dict[str, Any]:
        """
        Blocks until the job is completed and returns the final payload.

        Args:
            job_id: The provider's job id.
            settings: Settings snapshot holding the credential.
            on_poll: Called with each non-terminal observation.

        Returns:
            The raw payload of the completed job.

        Raises:
            ProviderError: If the job ends in the error state.
            PollingTimeoutError: If the deadline passes first.
            AuthError, ProviderNetworkError: If a status read fails.
        """
        deadline = None if self._timeout is None else self._clock() + self._timeout
        last_status: JobStatus | None = None

        while True:
            payload = self._provider.get_job(job_id, settings)
            job = TranscriptionJob.from_payload(job_id, payload)

            if job.status is not last_status:
                logger.info(
                    "Transcription job status changed",
                    extra={
                        "job_id": job_id,
                        "status": job.status.value,
                        "previous_status": last_status.value if last_status else None,
                    },
                )
                last_status = job.status

            if job.status is JobStatus.COMPLETED:
                return payload

            if job.status is JobStatus.ERROR:
                logger.error(
                    "Transcription job failed",
                    extra={"job_id": job_id, "error": job.error},
                )
                raise ProviderError(
                    f"Transcription failed: {job.error or 'Unknown error'}"
                )

            if on_poll is not None:
                on_poll(job)

            if deadline is not None and self._clock() + self._interval > deadline:
                logger.error(
                    "Transcription job timed out",
                    extra={"job_id": job_id, "timeout_seconds": self._timeout},
                )
                raise PollingTimeoutError(job_id, self._timeout)

            self._sleep(self._interval)
