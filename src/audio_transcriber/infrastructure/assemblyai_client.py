"""AssemblyAI REST implementation of the TranscriptionProvider interface."""

from typing import Any, BinaryIO

import requests

from audio_transcriber.config import ProviderConfig, TranscriptionSettings
from audio_transcriber.domain.models import UploadReference
from audio_transcriber.exceptions import (
    ApiKeyNotConfiguredError,
    ProviderError,
    ProviderNetworkError,
    UnauthorizedError,
)
from audio_transcriber.logging import setup_logging

from .interfaces import TranscriptionProvider

logger = setup_logging(__name__)

# Fixed capability set; the normalizer relies on utterances and language_code.
TRANSCRIPTION_FEATURES = {
    "speaker_labels": True,
    "language_detection": True,
    "punctuate": True,
    "format_text": True,
}


class AssemblyAIClient(TranscriptionProvider):
    """Talks to the AssemblyAI v2 REST API over a shared requests session."""

    def __init__(self, session: requests.Session, config: ProviderConfig):
        self._session = session
        self._base_url = config.base_url.rstrip("/")
        self._timeout = config.request_timeout_seconds

    def upload_audio(
        self, audio: BinaryIO, settings: TranscriptionSettings
    ) -> UploadReference:
        payload = self._request(
            "POST",
            "/upload",
            settings,
            data=audio,
            headers={"content-type": "application/octet-stream"},
        )
        upload_url = payload.get("upload_url")
        if not upload_url:
            raise ProviderError("AssemblyAI upload response did not include upload_url")

        logger.info("Audio uploaded to AssemblyAI")
        return UploadReference(upload_url=upload_url)

    def submit_job(
        self, upload: UploadReference, settings: TranscriptionSettings
    ) -> str:
        payload = self._request(
            "POST",
            "/transcript",
            settings,
            json={"audio_url": upload.upload_url, **TRANSCRIPTION_FEATURES},
        )
        job_id = payload.get("id")
        if not job_id:
            raise ProviderError("AssemblyAI transcript response did not include id")

        logger.info("Transcription job submitted", extra={"job_id": job_id})
        return str(job_id)

    def get_job(self, job_id: str, settings: TranscriptionSettings) -> dict[str, Any]:
        return self._request("GET", f"/transcript/{job_id}", settings)

    def _request(
        self,
        method: str,
        path: str,
        settings: TranscriptionSettings,
        headers: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> dict[str, Any]:
        """Sends an authorized request and maps failures onto the taxonomy."""
        if not settings.provider_api_key:
            raise ApiKeyNotConfiguredError()

        url = f"{self._base_url}{path}"
        try:
            response = self._session.request(
                method,
                url,
                headers={"authorization": settings.provider_api_key, **(headers or {})},
                timeout=self._timeout,
                **kwargs,
            )
        except requests.RequestException as e:
            logger.exception(
                "AssemblyAI request failed", extra={"method": method, "path": path}
            )
            raise ProviderNetworkError(
                f"Failed to reach AssemblyAI: {e}", cause=e
            ) from e

        payload = self._json(response)

        if response.status_code in (401, 403):
            logger.error(
                "AssemblyAI rejected credentials",
                extra={"path": path, "status_code": response.status_code},
            )
            raise UnauthorizedError(
                payload.get("error") or "AssemblyAI rejected the configured API key"
            )

        if response.status_code >= 400:
            logger.error(
                "AssemblyAI returned an error status",
                extra={"path": path, "status_code": response.status_code},
            )
            raise ProviderError(
                payload.get("error")
                or f"AssemblyAI request failed with status {response.status_code}",
                status_code=response.status_code,
            )

        if not payload:
            raise ProviderError(
                "AssemblyAI returned an invalid response",
                status_code=response.status_code,
            )

        return payload

    @staticmethod
    def _json(response: requests.Response) -> dict[str, Any]:
        try:
            payload = response.json()
        except ValueError:
            return {}
        return payload if isinstance(payload, dict) else {}
