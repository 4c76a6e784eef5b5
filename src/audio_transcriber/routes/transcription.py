"""Transcription endpoints."""

import os
from typing import Annotated

from fastapi import APIRouter, Depends, Form, HTTPException, UploadFile

from audio_transcriber.dependencies import (
    get_file_store,
    get_handler,
    get_provider,
    get_settings_store,
)
from audio_transcriber.domain import TranscriptionJob, TranscriptionResult, UploadCandidate
from audio_transcriber.exceptions import (
    ApiKeyNotConfiguredError,
    PollingTimeoutError,
    TranscriptionServiceError,
    UploadStorageError,
    ValidationError,
)
from audio_transcriber.handlers import TranscriptionHandler
from audio_transcriber.infrastructure.interfaces import (
    FileStore,
    SettingsStore,
    TranscriptionProvider,
)
from audio_transcriber.logging import setup_logging
from audio_transcriber.response_models import JobStatusResponse

logger = setup_logging(__name__)

router = APIRouter(prefix="/api", tags=["transcription"])

HandlerDep = Annotated[TranscriptionHandler, Depends(get_handler)]
ProviderDep = Annotated[TranscriptionProvider, Depends(get_provider)]
FileStoreDep = Annotated[FileStore, Depends(get_file_store)]
SettingsStoreDep = Annotated[SettingsStore, Depends(get_settings_store)]


def _http_error(error: TranscriptionServiceError) -> HTTPException:
    """Maps a pipeline failure onto an HTTP error carrying its kind tag."""
    if isinstance(error, (ValidationError, ApiKeyNotConfiguredError)):
        status_code = 400
    elif isinstance(error, PollingTimeoutError):
        status_code = 504
    elif isinstance(error, UploadStorageError):
        status_code = 500
    else:
        status_code = 502
    return HTTPException(
        status_code=status_code,
        detail={"kind": error.kind, "message": error.message},
    )


@router.post("/transcribe", response_model=TranscriptionResult)
def transcribe(
    file: UploadFile,
    handler: HandlerDep,
    file_store: FileStoreDep,
    settings_store: SettingsStoreDep,
    duration: float | None = Form(
        default=None, ge=0, description="Audio duration in seconds, if known"
    ),
) -> TranscriptionResult:
    """
    Transcribes and diarizes an uploaded audio file.

    Blocks until the provider finishes; the stored upload is deleted on
    every exit path.
    """
    settings = settings_store.get()
    file_name = file.filename or ""
    suffix = os.path.splitext(file_name)[1].lower()

    try:
        location = file_store.save(file.file, suffix)
    except OSError:
        raise HTTPException(
            status_code=500,
            detail={"kind": "storage", "message": "Failed to store uploaded file"},
        )

    candidate = UploadCandidate(
        file_name=file_name,
        declared_size=(
            file.size if file.size is not None else os.path.getsize(location)
        ),
        location=location,
        declared_duration=duration,
    )

    def on_progress(value: float) -> None:
        logger.debug(
            "Transcription progress",
            extra={"file_name": file_name, "progress": round(value, 1)},
        )

    try:
        return handler.transcribe(candidate, settings, on_progress=on_progress)
    except ValidationError as e:
        logger.warning(
            "Upload rejected", extra={"file_name": file_name, "kind": e.kind}
        )
        raise _http_error(e)
    except TranscriptionServiceError as e:
        logger.exception(
            "Transcription error", extra={"file_name": file_name, "kind": e.kind}
        )
        raise _http_error(e)


@router.get("/transcription/{job_id}/status", response_model=JobStatusResponse)
def get_transcription_status(
    job_id: str, provider: ProviderDep, settings_store: SettingsStoreDep
) -> JobStatusResponse:
    """Returns the provider's current status for a job."""
    settings = settings_store.get()
    try:
        if not settings.has_api_key:
            raise ApiKeyNotConfiguredError()
        job = TranscriptionJob.from_payload(job_id, provider.get_job(job_id, settings))
    except TranscriptionServiceError as e:
        logger.exception("Status check error", extra={"job_id": job_id})
        raise _http_error(e)

    return JobStatusResponse(status=job.status, progress=job.progress)
