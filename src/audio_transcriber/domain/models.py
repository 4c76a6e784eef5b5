"""Domain models for the audio transcription service."""

import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class UploadCandidate(BaseModel, frozen=True):
    """An uploaded file waiting to be transcribed, backed by transient storage."""

    file_name: str
    declared_size: int = Field(ge=0)
    location: str
    declared_duration: float | None = Field(default=None, ge=0)

    @property
    def extension(self) -> str:
        """Lower-cased trailing dot-segment of the file name, or an empty string."""
        base = self.file_name.replace("\\", "/").rsplit("/", 1)[-1]
        if "." not in base.lstrip("."):
            return ""
        return "." + base.rsplit(".", 1)[-1].lower()


class UploadReference(BaseModel, frozen=True):
    """Opaque provider token for uploaded audio, valid for one pipeline run."""

    upload_url: str


class JobStatus(str, Enum):
    """Provider-side lifecycle of a transcription job."""

    QUEUED = "queued"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self in (JobStatus.COMPLETED, JobStatus.ERROR)


class TranscriptionJob(BaseModel, frozen=True):
    """Last observed state of a provider job. Never mutated locally."""

    job_id: str
    status: JobStatus
    progress: float = Field(default=0.0, ge=0, le=100)
    error: str | None = None

    @classmethod
    def from_payload(cls, job_id: str, payload: dict[str, Any]) -> "TranscriptionJob":
        """Builds a job view from a raw provider status payload."""
        try:
            status = JobStatus(payload.get("status"))
        except ValueError:
            # unrecognised states are treated as still running
            status = JobStatus.PROCESSING

        progress = payload.get("progress")
        if status is JobStatus.COMPLETED:
            progress = 100.0
        try:
            progress = float(progress or 0.0)
        except (TypeError, ValueError):
            progress = 0.0
        progress = min(max(progress, 0.0), 100.0) if math.isfinite(progress) else 0.0

        return cls(
            job_id=str(payload.get("id") or job_id),
            status=status,
            progress=progress,
            error=str(payload["error"]) if payload.get("error") else None,
        )


class TranscriptionSegment(BaseModel, frozen=True):
    """A single speaker-attributed span of the transcript."""

    model_config = ConfigDict(populate_by_name=True)

    speaker: str
    text: str
    start_seconds: float = Field(ge=0, alias="start")
    end_seconds: float = Field(ge=0, alias="end")
    confidence: float = Field(ge=0, le=1)

    @model_validator(mode="after")
    def _end_not_before_start(self) -> "TranscriptionSegment":
        if self.end_seconds < self.start_seconds:
            raise ValueError("end_seconds must not be before start_seconds")
        return self


class TranscriptionResult(BaseModel, frozen=True):
    """Normalized transcript returned to the caller."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    language: str = "unknown"
    segments: tuple[TranscriptionSegment, ...] = ()
    full_text: str = Field(default="", alias="fullText")
    processing_time_seconds: float = Field(
        default=0.0, ge=0, alias="processingTime"
    )
