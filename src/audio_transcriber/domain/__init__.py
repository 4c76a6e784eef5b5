"""Domain layer exports."""

from .models import (
    JobStatus,
    TranscriptionJob,
    TranscriptionResult,
    TranscriptionSegment,
    UploadCandidate,
    UploadReference,
)
from .progress import ProgressCallback, ProgressTracker
from .transcript_normalizer import TranscriptNormalizer
from .upload_validator import UploadValidator
from .job_poller import JobPoller

__all__ = [
    "JobStatus",
    "TranscriptionJob",
    "TranscriptionResult",
    "TranscriptionSegment",
    "UploadCandidate",
    "UploadReference",
    "ProgressCallback",
    "ProgressTracker",
    "TranscriptNormalizer",
    "UploadValidator",
    "JobPoller",
]
