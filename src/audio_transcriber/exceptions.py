"""Custom exceptions for the audio-transcriber service.

Every failure surfaced to a caller carries a human-readable message and a
``kind`` tag that identifies it without string matching.
"""


class TranscriptionServiceError(Exception):
    """Base class for all failures surfaced by the transcription pipeline."""

    kind = "internal"

    def __init__(self, message: str, cause: Exception | None = None):
        self.message = message
        self.cause = cause
        super().__init__(message)


class ValidationError(TranscriptionServiceError):
    """Raised when an upload is rejected locally, before reaching the provider."""

    kind = "validation"


class FileTooLargeError(ValidationError):
    """Raised when the declared file size exceeds the configured limit."""

    kind = "file_too_large"

    def __init__(self, size: int, max_file_size: int):
        self.size = size
        self.max_file_size = max_file_size
        limit_mb = max_file_size / (1024 * 1024)
        super().__init__(f"File size exceeds {limit_mb:g}MB limit")


class UnsupportedFileTypeError(ValidationError):
    """Raised when the file extension is not in the supported list."""

    kind = "unsupported_type"

    def __init__(self, file_name: str, supported_extensions: tuple[str, ...]):
        self.file_name = file_name
        self.supported_extensions = supported_extensions
        super().__init__(
            f"Unsupported file type. Supported: {', '.join(supported_extensions)}"
        )


class DurationTooLongError(ValidationError):
    """Raised when a reported audio duration exceeds the configured ceiling."""

    kind = "duration_too_long"

    def __init__(self, duration: float, max_duration: int):
        self.duration = duration
        self.max_duration = max_duration
        super().__init__(
            f"Audio duration {duration:g}s exceeds {max_duration / 60:g}min limit"
        )


class AuthError(TranscriptionServiceError):
    """Raised when the provider credential is missing or rejected."""

    kind = "auth"


class ApiKeyNotConfiguredError(AuthError):
    """Raised when no provider API key has been configured."""

    kind = "not_configured"

    def __init__(self):
        super().__init__("AssemblyAI API key not configured")


class UnauthorizedError(AuthError):
    """Raised when the provider rejects the configured API key."""

    kind = "unauthorized"


class ProviderNetworkError(TranscriptionServiceError):
    """Raised when the provider cannot be reached at the transport level."""

    kind = "network"


class ProviderError(TranscriptionServiceError):
    """Raised when the provider reports a failure or a non-success status."""

    kind = "provider"

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        cause: Exception | None = None,
    ):
        self.status_code = status_code
        super().__init__(message, cause)


class PollingTimeoutError(TranscriptionServiceError):
    """Raised when a job does not reach a terminal state before the deadline."""

    kind = "timeout"

    def __init__(self, job_id: str, timeout_seconds: float):
        self.job_id = job_id
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"Transcription job '{job_id}' did not finish within {timeout_seconds:g}s"
        )


class UploadStorageError(TranscriptionServiceError):
    """Raised when a stored upload cannot be read back for sending."""

    kind = "storage"

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        super().__init__(f"Failed to read stored upload '{file_name}'", cause)


class SettingsPersistenceError(Exception):
    """Raised when runtime settings cannot be read from or written to disk."""

    def __init__(self, path: str, cause: Exception | None = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to persist settings at '{path}'")
