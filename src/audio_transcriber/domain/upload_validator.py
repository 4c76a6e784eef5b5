"""Local admission checks for uploaded audio files."""

from audio_transcriber.config import TranscriptionSettings
from audio_transcriber.exceptions import (
    DurationTooLongError,
    FileTooLargeError,
    UnsupportedFileTypeError,
)

from .models import UploadCandidate


class UploadValidator:
    """
    Checks an upload against the configured size and type policy.

    Runs before any network call and has no side effects. Audio duration
    cannot be measured without decoding the file, so the duration ceiling is
    only enforced when the caller reports a duration.
    """

    def validate(
        self, candidate: UploadCandidate, settings: TranscriptionSettings
    ) -> None:
        """
        Validates the candidate, raising on the first failed check.

        Args:
            candidate: The uploaded file.
            settings: Settings snapshot for this request.

        Raises:
            FileTooLargeError: If the declared size exceeds the limit.
            UnsupportedFileTypeError: If the extension is not supported.
            DurationTooLongError: If the reported duration exceeds the ceiling.
        """
        if candidate.declared_size > settings.max_file_size:
            raise FileTooLargeError(candidate.declared_size, settings.max_file_size)

        if candidate.extension not in settings.supported_extensions:
            raise UnsupportedFileTypeError(
                candidate.file_name, settings.supported_extensions
            )

        if (
            candidate.declared_duration is not None
            and candidate.declared_duration > settings.max_duration
        ):
            raise DurationTooLongError(
                candidate.declared_duration, settings.max_duration
            )
