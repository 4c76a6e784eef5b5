"""Request and response models for the transcription API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from audio_transcriber.config import TranscriptionSettings
from audio_transcriber.domain import JobStatus


class HealthResponse(BaseModel):
    """Liveness probe response."""

    status: str = "healthy"
    timestamp: datetime


class SettingsResponse(BaseModel):
    """Runtime settings with the credential redacted."""

    model_config = ConfigDict(populate_by_name=True)

    max_file_size: int = Field(alias="maxFileSize")
    max_duration: int = Field(alias="maxDuration")
    supported_extensions: list[str] = Field(alias="supportedExtensions")
    has_api_key: bool = Field(alias="hasApiKey")

    @classmethod
    def from_settings(cls, settings: TranscriptionSettings) -> "SettingsResponse":
        return cls(
            max_file_size=settings.max_file_size,
            max_duration=settings.max_duration,
            supported_extensions=list(settings.supported_extensions),
            has_api_key=settings.has_api_key,
        )


class SettingsUpdateRequest(BaseModel):
    """Partial settings update; omitted fields keep their current values."""

    model_config = ConfigDict(populate_by_name=True)

    max_file_size: int | None = Field(default=None, gt=0, alias="maxFileSize")
    max_duration: int | None = Field(default=None, gt=0, alias="maxDuration")
    supported_extensions: list[str] | None = Field(
        default=None, alias="supportedExtensions"
    )
    provider_api_key: str | None = Field(
        default=None, alias="assemblyAIKey", repr=False
    )

    def changes(self) -> dict:
        """Returns only the fields that should replace current values."""
        changes = self.model_dump(exclude_none=True)
        # a blank key from the settings form means "keep the current one"
        if not (changes.get("provider_api_key") or "").strip():
            changes.pop("provider_api_key", None)
        return changes


class SettingsUpdateResponse(BaseModel):
    """Response returned after a settings update."""

    message: str
    config: SettingsResponse


class JobStatusResponse(BaseModel):
    """Single status read of a provider job."""

    status: JobStatus
    progress: float
