"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel, Field, field_validator

DEFAULT_MAX_FILE_SIZE = 25 * 1024 * 1024  # 25MB
DEFAULT_MAX_DURATION = 1800  # 30 minutes
DEFAULT_SUPPORTED_EXTENSIONS = (".mp3", ".wav", ".m4a", ".flac", ".ogg")


def _normalize_extensions(extensions) -> tuple[str, ...]:
    normalized: list[str] = []
    for ext in extensions:
        if not isinstance(ext, str):
            continue
        ext = ext.strip().lower()
        if not ext:
            continue
        if not ext.startswith("."):
            ext = f".{ext}"
        if ext not in normalized:
            normalized.append(ext)
    return tuple(normalized)


class TranscriptionSettings(BaseModel, frozen=True):
    """
    Runtime limits and credentials consulted by every transcription request.

    Instances are immutable snapshots; updates produce a new instance.
    """

    max_file_size: int = Field(default=DEFAULT_MAX_FILE_SIZE, gt=0)
    max_duration: int = Field(default=DEFAULT_MAX_DURATION, gt=0)
    supported_extensions: tuple[str, ...] = DEFAULT_SUPPORTED_EXTENSIONS
    provider_api_key: str = Field(default="", repr=False)

    @field_validator("supported_extensions", mode="before")
    @classmethod
    def _lowercase_dot_prefixed(cls, value):
        if isinstance(value, str):
            value = value.split(",")
        if not isinstance(value, (list, tuple)):
            raise ValueError("supported_extensions must be a list of strings")
        return _normalize_extensions(value)

    @field_validator("supported_extensions")
    @classmethod
    def _not_empty(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("supported_extensions must not be empty")
        return value

    @property
    def has_api_key(self) -> bool:
        return bool(self.provider_api_key)


class ProviderConfig(BaseModel, frozen=True):
    """AssemblyAI REST API configuration."""

    base_url: str = "https://api.assemblyai.com/v2"
    request_timeout_seconds: float = 60.0


class PollingConfig(BaseModel, frozen=True):
    """Job status polling configuration."""

    interval_seconds: float = Field(default=5.0, gt=0)
    # None disables the deadline
    timeout_seconds: float | None = 3600.0


class StorageConfig(BaseModel, frozen=True):
    """Transient upload storage and settings persistence configuration."""

    upload_dir: str | None = None
    settings_path: str | None = None


class ServerConfig(BaseModel, frozen=True):
    """HTTP server configuration."""

    cors_origins: tuple[str, ...] = (
        "http://localhost:5173",
        "http://localhost:3000",
    )


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    settings: TranscriptionSettings
    provider: ProviderConfig = ProviderConfig()
    polling: PollingConfig = PollingConfig()
    storage: StorageConfig = StorageConfig()
    server: ServerConfig = ServerConfig()


def _split(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    poll_timeout = float(os.getenv("TRANSCRIPTION_POLL_TIMEOUT_SECONDS", "3600"))

    return AppConfig(
        settings=TranscriptionSettings(
            max_file_size=int(
                os.getenv("TRANSCRIPTION_MAX_FILE_SIZE", str(DEFAULT_MAX_FILE_SIZE))
            ),
            max_duration=int(
                os.getenv("TRANSCRIPTION_MAX_DURATION", str(DEFAULT_MAX_DURATION))
            ),
            supported_extensions=_split(
                os.getenv(
                    "TRANSCRIPTION_SUPPORTED_EXTENSIONS",
                    ",".join(DEFAULT_SUPPORTED_EXTENSIONS),
                )
            ),
            provider_api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
        ),
        provider=ProviderConfig(
            base_url=os.getenv("ASSEMBLYAI_BASE_URL", "https://api.assemblyai.com/v2"),
            request_timeout_seconds=float(
                os.getenv("ASSEMBLYAI_REQUEST_TIMEOUT_SECONDS", "60")
            ),
        ),
        polling=PollingConfig(
            interval_seconds=float(
                os.getenv("TRANSCRIPTION_POLL_INTERVAL_SECONDS", "5")
            ),
            timeout_seconds=poll_timeout if poll_timeout > 0 else None,
        ),
        storage=StorageConfig(
            upload_dir=os.getenv("UPLOAD_DIR") or None,
            settings_path=os.getenv("SETTINGS_PATH") or None,
        ),
        server=ServerConfig(
            cors_origins=_split(
                os.getenv(
                    "CORS_ORIGINS", "http://localhost:5173,http://localhost:3000"
                )
            ),
        ),
    )
