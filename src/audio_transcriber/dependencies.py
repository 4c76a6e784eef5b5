"""FastAPI dependency injection configuration."""

import requests

from audio_transcriber.config import AppConfig, load_config
from audio_transcriber.domain import JobPoller, TranscriptNormalizer, UploadValidator
from audio_transcriber.handlers import TranscriptionHandler
from audio_transcriber.infrastructure import (
    AssemblyAIClient,
    InMemorySettingsStore,
    LocalFileStore,
)
from audio_transcriber.infrastructure.interfaces import (
    FileStore,
    SettingsStore,
    TranscriptionProvider,
)
from audio_transcriber.logging import setup_logging

logger = setup_logging(__name__)

_config = load_config()

_settings_store = InMemorySettingsStore(
    _config.settings, path=_config.storage.settings_path
)

# AssemblyAI setup
_http_session = requests.Session()
_provider = AssemblyAIClient(_http_session, _config.provider)
_poller = JobPoller(_provider, _config.polling)

_file_store = LocalFileStore(_config.storage.upload_dir)


def get_config() -> AppConfig:
    """Returns the static application configuration."""
    return _config


def get_settings_store() -> SettingsStore:
    """Returns the runtime settings store."""
    return _settings_store


def get_provider() -> TranscriptionProvider:
    """Returns the configured transcription provider."""
    return _provider


def get_file_store() -> FileStore:
    """Returns the transient upload store."""
    return _file_store


def get_handler() -> TranscriptionHandler:
    """Returns the configured transcription handler."""
    return TranscriptionHandler(
        UploadValidator(), _provider, _poller, TranscriptNormalizer(), _file_store
    )
