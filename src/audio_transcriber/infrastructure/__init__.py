"""Infrastructure layer exports."""

from .assemblyai_client import AssemblyAIClient
from .local_file_store import LocalFileStore
from .settings_store import InMemorySettingsStore

__all__ = ["AssemblyAIClient", "LocalFileStore", "InMemorySettingsStore"]
