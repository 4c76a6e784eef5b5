"""Local temporary-file implementation of the FileStore interface."""

import os
import shutil
import tempfile
from typing import BinaryIO

from audio_transcriber.logging import setup_logging

from .interfaces import FileStore

logger = setup_logging(__name__)

_CHUNK_SIZE = 1024 * 1024


class LocalFileStore(FileStore):
    """Stores uploads as uniquely named files in a local directory."""

    def __init__(self, directory: str | None = None):
        self._directory = directory or os.path.join(
            tempfile.gettempdir(), "audio-transcriber-uploads"
        )

    def save(self, data: BinaryIO, suffix: str = "") -> str:
        os.makedirs(self._directory, exist_ok=True)
        fd, location = tempfile.mkstemp(
            prefix="upload-", suffix=suffix, dir=self._directory
        )
        try:
            with os.fdopen(fd, "wb") as target:
                shutil.copyfileobj(data, target, _CHUNK_SIZE)
        except OSError:
            logger.exception("Failed to store upload", extra={"location": location})
            self.release(location)
            raise

        logger.info(
            "Upload stored",
            extra={"location": location, "size": os.path.getsize(location)},
        )
        return location

    def release(self, location: str) -> None:
        try:
            os.remove(location)
            logger.info("Cleaned up file", extra={"location": location})
        except FileNotFoundError:
            pass
        except OSError:
            logger.exception("Error cleaning up file", extra={"location": location})
