"""Abstract interface for transient upload storage."""

from abc import ABC, abstractmethod
from typing import BinaryIO


class FileStore(ABC):
    """Abstract base class for short-lived storage of uploaded files."""

    @abstractmethod
    def save(self, data: BinaryIO, suffix: str = "") -> str:
        """
        Streams an upload into a fresh, uniquely named location.

        Args:
            data: Readable binary stream.
            suffix: File name suffix, usually the original extension.

        Returns:
            The location of the stored file.

        Raises:
            OSError: If the file cannot be written.
        """

    @abstractmethod
    def release(self, location: str) -> None:
        """
        Deletes a stored file. Failures are logged, never raised.

        Args:
            location: A location returned by ``save``.
        """
