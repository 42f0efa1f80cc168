"""Abstract interfaces for buildmeta."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO

from buildmeta.core.models import ExtractionOutcome


class IoService(ABC):
    """File access used by extractors, the version rewriter and tasks."""

    @abstractmethod
    def file_exists(self, path: str | Path) -> bool:
        """Return True if the path names an existing regular file."""

    @abstractmethod
    def read_file_as_stream(self, path: str | Path) -> BinaryIO | None:
        """Open a file for binary reading.

        Returns:
            An open binary stream the caller must close, or None if the file
            cannot be opened
        """

    @abstractmethod
    def write_file(self, path: str | Path, contents: str) -> bool:
        """Write text contents to a file, replacing it.

        Returns:
            True if the file was written
        """

    @abstractmethod
    def is_directory(self, path: str | Path) -> bool:
        """Return True if the path names an existing directory."""


class InfoExtractor(ABC):
    """Abstract interface for project metadata extractors."""

    @abstractmethod
    def extract(self, source_path: str | Path) -> ExtractionOutcome:
        """Extract project metadata.

        Args:
            source_path: Info file or build artifact to read

        Returns:
            ExtractionOutcome with the record and a success flag

        Raises:
            RequiredAttributeError: If an artifact lacks a required attribute
        """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the extractor name."""
