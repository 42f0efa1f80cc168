"""Local filesystem implementation of the I/O service."""

import logging
from pathlib import Path
from typing import BinaryIO

from buildmeta.core.interfaces import IoService

LOGGER = logging.getLogger("buildmeta.core.io_utils")


class LocalIoService(IoService):
    """I/O service backed by the local filesystem."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def file_exists(self, path: str | Path) -> bool:
        return Path(path).is_file()

    def read_file_as_stream(self, path: str | Path) -> BinaryIO | None:
        try:
            return Path(path).open("rb")
        except OSError as e:
            LOGGER.warning(f"Unable to open {path}: {e}")
            return None

    def write_file(self, path: str | Path, contents: str) -> bool:
        # newline="" keeps the line endings already present in contents
        try:
            with Path(path).open("w", encoding=self.encoding, newline="") as f:
                f.write(contents)
        except OSError as e:
            LOGGER.warning(f"Unable to write {path}: {e}")
            return False
        return True

    def is_directory(self, path: str | Path) -> bool:
        return Path(path).is_dir()
