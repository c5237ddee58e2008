# src/ymlreader/adapters/outbound/filesystem/loader.py
import os
from pathlib import Path

from ymlreader.core.errors import FileAccessError, InvalidFileError, OutOfMemoryError
from ymlreader.infrastructure.logging import get_logger

logger = get_logger(__name__)


class FileSystemTextSource:
    """
    Loads a whole file from the local filesystem.

    The size is queried on the open descriptor before reading, so an
    oversized file is refused without being read.
    """

    def __init__(self, max_file_bytes: int | None = None):
        """
        Args:
            max_file_bytes: Refuse files larger than this (None = no limit)
        """
        self.max_file_bytes = max_file_bytes

    def load(self, path: str | Path) -> bytes:
        """
        Read the complete contents of ``path``.

        Raises:
            InvalidFileError: If the file cannot be opened
            FileAccessError: If the size query or the read fails, or the
                             file exceeds max_file_bytes
            OutOfMemoryError: If the contents do not fit in memory
        """
        path = Path(path)
        try:
            handle = path.open("rb")
        except OSError as e:
            logger.error(f"Cannot open {path}: {e}")
            raise InvalidFileError(f"Cannot open config file: {path}") from e

        with handle:
            try:
                size = os.fstat(handle.fileno()).st_size
            except OSError as e:
                logger.error(f"Cannot stat {path}: {e}")
                raise FileAccessError(f"Cannot get size of config file: {path}") from e

            if self.max_file_bytes is not None and size > self.max_file_bytes:
                logger.error(f"{path} is {size} bytes, limit is {self.max_file_bytes}")
                raise FileAccessError(
                    f"Config file {path} is {size} bytes, larger than the {self.max_file_bytes} bytes allowed"
                )

            try:
                content = handle.read()
            except MemoryError as e:
                logger.error(f"Out of memory reading {path} ({size} bytes)")
                raise OutOfMemoryError(f"Not enough memory to read config file: {path}") from e
            except OSError as e:
                logger.error(f"Cannot read {path}: {e}")
                raise FileAccessError(f"Cannot read config file: {path}") from e

        logger.debug(f"Loaded {len(content)} bytes from {path}")
        return content
