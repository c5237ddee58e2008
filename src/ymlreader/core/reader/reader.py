# src/ymlreader/core/reader/reader.py
"""
YmlReader - lifecycle of a parsed configuration file.

States: fresh -> parsed -> released.

Thread-safety:
- parse() and close() take the reader lock (threading.Lock), released on
  every exit path
- parse() fills a private HashIndex and publishes it with one reference
  swap, so lookups racing with parse see the empty index or the complete
  one, never a partial one
- lookups are lock-free; the caller must not close() while lookups are in
  flight
"""

import os
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from pathlib import Path

from ymlreader.adapters.outbound.filesystem.loader import FileSystemTextSource
from ymlreader.core.errors import (
    AlreadyParsedError,
    InvalidPointerError,
    KindMismatchError,
    MutexError,
    OutOfMemoryError,
)
from ymlreader.core.index.hash_index import HashIndex
from ymlreader.core.matcher.line_matcher import scan, to_entry
from ymlreader.core.model.entry import Entry
from ymlreader.core.model.value_kind import ValueKind
from ymlreader.infrastructure.logging import get_logger
from ymlreader.infrastructure.settings import ReaderSettings
from ymlreader.ports.outbound.text_source import TextSource

logger = get_logger(__name__)


class ReaderState(str, Enum):
    """Lifecycle states of a reader"""

    FRESH = "fresh"
    PARSED = "parsed"
    RELEASED = "released"


class YmlReader:
    """
    Reader for flat ``key: 123`` / ``key: "text"`` configuration files.

    Example:
        >>> with YmlReader("server.yml") as reader:
        ...     reader.parse()
        ...     name = reader.get_str("name")
        ...     slots = reader.get_int("slots")
    """

    def __init__(
        self,
        path: str | Path,
        settings: ReaderSettings | None = None,
        source: TextSource | None = None,
    ):
        """
        Load the file text. Parsing is a separate, one-shot step.

        Args:
            path: Path of the configuration file
            settings: Reader settings (defaults when None)
            source: Text loader (filesystem when None)

        Raises:
            InvalidPointerError: If path is None, empty, or not a str or PathLike
            InvalidFileError: If the file cannot be opened
            FileAccessError: If the size query or read fails
            OutOfMemoryError: If the contents do not fit in memory
        """
        if not isinstance(path, (str, os.PathLike)) or not str(path):
            raise InvalidPointerError("A path (str or PathLike) is required to open a reader")

        self.path = str(path)
        self.settings = settings or ReaderSettings()
        self._source = source or FileSystemTextSource(self.settings.max_file_bytes)
        self._lock = threading.Lock()

        self._text: bytes | None = self._source.load(path)
        self._index = HashIndex()
        self._state = ReaderState.FRESH

        logger.info(f"Reader opened for {self.path} ({len(self._text)} bytes)")

    @contextmanager
    def _locked(self, operation: str):
        if not self._lock.acquire(timeout=self.settings.lock_timeout):
            logger.error(f"{operation}: lock not acquired within {self.settings.lock_timeout}s")
            raise MutexError(f"Could not acquire the reader lock for {operation}")
        try:
            yield
        finally:
            self._lock.release()

    def _ensure_open(self, operation: str) -> None:
        if self._state == ReaderState.RELEASED:
            logger.warning(f"{operation} called on released reader for {self.path}")
            raise InvalidPointerError(f"Reader for {self.path} is already closed")

    @property
    def state(self) -> ReaderState:
        return self._state

    @property
    def parsed(self) -> bool:
        return self._state == ReaderState.PARSED

    def parse(self) -> int:
        """
        Scan the text and populate the index. Runs at most once.

        Returns:
            Number of distinct keys indexed

        Raises:
            AlreadyParsedError: If the reader was already parsed
            MutexError: If the lock is not acquired within settings.lock_timeout
            OutOfMemoryError: If the index cannot be built
            InvalidPointerError: If the reader is closed
        """
        with self._locked("parse"):
            self._ensure_open("parse")
            if self._state == ReaderState.PARSED:
                raise AlreadyParsedError(f"Reader for {self.path} was already parsed")

            index = HashIndex()
            matched = 0
            try:
                for match in scan(self._text):
                    index.insert(to_entry(match))
                    matched += 1
            except MemoryError as e:
                logger.error(f"Out of memory while indexing {self.path}")
                raise OutOfMemoryError(f"Not enough memory to index {self.path}") from e

            self._index = index
            self._state = ReaderState.PARSED

        logger.info(f"Parsed {self.path}: {matched} assignments, {len(index)} keys")
        return len(index)

    def lookup(self, key: str) -> Entry | None:
        """
        Tagged lookup.

        Args:
            key: Configuration key

        Returns:
            The Entry (kind + value) or None when absent. Always None before
            parse().

        Raises:
            InvalidPointerError: If key is not a string or the reader is closed
        """
        if not isinstance(key, str):
            raise InvalidPointerError("Lookup key must be a string")
        self._ensure_open("lookup")
        return self._index.lookup(key)

    def get(self, key: str, destination) -> int:
        """
        Copy the stored bytes of ``key`` into ``destination``.

        Integers are copied as native-width signed integers in native byte
        order, strings as ASCII bytes plus a trailing NUL. Interpreting the
        bytes is up to the caller; prefer lookup() when the kind matters.

        Args:
            key: Configuration key
            destination: Writable buffer (bytearray, memoryview, array, ...)

        Returns:
            1 when the key was found and copied, 0 when absent

        Raises:
            InvalidPointerError: If key or destination is missing, the
                                 destination is read-only or smaller than
                                 the stored value, or the reader is closed
        """
        if destination is None:
            raise InvalidPointerError("A destination buffer is required")
        entry = self.lookup(key)

        try:
            view = memoryview(destination)
        except TypeError as e:
            raise InvalidPointerError("Destination does not support the buffer protocol") from e

        with view:
            if view.readonly:
                raise InvalidPointerError("Destination buffer is read-only")
            if entry is None:
                return 0
            try:
                target = view.cast("B")
            except (TypeError, ValueError) as e:
                raise InvalidPointerError("Destination must be a contiguous buffer") from e
            with target:
                if target.nbytes < entry.size:
                    raise InvalidPointerError(
                        f"Destination holds {target.nbytes} bytes, '{key}' needs {entry.size}"
                    )
                target[:entry.size] = entry.payload
        return 1

    def _typed(self, key: str, kind: ValueKind):
        entry = self.lookup(key)
        if entry is None:
            raise KeyError(key)
        if entry.kind != kind:
            raise KindMismatchError(key, kind, entry.kind)
        return entry.value

    def get_int(self, key: str) -> int:
        """Integer value of ``key``; KeyError if absent, KindMismatchError if a string."""
        return self._typed(key, ValueKind.INTEGER)

    def get_str(self, key: str) -> str:
        """String value of ``key``; KeyError if absent, KindMismatchError if an integer."""
        return self._typed(key, ValueKind.STRING)

    def keys(self) -> list[str]:
        self._ensure_open("keys")
        return self._index.keys()

    def to_dict(self) -> dict[str, int | str]:
        """Snapshot of every key and value."""
        self._ensure_open("to_dict")
        return {entry.key: entry.value for entry in self._index}

    def close(self) -> int:
        """
        Release the text and every index entry.

        Returns:
            Number of entries released

        Raises:
            MutexError: If the lock is not acquired within settings.lock_timeout
            InvalidPointerError: If the reader is already closed
        """
        with self._locked("close"):
            self._ensure_open("close")
            released = self._index.release()
            self._index = HashIndex()
            self._text = None
            self._state = ReaderState.RELEASED

        logger.info(f"Reader for {self.path} closed, {released} entries released")
        return released

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._index.lookup(key) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __enter__(self) -> "YmlReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._state != ReaderState.RELEASED:
            self.close()

    def __repr__(self) -> str:
        return f"YmlReader(path={self.path!r}, state={self._state.value}, keys={len(self._index)})"
