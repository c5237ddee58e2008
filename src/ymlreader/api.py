# src/ymlreader/api.py
"""
Code-returning API.

The same four operations as YmlReader, for callers that want integer
results instead of exceptions:

    open_reader(path)            -> YmlReader | negative ErrorCode
    parse(reader)                -> 1 | negative ErrorCode
    get(reader, key, destination) -> 1 | 0 | negative ErrorCode
    close(reader)                -> 1 | negative ErrorCode

Example:
    >>> reader = open_reader("server.yml")
    >>> parse(reader)
    1
    >>> slots = bytearray(8)
    >>> get(reader, "slots", slots)
    1
    >>> close(reader)
    1
"""

from pathlib import Path

from ymlreader.core.errors import YmlReaderError
from ymlreader.core.model.error_codes import OK, ErrorCode
from ymlreader.core.reader.reader import YmlReader
from ymlreader.infrastructure.logging import get_logger
from ymlreader.infrastructure.settings import ReaderSettings
from ymlreader.ports.outbound.text_source import TextSource

logger = get_logger(__name__)


def open_reader(
    path: str | Path,
    settings: ReaderSettings | None = None,
    source: TextSource | None = None,
) -> YmlReader | ErrorCode:
    """Load ``path`` into a fresh reader, or return the failure code."""
    try:
        return YmlReader(path, settings=settings, source=source)
    except YmlReaderError as e:
        logger.debug(f"open_reader({path!r}) -> {e.code.name}: {e}")
        return e.code


def parse(reader: YmlReader) -> int:
    """Run the one-shot parse; ALREADY_PARSED on the second call."""
    if not isinstance(reader, YmlReader):
        return ErrorCode.INVALID_POINTER
    try:
        reader.parse()
    except YmlReaderError as e:
        logger.debug(f"parse({reader.path!r}) -> {e.code.name}: {e}")
        return e.code
    return OK


def get(reader: YmlReader, key: str, destination) -> int:
    """Copy the stored bytes of ``key``: 1 on hit, 0 on miss."""
    if not isinstance(reader, YmlReader):
        return ErrorCode.INVALID_POINTER
    try:
        return reader.get(key, destination)
    except YmlReaderError as e:
        logger.debug(f"get({key!r}) -> {e.code.name}: {e}")
        return e.code


def close(reader: YmlReader) -> int:
    """Release the reader and everything it owns."""
    if not isinstance(reader, YmlReader):
        return ErrorCode.INVALID_POINTER
    try:
        reader.close()
    except YmlReaderError as e:
        logger.debug(f"close({reader.path!r}) -> {e.code.name}: {e}")
        return e.code
    return OK
