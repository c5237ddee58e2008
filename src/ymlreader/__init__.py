"""
ymlreader - typed reader for flat YAML-like configuration files.

Recognizes ``key: 123`` and ``key: "text"`` lines, indexes them in a
256-bucket chained hash table and serves typed lookups.
"""

from ymlreader.api import close, get, open_reader, parse
from ymlreader.core.errors import (
    AlreadyParsedError,
    FileAccessError,
    InvalidFileError,
    InvalidPointerError,
    KindMismatchError,
    MutexError,
    OutOfMemoryError,
    YmlReaderError,
)
from ymlreader.core.model import NATIVE_INT_SIZE, OK, Entry, ErrorCode, ValueKind
from ymlreader.core.reader import ReaderState, YmlReader
from ymlreader.infrastructure.settings import ReaderSettings

__version__ = "0.1.0"

__all__ = [
    "open_reader",
    "parse",
    "get",
    "close",
    "YmlReader",
    "ReaderState",
    "ReaderSettings",
    "Entry",
    "ValueKind",
    "ErrorCode",
    "OK",
    "NATIVE_INT_SIZE",
    "YmlReaderError",
    "InvalidPointerError",
    "OutOfMemoryError",
    "InvalidFileError",
    "FileAccessError",
    "MutexError",
    "AlreadyParsedError",
    "KindMismatchError",
]
