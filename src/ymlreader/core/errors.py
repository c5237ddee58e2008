# src/ymlreader/core/errors.py
"""
Exception hierarchy.

Every failure the reader can report derives from YmlReaderError and carries
the stable ErrorCode that the code-based API (ymlreader.api) returns in its
place. Grammar mismatches, duplicate keys and missing keys are not errors.
"""

from ymlreader.core.model.error_codes import ErrorCode
from ymlreader.core.model.value_kind import ValueKind


class YmlReaderError(Exception):
    """Base class for reader failures"""
    code: ErrorCode


class InvalidPointerError(YmlReaderError):
    """Missing reader, path, key or destination, or a reader already closed"""
    code = ErrorCode.INVALID_POINTER


class OutOfMemoryError(YmlReaderError):
    """Allocation failed while loading or parsing"""
    code = ErrorCode.OUT_OF_MEMORY


class InvalidFileError(YmlReaderError):
    """The path could not be opened"""
    code = ErrorCode.INVALID_FILE


class FileAccessError(YmlReaderError):
    """Querying the size of, or reading, an opened file failed"""
    code = ErrorCode.FILE_ERROR


class MutexError(YmlReaderError):
    """The reader lock could not be acquired"""
    code = ErrorCode.MUTEX_ERROR


class AlreadyParsedError(YmlReaderError):
    """parse() was called on a reader that has already been parsed"""
    code = ErrorCode.ALREADY_PARSED


class KindMismatchError(TypeError):
    """A typed read asked for a kind different from the stored one"""

    def __init__(self, key: str, expected: ValueKind, actual: ValueKind):
        super().__init__(f"Key '{key}' holds a {actual.value} value, not {expected.value}")
        self.key = key
        self.expected = expected
        self.actual = actual
