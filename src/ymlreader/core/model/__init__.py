"""
Model module - value kinds, error codes and index entries.
"""

from ymlreader.core.model.value_kind import ValueKind
from ymlreader.core.model.error_codes import ErrorCode, OK
from ymlreader.core.model.entry import (
    Entry,
    NATIVE_INT_SIZE,
    NATIVE_INT_MIN,
    NATIVE_INT_MAX,
    wrap_native_int,
)

__all__ = [
    "ValueKind",
    "ErrorCode",
    "OK",
    "Entry",
    "NATIVE_INT_SIZE",
    "NATIVE_INT_MIN",
    "NATIVE_INT_MAX",
    "wrap_native_int",
]
