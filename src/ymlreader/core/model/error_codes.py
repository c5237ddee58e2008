# src/ymlreader/core/model/error_codes.py
from enum import IntEnum


class ErrorCode(IntEnum):
    """Stable negative codes returned by the code-based API"""

    INVALID_POINTER = -1  # missing reader, path, key or destination
    OUT_OF_MEMORY = -2
    INVALID_FILE = -3     # path could not be opened
    FILE_ERROR = -4       # size or read failed
    MUTEX_ERROR = -5
    ALREADY_PARSED = -6


# Success value of parse() and close() in the code-based API
OK = 1
