# src/ymlreader/core/model/value_kind.py
from enum import Enum


class ValueKind(str, Enum):
    """Kinds of values the reader can store"""

    INTEGER = "integer"
    STRING = "string"
