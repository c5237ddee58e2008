# src/ymlreader/core/model/entry.py
"""
Entry record stored in the typed index.

An entry owns its key and value independently of the text buffer it was
extracted from. Its stored representation (``payload``) is what ``get``
copies into a caller's destination:

- integer: native-width signed integer, native byte order
- string: ASCII bytes followed by a single NUL
"""

import re
import struct
import sys

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ymlreader.core.model.value_kind import ValueKind

NATIVE_INT_SIZE = struct.calcsize("n")
NATIVE_INT_BITS = NATIVE_INT_SIZE * 8
NATIVE_INT_MIN = -(1 << (NATIVE_INT_BITS - 1))
NATIVE_INT_MAX = (1 << (NATIVE_INT_BITS - 1)) - 1

_STRING_VALUE = re.compile(r"[A-Za-z0-9_ ]*")


def wrap_native_int(value: int) -> int:
    """Keep the low-order bits of ``value`` as a two's complement native int."""
    value &= (1 << NATIVE_INT_BITS) - 1
    if value > NATIVE_INT_MAX:
        value -= 1 << NATIVE_INT_BITS
    return value


class Entry(BaseModel):
    """A (key, kind, value) record owned by the index"""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, pattern=r"^[A-Za-z0-9_]+$", description="Configuration key")
    kind: ValueKind = Field(..., description="Kind tag of the stored value")
    value: int | str = Field(..., description="Converted value")

    @model_validator(mode="after")
    def _value_matches_kind(self) -> "Entry":
        if self.kind == ValueKind.INTEGER:
            if not isinstance(self.value, int) or isinstance(self.value, bool):
                raise ValueError("integer entries need an int value")
            if not NATIVE_INT_MIN <= self.value <= NATIVE_INT_MAX:
                raise ValueError(f"integer value does not fit in {NATIVE_INT_BITS} bits")
        else:
            if not isinstance(self.value, str):
                raise ValueError("string entries need a str value")
            if not _STRING_VALUE.fullmatch(self.value):
                raise ValueError("string value may only contain letters, digits, '_' and spaces")
        return self

    @property
    def payload(self) -> bytes:
        """Bytes copied out by ``get``."""
        if self.kind == ValueKind.INTEGER:
            return self.value.to_bytes(NATIVE_INT_SIZE, sys.byteorder, signed=True)
        return self.value.encode("ascii") + b"\0"

    @property
    def size(self) -> int:
        """Recorded size in bytes; always equals ``len(payload)``."""
        if self.kind == ValueKind.INTEGER:
            return NATIVE_INT_SIZE
        return len(self.value) + 1
