# src/ymlreader/ports/outbound/text_source.py
"""
TextSource Protocol - the "load file bytes given a path" contract.

The reader depends only on this contract: one call, whole contents, no
streaming. Implementations report failures with the reader's exceptions:

- InvalidFileError: the path could not be opened
- FileAccessError: size query or read failed
- OutOfMemoryError: the contents could not be held in memory
"""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class TextSource(Protocol):
    """Contract that every text loader must satisfy (structural typing)."""

    def load(self, path: str | Path) -> bytes: ...
