"""
Reader module - lifecycle object owning the text and the typed index.
"""

from ymlreader.core.reader.reader import ReaderState, YmlReader

__all__ = [
    "ReaderState",
    "YmlReader",
]
