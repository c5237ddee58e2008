"""
Outbound ports - Abstract interfaces for external dependencies.
"""

from ymlreader.ports.outbound.text_source import TextSource

__all__ = [
    "TextSource",
]
