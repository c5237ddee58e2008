from ymlreader.adapters.outbound.filesystem.loader import FileSystemTextSource

__all__ = [
    "FileSystemTextSource",
]
