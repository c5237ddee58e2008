"""
Pytest configuration and shared fixtures.

Fixtures provided:
- write_config: factory writing a config file into tmp_path
- sample_config_path: the "name / slots" sample file
- open_sample_reader: fresh reader over the sample file
- memory_source: in-memory TextSource fake
- log_messages: list collecting Loguru messages emitted during a test
"""

import sys
from pathlib import Path

import pytest
from loguru import logger

# Add src to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from ymlreader.core.reader.reader import YmlReader


SAMPLE_CONFIG = b'# server settings\nname: "srv1"\nslots: 4\n'


class MemoryTextSource:
    """TextSource fake serving bytes from a dict, counting loads."""

    def __init__(self, files: dict[str, bytes] | None = None):
        self.files = dict(files or {})
        self.loads: list[str] = []

    def load(self, path) -> bytes:
        self.loads.append(str(path))
        return self.files[str(path)]


# ============================================================================
# File Fixtures
# ============================================================================

@pytest.fixture
def write_config(tmp_path):
    """Factory writing ``content`` (str or bytes) to a file and returning its path."""
    def _write(content: str | bytes, name: str = "config.yml") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            content = content.encode("ascii")
        path.write_bytes(content)
        return path
    return _write


@pytest.fixture
def sample_config_path(write_config) -> Path:
    """Provides the name/slots sample configuration file."""
    return write_config(SAMPLE_CONFIG)


@pytest.fixture
def open_sample_reader(sample_config_path):
    """Provides a fresh (unparsed) reader over the sample file; closed after the test."""
    reader = YmlReader(sample_config_path)
    yield reader
    if reader.state.value != "released":
        reader.close()


# ============================================================================
# Collaborator Fixtures
# ============================================================================

@pytest.fixture
def memory_source():
    """Provides an empty in-memory TextSource; tests add files to .files."""
    return MemoryTextSource()


@pytest.fixture
def log_messages():
    """Collects every Loguru record message emitted while the test runs."""
    messages: list[str] = []
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
