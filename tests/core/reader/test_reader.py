"""Tests for ymlreader.core.reader.reader - YmlReader lifecycle and lookups."""

import sys

import pytest

from ymlreader.core.errors import (
    AlreadyParsedError,
    FileAccessError,
    InvalidFileError,
    InvalidPointerError,
    KindMismatchError,
)
from ymlreader.core.model.entry import NATIVE_INT_SIZE
from ymlreader.core.model.value_kind import ValueKind
from ymlreader.core.reader.reader import ReaderState, YmlReader
from ymlreader.infrastructure.settings import ReaderSettings

# ---------------------------------------------------------------------------
# Open
# ---------------------------------------------------------------------------


class TestOpen:

    def test_fresh_after_open(self, open_sample_reader):
        assert open_sample_reader.state == ReaderState.FRESH
        assert open_sample_reader.parsed is False

    @pytest.mark.parametrize("path", [None, "", 5, 3.5, b"config.yml", ["config.yml"]])
    def test_missing_or_non_path(self, path):
        with pytest.raises(InvalidPointerError):
            YmlReader(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(InvalidFileError):
            YmlReader(tmp_path / "absent.yml")

    def test_directory_is_invalid_file(self, tmp_path):
        with pytest.raises(InvalidFileError):
            YmlReader(tmp_path)

    def test_file_over_limit(self, write_config):
        path = write_config("slots: 4\n")
        with pytest.raises(FileAccessError):
            YmlReader(path, settings=ReaderSettings(max_file_bytes=3))

    def test_custom_source(self, memory_source):
        memory_source.files["cfg"] = b"slots: 4\n"
        reader = YmlReader("cfg", source=memory_source)
        reader.parse()
        assert reader.get_int("slots") == 4
        assert memory_source.loads == ["cfg"]

    def test_text_loaded_once(self, memory_source):
        memory_source.files["cfg"] = b"a: 1\n"
        reader = YmlReader("cfg", source=memory_source)
        reader.parse()
        reader.lookup("a")
        assert len(memory_source.loads) == 1


# ---------------------------------------------------------------------------
# Parse
# ---------------------------------------------------------------------------


class TestParse:

    def test_parse_populates_index(self, open_sample_reader):
        assert open_sample_reader.parse() == 2
        assert open_sample_reader.state == ReaderState.PARSED
        assert sorted(open_sample_reader.keys()) == ["name", "slots"]

    def test_second_parse_raises_and_keeps_index(self, open_sample_reader):
        open_sample_reader.parse()
        before = open_sample_reader.to_dict()
        with pytest.raises(AlreadyParsedError):
            open_sample_reader.parse()
        assert open_sample_reader.to_dict() == before
        assert open_sample_reader.state == ReaderState.PARSED

    def test_lookups_before_parse_are_absent(self, open_sample_reader):
        assert open_sample_reader.lookup("name") is None
        assert len(open_sample_reader) == 0
        assert "slots" not in open_sample_reader

    @pytest.mark.parametrize(
        "content",
        [b"", b"# only a comment\n\n", b"ratio: 1.5\nflag: true\n  nested: 1\n"],
        ids=["empty", "comments", "unrecognized"],
    )
    def test_nothing_to_index(self, write_config, content):
        reader = YmlReader(write_config(content))
        assert reader.parse() == 0
        assert reader.keys() == []
        assert reader.parsed

    def test_last_assignment_wins(self, write_config):
        reader = YmlReader(write_config("x: 1\nx: 2\n"))
        reader.parse()
        assert reader.get_int("x") == 2

    def test_string_beats_integer_for_same_key(self, write_config):
        reader = YmlReader(write_config('x: "y"\nx: 1\n'))
        reader.parse()
        assert reader.lookup("x").kind == ValueKind.STRING
        assert reader.get_str("x") == "y"

    def test_long_key_and_value(self, write_config):
        key = "k" * 2000
        value = "v " * 2000
        reader = YmlReader(write_config(f'{key}: "{value}"\n'))
        reader.parse()
        assert reader.get_str(key) == value

    def test_parse_logs_summary(self, open_sample_reader, log_messages):
        open_sample_reader.parse()
        assert any("2 keys" in m for m in log_messages)


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------


class TestLookups:

    @pytest.fixture
    def reader(self, open_sample_reader):
        open_sample_reader.parse()
        return open_sample_reader

    def test_tagged_lookup(self, reader):
        entry = reader.lookup("slots")
        assert entry.kind == ValueKind.INTEGER
        assert entry.value == 4

    def test_missing_key(self, reader):
        assert reader.lookup("missing") is None
        assert "missing" not in reader

    def test_typed_reads(self, reader):
        assert reader.get_str("name") == "srv1"
        assert reader.get_int("slots") == 4

    def test_typed_read_kind_mismatch(self, reader):
        with pytest.raises(KindMismatchError) as exc_info:
            reader.get_int("name")
        assert exc_info.value.actual == ValueKind.STRING
        assert isinstance(exc_info.value, TypeError)

    def test_typed_read_missing_key(self, reader):
        with pytest.raises(KeyError):
            reader.get_str("missing")

    @pytest.mark.parametrize("key", [None, 42, b"name"])
    def test_non_string_key(self, reader, key):
        with pytest.raises(InvalidPointerError):
            reader.lookup(key)

    def test_lookup_has_no_side_effects(self, reader):
        before = reader.to_dict()
        for _ in range(3):
            reader.lookup("name")
            reader.lookup("missing")
            reader.get("slots", bytearray(NATIVE_INT_SIZE))
        assert reader.to_dict() == before

    def test_iteration_and_len(self, reader):
        assert sorted(reader) == ["name", "slots"]
        assert len(reader) == 2


class TestGetIntoBuffer:
    """get(key, destination) copies exactly the recorded size."""

    @pytest.fixture
    def reader(self, open_sample_reader):
        open_sample_reader.parse()
        return open_sample_reader

    def test_string_bytes(self, reader):
        dest = bytearray(255)
        assert reader.get("name", dest) == 1
        assert bytes(dest[:5]) == b"srv1\0"

    def test_integer_bytes(self, reader):
        dest = bytearray(NATIVE_INT_SIZE)
        assert reader.get("slots", dest) == 1
        assert int.from_bytes(dest, sys.byteorder, signed=True) == 4

    def test_only_size_bytes_written(self, reader):
        dest = bytearray(b"\xff" * 10)
        reader.get("name", dest)
        assert bytes(dest) == b"srv1\0" + b"\xff" * 5

    def test_memoryview_destination(self, reader):
        backing = bytearray(8)
        assert reader.get("name", memoryview(backing)) == 1
        assert backing[:5] == b"srv1\0"

    def test_miss_returns_zero_and_leaves_buffer(self, reader):
        dest = bytearray(b"abc")
        assert reader.get("missing", dest) == 0
        assert dest == bytearray(b"abc")

    def test_none_destination(self, reader):
        with pytest.raises(InvalidPointerError):
            reader.get("name", None)

    def test_read_only_destination(self, reader):
        with pytest.raises(InvalidPointerError):
            reader.get("name", b"\0" * 16)

    def test_non_buffer_destination(self, reader):
        with pytest.raises(InvalidPointerError):
            reader.get("name", [0] * 16)

    def test_destination_too_small(self, reader):
        with pytest.raises(InvalidPointerError):
            reader.get("name", bytearray(4))

    def test_none_key(self, reader):
        with pytest.raises(InvalidPointerError):
            reader.get(None, bytearray(8))


# ---------------------------------------------------------------------------
# Close
# ---------------------------------------------------------------------------


class TestClose:

    def test_close_releases_everything(self, open_sample_reader):
        open_sample_reader.parse()
        assert open_sample_reader.close() == 2
        assert open_sample_reader.state == ReaderState.RELEASED
        assert len(open_sample_reader) == 0

    def test_close_fresh_reader(self, open_sample_reader):
        assert open_sample_reader.close() == 0
        assert open_sample_reader.state == ReaderState.RELEASED

    def test_operations_after_close(self, open_sample_reader):
        open_sample_reader.parse()
        open_sample_reader.close()
        with pytest.raises(InvalidPointerError):
            open_sample_reader.lookup("name")
        with pytest.raises(InvalidPointerError):
            open_sample_reader.parse()
        with pytest.raises(InvalidPointerError):
            open_sample_reader.close()

    def test_context_manager_closes(self, sample_config_path):
        with YmlReader(sample_config_path) as reader:
            reader.parse()
            assert reader.get_int("slots") == 4
        assert reader.state == ReaderState.RELEASED

    def test_context_manager_after_explicit_close(self, sample_config_path):
        with YmlReader(sample_config_path) as reader:
            reader.close()
        assert reader.state == ReaderState.RELEASED

    def test_repr(self, open_sample_reader):
        assert "fresh" in repr(open_sample_reader)
