# src/ymlreader/core/matcher/line_matcher.py
"""
Line matcher.

Turns the raw text buffer into (key, raw_value, kind) triples. Two fixed
patterns are applied in two independent passes over the whole buffer:

    integer line:  KEY WS* ":" WS* "-"? DIGIT+
    string line:   KEY WS* ":" WS* '"' [A-Za-z0-9_ ]* '"'

A line is recognized only when the key starts at column 0 and nothing but
spaces or tabs follows the value before the end of the line. Everything
else (comments, blank lines, floats, booleans, unquoted or escaped strings,
indented structure) is skipped silently; a non-matching line is never an
error.

Triples come out as all integers in file order, then all strings in file
order, so the index keeps a string over an integer for the same key.
"""

import re
from collections.abc import Iterator
from typing import NamedTuple

from ymlreader.core.model.entry import NATIVE_INT_BITS, Entry, wrap_native_int
from ymlreader.core.model.value_kind import ValueKind
from ymlreader.infrastructure.logging import get_logger

logger = get_logger(__name__)

_LINE_END = rb"[ \t]*(?=\r?\n|\r?\Z)(?:\r?\n)*"

INTEGER_LINE = re.compile(
    rb"^(?P<key>[A-Za-z0-9_]+)[ \t]*:[ \t]*(?P<value>-?[0-9]+)" + _LINE_END,
    re.MULTILINE | re.IGNORECASE,
)
STRING_LINE = re.compile(
    rb'^(?P<key>[A-Za-z0-9_]+)[ \t]*:[ \t]*"(?P<value>[A-Za-z0-9_ ]*)"' + _LINE_END,
    re.MULTILINE | re.IGNORECASE,
)

# Order matters: later passes win for duplicate keys
PASSES: tuple[tuple[re.Pattern, ValueKind], ...] = (
    (INTEGER_LINE, ValueKind.INTEGER),
    (STRING_LINE, ValueKind.STRING),
)


class Match(NamedTuple):
    """One recognized assignment, copied out of the buffer"""

    key: str
    raw_value: str
    kind: ValueKind


def parse_native_int(text: str) -> int:
    """
    Lax decimal conversion with native-width wraparound.

    Reads an optional leading '-' then digits until the first non-digit.
    Overflow is not detected: only the low-order bits are kept, so
    arbitrarily long digit runs are accepted.
    """
    negative = text.startswith("-")
    digits = text[1:] if negative else text
    mask = (1 << NATIVE_INT_BITS) - 1
    result = 0
    for ch in digits:
        if not "0" <= ch <= "9":
            break
        result = (result * 10 + ord(ch) - 48) & mask
    if negative:
        result = -result
    return wrap_native_int(result)


def scan_pass(buffer: bytes, pattern: re.Pattern, kind: ValueKind) -> Iterator[Match]:
    """Yield every non-overlapping match of one pattern, left to right."""
    for found in pattern.finditer(buffer):
        match = Match(
            key=found.group("key").decode("ascii"),
            raw_value=found.group("value").decode("ascii"),
            kind=kind,
        )
        logger.debug(f"Matched {kind.value} line at offset {found.start()}: {match.key}")
        yield match


def scan(buffer: bytes) -> Iterator[Match]:
    """
    Scan the whole buffer, one pass per pattern.

    Args:
        buffer: Complete file contents

    Yields:
        Match triples, integers first then strings, each in file order
    """
    for pattern, kind in PASSES:
        yield from scan_pass(buffer, pattern, kind)


def to_entry(match: Match) -> Entry:
    """Convert a match's raw text into an owned, typed Entry."""
    if match.kind == ValueKind.INTEGER:
        value = parse_native_int(match.raw_value)
    else:
        value = match.raw_value
    return Entry(key=match.key, kind=match.kind, value=value)
