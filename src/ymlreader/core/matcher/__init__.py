"""
Matcher module - recognizes assignment lines in the raw text.
"""

from ymlreader.core.matcher.line_matcher import (
    INTEGER_LINE,
    STRING_LINE,
    Match,
    parse_native_int,
    scan,
    scan_pass,
    to_entry,
)

__all__ = [
    "INTEGER_LINE",
    "STRING_LINE",
    "Match",
    "parse_native_int",
    "scan",
    "scan_pass",
    "to_entry",
]
