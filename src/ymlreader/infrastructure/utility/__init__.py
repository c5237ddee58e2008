# src/ymlreader/infrastructure/utility/__init__.py
"""Shared utility modules for ymlreader."""

from ymlreader.infrastructure.utility.pydantic_validation import (
    format_validation_error,
    get_validation_action,
)

__all__ = [
    "format_validation_error",
    "get_validation_action",
]
