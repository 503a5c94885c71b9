"""Utility modules."""

from .logging import setup_logging, get_logger
from .validation import (
    validate_lyrics_text,
    validate_duration,
    validate_output_path,
    validate_line_order,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "validate_lyrics_text",
    "validate_duration",
    "validate_output_path",
    "validate_line_order",
]
