"""Validation utilities."""

import logging
import math
from pathlib import Path
from typing import Optional

from ..exceptions import ValidationError

logger = logging.getLogger(__name__)

OUTPUT_SUFFIXES = {".json", ".lrc"}


def validate_lyrics_text(text) -> str:
    """Reject a missing lyrics argument before any parsing happens."""
    if text is None:
        raise ValidationError("Lyrics text is required")
    if not isinstance(text, str):
        raise ValidationError(f"Lyrics text must be a string, got {type(text).__name__}")
    return text


def validate_duration(duration) -> Optional[float]:
    """Validate a duration argument; ``None`` means unknown."""
    if duration is None:
        return None
    if isinstance(duration, bool) or not isinstance(duration, (int, float)):
        raise ValidationError(f"Duration must be a number, got {type(duration).__name__}")
    if not math.isfinite(duration):
        raise ValidationError("Duration must be finite")
    return float(duration)


def validate_output_path(path: str) -> Path:
    """Validate and normalize output path."""
    output_path = Path(path)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ValidationError(f"Cannot create output directory: {e}")

    if output_path.suffix.lower() not in OUTPUT_SUFFIXES:
        raise ValidationError("Output file must have .json or .lrc extension")

    return output_path


def validate_line_order(lines) -> None:
    """Validate that timed lines never go backwards."""
    prev_time = None
    for idx, line in enumerate(lines):
        if line.time is None:
            continue
        if prev_time is not None and line.time < prev_time:
            raise ValidationError(
                f"Line {idx + 1} starts before previous line ({line.time:.2f}s < {prev_time:.2f}s)"
            )
        prev_time = line.time
