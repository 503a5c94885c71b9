"""LRC parsing and serialization.

This module handles:
- LRC timestamp parsing (``[MM:SS.ff]`` and ``[MM:SS.fff]``)
- Extracting timed lines, including lines carrying several tags
- Rendering timed lines back to LRC text
"""

from typing import Iterable, List, Optional, Tuple

from ..utils.logging import get_logger
from .models import LyricLine
from .tags import find_timestamp_tags, match_timestamp_tag, strip_timestamp_tags

logger = get_logger(__name__)

_MAX_LRC_MINUTES = 99


# ----------------------
# LRC timestamp parsing
# ----------------------
def parse_lrc_timestamp(ts: str) -> Optional[float]:
    """Parse a single LRC timestamp like [01:23.45] to seconds."""
    if not ts:
        return None
    ts = ts.strip()
    tag = match_timestamp_tag(ts)
    if tag is None or tag.end != len(ts):
        return None
    return tag.to_seconds()


def parse_lrc_with_timing(lrc_text: str) -> List[Tuple[float, str]]:
    """Parse LRC text into (timestamp, text) tuples sorted by time.

    A line with several tags yields one tuple per tag. Lines without a
    tag, or with no text left once tags are removed, are skipped.
    """
    if not lrc_text:
        return []

    timed: List[Tuple[float, str]] = []
    for line in lrc_text.splitlines():
        tags = find_timestamp_tags(line)
        if not tags:
            continue
        text = strip_timestamp_tags(line, tags)
        if not text:
            continue
        for tag in tags:
            timed.append((tag.to_seconds(), text))

    # Input order is not assumed to be chronological
    timed.sort(key=lambda item: item[0])
    return timed


def parse_explicit(text: str) -> List[LyricLine]:
    """Parse explicitly timestamped lyrics into LyricLine objects."""
    lines = [LyricLine(time=t, text=line) for t, line in parse_lrc_with_timing(text)]
    logger.debug(f"Parsed {len(lines)} timed lines from LRC")
    return lines


# ----------------------
# LRC serialization
# ----------------------
def format_timestamp(seconds: float, fraction_digits: int = 2) -> str:
    """Render seconds as an LRC tag.

    Rounds to the requested precision before splitting into minutes and
    seconds, so 59.996 renders as ``[01:00.00]``.
    """
    if fraction_digits not in (2, 3):
        raise ValueError("fraction_digits must be 2 or 3")
    if seconds < 0:
        raise ValueError("LRC timestamps must be non-negative")

    scale = 10**fraction_digits
    units = int(round(seconds * scale))
    minutes, remainder = divmod(units, 60 * scale)
    secs, fraction = divmod(remainder, scale)
    if minutes > _MAX_LRC_MINUTES:
        raise ValueError(f"LRC timestamps cannot exceed {_MAX_LRC_MINUTES} minutes")
    return f"[{minutes:02d}:{secs:02d}.{fraction:0{fraction_digits}d}]"


def to_lrc(lines: Iterable[LyricLine], fraction_digits: int = 2) -> str:
    """Render lines as LRC text, skipping lines without a time."""
    rendered = [
        f"{format_timestamp(line.time, fraction_digits)} {line.text}"
        for line in lines
        if line.time is not None
    ]
    return "\n".join(rendered)
