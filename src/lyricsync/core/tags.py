"""Bracket tag scanning for lyric lines.

Two kinds of tag are recognized:

- timestamp tags ``[MM:SS.ff]`` / ``[MM:SS.fff]`` (two-digit minutes and
  seconds, two or three fractional digits), possibly several per line
- section tags: a line that is exactly one ``[label]`` and nothing else

Tags are found with a forward-only scanner instead of regular expressions,
so every position of a line is visited at most a constant number of times
and anything that is not a well-formed tag stays ordinary text.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

_DIGITS = "0123456789"


@dataclass(frozen=True)
class TimestampTag:
    """A timestamp tag located at ``line[start:end]``."""

    start: int
    end: int
    minutes: str
    seconds: str
    fraction: str

    def to_seconds(self) -> float:
        """Decode to seconds, reading the fraction as zero-padded milliseconds."""
        millis = int(self.fraction.ljust(3, "0"))
        total = int(self.minutes) * 60 + int(self.seconds) + millis / 1000
        return round(total, 3)


def _take_digits(
    line: str, pos: int, min_count: int, max_count: int
) -> Tuple[Optional[str], int]:
    end = pos
    while end < len(line) and end - pos < max_count and line[end] in _DIGITS:
        end += 1
    if end - pos < min_count:
        return None, pos
    return line[pos:end], end


def _expect(line: str, pos: int, char: str) -> bool:
    return pos < len(line) and line[pos] == char


def match_timestamp_tag(line: str, pos: int = 0) -> Optional[TimestampTag]:
    """Match a timestamp tag starting exactly at ``pos``."""
    if not _expect(line, pos, "["):
        return None

    minutes, cursor = _take_digits(line, pos + 1, 2, 2)
    if minutes is None or not _expect(line, cursor, ":"):
        return None

    seconds, cursor = _take_digits(line, cursor + 1, 2, 2)
    if seconds is None or not _expect(line, cursor, "."):
        return None

    fraction, cursor = _take_digits(line, cursor + 1, 2, 3)
    if fraction is None or not _expect(line, cursor, "]"):
        return None

    return TimestampTag(pos, cursor + 1, minutes, seconds, fraction)


def find_timestamp_tags(line: str) -> List[TimestampTag]:
    """Return every timestamp tag on a line, left to right."""
    tags: List[TimestampTag] = []
    pos = line.find("[")
    while pos != -1:
        tag = match_timestamp_tag(line, pos)
        if tag is not None:
            tags.append(tag)
            pos = line.find("[", tag.end)
        else:
            pos = line.find("[", pos + 1)
    return tags


def has_timestamp_tag(line: str) -> bool:
    return bool(find_timestamp_tags(line))


def strip_timestamp_tags(line: str, tags: Optional[List[TimestampTag]] = None) -> str:
    """Remove timestamp tags from a line and trim the remaining text."""
    if tags is None:
        tags = find_timestamp_tags(line)
    pieces = []
    cursor = 0
    for tag in tags:
        pieces.append(line[cursor : tag.start])
        cursor = tag.end
    pieces.append(line[cursor:])
    return "".join(pieces).strip()


def section_tag_label(line: str) -> Optional[str]:
    """Return the inner text if the trimmed line is exactly one ``[label]``.

    Timestamp tags are not section tags.
    """
    text = line.strip()
    if len(text) < 3 or text[0] != "[" or text[-1] != "]":
        return None
    inner = text[1:-1]
    if "[" in inner or "]" in inner or not inner.strip():
        return None
    if match_timestamp_tag(text) is not None:
        return None
    return inner


def is_section_tag(line: str) -> bool:
    return section_tag_label(line) is not None


def normalize_section_label(label: str) -> str:
    """Lowercase a label and drop all whitespace (``"Pre Chorus"`` -> ``"prechorus"``)."""
    return "".join(label.lower().split())
