"""Format classification for raw lyric text."""

from .models import LyricsFormat
from .tags import has_timestamp_tag, is_section_tag


def has_section_tags(text: str) -> bool:
    """True if any line, once trimmed, is a lone ``[label]`` tag."""
    return any(is_section_tag(line) for line in text.splitlines())


def classify(text: str) -> LyricsFormat:
    """Decide which of the three supported shapes ``text`` has.

    Timestamp tags anywhere win over section tags; text with neither is
    plain.
    """
    if not text:
        return LyricsFormat.PLAIN_TEXT
    lines = text.splitlines()
    if any(has_timestamp_tag(line) for line in lines):
        return LyricsFormat.EXPLICIT_TIMESTAMP
    if any(is_section_tag(line) for line in lines):
        return LyricsFormat.SECTION_TAGGED
    return LyricsFormat.PLAIN_TEXT
