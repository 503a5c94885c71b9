"""Data models for lyrics synchronization."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class LyricsFormat(str, Enum):
    """Shape of raw lyric text as decided by the format classifier."""

    EXPLICIT_TIMESTAMP = "explicit_timestamp"
    SECTION_TAGGED = "section_tagged"
    PLAIN_TEXT = "plain_text"


class LyricsType(str, Enum):
    """Which synchronization path produced a result."""

    LRC = "lrc"
    SECTIONED = "sectioned"
    PLAIN = "plain"
    SYNCED = "synced"
    NONE = "none"


@dataclass(frozen=True)
class LyricLine:
    """A single renderable lyric line.

    ``time`` is only ``None`` for lines the transcript aligner could not
    place; every other path always assigns a time.
    """

    time: Optional[float]
    text: str
    section: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"time": self.time, "text": self.text, "section": self.section}


@dataclass
class Section:
    """A group of lines sharing one section label during distribution."""

    label: str
    speed_multiplier: float
    lines: List[str] = field(default_factory=list)
    tagged: bool = True  # False for lines seen before any section tag


@dataclass(frozen=True)
class TranscriptWord:
    """A word from a speech transcription with timing."""

    text: str
    start_ms: int
    confidence: Optional[float] = None
    end_ms: Optional[int] = None

    @property
    def start(self) -> float:
        return self.start_ms / 1000


@dataclass(frozen=True)
class AlignedEntry:
    """One row of aligner output: a lyric line or a section marker."""

    kind: str  # "line" or "section"
    text: str
    time: Optional[float] = None

    @property
    def label(self) -> Optional[str]:
        return self.text if self.kind == "section" else None

    @property
    def is_section(self) -> bool:
        return self.kind == "section"


@dataclass
class SyncResult:
    """Synchronized lines plus the path that produced them."""

    synced_lyrics: List[LyricLine]
    lyrics_type: LyricsType

    @property
    def total_lines(self) -> int:
        return len(self.synced_lyrics)

    @property
    def matched_lines(self) -> int:
        return sum(1 for line in self.synced_lyrics if line.time is not None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "syncedLyrics": [line.to_dict() for line in self.synced_lyrics],
            "lyricsType": self.lyrics_type.value,
        }
