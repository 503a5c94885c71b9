"""lyricsync - time-stamped lyric lines for karaoke-style display."""

__version__ = "0.1.0"

from .core.models import LyricLine, LyricsFormat, LyricsType, SyncResult, TranscriptWord
from .core.sync import process_lyrics

__all__ = [
    "__version__",
    "LyricLine",
    "LyricsFormat",
    "LyricsType",
    "SyncResult",
    "TranscriptWord",
    "process_lyrics",
]
