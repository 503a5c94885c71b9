"""Core lyrics synchronization modules.

Everything here is pure computation over in-memory text; the optional
forced aligner and audio-duration lookup are the only modules that touch
external tools.
"""

from .models import AlignedEntry, LyricLine, LyricsFormat, LyricsType, Section, SyncResult, TranscriptWord
from .classify import classify
from .lrc import format_timestamp, parse_explicit, to_lrc
from .syllables import syllables
from .sections import SectionTimingModel, parse_sections
from .distribution import DistributionEngine, distribute
from .alignment import AlignmentStrategy, TranscriptAligner, align, collapse_sections
from .sync import process_lyrics

__all__ = [
    "AlignedEntry",
    "LyricLine",
    "LyricsFormat",
    "LyricsType",
    "Section",
    "SyncResult",
    "TranscriptWord",
    "classify",
    "format_timestamp",
    "parse_explicit",
    "to_lrc",
    "syllables",
    "SectionTimingModel",
    "parse_sections",
    "DistributionEngine",
    "distribute",
    "AlignmentStrategy",
    "TranscriptAligner",
    "align",
    "collapse_sections",
    "process_lyrics",
]
