"""Lyrics synchronization entry point.

Routes raw lyric text to the right timing path:

- explicit ``[MM:SS.ff]`` timestamps are parsed as-is (``"lrc"``)
- a transcript (or another alignment strategy) places lines against the
  recording (``"synced"``)
- otherwise time is estimated from the song duration (``"sectioned"`` or
  ``"plain"``)
"""

from typing import List, Optional, Sequence

from ..config import DEFAULT_DURATION
from ..utils.logging import get_logger
from ..utils.validation import validate_duration, validate_lyrics_text
from .alignment import AlignmentStrategy, TranscriptAligner, collapse_sections
from .classify import classify
from .distribution import DistributionEngine
from .lrc import parse_explicit
from .models import LyricsFormat, LyricsType, SyncResult, TranscriptWord
from .sections import SectionTimingModel

logger = get_logger(__name__)


def resolve_duration(duration: Optional[float]) -> float:
    """Substitute the default duration when it is unknown or not positive."""
    duration = validate_duration(duration)
    if duration is None or duration <= 0:
        logger.debug(f"No usable duration, assuming {DEFAULT_DURATION:.0f}s")
        return DEFAULT_DURATION
    return duration


def _run_strategies(
    text: str, strategies: Sequence[AlignmentStrategy]
) -> Optional[SyncResult]:
    for strategy in strategies:
        entries = strategy.align(text)
        if entries is None:
            logger.info(f"Alignment strategy '{strategy.name}' unavailable, trying next")
            continue
        logger.debug(f"Aligned lyrics with '{strategy.name}' strategy")
        return SyncResult(collapse_sections(entries), LyricsType.SYNCED)
    return None


def process_lyrics(
    text: str,
    duration: Optional[float] = None,
    transcript_words: Optional[Sequence[TranscriptWord]] = None,
    strategies: Optional[Sequence[AlignmentStrategy]] = None,
    timing_model: Optional[SectionTimingModel] = None,
) -> SyncResult:
    """Turn raw lyric text into time-stamped lines.

    Args:
        text: Raw lyrics (LRC, section-tagged or plain text)
        duration: Audio duration in seconds; unknown or <= 0 uses the default
        transcript_words: Ordered transcript words; when given, transcript
            alignment is preferred over duration-based estimation
        strategies: Extra alignment strategies tried in order after the
            transcript; a strategy returning None is skipped
        timing_model: Section speed table for duration-based estimation

    Returns:
        SyncResult with the lines and the path that produced them
    """
    text = validate_lyrics_text(text)
    duration = validate_duration(duration)
    if not text.strip():
        return SyncResult([], LyricsType.NONE)

    lyrics_format = classify(text)
    logger.debug(f"Classified lyrics as {lyrics_format.value}")

    if lyrics_format == LyricsFormat.EXPLICIT_TIMESTAMP:
        return SyncResult(parse_explicit(text), LyricsType.LRC)

    candidates: List[AlignmentStrategy] = []
    if transcript_words is not None:
        candidates.append(TranscriptAligner(transcript_words))
    candidates.extend(strategies or [])
    if candidates:
        aligned = _run_strategies(text, candidates)
        if aligned is not None:
            return aligned

    engine = DistributionEngine(timing_model)
    lines = engine.distribute(text, resolve_duration(duration))
    if lyrics_format == LyricsFormat.SECTION_TAGGED:
        return SyncResult(lines, LyricsType.SECTIONED)
    return SyncResult(lines, LyricsType.PLAIN)
