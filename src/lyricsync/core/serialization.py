"""JSON serialization for sync results and transcripts."""

import json
from pathlib import Path
from typing import Any, Dict, List, Union

from ..exceptions import LyricsError, TranscriptError, ValidationError
from ..utils.logging import get_logger
from .models import LyricLine, LyricsType, SyncResult, TranscriptWord

logger = get_logger(__name__)


def result_to_dict(result: SyncResult) -> Dict[str, Any]:
    """Convert a SyncResult into a JSON-serializable dict."""
    return result.to_dict()


def result_from_dict(data: Dict[str, Any]) -> SyncResult:
    """Convert a dict produced by :func:`result_to_dict` back into a SyncResult."""
    try:
        lines = [
            LyricLine(
                time=None if item.get("time") is None else float(item["time"]),
                text=item["text"],
                section=item.get("section"),
            )
            for item in data["syncedLyrics"]
        ]
        lyrics_type = LyricsType(data["lyricsType"])
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise LyricsError(f"Malformed sync result data: {e}")
    return SyncResult(synced_lyrics=lines, lyrics_type=lyrics_type)


def save_result_json(filepath: Union[str, Path], result: SyncResult) -> None:
    """Save a sync result to a JSON file."""
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(result_to_dict(result), f, indent=2, ensure_ascii=False)


def load_result_json(filepath: Union[str, Path]) -> SyncResult:
    """Load a sync result from a JSON file."""
    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)
    return result_from_dict(data)


# ----------------------
# Transcripts
# ----------------------
_UNIT_SCALE = {"ms": 1, "s": 1000}


def _first_present(item: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if item.get(key) is not None:
            return item[key]
    return None


def transcript_words_from_json(data: Any, unit: str = "ms") -> List[TranscriptWord]:
    """Build TranscriptWords from a transcription service payload.

    Accepts a list of word objects or an object with a ``"words"`` list.
    Word objects use ``text``/``word``, ``start``, ``end`` and
    ``confidence``/``probability``; ``unit`` says whether times are in
    milliseconds (``"ms"``) or seconds (``"s"``). Unusable entries are
    skipped.
    """
    if unit not in _UNIT_SCALE:
        raise ValidationError(f"Unknown transcript time unit: {unit}")
    scale = _UNIT_SCALE[unit]

    if isinstance(data, dict):
        items = data.get("words")
    else:
        items = data
    if not isinstance(items, list):
        raise TranscriptError("Transcript must be a list of words or an object with 'words'")

    words: List[TranscriptWord] = []
    skipped = 0
    for item in items:
        if not isinstance(item, dict):
            skipped += 1
            continue
        text = _first_present(item, "text", "word")
        start = item.get("start")
        try:
            start_ms = int(round(float(start) * scale))
        except (TypeError, ValueError):
            skipped += 1
            continue
        if text is None or start_ms < 0:
            skipped += 1
            continue

        end = item.get("end")
        confidence = _first_present(item, "confidence", "probability")
        try:
            end_ms = None if end is None else int(round(float(end) * scale))
            confidence = None if confidence is None else float(confidence)
        except (TypeError, ValueError):
            skipped += 1
            continue

        words.append(
            TranscriptWord(
                text=str(text),
                start_ms=start_ms,
                confidence=confidence,
                end_ms=end_ms,
            )
        )

    if skipped:
        logger.warning(f"Skipped {skipped} malformed transcript entries")
    return words


def load_transcript(filepath: Union[str, Path], unit: str = "ms") -> List[TranscriptWord]:
    """Load transcript words from a JSON file."""
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise TranscriptError(f"Cannot read transcript {filepath}: {e}")
    return transcript_words_from_json(data, unit=unit)
