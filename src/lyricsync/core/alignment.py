"""Align lyric lines to transcribed words using anchor matching.

Each lyric line is located in the transcript by its first few words: the
first three tokens are tried, then two, then one. Searching only moves
forward from the last match, so the resulting timeline never jumps back.
A line that cannot be found keeps ``time=None`` and does not move the
search position.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Sequence, Tuple

from ..utils.logging import get_logger
from .models import AlignedEntry, LyricLine, TranscriptWord
from .tags import normalize_section_label, section_tag_label
from .text_utils import normalize_token, tokenize_line

logger = get_logger(__name__)

MAX_ANCHOR_SIZE = 3


class AlignmentStrategy(ABC):
    """Produces aligned entries for lyric text, or ``None`` if unavailable."""

    name = "base"

    @abstractmethod
    def align(self, text: str) -> Optional[List[AlignedEntry]]:
        """Return aligned entries, or ``None`` when the strategy cannot run."""


class TranscriptAligner(AlignmentStrategy):
    """Anchor-matching aligner over an already-ordered transcript."""

    name = "transcript"

    def __init__(self, words: Sequence[TranscriptWord], max_anchor: int = MAX_ANCHOR_SIZE):
        if max_anchor < 1:
            raise ValueError("max_anchor must be at least 1")
        self.words = list(words)
        self.max_anchor = max_anchor
        self._tokens = [normalize_token(w.text) for w in self.words]

    def find_anchor(self, tokens: Sequence[str], cursor: int) -> Optional[int]:
        """Index of the earliest transcript match at or after ``cursor``.

        Longer anchors are preferred over earlier positions.
        """
        for size in range(min(len(tokens), self.max_anchor), 0, -1):
            anchor = list(tokens[:size])
            for i in range(cursor, len(self._tokens) - size + 1):
                if self._tokens[i : i + size] == anchor:
                    return i
        return None

    def iter_alignment(self, text: str) -> Iterator[Tuple[AlignedEntry, int]]:
        """Yield each aligned entry with the search cursor after it."""
        cursor = 0
        for raw in text.strip().splitlines():
            line = raw.strip()
            if not line:
                continue

            label = section_tag_label(line)
            if label is not None:
                yield AlignedEntry(kind="section", text=normalize_section_label(label)), cursor
                continue

            tokens = tokenize_line(line)
            if not tokens:
                continue

            index = self.find_anchor(tokens, cursor)
            if index is None:
                logger.debug(f"No transcript match for line: {line!r}")
                yield AlignedEntry(kind="line", text=line), cursor
                continue

            cursor = index + 1
            yield AlignedEntry(kind="line", text=line, time=self.words[index].start), cursor

    def align(self, text: str) -> List[AlignedEntry]:
        entries = [entry for entry, _ in self.iter_alignment(text)]
        matched = sum(1 for e in entries if not e.is_section and e.time is not None)
        total = sum(1 for e in entries if not e.is_section)
        logger.debug(f"Transcript alignment matched {matched}/{total} lines")
        return entries


def align(text: str, words: Sequence[TranscriptWord]) -> List[AlignedEntry]:
    """Align ``text`` against transcript ``words``."""
    return TranscriptAligner(words).align(text)


def collapse_sections(entries: Sequence[AlignedEntry]) -> List[LyricLine]:
    """Fold section markers into the ``section`` field of following lines."""
    lines: List[LyricLine] = []
    current: Optional[str] = None
    for entry in entries:
        if entry.is_section:
            current = entry.text
            continue
        lines.append(LyricLine(time=entry.time, text=entry.text, section=current))
    return lines
