"""
Text utilities for token normalization, keyword extraction and cleaning
lyrics scraped from lyric sites.
"""

import re
from typing import List

from ..config import KEYWORD_LIMIT, KEYWORD_MIN_LENGTH
from .tags import is_section_tag


# ----------------------
# Token normalization
# ----------------------
def normalize_token(text: str) -> str:
    """Lowercase and keep only alphanumeric characters."""
    return "".join(ch for ch in text.lower() if ch.isalnum())


def tokenize_line(line: str) -> List[str]:
    """Split a lyric line into normalized word tokens."""
    cleaned = "".join(ch for ch in line.lower() if ch.isalnum() or ch.isspace())
    return cleaned.split()


# ----------------------
# Transcription helpers
# ----------------------
_BRACKETED_RE = re.compile(r"\[.*?\]")


def extract_keywords(
    lyrics: str, limit: int = KEYWORD_LIMIT, min_length: int = KEYWORD_MIN_LENGTH
) -> List[str]:
    """Collect distinct lyric words to boost a speech transcription.

    Bracketed tags are ignored; words keep first-seen order.
    """
    if not lyrics:
        return []
    word_re = re.compile(rf"\b[a-z]{{{min_length},}}\b")
    words = word_re.findall(_BRACKETED_RE.sub("", lyrics.lower()))
    return list(dict.fromkeys(words))[:limit]


# ----------------------
# Scraped lyrics cleanup
# ----------------------
_PREAMBLE_MARKERS = ("contribution", "viewer", "lyrics")


def clean_scraped_lyrics(text: str) -> str:
    """Strip page noise that lyric sites prepend to the first section tag.

    Headers such as "11 Contributors ... Lyrics" end up before the first
    ``[Intro]``-style tag, sometimes glued to it on the same line.
    """
    if not text:
        return ""

    lines = [line.strip() for line in text.split("\n")]

    first_section = next(
        (i for i, line in enumerate(lines) if is_section_tag(line)), -1
    )
    if 0 < first_section < 20:
        preamble = " ".join(lines[:first_section]).lower()
        if len(preamble) < 200 and any(m in preamble for m in _PREAMBLE_MARKERS):
            lines = lines[first_section:]

    if lines and "[" in lines[0]:
        lines[0] = lines[0][lines[0].index("[") :].strip()

    cleaned = "\n".join(lines)
    return re.sub(r"\n{3,}", "\n\n", cleaned).strip()
