"""Heuristic syllable counting.

Only used to weight lines against each other when distributing time, so
a cheap vowel-group count is enough. Tuned for Latin-alphabet text.
"""

import re

_NON_LETTER_RE = re.compile(r"[^a-z\s]")
# Silent endings: "-es"/"-e" after a consonant other than "l", and "-ed"
_SILENT_SUFFIX_RE = re.compile(r"(?:[^laeiouy]es|ed|[^laeiouy]e)$")
_VOWEL_RUN_RE = re.compile(r"[aeiouy]+")


def word_syllables(word: str) -> int:
    """Count vowel runs in a lowercase word, at least 1."""
    stem = _SILENT_SUFFIX_RE.sub("", word)
    if stem.startswith("y"):
        stem = stem[1:]
    return max(1, len(_VOWEL_RUN_RE.findall(stem)))


def syllables(line: str) -> int:
    """Estimate the syllable count of a lyric line (always >= 1)."""
    if not line:
        return 1
    words = _NON_LETTER_RE.sub("", line.lower()).split()
    return max(1, sum(word_syllables(w) for w in words))
