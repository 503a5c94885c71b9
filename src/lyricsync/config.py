"""Configuration settings for lyricsync."""

import math
import os
import sys
from pathlib import Path

from .exceptions import ConfigError

# Directories
DEFAULT_CACHE_DIR = Path.home() / ".cache" / "lyricsync"

# Caller policy: duration substituted when the audio length is unknown
DEFAULT_DURATION = float(os.getenv("LYRICSYNC_DEFAULT_DURATION", "180.0"))

# Sectioned distribution gaps (seconds)
INTRO_GAP_RATIO = 0.08
INTRO_GAP_MIN = 4.0
INTRO_GAP_MAX = 8.0
OUTRO_GAP_RATIO = 0.05
OUTRO_GAP_MAX = 5.0
SECTION_GAP = 0.8
MIN_LYRIC_BUDGET_RATIO = 0.9  # Floor after section gaps are reserved

# Flat distribution gaps (seconds)
FLAT_INTRO_GAP_RATIO = 0.06
FLAT_INTRO_GAP_MAX = 5.0
FLAT_OUTRO_GAP_RATIO = 0.04
FLAT_OUTRO_GAP_MAX = 4.0

# Section speed multipliers: higher = faster delivery = less time per syllable
DEFAULT_SPEED = 1.0
DEFAULT_SECTION_SPEEDS = {
    "interlude": 0.6,
    "instrumental": 0.6,
    "break": 0.6,
    "intro": 0.7,
    "outro": 0.7,
    "bridge": 0.9,
    "verse": 1.0,
    "prechorus": 1.1,
    "pre-chorus": 1.1,
    "chorus": 1.3,
    "hook": 1.3,
    "refrain": 1.3,
    "rap": 1.8,
}

# Label given to lines that appear before the first section tag
IMPLICIT_SECTION_LABEL = "intro"

# Keyword extraction for transcription word boosting
KEYWORD_LIMIT = 1000
KEYWORD_MIN_LENGTH = 3

# Optional forced aligner (aeneas) run as a subprocess
FORCED_ALIGN_PYTHON = os.getenv("LYRICSYNC_FORCED_ALIGN_PYTHON", sys.executable)
FORCED_ALIGN_TIMEOUT = float(os.getenv("LYRICSYNC_FORCED_ALIGN_TIMEOUT", "120"))
FORCED_ALIGN_LANGUAGE = os.getenv("LYRICSYNC_FORCED_ALIGN_LANGUAGE", "eng")


def validate_speed_table(speeds) -> None:
    """Validate that every multiplier is a positive finite number."""
    for label, speed in speeds.items():
        if isinstance(speed, bool) or not isinstance(speed, (int, float)):
            raise ConfigError(f"Speed for section '{label}' must be a number")
        if not math.isfinite(speed) or speed <= 0:
            raise ConfigError(f"Speed for section '{label}' must be positive")


def validate_config() -> None:
    """Validate configuration values."""
    if not math.isfinite(DEFAULT_DURATION) or DEFAULT_DURATION <= 0:
        raise ConfigError("Default duration must be positive")

    if not (0 < INTRO_GAP_MIN <= INTRO_GAP_MAX):
        raise ConfigError("Invalid intro gap range")

    if not (0 < MIN_LYRIC_BUDGET_RATIO <= 1.0):
        raise ConfigError("Invalid minimum lyric budget ratio")

    if FORCED_ALIGN_TIMEOUT <= 0:
        raise ConfigError("Invalid forced alignment timeout")

    validate_speed_table(DEFAULT_SECTION_SPEEDS)
    validate_speed_table({"default": DEFAULT_SPEED})


def get_cache_dir() -> Path:
    """Get cache directory from environment or default."""
    cache_dir = os.getenv("LYRICSYNC_CACHE_DIR")
    if cache_dir:
        return Path(cache_dir)
    return DEFAULT_CACHE_DIR


# Validate config on import
validate_config()
