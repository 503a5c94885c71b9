"""Test configuration and fixtures.

Provides reusable fixtures for:
- Sample lyrics in each supported format
- Transcript word lists
- Temporary files and directories
"""

import os
import tempfile
from pathlib import Path

import pytest

from lyricsync.core.models import TranscriptWord


def pytest_addoption(parser):
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests that need external tools (aeneas, librosa)",
    )


def pytest_collection_modifyitems(config, items):
    run_integration = config.getoption("--run-integration") or os.getenv(
        "RUN_INTEGRATION_TESTS"
    ) == "1"
    if run_integration:
        return

    skip_integration = pytest.mark.skip(
        reason="requires external tools (use --run-integration or RUN_INTEGRATION_TESTS=1)"
    )
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


# =============================================================================
# Basic Fixtures
# =============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_audio_file(temp_dir):
    """Create a mock audio file."""
    audio_file = temp_dir / "song.wav"
    audio_file.write_bytes(b"fake audio data")
    return audio_file


# =============================================================================
# Lyrics Fixtures
# =============================================================================


@pytest.fixture
def lrc_lyrics():
    """Explicitly timestamped lyrics, deliberately out of order."""
    return (
        "[ar:Some Artist]\n"
        "[00:12.50] Hello world\n"
        "[00:05.00]Intro line\n"
        "[00:20.10][00:40.25] Repeated chorus line\n"
    )


@pytest.fixture
def sectioned_lyrics():
    return (
        "[Verse 1]\n"
        "Walking down the empty street\n"
        "Counting every heartbeat\n"
        "\n"
        "[Chorus]\n"
        "Oh oh oh\n"
        "Sing it loud\n"
        "\n"
        "[Bridge]\n"
        "Slowly now\n"
    )


@pytest.fixture
def plain_lyrics():
    return "Walking down the empty street\nCounting every heartbeat\nSing it loud\n"


# =============================================================================
# Transcript Fixtures
# =============================================================================


def _make_words(*pairs, confidence=0.9):
    """Build TranscriptWords from (text, start_ms) pairs."""
    return [TranscriptWord(text=t, start_ms=ms, confidence=confidence) for t, ms in pairs]


@pytest.fixture
def transcript_words():
    """Transcript for the sectioned lyrics, with service-style punctuation."""
    return _make_words(
        ("Walking", 4000),
        ("down", 4400),
        ("the", 4700),
        ("empty", 5000),
        ("street,", 5600),
        ("Counting", 8000),
        ("every", 8500),
        ("heartbeat.", 9000),
        ("Oh,", 12000),
        ("oh,", 12400),
        ("oh!", 12800),
        ("Sing", 14000),
        ("it", 14300),
        ("loud", 14600),
        ("Slowly", 20000),
        ("now", 20600),
    )
