import math

import pytest

from lyricsync.core.models import LyricLine
from lyricsync.exceptions import ValidationError
from lyricsync.utils.validation import (
    validate_duration,
    validate_line_order,
    validate_lyrics_text,
    validate_output_path,
)


def test_validate_lyrics_text():
    assert validate_lyrics_text("") == ""
    with pytest.raises(ValidationError):
        validate_lyrics_text(None)
    with pytest.raises(ValidationError):
        validate_lyrics_text(b"bytes")


def test_validate_duration():
    assert validate_duration(None) is None
    assert validate_duration(3) == 3.0
    assert validate_duration(-1.5) == -1.5
    for bad in ("10", True, math.inf, math.nan):
        with pytest.raises(ValidationError):
            validate_duration(bad)


def test_validate_output_path_creates_parent(tmp_path):
    path = validate_output_path(str(tmp_path / "nested" / "song.LRC"))
    assert path.parent.is_dir()
    with pytest.raises(ValidationError):
        validate_output_path(str(tmp_path / "song.mp4"))


def test_validate_line_order():
    validate_line_order([LyricLine(1.0, "a"), LyricLine(None, "b"), LyricLine(1.0, "c")])
    with pytest.raises(ValidationError):
        validate_line_order([LyricLine(2.0, "a"), LyricLine(None, "b"), LyricLine(1.0, "c")])
