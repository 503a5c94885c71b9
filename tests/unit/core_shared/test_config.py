import math
from pathlib import Path

import pytest

from lyricsync import config
from lyricsync.exceptions import ConfigError


def test_default_table_is_valid():
    config.validate_speed_table(config.DEFAULT_SECTION_SPEEDS)
    assert config.DEFAULT_SECTION_SPEEDS["chorus"] > config.DEFAULT_SECTION_SPEEDS["verse"]
    assert config.DEFAULT_DURATION == 180.0


@pytest.mark.parametrize("bad", [0, -1, math.inf, math.nan, "1.0", None, False])
def test_validate_speed_table_rejects(bad):
    with pytest.raises(ConfigError):
        config.validate_speed_table({"verse": bad})


def test_get_cache_dir_env_override(monkeypatch, tmp_path):
    monkeypatch.setenv("LYRICSYNC_CACHE_DIR", str(tmp_path))
    assert config.get_cache_dir() == tmp_path


def test_get_cache_dir_default(monkeypatch):
    monkeypatch.delenv("LYRICSYNC_CACHE_DIR", raising=False)
    assert config.get_cache_dir() == Path.home() / ".cache" / "lyricsync"
