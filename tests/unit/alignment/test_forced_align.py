import json
import subprocess
from pathlib import Path

import pytest

from lyricsync.core import forced_align
from lyricsync.core.forced_align import ForcedAligner, parse_fragments
from lyricsync.core.models import AlignedEntry


def _fake_aeneas(begins):
    calls = []

    def run(cmd, **kwargs):
        calls.append(cmd)
        fragments = [{"begin": f"{b:.3f}", "end": "0.000"} for b in begins]
        Path(cmd[-1]).write_text(json.dumps({"fragments": fragments}))
        return subprocess.CompletedProcess(cmd, 0, "", "")

    run.calls = calls
    return run


@pytest.fixture
def aeneas_installed(monkeypatch):
    monkeypatch.setattr(forced_align, "aeneas_available", lambda python: True)


def test_parse_fragments():
    data = {"fragments": [{"begin": "0.000"}, {"begin": "3.1204"}]}
    assert parse_fragments(data) == [0.0, 3.12]


@pytest.mark.parametrize(
    "data",
    [None, [], {"fragments": None}, {"fragments": [{"end": "1.0"}]}, {"fragments": [{"begin": "x"}]}],
)
def test_parse_fragments_malformed(data):
    assert parse_fragments(data) is None


def test_align_places_lines_and_keeps_sections(monkeypatch, mock_audio_file, aeneas_installed):
    run = _fake_aeneas([1.5, 4.25])
    monkeypatch.setattr(forced_align.subprocess, "run", run)

    entries = ForcedAligner(mock_audio_file, python="python3").align("[Verse]\nHello\n\nWorld")

    assert entries == [
        AlignedEntry(kind="section", text="verse"),
        AlignedEntry(kind="line", text="Hello", time=1.5),
        AlignedEntry(kind="line", text="World", time=4.25),
    ]
    cmd = run.calls[0]
    assert cmd[:3] == ["python3", "-m", forced_align.AENEAS_MODULE]
    assert cmd[3] == str(mock_audio_file)
    assert "os_task_file_format=json" in cmd[5]


def test_missing_audio_is_unavailable(temp_dir, aeneas_installed):
    assert ForcedAligner(temp_dir / "missing.wav").align("Hello") is None


def test_missing_aeneas_is_unavailable(monkeypatch, mock_audio_file):
    monkeypatch.setattr(forced_align, "aeneas_available", lambda python: False)
    assert ForcedAligner(mock_audio_file).align("Hello") is None


def test_failed_run_is_unavailable(monkeypatch, mock_audio_file, aeneas_installed):
    def run(cmd, **kwargs):
        raise subprocess.CalledProcessError(1, cmd)

    monkeypatch.setattr(forced_align.subprocess, "run", run)
    assert ForcedAligner(mock_audio_file).align("Hello") is None


def test_fragment_count_mismatch_is_unavailable(monkeypatch, mock_audio_file, aeneas_installed):
    monkeypatch.setattr(forced_align.subprocess, "run", _fake_aeneas([1.0]))
    assert ForcedAligner(mock_audio_file).align("Hello\nWorld") is None


def test_sections_only_needs_no_audio(temp_dir):
    entries = ForcedAligner(temp_dir / "missing.wav").align("[Intro]\n[Outro]")
    assert [e.text for e in entries] == ["intro", "outro"]


def test_aeneas_probe_in_other_interpreter(monkeypatch):
    monkeypatch.setattr(
        forced_align.subprocess,
        "run",
        lambda cmd, **kwargs: subprocess.CompletedProcess(cmd, 1, "", "No module named aeneas"),
    )
    assert forced_align.aeneas_available("/nonexistent/python") is False


def test_aeneas_probe_handles_missing_interpreter(monkeypatch):
    def run(cmd, **kwargs):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(forced_align.subprocess, "run", run)
    assert forced_align.aeneas_available("/nonexistent/python") is False

