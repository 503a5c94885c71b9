"""Forced alignment through the external aeneas tool.

This is an optional strategy: aeneas runs in a subprocess and maps each
lyric line to the audio directly. When aeneas is not installed, the audio
file is missing or the run fails, the strategy reports itself unavailable
by returning ``None`` so callers can fall back to another path.
"""

import importlib.util
import json
import subprocess
import sys
import tempfile
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

from ..config import FORCED_ALIGN_LANGUAGE, FORCED_ALIGN_PYTHON, FORCED_ALIGN_TIMEOUT
from ..utils.logging import get_logger
from .alignment import AlignmentStrategy
from .models import AlignedEntry
from .tags import normalize_section_label, section_tag_label

logger = get_logger(__name__)

AENEAS_MODULE = "aeneas.tools.execute_task"


def aeneas_available(python: str) -> bool:
    """Check whether aeneas can be imported by ``python``."""
    if python == sys.executable:
        return importlib.util.find_spec("aeneas") is not None
    try:
        result = subprocess.run(
            [python, "-c", "import aeneas"],
            capture_output=True,
            text=True,
            timeout=30,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f"Could not probe aeneas with {python}: {e}")
        return False
    return result.returncode == 0


def parse_fragments(data: Any) -> Optional[List[float]]:
    """Extract fragment start times from aeneas JSON output."""
    if not isinstance(data, dict) or not isinstance(data.get("fragments"), list):
        return None
    starts: List[float] = []
    for fragment in data["fragments"]:
        try:
            starts.append(round(float(fragment["begin"]), 3))
        except (KeyError, TypeError, ValueError):
            return None
    return starts


def _split_structure(text: str) -> List[Tuple[str, str]]:
    items: List[Tuple[str, str]] = []
    for raw in text.strip().splitlines():
        line = raw.strip()
        if not line:
            continue
        label = section_tag_label(line)
        if label is not None:
            items.append(("section", normalize_section_label(label)))
        else:
            items.append(("line", line))
    return items


class ForcedAligner(AlignmentStrategy):
    """Line-level forced alignment of lyrics against an audio file."""

    name = "forced"

    def __init__(
        self,
        audio_path: Union[str, Path],
        python: str = FORCED_ALIGN_PYTHON,
        language: str = FORCED_ALIGN_LANGUAGE,
        timeout: float = FORCED_ALIGN_TIMEOUT,
    ):
        self.audio_path = Path(audio_path)
        self.python = python
        self.language = language
        self.timeout = timeout

    def is_available(self) -> bool:
        if not self.audio_path.is_file():
            logger.warning(f"Forced alignment unavailable: no audio at {self.audio_path}")
            return False
        if not aeneas_available(self.python):
            logger.warning("Forced alignment unavailable: aeneas is not installed")
            return False
        return True

    def _run_aeneas(self, lines: List[str]) -> Optional[List[float]]:
        with tempfile.TemporaryDirectory() as tmpdir:
            text_path = Path(tmpdir) / "lyrics.txt"
            out_path = Path(tmpdir) / "aligned.json"
            text_path.write_text("\n".join(lines), encoding="utf-8")

            config = f"task_language={self.language}|os_task_file_format=json|is_text_type=plain"
            try:
                subprocess.run(
                    [
                        self.python,
                        "-m",
                        AENEAS_MODULE,
                        str(self.audio_path),
                        str(text_path),
                        config,
                        str(out_path),
                    ],
                    capture_output=True,
                    text=True,
                    timeout=self.timeout,
                    check=True,
                )
                data = json.loads(out_path.read_text(encoding="utf-8"))
            except (OSError, subprocess.SubprocessError, json.JSONDecodeError) as e:
                logger.warning(f"Forced alignment failed: {e}")
                return None

        return parse_fragments(data)

    def align(self, text: str) -> Optional[List[AlignedEntry]]:
        items = _split_structure(text)
        lyric_lines = [value for kind, value in items if kind == "line"]
        if not lyric_lines:
            return [AlignedEntry(kind="section", text=value) for _, value in items]

        if not self.is_available():
            return None

        starts = self._run_aeneas(lyric_lines)
        if starts is None:
            return None
        if len(starts) != len(lyric_lines):
            logger.warning(
                f"Forced alignment returned {len(starts)} fragments for {len(lyric_lines)} lines"
            )
            return None

        entries: List[AlignedEntry] = []
        line_starts = iter(starts)
        for kind, value in items:
            if kind == "section":
                entries.append(AlignedEntry(kind="section", text=value))
            else:
                entries.append(AlignedEntry(kind="line", text=value, time=next(line_starts)))

        logger.info(f"Forced alignment placed {len(lyric_lines)} lines")
        return entries
