"""Section timing model and section parsing for tagged lyrics."""

import json
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

from ..config import (
    DEFAULT_SECTION_SPEEDS,
    DEFAULT_SPEED,
    IMPLICIT_SECTION_LABEL,
    validate_speed_table,
)
from ..exceptions import ConfigError
from ..utils.logging import get_logger
from .models import Section
from .tags import normalize_section_label, section_tag_label

logger = get_logger(__name__)


def _base_label(label: str) -> str:
    """Reduce ``"verse2"`` or ``"chorus:artist"`` to the bare section name."""
    return label.split(":", 1)[0].rstrip("0123456789")


class SectionTimingModel:
    """Maps section labels to delivery-speed multipliers.

    Higher multipliers mean faster delivery, so lines in that section get
    less time per syllable. Unknown labels use ``default``.
    """

    def __init__(
        self,
        speeds: Optional[Mapping[str, float]] = None,
        default: float = DEFAULT_SPEED,
    ):
        table = DEFAULT_SECTION_SPEEDS if speeds is None else speeds
        normalized = {normalize_section_label(k): v for k, v in table.items()}
        validate_speed_table(normalized)
        validate_speed_table({"default": default})
        self._speeds: Dict[str, float] = {k: float(v) for k, v in normalized.items()}
        self.default = float(default)

    @property
    def speeds(self) -> Dict[str, float]:
        return dict(self._speeds)

    def __contains__(self, label: str) -> bool:
        return normalize_section_label(label) in self._speeds

    def multiplier(self, label: Optional[str]) -> float:
        """Look up the multiplier for a label, falling back to the default."""
        if not label:
            return self.default
        key = normalize_section_label(label)
        if key in self._speeds:
            return self._speeds[key]
        base = _base_label(key)
        if base in self._speeds:
            return self._speeds[base]
        return self.default

    def with_overrides(self, overrides: Mapping[str, float]) -> "SectionTimingModel":
        merged = self.speeds
        merged.update({normalize_section_label(k): v for k, v in overrides.items()})
        return SectionTimingModel(merged, default=self.default)


def load_section_speeds(path: Union[str, Path]) -> Dict[str, float]:
    """Load a JSON object of label -> multiplier merged over the defaults."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read section speeds from {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError("Section speeds file must contain a JSON object")

    overrides = {normalize_section_label(str(k)): v for k, v in data.items()}
    validate_speed_table(overrides)

    merged = dict(DEFAULT_SECTION_SPEEDS)
    merged.update({k: float(v) for k, v in overrides.items()})
    logger.debug(f"Loaded {len(overrides)} section speed overrides from {path}")
    return merged


def parse_sections(text: str, timing_model: Optional[SectionTimingModel] = None) -> List[Section]:
    """Split tagged lyrics into ordered sections.

    Lines before the first tag form an untagged section timed at intro
    speed. Sections without any lines are dropped.
    """
    model = timing_model or SectionTimingModel()
    sections: List[Section] = []
    current = Section(
        label=IMPLICIT_SECTION_LABEL,
        speed_multiplier=model.multiplier(IMPLICIT_SECTION_LABEL),
        tagged=False,
    )

    for raw in text.splitlines():
        line = raw.strip()
        label = section_tag_label(line)
        if label is not None:
            if current.lines:
                sections.append(current)
            key = normalize_section_label(label)
            current = Section(label=key, speed_multiplier=model.multiplier(key))
        elif line:
            current.lines.append(line)

    if current.lines:
        sections.append(current)

    return sections
