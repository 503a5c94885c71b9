"""Syllable-weighted time distribution for lyrics without timestamps.

Lines get time in proportion to their weight. With section tags the
weight is ``syllables / section speed`` so dense lines and slow sections
get more room; without tags it is the plain syllable count. Time is held
back for an intro before the first line, an outro after the last, and (for
tagged text) a short breath at every section change.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..config import (
    FLAT_INTRO_GAP_MAX,
    FLAT_INTRO_GAP_RATIO,
    FLAT_OUTRO_GAP_MAX,
    FLAT_OUTRO_GAP_RATIO,
    INTRO_GAP_MAX,
    INTRO_GAP_MIN,
    INTRO_GAP_RATIO,
    MIN_LYRIC_BUDGET_RATIO,
    OUTRO_GAP_MAX,
    OUTRO_GAP_RATIO,
    SECTION_GAP,
)
from ..exceptions import ValidationError
from ..utils.logging import get_logger
from .classify import has_section_tags
from .models import LyricLine
from .sections import SectionTimingModel, parse_sections
from .syllables import syllables
from .tags import is_section_tag

logger = get_logger(__name__)


@dataclass
class _WeightedLine:
    text: str
    section: Optional[str]
    weight: float
    starts_section: bool


def intro_gap(duration: float) -> float:
    """Lead-in before the first line of tagged lyrics."""
    return min(INTRO_GAP_MAX, max(INTRO_GAP_MIN, duration * INTRO_GAP_RATIO))


def outro_gap(duration: float) -> float:
    return min(OUTRO_GAP_MAX, duration * OUTRO_GAP_RATIO)


def flat_intro_gap(duration: float) -> float:
    return min(FLAT_INTRO_GAP_MAX, duration * FLAT_INTRO_GAP_RATIO)


def flat_outro_gap(duration: float) -> float:
    return min(FLAT_OUTRO_GAP_MAX, duration * FLAT_OUTRO_GAP_RATIO)


class DistributionEngine:
    """Assigns estimated timestamps to untimed lyric lines."""

    def __init__(self, timing_model: Optional[SectionTimingModel] = None):
        self.timing_model = timing_model or SectionTimingModel()

    def distribute(self, text: str, total_duration: float) -> List[LyricLine]:
        """Distribute ``total_duration`` seconds over the lines of ``text``."""
        if total_duration is None or total_duration <= 0:
            raise ValidationError("Duration must be positive")
        if has_section_tags(text):
            return self.distribute_sectioned(text, total_duration)
        return self.distribute_flat(text, total_duration)

    def distribute_sectioned(self, text: str, total_duration: float) -> List[LyricLine]:
        sections = parse_sections(text, self.timing_model)

        weighted: List[_WeightedLine] = []
        for section in sections:
            label = section.label if section.tagged else None
            for i, line in enumerate(section.lines):
                if is_section_tag(line):
                    continue
                weighted.append(
                    _WeightedLine(
                        text=line,
                        section=label,
                        weight=syllables(line) / section.speed_multiplier,
                        starts_section=i == 0,
                    )
                )

        if not weighted:
            return []

        lead_in = intro_gap(total_duration)
        tail = outro_gap(total_duration)
        usable = max(total_duration - lead_in - tail, 0.0)
        transition_total = (len(sections) - 1) * SECTION_GAP
        # Gaps may not eat more than a tenth of the lyric budget
        lyric_budget = max(usable - transition_total, usable * MIN_LYRIC_BUDGET_RATIO)

        total_weight = sum(w.weight for w in weighted)
        per_unit = lyric_budget / total_weight
        logger.debug(
            f"Sectioned distribution: {len(sections)} sections, {len(weighted)} lines, "
            f"intro {lead_in:.2f}s, outro {tail:.2f}s, budget {lyric_budget:.2f}s"
        )

        result: List[LyricLine] = []
        cursor = lead_in
        for index, line in enumerate(weighted):
            if line.starts_section and index > 0:
                cursor += SECTION_GAP
            result.append(LyricLine(time=round(cursor, 3), text=line.text, section=line.section))
            cursor += line.weight * per_unit

        return result

    def distribute_flat(self, text: str, total_duration: float) -> List[LyricLine]:
        lines = [
            line
            for line in (raw.strip() for raw in text.splitlines())
            if line and not is_section_tag(line)
        ]
        if not lines:
            return []

        weights = [syllables(line) for line in lines]
        total_weight = sum(weights)

        lead_in = flat_intro_gap(total_duration)
        usable = max(total_duration - lead_in - flat_outro_gap(total_duration), 0.0)
        logger.debug(
            f"Flat distribution: {len(lines)} lines, intro {lead_in:.2f}s, "
            f"budget {usable:.2f}s"
        )

        result: List[LyricLine] = []
        cursor = lead_in
        for line, weight in zip(lines, weights):
            result.append(LyricLine(time=round(cursor, 3), text=line))
            cursor += (weight / total_weight) * usable

        return result


def distribute(
    text: str,
    total_duration: float,
    timing_model: Optional[SectionTimingModel] = None,
) -> List[LyricLine]:
    """Convenience wrapper around :class:`DistributionEngine`."""
    return DistributionEngine(timing_model).distribute(text, total_duration)
