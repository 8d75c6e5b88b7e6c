"""Hue distribution analysis for a batch of avatars.

The analyzer only reports structured findings. Turning a finding into a
sentence (and translating it) is left to whoever renders the report.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Sequence, Tuple

from config import AvatarConfig, PaletteMode

if TYPE_CHECKING:
    from avatar import AvatarResult

logger = logging.getLogger(__name__)

COLLISION_THRESHOLD_DEGREES = 10
NARROW_SPREAD_DEGREES = 5
NARROW_SPREAD_MIN_NAMES = 3


class Severity(enum.Enum):
    WARNING = 'warning'
    INFO = 'info'


@dataclass(frozen=True)
class DistributionWarning:
    severity: Severity
    code: str
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'params', MappingProxyType(dict(self.params)))


@dataclass(frozen=True)
class DistributionReport:
    min_gap_degrees: float
    ideal_gap_degrees: float
    collision_count: int
    warnings: Tuple[DistributionWarning, ...] = ()

    @property
    def has_warnings(self) -> bool:
        return any(entry.severity is Severity.WARNING for entry in self.warnings)


def circular_gaps(hues: Iterable[int]) -> list[float]:
    """Gaps between neighbouring hues on the color wheel, wrap-around included."""
    ordered = sorted(hues)
    gaps: list[float] = []
    for index, current in enumerate(ordered):
        if index + 1 < len(ordered):
            gaps.append(float(ordered[index + 1] - current))
        else:
            gaps.append(float(360 - current + ordered[0]))
    return gaps


def analyze_hues(
    hues: Sequence[int],
    name_count: int,
    palette: PaletteMode = PaletteMode.FULL_SPECTRUM,
) -> DistributionReport:
    """Measure how well *hues* are spread around the wheel.

    Entries are always ordered collision warning, narrow-spread warning,
    summary, since renderers may rely on their position.
    """
    if name_count < 2 or not hues:
        return DistributionReport(min_gap_degrees=360.0, ideal_gap_degrees=360.0, collision_count=0)

    gaps = circular_gaps(hues)
    min_gap = min(gaps)
    collisions = sum(1 for gap in gaps if gap < COLLISION_THRESHOLD_DEGREES)
    ideal_gap = 360 / name_count

    warnings = []
    if collisions > 0:
        warnings.append(DistributionWarning(
            Severity.WARNING,
            'hue-collision',
            {'collisions': collisions, 'threshold_degrees': COLLISION_THRESHOLD_DEGREES},
        ))
    if min_gap < NARROW_SPREAD_DEGREES and name_count > NARROW_SPREAD_MIN_NAMES:
        warnings.append(DistributionWarning(
            Severity.WARNING,
            'narrow-spread',
            {'min_gap_degrees': min_gap},
        ))
    warnings.append(DistributionWarning(
        Severity.INFO,
        'spread-summary',
        {'min_gap_degrees': min_gap, 'ideal_gap_degrees': ideal_gap, 'palette': palette.value},
    ))

    logger.debug(
        'Hue distribution for %s names: min gap %.1f, ideal %.1f, %s collisions',
        name_count, min_gap, ideal_gap, collisions,
    )
    return DistributionReport(
        min_gap_degrees=min_gap,
        ideal_gap_degrees=ideal_gap,
        collision_count=collisions,
        warnings=tuple(warnings),
    )


def analyze(results: Sequence['AvatarResult'], config: AvatarConfig | None = None) -> DistributionReport:
    """Analyze the hue spread of already resolved avatars."""
    palette = (config or AvatarConfig()).palette_mode
    return analyze_hues([result.hue for result in results], len(results), palette)


__all__ = [
    'COLLISION_THRESHOLD_DEGREES',
    'DistributionReport',
    'DistributionWarning',
    'NARROW_SPREAD_DEGREES',
    'Severity',
    'analyze',
    'analyze_hues',
    'circular_gaps',
]
