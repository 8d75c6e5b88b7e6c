"""Resolve display names into accessible avatar colors."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Tuple

from config import AvatarConfig
from services.color_service import (
    RGB,
    best_text_color,
    format_hsl,
    hsl_to_rgb,
    rgb_to_hex,
    text_contrast,
)
from services.contrast_service import AAA_RATIO, adjust_lightness
from services.hue_service import hue_for
from services.initials_service import extract_initials

AA_RATIO = 4.5
AA_LARGE_RATIO = 3.0


class WcagLevel(enum.Enum):
    AAA_PASS = 'AAA Pass'
    AA_PASS = 'AA Pass'
    AA_PASS_AAA_FAIL = 'AA Pass (AAA Fail)'
    FAIL_BELOW_4_5 = 'AA Fail'
    FAIL_BELOW_3 = 'Fail'

    @property
    def label(self) -> str:
        return self.value


def classify_wcag(ratio: float, nominal_ratio: float) -> WcagLevel:
    """Map a contrast ratio onto a WCAG tier.

    A ratio that passes AA is reported as failing AAA when the caller
    asked for AAA (a nominal threshold of 7 or more).
    """
    if ratio >= AAA_RATIO:
        return WcagLevel.AAA_PASS
    if ratio >= AA_RATIO:
        if nominal_ratio >= AAA_RATIO:
            return WcagLevel.AA_PASS_AAA_FAIL
        return WcagLevel.AA_PASS
    if ratio >= AA_LARGE_RATIO:
        return WcagLevel.FAIL_BELOW_4_5
    return WcagLevel.FAIL_BELOW_3


@dataclass(frozen=True)
class AvatarResult:
    source_name: str
    initials: str
    hue: int
    saturation: int
    lightness: int
    rgb: RGB
    hex: str
    text_color: str
    contrast_ratio: float
    wcag_level: WcagLevel

    @property
    def hsl(self) -> str:
        return format_hsl(self.hue, self.saturation, self.lightness)

    def to_dict(self) -> Dict[str, Any]:
        """Export record with the stable keys used by design-token files."""
        return {
            'name': self.source_name,
            'initials': self.initials,
            'background': self.hex,
            'text-color': self.text_color,
            'hsl': self.hsl,
            'contrast-ratio': round(self.contrast_ratio, 2),
            'wcag': self.wcag_level.label,
        }


def resolve(name: str, config: AvatarConfig | None = None) -> AvatarResult:
    """Compute the avatar colors for *name* under *config*."""
    config = config or AvatarConfig()
    initials = extract_initials(name)
    hue = hue_for(name, config.color_basis, config.palette_mode)
    saturation = config.saturation
    lightness = config.lightness

    if config.force_aaa:
        lightness = adjust_lightness(hue, saturation, lightness, AAA_RATIO)

    rgb = hsl_to_rgb(hue, saturation, lightness)
    text_color = best_text_color(*rgb)
    ratio = text_contrast(rgb, text_color)

    return AvatarResult(
        source_name=(name or '').strip(),
        initials=initials,
        hue=hue,
        saturation=saturation,
        lightness=lightness,
        rgb=rgb,
        hex=rgb_to_hex(*rgb),
        text_color=text_color,
        contrast_ratio=ratio,
        wcag_level=classify_wcag(ratio, config.min_contrast_ratio),
    )


def resolve_many(names: Iterable[str], config: AvatarConfig | None = None) -> Tuple[AvatarResult, ...]:
    """Resolve every name, preserving input order."""
    config = config or AvatarConfig()
    return tuple(resolve(name, config) for name in names)


__all__ = [
    'AA_LARGE_RATIO',
    'AA_RATIO',
    'AvatarResult',
    'WcagLevel',
    'classify_wcag',
    'resolve',
    'resolve_many',
]
