"""Lightness search that nudges a background towards a target contrast ratio."""

from __future__ import annotations

import logging

from services.color_service import WHITE, best_text_color, hsl_to_rgb, text_contrast

logger = logging.getLogger(__name__)

AAA_RATIO = 7.0
LIGHTNESS_FLOOR = 10
LIGHTNESS_CEILING = 90


def adjust_lightness(hue: int, saturation: int, lightness: int, required_ratio: float) -> int:
    """Return a lightness whose contrast against its text color meets *required_ratio*.

    The text color is chosen once, at the initial lightness. With white
    text the background is darkened step by step down to
    ``LIGHTNESS_FLOOR``; with black text it is lightened up to
    ``LIGHTNESS_CEILING``. The direction is never re-evaluated during
    the search, so previously generated colors stay reproducible.

    When the target cannot be reached the initial lightness is returned.
    """
    rgb = hsl_to_rgb(hue, saturation, lightness)
    text_color = best_text_color(*rgb)
    if text_contrast(rgb, text_color) >= required_ratio:
        return lightness

    if text_color == WHITE:
        candidates = range(lightness, LIGHTNESS_FLOOR - 1, -1)
    else:
        candidates = range(lightness, LIGHTNESS_CEILING + 1)

    for candidate in candidates:
        if text_contrast(hsl_to_rgb(hue, saturation, candidate), text_color) >= required_ratio:
            logger.debug(
                'Lightness adjusted from %s to %s for hue %s (target %.2f)',
                lightness, candidate, hue, required_ratio,
            )
            return candidate

    logger.debug(
        'Contrast target %.2f unreachable for hsl(%s, %s%%, %s%%); keeping original lightness',
        required_ratio, hue, saturation, lightness,
    )
    return lightness


__all__ = ['AAA_RATIO', 'LIGHTNESS_CEILING', 'LIGHTNESS_FLOOR', 'adjust_lightness']
