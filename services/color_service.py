"""Color space helpers: HSL/RGB conversion, hex codecs and WCAG contrast."""

from __future__ import annotations

import math
import string
from typing import Tuple

RGB = Tuple[int, int, int]

WHITE = '#ffffff'
BLACK = '#000000'

_HEX_DIGITS = frozenset(string.hexdigits)


class InvalidColorFormat(ValueError):
    """Raised when a string is not a ``#rrggbb`` color."""


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp_channel(value: float) -> int:
    return max(0, min(255, _round_half_up(value * 255)))


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> RGB:
    """Convert HSL (degrees, percent, percent) to 8-bit RGB channels."""
    s = saturation / 100
    l = lightness / 100
    chroma = (1 - abs(2 * l - 1)) * s
    x = chroma * (1 - abs((hue / 60) % 2 - 1))
    m = l - chroma / 2

    if hue < 60:
        r, g, b = chroma, x, 0.0
    elif hue < 120:
        r, g, b = x, chroma, 0.0
    elif hue < 180:
        r, g, b = 0.0, chroma, x
    elif hue < 240:
        r, g, b = 0.0, x, chroma
    elif hue < 300:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return _clamp_channel(r + m), _clamp_channel(g + m), _clamp_channel(b + m)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f'#{r:02x}{g:02x}{b:02x}'


def hex_to_rgb(value: str) -> RGB:
    """Decode an exact ``#rrggbb`` string into RGB channels."""
    if (
        not isinstance(value, str)
        or len(value) != 7
        or not value.startswith('#')
        or not _HEX_DIGITS.issuperset(value[1:])
    ):
        raise InvalidColorFormat(f'Expected "#" followed by 6 hex digits, got {value!r}')
    return int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16)


def normalize_hex_color(value: str | None) -> str:
    """Normalize a loosely written HEX color to the canonical ``#rrggbb`` form."""
    if not value:
        raise InvalidColorFormat('Empty color value')
    candidate = value.strip()
    if not candidate.startswith('#'):
        candidate = f'#{candidate}'
    return rgb_to_hex(*hex_to_rgb(candidate.lower()))


def is_valid_hex_color(value: str | None) -> bool:
    """Return True when *value* is a valid HEX color string."""
    try:
        normalize_hex_color(value)
    except InvalidColorFormat:
        return False
    return True


def srgb_to_linear(channel: float) -> float:
    if channel <= 0.03928:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def relative_luminance(r: int, g: int, b: int) -> float:
    """WCAG 2.1 relative luminance of an 8-bit RGB color."""
    return (
        0.2126 * srgb_to_linear(r / 255)
        + 0.7152 * srgb_to_linear(g / 255)
        + 0.0722 * srgb_to_linear(b / 255)
    )


def contrast_ratio(l1: float, l2: float) -> float:
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def best_text_color(r: int, g: int, b: int) -> str:
    """Return white or black, whichever reads better on the given background."""
    background = relative_luminance(r, g, b)
    white_contrast = contrast_ratio(1.0, background)
    black_contrast = contrast_ratio(background, 0.0)
    return WHITE if white_contrast >= black_contrast else BLACK


def text_contrast(rgb: RGB, text_color: str) -> float:
    """Contrast ratio between a background and a hex text color."""
    return contrast_ratio(relative_luminance(*rgb), relative_luminance(*hex_to_rgb(text_color)))


def format_hsl(hue: int, saturation: int, lightness: int) -> str:
    return f'hsl({hue}, {saturation}%, {lightness}%)'


__all__ = [
    'BLACK',
    'InvalidColorFormat',
    'RGB',
    'WHITE',
    'best_text_color',
    'contrast_ratio',
    'format_hsl',
    'hex_to_rgb',
    'hsl_to_rgb',
    'is_valid_hex_color',
    'normalize_hex_color',
    'relative_luminance',
    'rgb_to_hex',
    'srgb_to_linear',
    'text_contrast',
]
