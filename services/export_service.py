"""Design-token export of avatar colors."""

from __future__ import annotations

import json
import re
from typing import Any, Dict, Iterable

from avatar import resolve
from config import AvatarConfig, ColorBasis, PaletteMode

TOKEN_ROOT = 'avatar-color-strategy'

_WHITESPACE = re.compile(r'\s+')
_UNSAFE_KEY_CHARS = re.compile(r'[^a-z0-9-]')


def token_key(name: str) -> str:
    """Slug used as the key of a name in the exported ``colors`` mapping."""
    key = _WHITESPACE.sub('-', name.strip().lower())
    return _UNSAFE_KEY_CHARS.sub('', key)


def _settings(config: AvatarConfig) -> Dict[str, Any]:
    return {
        'saturation': config.saturation,
        'lightness': config.lightness,
        'palette': 'limited-12' if config.palette_mode is PaletteMode.LIMITED_12 else 'full-spectrum',
        'color-basis': 'full-name' if config.color_basis is ColorBasis.FULL_NAME else 'initials',
        'forced-contrast': 'AAA' if config.force_aaa else 'none',
    }


def build_design_tokens(names: Iterable[str], config: AvatarConfig | None = None) -> Dict[str, Any]:
    """Return the design-token document for *names*.

    Blank names are skipped. Names sharing a slug keep the last entry.
    """
    config = config or AvatarConfig()
    cleaned = [name.strip() for name in names if name and name.strip()]
    if not cleaned:
        raise ValueError('No names to export')

    colors: Dict[str, Dict[str, Any]] = {}
    for name in cleaned:
        colors[token_key(name)] = resolve(name, config).to_dict()

    return {
        TOKEN_ROOT: {
            'description': 'Avatar color strategy',
            'settings': _settings(config),
            'colors': colors,
        },
    }


def dump_design_tokens(names: Iterable[str], config: AvatarConfig | None = None) -> str:
    return json.dumps(build_design_tokens(names, config), indent=2, ensure_ascii=False)


__all__ = ['TOKEN_ROOT', 'build_design_tokens', 'dump_design_tokens', 'token_key']
