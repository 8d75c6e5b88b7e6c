import dataclasses
import enum
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Type, TypeVar

_E = TypeVar('_E', bound=enum.Enum)


class ColorBasis(enum.Enum):
    """Which part of a name feeds the hue hash."""

    INITIALS = 'initials'
    FULL_NAME = 'full-name'


class PaletteMode(enum.Enum):
    FULL_SPECTRUM = 'full-spectrum'
    LIMITED_12 = 'limited-12'


def _as_int(value: str | None, default: int) -> int:
    try:
        return int(value) if value is not None else default
    except ValueError:
        return default


def _as_float(value: str | None, default: float) -> float:
    try:
        return float(value) if value is not None else default
    except ValueError:
        return default


def _as_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in ('1', 'true', 'yes', 'on'):
        return True
    if normalized in ('0', 'false', 'no', 'off'):
        return False
    return default


def _as_choice(value: str | None, choices: Type[_E], default: _E) -> _E:
    try:
        return choices(value.strip().lower()) if value is not None else default
    except ValueError:
        return default


class BaseConfig:
    """Defaults shared by every entry point."""

    SATURATION = 65
    LIGHTNESS = 45
    COLOR_BASIS = ColorBasis.INITIALS
    PALETTE_MODE = PaletteMode.FULL_SPECTRUM
    CONTRAST_LEVEL = 4.5
    FORCE_AAA = False

    LOG_LEVEL = 'INFO'


@dataclass(frozen=True)
class AvatarConfig:
    """Immutable settings applied to every avatar computation."""

    saturation: int = BaseConfig.SATURATION
    lightness: int = BaseConfig.LIGHTNESS
    color_basis: ColorBasis = BaseConfig.COLOR_BASIS
    palette_mode: PaletteMode = BaseConfig.PALETTE_MODE
    min_contrast_ratio: float = BaseConfig.CONTRAST_LEVEL
    force_aaa: bool = BaseConfig.FORCE_AAA

    def __post_init__(self) -> None:
        for field_name in ('saturation', 'lightness'):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 100:
                raise ValueError(f'{field_name} must be an integer between 0 and 100, got {value!r}')
        if not 1.0 <= self.min_contrast_ratio <= 21.0:
            raise ValueError(f'min_contrast_ratio must be between 1 and 21, got {self.min_contrast_ratio!r}')
        if not isinstance(self.color_basis, ColorBasis):
            raise ValueError(f'Unknown color basis: {self.color_basis!r}')
        if not isinstance(self.palette_mode, PaletteMode):
            raise ValueError(f'Unknown palette mode: {self.palette_mode!r}')

    def replace(self, **changes) -> 'AvatarConfig':
        return dataclasses.replace(self, **changes)


def load_avatar_config(environ: Optional[Mapping[str, str]] = None) -> AvatarConfig:
    """Build an :class:`AvatarConfig` from ``AVATAR_*`` environment variables.

    Malformed values fall back to the defaults; out-of-range numbers are
    rejected by :class:`AvatarConfig` itself.
    """
    env = os.environ if environ is None else environ
    return AvatarConfig(
        saturation=_as_int(env.get('AVATAR_SATURATION'), BaseConfig.SATURATION),
        lightness=_as_int(env.get('AVATAR_LIGHTNESS'), BaseConfig.LIGHTNESS),
        color_basis=_as_choice(env.get('AVATAR_COLOR_BASIS'), ColorBasis, BaseConfig.COLOR_BASIS),
        palette_mode=_as_choice(env.get('AVATAR_PALETTE'), PaletteMode, BaseConfig.PALETTE_MODE),
        min_contrast_ratio=_as_float(env.get('AVATAR_CONTRAST_LEVEL'), BaseConfig.CONTRAST_LEVEL),
        force_aaa=_as_bool(env.get('AVATAR_FORCE_AAA'), BaseConfig.FORCE_AAA),
    )


def load_log_level(environ: Optional[Mapping[str, str]] = None) -> str:
    env = os.environ if environ is None else environ
    return env.get('LOG_LEVEL', BaseConfig.LOG_LEVEL)
