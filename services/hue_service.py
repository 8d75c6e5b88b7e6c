"""Map names onto the hue circle."""

from __future__ import annotations

from config import ColorBasis, PaletteMode
from services.hash_service import hash_text
from services.initials_service import extract_initials

LIMITED_PALETTE_SIZE = 12
LIMITED_PALETTE_STEP = 360 // LIMITED_PALETTE_SIZE


def color_basis_for(name: str, basis: ColorBasis) -> str:
    """Return the text whose hash determines the hue for *name*."""
    if basis is ColorBasis.FULL_NAME:
        return (name or '').strip().lower()
    return extract_initials(name)


def hue_for(name: str, basis: ColorBasis, palette: PaletteMode) -> int:
    """Deterministic hue in ``[0, 360)`` for *name*.

    The limited palette snaps hues onto twelve buckets 30 degrees apart,
    trading uniqueness for guaranteed separation.
    """
    digest = abs(hash_text(color_basis_for(name, basis)))
    if palette is PaletteMode.LIMITED_12:
        return (digest % LIMITED_PALETTE_SIZE) * LIMITED_PALETTE_STEP
    return digest % 360


__all__ = ['LIMITED_PALETTE_SIZE', 'LIMITED_PALETTE_STEP', 'color_basis_for', 'hue_for']
