# services/hash_service.py

"""Deterministic string hashing used to derive avatar hues.

Python's built-in ``hash`` is salted per process, so avatar colors are
derived from an explicit two-accumulator mix (the cyrb53 scheme) computed
with 32-bit wrapping arithmetic. Input is folded as UTF-16 code units so
identical names hash identically on every platform.
"""

from __future__ import annotations

from typing import Final, Iterator

_MASK_32: Final = 0xFFFFFFFF
_HIGH_MASK: Final = 0x1FFFFF  # 21 bits, giving a 53-bit result

_SEED_1: Final = 0xDEADBEEF
_SEED_2: Final = 0x41C6CE57
_MULTIPLIER_1: Final = 2654435761
_MULTIPLIER_2: Final = 1597334677
_AVALANCHE_1: Final = 2246822507
_AVALANCHE_2: Final = 3266489909


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK_32


def _code_units(text: str) -> Iterator[int]:
    data = text.encode('utf-16-le', errors='surrogatepass')
    for index in range(0, len(data), 2):
        yield data[index] | (data[index + 1] << 8)


def hash_text(text: str) -> int:
    """Return a non-negative 53-bit hash of *text*."""
    h1 = _SEED_1
    h2 = _SEED_2
    for unit in _code_units(text):
        h1 = _imul(h1 ^ unit, _MULTIPLIER_1)
        h2 = _imul(h2 ^ unit, _MULTIPLIER_2)

    h1 = _imul(h1 ^ (h1 >> 16), _AVALANCHE_1)
    h1 ^= _imul(h2 ^ (h2 >> 13), _AVALANCHE_2)
    h2 = _imul(h2 ^ (h2 >> 16), _AVALANCHE_1)
    h2 ^= _imul(h1 ^ (h1 >> 13), _AVALANCHE_2)

    return ((h2 & _HIGH_MASK) << 32) + h1


__all__ = ['hash_text']
