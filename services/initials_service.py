"""Initials extraction for avatar labels."""

from __future__ import annotations

from typing import FrozenSet, List

import regex

FALLBACK_INITIALS = '?'

# Name-affix particles that do not contribute to initials ("Ludwig van Beethoven" -> "LB").
NAME_PARTICLES: FrozenSet[str] = frozenset({
    'van', 'de', 'der', 'den', 'het', 'ter', 'ten', 'te',
    'la', 'le', 'les', 'du', 'des', 'von', 'zu', 'di', 'da', 'del', 'della',
    'el', 'al', 'bin', 'ibn',
})

_GRAPHEME = regex.compile(r'\X')


def first_grapheme(word: str) -> str:
    """Return the first user-perceived character of *word*."""
    match = _GRAPHEME.match(word)
    return match.group(0) if match else FALLBACK_INITIALS


def _significant_words(words: List[str]) -> List[str]:
    significant = [word for word in words if word.lower() not in NAME_PARTICLES]
    return significant or words


def extract_initials(name: str | None) -> str:
    """Return one or two uppercase initials for *name*, or ``"?"`` when blank."""
    words = (name or '').split()
    if not words:
        return FALLBACK_INITIALS

    source = _significant_words(words)
    if len(source) == 1:
        return first_grapheme(source[0]).upper()
    return first_grapheme(source[0]).upper() + first_grapheme(source[-1]).upper()


__all__ = ['FALLBACK_INITIALS', 'NAME_PARTICLES', 'extract_initials', 'first_grapheme']
