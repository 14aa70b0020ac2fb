"""Conversion of hiragana to katakana."""

from __future__ import annotations

_HIRAGANA_LO = 0x3041
_KATAKANA_LO = 0x30A1
_OFFSET = _KATAKANA_LO - _HIRAGANA_LO

_HIRAGANA_RANGES = ((0x3041, 0x3096), (0x309D, 0x309F))

_TABLE = {
    code: code + _OFFSET
    for low, high in _HIRAGANA_RANGES
    for code in range(low, high + 1)
}


def htok(text: str) -> str:
    """Return ``text`` with every hiragana replaced by its katakana."""
    return text.translate(_TABLE)