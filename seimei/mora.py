"""Counting of morae in a katakana reading."""

from __future__ import annotations

from typing import Iterable

# Small kana that do not make a mora of their own.
SUTE_GANA_EXCEPT_ONE_MORA = frozenset("ァィゥェォャュョ")


def count(text: Iterable[str]) -> int:
    """Return the number of morae in a katakana reading."""
    return sum(1 for char in text if char not in SUTE_GANA_EXCEPT_ONE_MORA)