"""Stroke counts of characters and their sums."""

from __future__ import annotations

from typing import Callable, Iterable, Mapping

# Upper bound of strokes for which a rank is defined.
MAX_STROKES = 40

StrokesFunc = Callable[[str], int]


class StrokesNotFoundError(LookupError):
    """Raised when a character has no known stroke count."""

    def __init__(self, char: str) -> None:
        super().__init__(f"strokes not found for {char!r}")
        self.char = char


def sum_strokes(chars: Iterable[str], strokes_func: StrokesFunc) -> int:
    """Return the total strokes of all characters."""
    return sum(strokes_func(char) for char in chars)


def add_strokes(first: str, second: str, strokes_func: StrokesFunc) -> int:
    """Return the strokes of two characters added together."""
    return strokes_func(first) + strokes_func(second)


def by_map(strokes_map: Mapping[str, int]) -> StrokesFunc:
    """Return a strokes function that looks characters up in a mapping."""

    def lookup(char: str) -> int:
        try:
            return strokes_map[char]
        except KeyError:
            raise StrokesNotFoundError(char) from None

    return lookup


def by_constant(strokes: int, error: BaseException | None = None) -> StrokesFunc:
    """Return a strokes function that always gives ``strokes`` or raises ``error``."""

    def constant(char: str) -> int:
        if error is not None:
            raise error
        return strokes

    return constant