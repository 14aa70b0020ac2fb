"""Functions that give the possible readings of a written name."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Mapping, Sequence

from seimei.sliceutil import cartesian


@dataclass(frozen=True)
class YomiResult:
    """One reading of a name, in katakana."""

    text: str

    def __str__(self) -> str:
        return self.text


YomiFunc = Callable[[str], list[YomiResult]]


def by_constant(yomis: Iterable[str]) -> YomiFunc:
    """Return a function that gives the same readings for every name."""
    fixed = [YomiResult(yomi) for yomi in yomis]
    return lambda name: list(fixed)


def fallback(primary: YomiFunc, secondary: YomiFunc) -> YomiFunc:
    """Use ``secondary`` when ``primary`` gives no readings."""

    def read(name: str) -> list[YomiResult]:
        return primary(name) or secondary(name)

    return read


def by_cartesian(yomi_dict: Mapping[str, Sequence[str]]) -> YomiFunc:
    """Combine every reading of every character, in order.

    A character without readings makes the name unreadable.
    """

    def read(name: str) -> list[YomiResult]:
        choices = [yomi_dict.get(char, ()) for char in name]
        return [YomiResult("".join(parts)) for parts in cartesian(choices)]

    return read