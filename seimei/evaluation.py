"""Fortune evaluation of a full name by its five stroke groups."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence

from seimei.strokes import StrokesFunc, add_strokes, sum_strokes


class Rank(IntEnum):
    """Fortune rank, higher is better."""

    DAI_KYO = 0
    KYO = 1
    KICHI = 2
    DAI_KICHI = 3
    DAI_DAI_KICHI = 4

    @property
    def label(self) -> str:
        return _LABELS[self]

    def __str__(self) -> str:
        return self.label

    def __format__(self, spec: str) -> str:
        return format(self.label, spec)


_LABELS = {
    Rank.DAI_DAI_KICHI: "大大吉",
    Rank.DAI_KICHI: "大吉",
    Rank.KICHI: "吉",
    Rank.KYO: "凶",
    Rank.DAI_KYO: "大凶",
}

_RANK_GROUPS = {
    Rank.DAI_DAI_KICHI: (15, 24, 31),
    Rank.DAI_KICHI: (1, 3, 5, 6, 11, 13, 16, 21, 23, 29, 32, 33, 35, 37, 39),
    Rank.KICHI: (7, 8, 17, 18, 25, 26, 38),
    Rank.KYO: (14, 22, 27, 28, 30),
    Rank.DAI_KYO: (2, 4, 9, 10, 12, 19, 20, 34, 36, 40),
}

_RANK_BY_STROKES = {
    strokes: rank for rank, group in _RANK_GROUPS.items() for strokes in group
}


def strokes_to_rank(strokes: int) -> Rank:
    """Return the rank for a stroke count; raise ValueError if none is defined."""
    try:
        return _RANK_BY_STROKES[strokes]
    except KeyError:
        raise ValueError(f"too large strokes: {strokes}") from None


@dataclass(frozen=True)
class Result:
    """Ranks of the five stroke groups of a name."""

    tenkaku: Rank
    jinkaku: Rank
    chikaku: Rank
    gaikaku: Rank
    sokaku: Rank

    def total(self) -> int:
        """Return the sum of all five ranks."""
        return int(self.tenkaku + self.jinkaku + self.chikaku + self.gaikaku + self.sokaku)

    def __str__(self) -> str:
        return (
            f"Result{{Tenkaku: {self.tenkaku.label}, Jinkaku: {self.jinkaku.label}, "
            f"Chikaku: {self.chikaku.label}, Gaikaku: {self.gaikaku.label}, "
            f"Sokaku: {self.sokaku.label}}}"
        )


def tenkaku(family_name: Sequence[str], strokes_func: StrokesFunc) -> int:
    """Strokes of the whole family name."""
    return sum_strokes(family_name, strokes_func)


def jinkaku(family_name: Sequence[str], given_name: Sequence[str], strokes_func: StrokesFunc) -> int:
    """Strokes of the last family character and the first given character."""
    return add_strokes(family_name[-1], given_name[0], strokes_func)


def chikaku(given_name: Sequence[str], strokes_func: StrokesFunc) -> int:
    """Strokes of the whole given name."""
    return sum_strokes(given_name, strokes_func)


def gaikaku(family_name: Sequence[str], given_name: Sequence[str], strokes_func: StrokesFunc) -> int:
    """Strokes of the outer characters, one added for each single-character part."""
    first = strokes_func(family_name[0])
    last = strokes_func(given_name[-1])
    if len(family_name) == 1:
        first += 1
    if len(given_name) == 1:
        last += 1
    return first + last


def sokaku(family_name: Sequence[str], given_name: Sequence[str], strokes_func: StrokesFunc) -> int:
    """Strokes of the full name."""
    return sum_strokes(family_name, strokes_func) + sum_strokes(given_name, strokes_func)


def evaluate(family_name: Sequence[str], given_name: Sequence[str], strokes_func: StrokesFunc) -> Result:
    """Rank the five stroke groups of a name."""
    return Result(
        tenkaku=strokes_to_rank(tenkaku(family_name, strokes_func)),
        jinkaku=strokes_to_rank(jinkaku(family_name, given_name, strokes_func)),
        chikaku=strokes_to_rank(chikaku(given_name, strokes_func)),
        gaikaku=strokes_to_rank(gaikaku(family_name, given_name, strokes_func)),
        sokaku=strokes_to_rank(sokaku(family_name, given_name, strokes_func)),
    )