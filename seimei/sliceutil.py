"""Helpers over lists of lists."""

from __future__ import annotations

from itertools import chain, product
from typing import Iterable, TypeVar

T = TypeVar("T")


def cartesian(lists: Iterable[Iterable[T]]) -> list[list[T]]:
    """Return every combination taking one item from each list, in order.

    An empty input gives no combinations.
    """
    pools = [list(items) for items in lists]
    if not pools:
        return []
    return [list(combination) for combination in product(*pools)]


def flatten(lists: Iterable[Iterable[T]]) -> list[T]:
    """Return the concatenation of all lists."""
    return list(chain.from_iterable(lists))