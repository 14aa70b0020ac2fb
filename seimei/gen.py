"""Generators of candidate given names with their readings."""

from __future__ import annotations

import json
import unicodedata
from dataclasses import dataclass
from typing import AbstractSet, Callable, Iterator, Mapping, Sequence

from seimei.kanji import is_valid
from seimei.resources import read_bytes
from seimei.strokes import MAX_STROKES, StrokesFunc, sum_strokes
from seimei.yomi import YomiFunc

MEI_PATH = "gen/mei.json"


@dataclass(frozen=True)
class Options:
    """Length limits of the generated given names."""

    min_length: int = 1
    max_length: int = 3


@dataclass(frozen=True)
class Generated:
    """A candidate given name and one of its readings."""

    given_name: str
    yomi: str


GenerateFunc = Callable[[str, Options], Iterator[Generated]]


def load_mei() -> dict[str, list[str]]:
    """Load the common given names, keyed by reading."""
    table = json.loads(read_bytes(MEI_PATH))
    if not isinstance(table, dict) or not all(
        isinstance(names, list) and all(isinstance(name, str) for name in names)
        for names in table.values()
    ):
        raise ValueError("given name table must map readings to arrays of strings")
    return table


def common_space_generator(
    chars: AbstractSet[str],
    mei: Mapping[str, Sequence[str]] | None = None,
) -> GenerateFunc:
    """Generate the commonly used given names that are written with ``chars``.

    Without ``mei`` the bundled table of common names is loaded.
    """
    table = load_mei() if mei is None else mei

    def generate(family_name: str, options: Options) -> Iterator[Generated]:
        for yomi, names in table.items():
            normalized = unicodedata.normalize("NFC", yomi)
            for name in names:
                if not is_valid(name, chars):
                    continue
                if not options.min_length <= len(name) <= options.max_length:
                    continue
                yield Generated(given_name=name, yomi=normalized)

    return generate


def full_space_generator(
    chars: AbstractSet[str],
    strokes_func: StrokesFunc,
    yomi_func: YomiFunc,
) -> GenerateFunc:
    """Generate every combination of ``chars`` whose full name stays within the stroke limit."""
    ordered = sorted(chars)

    def generate(family_name: str, options: Options) -> Iterator[Generated]:
        max_strokes = MAX_STROKES - sum_strokes(family_name, strokes_func)

        def walk(current: str, current_strokes: int) -> Iterator[Generated]:
            if len(current) >= options.max_length:
                return
            for char in ordered:
                total = current_strokes + strokes_func(char)
                if total > max_strokes:
                    continue
                name = current + char
                if len(name) >= options.min_length:
                    for reading in yomi_func(name):
                        yield Generated(given_name=name, yomi=reading.text)
                yield from walk(name, total)

        yield from walk("", 0)

    return generate