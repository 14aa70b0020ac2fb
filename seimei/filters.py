"""Predicates over search results, and the combinators that build them."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import Callable, Iterable

from seimei.evaluation import Rank, Result
from seimei.sex import Sex


@dataclass(frozen=True)
class Target:
    """A candidate given name with everything a filter may look at."""

    kanji: str
    yomi: str
    strokes: int
    mora: int
    sex: Sex
    eval_result: Result

    def __str__(self) -> str:
        return (
            f"{self.kanji} {self.yomi} {self.strokes} {self.mora} "
            f"{self.sex.label} {self.eval_result}"
        )


FilterFunc = Callable[[Target], bool]
ByteFunc = Callable[[int], bool]
MatchFunc = Callable[[str], bool]
SexPredicate = Callable[[Sex], bool]


def byte_equal(n: int) -> ByteFunc:
    """Accept counts equal to ``n``."""
    return lambda value: value == n


def byte_less_than(n: int) -> ByteFunc:
    """Accept counts below ``n``."""
    return lambda value: value < n


def byte_greater_than(n: int) -> ByteFunc:
    """Accept counts above ``n``."""
    return lambda value: value > n


def and_(*args: FilterFunc) -> FilterFunc:
    """Accept a target that every filter accepts."""
    filters = tuple(args)
    return lambda target: all(f(target) for f in filters)


def or_(*args: FilterFunc) -> FilterFunc:
    """Accept a target that at least one filter accepts."""
    filters = tuple(args)
    return lambda target: any(f(target) for f in filters)


def not_(filter_func: FilterFunc) -> FilterFunc:
    """Accept a target that ``filter_func`` rejects."""
    return lambda target: not filter_func(target)


def true_() -> FilterFunc:
    """Accept every target."""
    return lambda target: True


def false_() -> FilterFunc:
    """Reject every target."""
    return lambda target: False


def match_exactly(matching: str) -> MatchFunc:
    """Match text equal to ``matching``."""
    return lambda text: text == matching


def match_starts_with(matching: str) -> MatchFunc:
    """Match text that begins with ``matching``."""
    return lambda text: text.startswith(matching)


def match_ends_with(matching: str) -> MatchFunc:
    """Match text that ends with ``matching``."""
    return lambda text: text.endswith(matching)


def match_contains(matching: str) -> MatchFunc:
    """Match text that contains ``matching``."""
    return lambda text: matching in text


def kanji_count(char: str, byte_func: ByteFunc) -> FilterFunc:
    """Test how often ``char`` occurs in the written name."""
    return lambda target: byte_func(target.kanji.count(char))


def kanji_match(match_func: MatchFunc) -> FilterFunc:
    """Test the written name with a match function."""
    return lambda target: match_func(target.kanji)


def length(count_func: ByteFunc) -> FilterFunc:
    """Test the number of characters of the written name."""
    return lambda target: count_func(len(target.kanji))


def mora(byte_func: ByteFunc) -> FilterFunc:
    """Test the number of morae of the reading."""
    return lambda target: byte_func(target.mora)


def strokes(count_func: ByteFunc) -> FilterFunc:
    """Test the total strokes of the given name."""
    return lambda target: count_func(target.strokes)


def min_rank(minimum: int) -> FilterFunc:
    """Accept targets whose changeable ranks are all at least ``minimum``.

    The heaven rank depends on the family name alone, so it is not checked.
    """

    def check(target: Target) -> bool:
        result = target.eval_result
        return all(
            rank >= minimum
            for rank in (result.jinkaku, result.chikaku, result.gaikaku, result.sokaku)
        )

    return check


def min_total_rank(minimum: int) -> FilterFunc:
    """Accept targets whose summed ranks reach ``minimum``."""
    return lambda target: target.eval_result.total() >= minimum


def sex(sex_func: SexPredicate) -> FilterFunc:
    """Test the sex the reading is used for."""
    return lambda target: sex_func(target.sex)


def asexual(value: Sex) -> bool:
    """True for readings used for both sexes."""
    return value == Sex.ASEXUAL


def female(value: Sex) -> bool:
    """True for readings usable for girls."""
    return value in (Sex.FEMALE, Sex.ASEXUAL)


def male(value: Sex) -> bool:
    """True for readings usable for boys."""
    return value in (Sex.MALE, Sex.ASEXUAL)


def yomi_count(char: str, byte_func: ByteFunc) -> FilterFunc:
    """Test how often ``char`` occurs in the reading."""
    return lambda target: byte_func(target.yomi.count(char))


def yomi_match(match_func: MatchFunc) -> FilterFunc:
    """Test the reading with a match function."""
    return lambda target: match_func(target.yomi)


def common_yomi(yomis: Iterable[str]) -> FilterFunc:
    """Accept targets whose reading is one of ``yomis`` (compared in NFC)."""
    known = frozenset(unicodedata.normalize("NFC", yomi) for yomi in yomis)
    return lambda target: target.yomi in known


__all__ = [
    "ByteFunc",
    "FilterFunc",
    "MatchFunc",
    "Rank",
    "SexPredicate",
    "Target",
    "and_",
    "asexual",
    "byte_equal",
    "byte_greater_than",
    "byte_less_than",
    "common_yomi",
    "false_",
    "female",
    "kanji_count",
    "kanji_match",
    "length",
    "male",
    "match_contains",
    "match_ends_with",
    "match_exactly",
    "match_starts_with",
    "min_rank",
    "min_total_rank",
    "mora",
    "not_",
    "or_",
    "sex",
    "strokes",
    "true_",
    "yomi_count",
    "yomi_match",
]