"""Reading filters written in JSON and turning them into predicates."""

from __future__ import annotations

import json
import unicodedata
from typing import Any, Callable, Mapping

from seimei import filters
from seimei.resources import read_bytes

COMMON_YOMI_PATH = "filter/common.json"

_BYTE_KEYS = ("lessThan", "equal", "greaterThan")
_MATCH_KEYS = ("equal", "startWith", "endWith", "contain")


class FilterError(ValueError):
    """Raised for a filter that cannot be read or built."""


def _expect_object(value: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(value, dict):
        raise FilterError(f"{where}: expected an object")
    return value


def _decode_byte(value: Any, where: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise FilterError(f"{where}: expected an integer from 0 to 255")
    return value


def _decode_string(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise FilterError(f"{where}: expected a string")
    return value


def _decode_unit(value: Any, where: str) -> dict[str, Any]:
    _expect_object(value, where)
    return {}


def _decode_byte_func(value: Any, where: str) -> dict[str, int]:
    obj = _expect_object(value, where)
    return {
        key: _decode_byte(obj[key], f"{where}.{key}")
        for key in _BYTE_KEYS
        if obj.get(key) is not None
    }


def _decode_match_func(value: Any, where: str) -> dict[str, str]:
    obj = _expect_object(value, where)
    return {
        key: _decode_string(obj[key], f"{where}.{key}")
        for key in _MATCH_KEYS
        if obj.get(key) is not None
    }


def _decode_count(value: Any, where: str) -> dict[str, Any]:
    obj = _expect_object(value, where)
    rune = obj.get("rune")
    count = obj.get("count")
    return {
        "rune": "" if rune is None else _decode_string(rune, f"{where}.rune"),
        "count": {} if count is None else _decode_byte_func(count, f"{where}.count"),
    }


def _decode_list(value: Any, where: str) -> list[dict[str, Any]]:
    if not isinstance(value, list):
        raise FilterError(f"{where}: expected an array")
    return [_decode_data(item, f"{where}[{i}]") for i, item in enumerate(value)]


def _decode_data(value: Any, where: str) -> dict[str, Any]:
    if value is None:
        return {}
    obj = _expect_object(value, where)
    return {
        key: decoder(obj[key], f"{where}.{key}")
        for key, decoder in _FIELDS
        if obj.get(key) is not None
    }


_FIELDS: tuple[tuple[str, Callable[[Any, str], Any]], ...] = (
    ("and", _decode_list),
    ("or", _decode_list),
    ("not", _decode_data),
    ("minRank", _decode_byte),
    ("minTotalRank", _decode_byte),
    ("mora", _decode_byte_func),
    ("strokes", _decode_byte_func),
    ("true", _decode_unit),
    ("false", _decode_unit),
    ("yomiCount", _decode_count),
    ("yomi", _decode_match_func),
    ("kanjiCount", _decode_count),
    ("kanji", _decode_match_func),
    ("commonYomi", _decode_unit),
    ("length", _decode_byte_func),
    ("sex", _decode_string),
)

_SEXES = {
    "asexual": filters.asexual,
    "male": filters.male,
    "female": filters.female,
}


def parse(raw: bytes | str) -> dict[str, Any]:
    """Read a filter from JSON; unknown keys are dropped, types are checked."""
    try:
        value = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise FilterError(f"invalid filter JSON: {exc}") from exc
    return _decode_data(value, "filter")


def _load_common_yomis() -> list[str]:
    try:
        yomis = json.loads(read_bytes(COMMON_YOMI_PATH))
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise FilterError(f"cannot load common readings: {exc}") from exc
    if not isinstance(yomis, list) or not all(isinstance(y, str) for y in yomis):
        raise FilterError("common readings must be a JSON array of strings")
    return yomis


def _first_char(text: str, where: str) -> str:
    if not text:
        raise FilterError(f"{where}: rune must hold one character")
    return text[0]


def build(seed: Mapping[str, Any]) -> filters.FilterFunc:
    """Turn a parsed filter into a predicate over targets."""
    if (items := seed.get("and")) is not None:
        return filters.and_(*(build(item) for item in items))
    if (items := seed.get("or")) is not None:
        return filters.or_(*(build(item) for item in items))
    if (inner := seed.get("not")) is not None:
        return filters.not_(build(inner))
    if (rank := seed.get("minRank")) is not None:
        return filters.min_rank(rank)
    if (data := seed.get("mora")) is not None:
        return filters.mora(build_byte_func(data))
    if (data := seed.get("strokes")) is not None:
        return filters.strokes(build_byte_func(data))
    if seed.get("true") is not None:
        return filters.true_()
    if seed.get("false") is not None:
        return filters.false_()
    if (data := seed.get("yomiCount")) is not None:
        count_func = build_byte_func(data.get("count") or {})
        rune = unicodedata.normalize("NFC", data.get("rune") or "")
        return filters.yomi_count(_first_char(rune, "yomiCount"), count_func)
    if (data := seed.get("yomi")) is not None:
        return filters.yomi_match(build_match_func(data))
    if seed.get("commonYomi") is not None:
        return filters.common_yomi(_load_common_yomis())
    if (data := seed.get("kanjiCount")) is not None:
        count_func = build_byte_func(data.get("count") or {})
        return filters.kanji_count(_first_char(data.get("rune") or "", "kanjiCount"), count_func)
    if (data := seed.get("kanji")) is not None:
        return filters.kanji_match(build_match_func(data))
    if (total := seed.get("minTotalRank")) is not None:
        return filters.min_total_rank(total)
    if (data := seed.get("length")) is not None:
        return filters.length(build_byte_func(data))
    if (name := seed.get("sex")) is not None:
        try:
            return filters.sex(_SEXES[name])
        except KeyError:
            raise FilterError(f"unknown sex: {name}") from None
    raise FilterError("empty data")


def build_byte_func(data: Mapping[str, int]) -> filters.ByteFunc:
    """Turn a count condition into a predicate over integers."""
    if (n := data.get("lessThan")) is not None:
        return filters.byte_less_than(n)
    if (n := data.get("equal")) is not None:
        return filters.byte_equal(n)
    if (n := data.get("greaterThan")) is not None:
        return filters.byte_greater_than(n)
    raise FilterError("empty count data")


def build_match_func(data: Mapping[str, str]) -> filters.MatchFunc:
    """Turn a match condition into a predicate over strings."""
    if (text := data.get("equal")) is not None:
        return filters.match_exactly(text)
    if (text := data.get("startWith")) is not None:
        return filters.match_starts_with(text)
    if (text := data.get("endWith")) is not None:
        return filters.match_ends_with(text)
    if (text := data.get("contain")) is not None:
        return filters.match_contains(text)
    raise FilterError("empty match data")


def dump(seed: Mapping[str, Any]) -> str:
    """Write a filter back as indented JSON, holding only the known keys."""
    return json.dumps(_decode_data(seed, "filter"), indent=2, ensure_ascii=False)