"""Kanji dictionaries: stroke counts and readings of usable characters."""

from __future__ import annotations

import json
import unicodedata
from typing import AbstractSet, Any, Iterable, Mapping, TypeVar

from seimei.kanaconv import htok
from seimei.resources import read_bytes

V = TypeVar("V")

JOYO_STROKES_PATH = "joyo/strokes.json"
JOYO_YOMI_PATH = "joyo/yomi.json"
JINMEI_STROKES_PATH = "jinmei/strokes.json"
JINMEI_YOMI_PATH = "jinmei/yomi.json"
KANA_STROKES_PATH = "kana/strokes.json"


def charset(mapping: Iterable[str]) -> frozenset[str]:
    """Return the set of characters that are keys of ``mapping``."""
    return frozenset(mapping)


def intersection(first: AbstractSet[str], second: AbstractSet[str]) -> frozenset[str]:
    """Return the characters present in both sets."""
    return frozenset(char for char in first if char in second)


def load(strokes_map: Mapping[str, int], yomi_map: Mapping[str, list[str]]) -> frozenset[str]:
    """Return the characters that have both a stroke count and readings."""
    return intersection(charset(strokes_map), charset(yomi_map))


def _entries(data: bytes | str, kind: str) -> list[dict[str, Any]]:
    try:
        entries = json.loads(data)
    except json.JSONDecodeError as exc:
        raise ValueError(f"failed to unmarshal {kind}: {exc}") from exc
    if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
        raise ValueError(f"failed to unmarshal {kind}: expected an array of objects")
    return entries


def _first_char(entry: Mapping[str, Any]) -> str:
    text = entry.get("kanji")
    if not isinstance(text, str) or not text:
        raise ValueError(f"entry without a character: {entry!r}")
    return text[0]


def parse_strokes(data: bytes | str) -> dict[str, int]:
    """Parse a JSON array of ``{"kanji", "strokes"}`` entries."""
    result: dict[str, int] = {}
    for entry in _entries(data, "strokes"):
        char = _first_char(entry)
        strokes = entry.get("strokes", 0)
        if isinstance(strokes, bool) or not isinstance(strokes, int) or not 0 <= strokes <= 255:
            raise ValueError(f"failed to unmarshal strokes: invalid value {strokes!r} for {char!r}")
        result[char] = strokes
    return result


def parse_yomi(data: bytes | str) -> dict[str, list[str]]:
    """Parse a JSON array of ``{"kanji", "yomi"}`` entries into NFC readings."""
    result: dict[str, list[str]] = {}
    for entry in _entries(data, "yomi"):
        char = _first_char(entry)
        readings = entry.get("yomi") or []
        if not isinstance(readings, list) or not all(isinstance(r, str) for r in readings):
            raise ValueError(f"failed to unmarshal yomi: invalid readings for {char!r}")
        result[char] = [unicodedata.normalize("NFC", reading) for reading in readings]
    return result


def kana_yomi(strokes_map: Iterable[str]) -> dict[str, list[str]]:
    """Return each kana's single reading, its katakana form."""
    return {kana: [htok(kana)] for kana in strokes_map}


def merge(joyo: Mapping[str, V], jinmei: Mapping[str, V], kana: Mapping[str, V]) -> dict[str, V]:
    """Join the three dictionaries; raise ValueError on any shared key."""
    merged: dict[str, V] = dict(joyo)
    for key in jinmei:
        if key in merged:
            raise ValueError(f"duplicate key between joyo and jinmei: {key!r}")
    merged.update(jinmei)
    for key in kana:
        if key in merged:
            raise ValueError(f"duplicate key among joyo and jinmei and kana: {key!r}")
    merged.update(kana)
    return merged


def load_strokes() -> dict[str, int]:
    """Load the stroke counts of all usable characters."""
    return merge(
        parse_strokes(read_bytes(JOYO_STROKES_PATH)),
        parse_strokes(read_bytes(JINMEI_STROKES_PATH)),
        parse_strokes(read_bytes(KANA_STROKES_PATH)),
    )


def load_yomi() -> dict[str, list[str]]:
    """Load the readings of all usable characters."""
    return merge(
        parse_yomi(read_bytes(JOYO_YOMI_PATH)),
        parse_yomi(read_bytes(JINMEI_YOMI_PATH)),
        kana_yomi(parse_strokes(read_bytes(KANA_STROKES_PATH))),
    )


def is_valid(given_name: Iterable[str], chars: AbstractSet[str]) -> bool:
    """Return whether every character of the name is usable."""
    return all(char in chars for char in given_name)