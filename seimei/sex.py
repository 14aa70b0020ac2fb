"""Guessing the sex of a given name from lists of readings."""

from __future__ import annotations

import json
import unicodedata
from enum import IntEnum
from typing import AbstractSet, Callable

from seimei.kanaconv import htok
from seimei.resources import read_bytes

UNKNOWN_STRING = "不明"
ASEXUAL_STRING = "両性"
MALE_STRING = "男性"
FEMALE_STRING = "女性"

MALE_NAMES_PATH = "sex/male.json"
FEMALE_NAMES_PATH = "sex/female.json"


class Sex(IntEnum):
    """Sex a reading is used for."""

    UNKNOWN = 0
    ASEXUAL = 1
    MALE = 2
    FEMALE = 3

    @property
    def label(self) -> str:
        return _LABELS[self]

    def __str__(self) -> str:
        return self.label

    def __format__(self, spec: str) -> str:
        return format(self.label, spec)


_LABELS = {
    Sex.UNKNOWN: UNKNOWN_STRING,
    Sex.ASEXUAL: ASEXUAL_STRING,
    Sex.MALE: MALE_STRING,
    Sex.FEMALE: FEMALE_STRING,
}

SexFunc = Callable[[str], Sex]


def by_name_lists(male_names: AbstractSet[str], female_names: AbstractSet[str]) -> SexFunc:
    """Return a function that classifies a reading by membership in the two lists."""

    def classify(given_name: str) -> Sex:
        is_male = given_name in male_names
        is_female = given_name in female_names
        if is_male and is_female:
            return Sex.ASEXUAL
        if is_male:
            return Sex.MALE
        if is_female:
            return Sex.FEMALE
        return Sex.UNKNOWN

    return classify


def load_names(data: bytes | str) -> frozenset[str]:
    """Parse a JSON list of readings into a set of NFC katakana readings."""
    names = json.loads(data)
    if not isinstance(names, list) or not all(isinstance(name, str) for name in names):
        raise ValueError("name list must be a JSON array of strings")
    return frozenset(htok(unicodedata.normalize("NFC", name)) for name in names)


def load_male_names() -> frozenset[str]:
    """Load the readings used for boys."""
    return load_names(read_bytes(MALE_NAMES_PATH))


def load_female_names() -> frozenset[str]:
    """Load the readings used for girls."""
    return load_names(read_bytes(FEMALE_NAMES_PATH))