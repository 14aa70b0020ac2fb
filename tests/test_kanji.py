import json

import pytest

from seimei import resources
from seimei.kanji import (
    charset,
    intersection,
    is_valid,
    kana_yomi,
    load,
    load_strokes,
    load_yomi,
    merge,
    parse_strokes,
    parse_yomi,
)


def _write(path, value):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(value, ensure_ascii=False), encoding="utf-8")


@pytest.fixture
def data_dir(monkeypatch, tmp_path):
    monkeypatch.setenv(resources.DATA_DIR_ENV, str(tmp_path))
    _write(tmp_path / "joyo" / "strokes.json", [{"kanji": "太", "strokes": 4}, {"kanji": "郎", "strokes": 9}])
    _write(tmp_path / "joyo" / "yomi.json", [{"kanji": "太", "yomi": ["タ", "タイ"]}, {"kanji": "郎", "yomi": ["ロウ"]}])
    _write(tmp_path / "jinmei" / "strokes.json", [{"kanji": "之", "strokes": 3}])
    _write(tmp_path / "jinmei" / "yomi.json", [{"kanji": "之", "yomi": ["ユキ"]}])
    _write(tmp_path / "kana" / "strokes.json", [{"kanji": "あ", "strokes": 3}])
    return tmp_path


def test_load():
    strokes_map = {"a": 1, "b": 2}
    yomi_map = {"a": [], "c": []}
    assert load(strokes_map, yomi_map) == frozenset({"a"})


def test_charset_and_intersection():
    assert charset({"a": 1, "b": 2}) == frozenset({"a", "b"})
    assert intersection(frozenset("abc"), frozenset("bcd")) == frozenset("bc")


def test_load_strokes(data_dir):
    assert load_strokes() == {"太": 4, "郎": 9, "之": 3, "あ": 3}


def test_load_yomi(data_dir):
    assert load_yomi() == {
        "太": ["タ", "タイ"],
        "郎": ["ロウ"],
        "之": ["ユキ"],
        "あ": ["ア"],
    }


def test_loaded_dictionaries_share_chars(data_dir):
    assert load(load_strokes(), load_yomi()) == frozenset({"太", "郎", "之", "あ"})


def test_load_strokes_duplicate(data_dir):
    _write(data_dir / "jinmei" / "strokes.json", [{"kanji": "太", "strokes": 4}])
    with pytest.raises(ValueError, match="duplicate key between joyo and jinmei"):
        load_strokes()


def test_merge_duplicate_kana():
    with pytest.raises(ValueError, match="duplicate key among joyo and jinmei and kana"):
        merge({"a": 1}, {"b": 2}, {"b": 3})


def test_merge_joins():
    assert merge({"a": 1}, {"b": 2}, {"c": 3}) == {"a": 1, "b": 2, "c": 3}


def test_parse_strokes_takes_first_char():
    assert parse_strokes('[{"kanji": "太郎", "strokes": 4}]') == {"太": 4}


@pytest.mark.parametrize(
    "data",
    [
        "not json",
        '{"kanji": "太"}',
        '[{"kanji": "太", "strokes": 256}]',
        '[{"kanji": "太", "strokes": -1}]',
        '[{"kanji": "", "strokes": 1}]',
    ],
)
def test_parse_strokes_invalid(data):
    with pytest.raises(ValueError):
        parse_strokes(data)


def test_parse_yomi_normalizes():
    assert parse_yomi('[{"kanji": "道", "yomi": ["ミチ", "ト\u3099ウ"]}]') == {"道": ["ミチ", "ドウ"]}


def test_kana_yomi():
    assert kana_yomi({"あ": 3, "イ": 2}) == {"あ": ["ア"], "イ": ["イ"]}


def test_is_valid():
    chars = frozenset("太郎")
    assert is_valid("太郎", chars)
    assert is_valid("", chars)
    assert not is_valid("太花", chars)