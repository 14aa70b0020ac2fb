import io

import pytest

from seimei.evaluation import Rank, Result
from seimei.filters import Target
from seimei.sex import Sex
from seimei.tsv import (
    TSV_HEADERS,
    parse_byte,
    parse_rank,
    parse_sex,
    parse_tsv,
    print_tsv_header,
    print_tsv_row,
    tsv_printer,
)

TARGET = Target(
    kanji="太郎",
    yomi="タロウ",
    strokes=13,
    mora=3,
    sex=Sex.MALE,
    eval_result=Result(
        tenkaku=Rank.KICHI,
        jinkaku=Rank.DAI_KYO,
        chikaku=Rank.DAI_KICHI,
        gaikaku=Rank.DAI_KYO,
        sokaku=Rank.DAI_KICHI,
    ),
)


def test_parse_tsv_round_trip():
    buf = io.StringIO()
    print_tsv_header(buf)
    print_tsv_row(buf, TARGET)
    buf.seek(0)
    assert list(parse_tsv(buf)) == [TARGET]


def test_printer_writes_header_and_rows():
    buf = io.StringIO()
    tsv_printer(buf)([TARGET, TARGET])
    lines = buf.getvalue().splitlines()
    assert lines[0] == "\t".join(TSV_HEADERS)
    assert lines[1:] == ["8\t13\t太郎\tタロウ\t男性\t吉\t大吉\t大凶\t大凶\t大吉"] * 2


def test_parse_tsv_skips_blank_lines():
    buf = io.StringIO()
    print_tsv_row(buf, TARGET)
    text = "\n\n" + buf.getvalue() + "\n   \n"
    assert list(parse_tsv(io.StringIO(text))) == [TARGET]


def test_parse_tsv_rejects_wrong_field_count():
    with pytest.raises(ValueError, match="invalid number of fields"):
        list(parse_tsv(io.StringIO("8\t13\t太郎\n")))


def test_parse_tsv_rejects_bad_rank():
    line = "8\t13\t太郎\tタロウ\t男性\t吉\t大吉\tX\t大凶\t大吉\n"
    with pytest.raises(ValueError, match="invalid jinkaku"):
        list(parse_tsv(io.StringIO(line)))


def test_parse_tsv_rejects_bad_strokes():
    line = "8\t300\t太郎\tタロウ\t男性\t吉\t大吉\t大凶\t大凶\t大吉\n"
    with pytest.raises(ValueError, match="invalid strokes"):
        list(parse_tsv(io.StringIO(line)))


@pytest.mark.parametrize("rank", list(Rank))
def test_parse_rank_round_trip(rank):
    assert parse_rank(rank.label) is rank


def test_parse_rank_rejects_unknown():
    with pytest.raises(ValueError):
        parse_rank("吉吉")


@pytest.mark.parametrize("text, expected", [("0", 0), ("255", 255), ("13", 13)])
def test_parse_byte(text, expected):
    assert parse_byte(text) == expected


@pytest.mark.parametrize("text", ["-1", "256", "x", "", "1.5"])
def test_parse_byte_rejects(text):
    with pytest.raises(ValueError):
        parse_byte(text)


@pytest.mark.parametrize("sex", [Sex.ASEXUAL, Sex.MALE, Sex.FEMALE])
def test_parse_sex_round_trip(sex):
    assert parse_sex(sex.label) is sex


def test_parse_sex_unknown():
    assert parse_sex("?") is Sex.UNKNOWN
    assert parse_sex(Sex.UNKNOWN.label) is Sex.UNKNOWN