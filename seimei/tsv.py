"""Reading and writing search results as tab-separated values."""

from __future__ import annotations

import re
import unicodedata
from typing import Callable, Iterable, Iterator, TextIO

from seimei import mora
from seimei.evaluation import Rank, Result
from seimei.filters import Target
from seimei.sex import Sex

TSV_HEADERS = ["評点", "画数", "名前", "読み", "性別", "天格", "地格", "人格", "外格", "総格"]

PrintFunc = Callable[[Iterable[Target]], None]

_RANKS = {rank.label: rank for rank in Rank}
_SEXES = {sex.label: sex for sex in (Sex.ASEXUAL, Sex.MALE, Sex.FEMALE)}
_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_rank(text: str) -> Rank:
    """Return the rank with the given label."""
    try:
        return _RANKS[text]
    except KeyError:
        raise ValueError(f"invalid rank: {text!r}") from None


def parse_byte(text: str) -> int:
    """Parse a decimal integer from 0 to 255."""
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid byte: {text!r}")
    value = int(text)
    if not 0 <= value <= 255:
        raise ValueError(f"invalid byte: {value}")
    return value


def parse_sex(text: str) -> Sex:
    """Return the sex with the given label, or unknown."""
    return _SEXES.get(text, Sex.UNKNOWN)


def _field(parse: Callable[[str], object], text: str, name: str):
    try:
        return parse(text)
    except ValueError as exc:
        raise ValueError(f"invalid {name}: {exc}") from exc


def parse_tsv(stream: Iterable[str]) -> Iterator[Target]:
    """Yield the targets of a result table; blank lines and the header are skipped."""
    for raw in stream:
        line = raw.strip()
        if not line:
            continue
        fields = line.split("\t")
        if len(fields) != len(TSV_HEADERS):
            raise ValueError(f"invalid number of fields: {line!r}")
        if fields[0] == TSV_HEADERS[0]:
            continue

        strokes = _field(parse_byte, fields[1], "strokes")
        yomi = unicodedata.normalize("NFC", fields[3])
        result = Result(
            tenkaku=_field(parse_rank, fields[5], "tenkaku"),
            chikaku=_field(parse_rank, fields[6], "chikaku"),
            jinkaku=_field(parse_rank, fields[7], "jinkaku"),
            gaikaku=_field(parse_rank, fields[8], "gaikaku"),
            sokaku=_field(parse_rank, fields[9], "sokaku"),
        )
        yield Target(
            kanji=fields[2],
            yomi=yomi,
            strokes=strokes,
            mora=mora.count(yomi),
            sex=parse_sex(fields[4]),
            eval_result=result,
        )


def print_tsv_header(out: TextIO) -> None:
    """Write the header line."""
    out.write("\t".join(TSV_HEADERS) + "\n")


def print_tsv_row(out: TextIO, target: Target) -> None:
    """Write one target as a line."""
    result = target.eval_result
    cells = [
        str(result.total()),
        str(target.strokes),
        target.kanji,
        target.yomi,
        target.sex.label,
        result.tenkaku.label,
        result.chikaku.label,
        result.jinkaku.label,
        result.gaikaku.label,
        result.sokaku.label,
    ]
    out.write("\t".join(cells) + "\n")


def tsv_printer(out: TextIO) -> PrintFunc:
    """Return a function that writes the header and then every target."""

    def print_all(targets: Iterable[Target]) -> None:
        print_tsv_header(out)
        for target in targets:
            print_tsv_row(out, target)

    return print_all