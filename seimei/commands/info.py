"""The ``info`` subcommand: show the evaluation of one full name."""

from __future__ import annotations

import argparse
import unicodedata
from dataclasses import dataclass
from typing import AbstractSet, NoReturn, Sequence, TextIO

from seimei import kanji, mora
from seimei.cli import ProcInout, default_proc_inout
from seimei.evaluation import evaluate
from seimei.filters import Target
from seimei.kanaconv import htok
from seimei.sex import by_name_lists, load_female_names, load_male_names
from seimei.strokes import by_map, sum_strokes
from seimei.tsv import print_tsv_header, print_tsv_row

_USAGE = """Usage: name info [options] <familyName> <givenName> <yomi>

EXAMPLES
\t$ name info 山田 太郎 タロウ
\t評点    画数    名前    読み    天格    地格    人格    外格    総格
\t8       13      太郎    タロウ  吉      大吉    大凶    大凶    大吉
"""


@dataclass(frozen=True)
class InfoOptions:
    """A full name and its reading, as given on the command line."""

    help: bool = False
    family_name: str = ""
    given_name: str = ""
    yomi: str = ""


class _FlagParser(argparse.ArgumentParser):
    def __init__(self, stderr: TextIO) -> None:
        super().__init__(prog="info", add_help=False, allow_abbrev=False)
        self._stderr = stderr

    def error(self, message: str) -> NoReturn:
        self._stderr.write(f"{message}\n{_USAGE}")
        raise ValueError(message)


def parse_options(args: Sequence[str], stderr: TextIO, chars: AbstractSet[str]) -> InfoOptions:
    """Read the names and reading; raise ValueError for anything invalid."""
    parser = _FlagParser(stderr)
    parser.add_argument("-h", "-help", "--help", dest="help", action="store_true")
    parser.add_argument("names", nargs="*")
    parsed = parser.parse_args(list(args))
    if parsed.help:
        stderr.write(_USAGE)
        return InfoOptions(help=True)

    names = parsed.names
    if not names:
        raise ValueError("given name is required")

    family_name = names[0]
    if not family_name:
        raise ValueError("family name is required")
    if not kanji.is_valid(family_name, chars):
        raise ValueError(f"invalid kanji included: {family_name!r}")

    given_name = names[1] if len(names) > 1 else ""
    if not given_name:
        raise ValueError("given name is required")
    if not kanji.is_valid(given_name, chars):
        raise ValueError(f"invalid kanji included: {given_name!r}")

    yomi = htok(unicodedata.normalize("NFC", names[2])) if len(names) > 2 else ""
    if not yomi:
        raise ValueError("yomi-gana is required")

    return InfoOptions(family_name=family_name, given_name=given_name, yomi=yomi)


def main(args: Sequence[str] | None = None, proc: ProcInout | None = None) -> int:
    """Run the subcommand and return its exit status."""
    proc = default_proc_inout() if proc is None else proc
    strokes_map = kanji.load_strokes()
    strokes_func = by_map(strokes_map)
    chars = kanji.load(strokes_map, kanji.load_yomi())

    try:
        opts = parse_options(list(args or []), proc.stderr, chars)
    except ValueError as exc:
        proc.stderr.write(f"failed to parse options: {exc}\n")
        return 1

    if opts.help:
        return 0

    print_tsv_header(proc.stdout)

    try:
        result = evaluate(opts.family_name, opts.given_name, strokes_func)
    except (ValueError, LookupError) as exc:
        proc.stderr.write(f"failed to evaluate: {exc}\n")
        return 1

    sex_func = by_name_lists(load_male_names(), load_female_names())

    try:
        strokes = sum_strokes(opts.given_name, strokes_func)
    except LookupError as exc:
        proc.stderr.write(f"failed to sum strokes: {exc}\n")
        return 1

    print_tsv_row(
        proc.stdout,
        Target(
            kanji=opts.given_name,
            yomi=opts.yomi,
            strokes=strokes,
            mora=mora.count(opts.yomi),
            sex=sex_func(opts.yomi),
            eval_result=result,
        ),
    )
    return 0