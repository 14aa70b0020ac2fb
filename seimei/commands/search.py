"""The ``search`` subcommand: list the given names that pass a filter."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from typing import AbstractSet, Callable, NoReturn, Sequence, TextIO

from seimei import filter_parser, kanji
from seimei.cli import ProcInout, default_proc_inout
from seimei.filters import FilterFunc
from seimei.gen import GenerateFunc, Options, common_space_generator, full_space_generator
from seimei.search import parallel
from seimei.sex import SexFunc, by_name_lists, load_female_names, load_male_names
from seimei.strokes import StrokesFunc, by_map, sum_strokes
from seimei.tsv import PrintFunc, tsv_printer
from seimei.yomi import YomiFunc, by_cartesian

_FLAGS: tuple[tuple[str, type, object, str], ...] = (
    ("space", str, "common", "Search spaces (available: full, common)"),
    ("min-length", int, 1, "Minimum length of a given name"),
    ("max-length", int, 3, "Maximum length of a given name"),
    ("yomi-count", int, 5, "Number of Yomi-Gana candidates"),
    ("dir-dict", str, "", "Directory of MeCab dictionary (full space only)"),
)

_STDIN_HELP = """
STDIN
\tFilter notated in JSON. See "name filter validate --help" for details.
"""

_EXAMPLES = """
EXAMPLES
\t$ name search 山田 < ./filter.example.json
\t評点    画数    名前    読み    天格    地格    人格    外格    総格
\t15      13      一喜    イッキ  吉      大吉    大吉    大大吉  大吉
\t15      13      一喜    イッキ  吉      大吉    大吉    大大吉  大吉
\t...
"""


@dataclass(frozen=True)
class SearchOptions:
    """Everything the search needs, read from the command line and stdin."""

    help: bool = False
    filter_func: FilterFunc | None = None
    family_name: str = ""
    min_length: int = 1
    max_length: int = 3
    generate: GenerateFunc | None = None


def _write_usage(out: TextIO) -> None:
    out.write("Usage: name [options] <familyName>\n\n")
    out.write("OPTIONS\n")
    for name, kind, default, text in sorted(_FLAGS):
        type_name = "int" if kind is int else "string"
        out.write(f"  -{name} {type_name}\n    \t{text}")
        if default not in ("", 0):
            shown = f'"{default}"' if kind is str else str(default)
            out.write(f" (default {shown})")
        out.write("\n")
    out.write(_STDIN_HELP)
    out.write(_EXAMPLES)


class _FlagParser(argparse.ArgumentParser):
    def __init__(self, stderr: TextIO, write_usage: Callable[[TextIO], None]) -> None:
        super().__init__(prog="search", add_help=False, allow_abbrev=False)
        self._stderr = stderr
        self._write_usage = write_usage

    def error(self, message: str) -> NoReturn:
        self._stderr.write(f"{message}\n")
        self._write_usage(self._stderr)
        raise ValueError(message)


def _flag_parser(stderr: TextIO) -> _FlagParser:
    parser = _FlagParser(stderr, _write_usage)
    parser.add_argument("-h", "-help", "--help", dest="help", action="store_true")
    for name, kind, default, text in _FLAGS:
        parser.add_argument(
            f"-{name}", f"--{name}", dest=name.replace("-", "_"), type=kind, default=default, help=text
        )
    parser.add_argument("names", nargs="*")
    return parser


def _full_space(
    yomi_count: int,
    dic_dir: str,
    chars: AbstractSet[str],
    strokes_func: StrokesFunc,
    yomi_func: YomiFunc,
) -> GenerateFunc:
    if yomi_count < 1:
        raise ValueError("yomi-count must be greater than or equal to 1")
    if dic_dir:
        try:
            is_dir = os.path.isdir(dic_dir)
            os.stat(dic_dir)
        except OSError as exc:
            raise ValueError(f"failed to stat {dic_dir!r}: {exc}") from exc
        if not is_dir:
            raise ValueError(f"{dic_dir!r} is not a directory")
    # Readings of the generated names come from the kanji dictionary.
    return full_space_generator(chars, strokes_func, yomi_func)


def parse_options(
    args: Sequence[str],
    stdin: TextIO,
    stderr: TextIO,
    chars: AbstractSet[str],
    strokes_func: StrokesFunc,
    yomi_func: YomiFunc,
) -> SearchOptions:
    """Read the search options; raise ValueError for anything invalid."""
    parsed = _flag_parser(stderr).parse_args(list(args))
    if parsed.help:
        _write_usage(stderr)
        return SearchOptions(help=True)

    family_name = parsed.names[0] if parsed.names else ""
    if not family_name:
        raise ValueError("family name is required")

    try:
        sum_strokes(family_name, strokes_func)
    except LookupError as exc:
        raise ValueError(f"invalid family name: {exc}") from exc

    if parsed.space == "full":
        generate = _full_space(parsed.yomi_count, parsed.dir_dict, chars, strokes_func, yomi_func)
    elif parsed.space == "common":
        generate = common_space_generator(chars)
    else:
        raise ValueError(f"unknown space: {parsed.space!r}")

    seed = filter_parser.parse(stdin.read())
    filter_func = filter_parser.build(seed)

    if parsed.min_length < 1:
        raise ValueError("min-length must be greater than or equal to 1")
    if parsed.min_length > 4:
        raise ValueError("min-length must be less than 4")
    if parsed.max_length > 4:
        raise ValueError("max-length must be less than 4")
    if parsed.min_length > parsed.max_length:
        raise ValueError("min-length must be less than or equal to max-length")

    return SearchOptions(
        filter_func=filter_func,
        family_name=family_name,
        min_length=parsed.min_length,
        max_length=parsed.max_length,
        generate=generate,
    )


def run_search(
    family_name: str,
    generate: GenerateFunc,
    options: Options,
    filter_func: FilterFunc,
    strokes_func: StrokesFunc,
    print_func: PrintFunc,
    sex_func: SexFunc,
) -> None:
    """Generate candidates, keep those the filter accepts and hand them to the printer."""
    parallelism = max((os.cpu_count() or 1) - 2, 1)
    print_func(
        parallel(
            family_name,
            generate(family_name, options),
            filter_func,
            strokes_func,
            sex_func,
            parallelism,
        )
    )


def main(args: Sequence[str] | None = None, proc: ProcInout | None = None) -> int:
    """Run the subcommand and return its exit status."""
    proc = default_proc_inout() if proc is None else proc
    strokes_map = kanji.load_strokes()
    strokes_func = by_map(strokes_map)
    yomi_map = kanji.load_yomi()
    yomi_func = by_cartesian(yomi_map)
    chars = kanji.load(strokes_map, yomi_map)

    try:
        opts = parse_options(list(args or []), proc.stdin, proc.stderr, chars, strokes_func, yomi_func)
    except (ValueError, LookupError, OSError) as exc:
        proc.stderr.write(f"failed to parse options: {exc}\n")
        return 1

    if opts.help:
        return 0

    assert opts.generate is not None and opts.filter_func is not None
    try:
        run_search(
            opts.family_name,
            opts.generate,
            Options(min_length=opts.min_length, max_length=opts.max_length),
            opts.filter_func,
            strokes_func,
            tsv_printer(proc.stdout),
            by_name_lists(load_male_names(), load_female_names()),
        )
    except (ValueError, LookupError) as exc:
        proc.stderr.write(f"failed to search: {exc}\n")
        return 1
    return 0