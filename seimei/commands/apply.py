"""The ``filter apply`` subcommand: filter the rows of an earlier search result."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import NoReturn, Sequence, TextIO

from seimei import filter_parser
from seimei.cli import ProcInout, default_proc_inout
from seimei.filters import FilterFunc
from seimei.tsv import PrintFunc, parse_tsv, tsv_printer

_USAGE = """Usage: name filter apply <familyName> --to <path>
OPTIONS
  -to path
    \tpath to the result file of name search

STDIN
\tFilter notated in JSON. See "name filter validate --help" for details.

EXAMPLES
\t$ name filter apply 山田 --to /path/to/result.tsv < ./filter.example.json 
\t評点    画数    名前    読み    天格    地格    人格    外格    総格
\t15      13      一喜    イッキ  吉      大吉    大吉    大大吉  大吉
\t15      13      一喜    イッキ  吉      大吉    大吉    大大吉  大吉
"""


@dataclass
class ApplyOptions:
    """The filter to apply and the open result table it applies to."""

    help: bool = False
    family_name: str = ""
    filter_func: FilterFunc | None = None
    result: TextIO | None = None


class _FlagParser(argparse.ArgumentParser):
    def __init__(self, stderr: TextIO) -> None:
        super().__init__(prog="apply", add_help=False, allow_abbrev=False)
        self._stderr = stderr

    def error(self, message: str) -> NoReturn:
        self._stderr.write(f"{message}\n{_USAGE}")
        raise ValueError(message)


def parse_options(args: Sequence[str], stdin: TextIO, stderr: TextIO) -> ApplyOptions:
    """Read the options and the filter; raise ValueError for anything invalid.

    The result file is left open in the returned options; the caller closes it.
    """
    parser = _FlagParser(stderr)
    parser.add_argument("-h", "-help", "--help", dest="help", action="store_true")
    parser.add_argument("-to", "--to", dest="to", default="")
    parser.add_argument("names", nargs="*")
    parsed = parser.parse_intermixed_args(list(args))
    if parsed.help:
        stderr.write(_USAGE)
        return ApplyOptions(help=True)

    if not parsed.to:
        raise ValueError("missing required option: --to")
    try:
        result = open(parsed.to, encoding="utf-8")
    except OSError as exc:
        raise ValueError(f"failed to open result file: {exc}") from exc

    try:
        try:
            raw = stdin.read()
        except OSError as exc:
            raise ValueError(f"failed to read filter from stdin: {exc}") from exc
        try:
            seed = filter_parser.parse(raw)
        except filter_parser.FilterError as exc:
            raise ValueError(f"failed to parse filter: {exc}") from exc
        try:
            filter_func = filter_parser.build(seed)
        except filter_parser.FilterError as exc:
            raise ValueError(f"failed to build filter: {exc}") from exc
    except BaseException:
        result.close()
        raise

    return ApplyOptions(
        family_name=parsed.names[0] if parsed.names else "",
        filter_func=filter_func,
        result=result,
    )


def apply_filter(options: ApplyOptions, print_func: PrintFunc) -> None:
    """Hand every row of the result table that the filter accepts to the printer."""
    if options.result is None or options.filter_func is None:
        raise ValueError("options hold no result table or filter")
    filter_func = options.filter_func
    print_func(target for target in parse_tsv(options.result) if filter_func(target))


def main(args: Sequence[str] | None = None, proc: ProcInout | None = None) -> int:
    """Run the subcommand and return its exit status."""
    proc = default_proc_inout() if proc is None else proc
    try:
        opts = parse_options(list(args or []), proc.stdin, proc.stderr)
    except ValueError as exc:
        proc.stderr.write(f"failed to parse options: {exc}\n")
        return 1

    if opts.help:
        return 0

    assert opts.result is not None
    with opts.result:
        try:
            apply_filter(opts, tsv_printer(proc.stdout))
        except (ValueError, OSError) as exc:
            proc.stderr.write(f"failed to apply filter: {exc}\n")
            return 1
    return 0