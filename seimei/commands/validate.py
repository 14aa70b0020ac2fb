"""The ``filter validate`` subcommand: check a filter and print it back."""

from __future__ import annotations

from typing import Sequence, TextIO

from seimei import filter_parser
from seimei.cli import ProcInout, default_proc_inout

_USAGE = """Usage: name filter validate

STDIN
\tFilter notated in JSON.

\t\tfilter       := true | false | and | or | not | sex | length | mora | strokes | minRank | minTotalRank |
                        yomiCount | yomi | kanjiCount | kanji
\t\ttrue         := {"true": {}}
\t\tfalse        := {"false": {}}
\t\tand          := {"and": [filter...]}
\t\tor           := {"or": [filter...]}
\t\tnot          := {"not": filter}
\t\tsex          := {"sex": "asexual" | "male" | "female"}
\t\tlength       := {"length": count}
\t\tmora         := {"maxMora": count}
\t\tstrokes      := {"strokes": count}
\t\tminRank      := {"minRank": 0-4} (4=大大吉, 3=大吉, 2=吉, 1=凶, 0=大凶)
\t\tminTotalRank := {"minTotalRank": byte}
\t\tyomiCount    := {"yomiCount": {"rune": rune, "count": count}}
\t\tyomi         := {"yomi": match}
\t\tkanjiCount   := {"kanjiCount": {"rune": rune, "count": count}}
\t\tkanji        := {"kanji": match}
\t\tcount        := {"equal": byte} | {"greaterThan": byte} | {"lessThan": byte}
\t\tmatch        := {"equal": string} | {"contain": string} | {"startWith": string} | {"endWith": string}
\t\tbyte         := 0-255
\t\trune         := string that contains only one rune

EXAMPLES
\t$ name filter validate < valid-filter.json
\t$ echo $?
\t0

\t$ name filter validate < invalid-filter.json
\t$ echo $?
\t1
"""


def _wants_help(args: Sequence[str], stderr: TextIO) -> bool:
    """Scan the leading flags; no flags are defined besides help."""
    for arg in args:
        if arg == "--" or arg == "-" or not arg.startswith("-"):
            return False
        name = arg[2:] if arg.startswith("--") else arg[1:]
        name = name.split("=", 1)[0]
        if name in ("h", "help"):
            stderr.write(_USAGE)
            return True
        stderr.write(f"flag provided but not defined: {arg}\n")
        stderr.write(_USAGE)
        return False
    return False


def main(args: Sequence[str] | None = None, proc: ProcInout | None = None) -> int:
    """Read a filter from stdin; print it normalised and return 0, or return 1 if invalid."""
    proc = default_proc_inout() if proc is None else proc
    if _wants_help(list(args or []), proc.stderr):
        return 0

    try:
        raw = proc.stdin.read()
    except OSError as exc:
        proc.stderr.write(f"failed to read from stdin: {exc}\n")
        return 1

    try:
        seed = filter_parser.parse(raw)
    except filter_parser.FilterError:
        return 1

    proc.stdout.write(filter_parser.dump(seed))
    return 0