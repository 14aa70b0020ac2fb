"""Dispatching of command lines to subcommands."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Mapping, NoReturn, Sequence, TextIO


@dataclass
class ProcInout:
    """The standard streams a command works with."""

    stdin: TextIO
    stdout: TextIO
    stderr: TextIO


Command = Callable[[list[str], ProcInout], int]


@dataclass(frozen=True)
class SubCommand:
    """A named command with its one-line help."""

    help: str
    command: Command


def default_proc_inout() -> ProcInout:
    """Return the process's own standard streams."""
    return ProcInout(stdin=sys.stdin, stdout=sys.stdout, stderr=sys.stderr)


def usage(out: TextIO, name: str, sub_commands: Mapping[str, SubCommand]) -> None:
    """Write the usage of a command with subcommands."""
    out.write(f"Usage: {name} [subcommand] [options]\n\n")
    out.write("SUBCOMMANDS\n")
    for key, sub in sub_commands.items():
        out.write(f"  {key}    {sub.help}\n")


def command_with_sub_commands(name: str, sub_commands: Mapping[str, SubCommand]) -> Command:
    """Return a command that hands its arguments to the named subcommand."""

    def command(args: list[str], proc: ProcInout) -> int:
        rest: list[str] = []
        for index, arg in enumerate(args):
            if arg == "--":
                rest = args[index + 1 :]
                break
            if len(arg) > 1 and arg.startswith("-"):
                flag = arg[2:] if arg.startswith("--") else arg[1:]
                flag = flag.split("=", 1)[0]
                if flag in ("h", "help"):
                    usage(proc.stderr, name, sub_commands)
                    return 0
                proc.stderr.write(f"flag provided but not defined: {arg}\n")
                usage(proc.stderr, name, sub_commands)
                return 1
            rest = args[index:]
            break

        if not rest:
            usage(proc.stderr, name, sub_commands)
            return 1

        sub = sub_commands.get(args[0])
        if sub is None:
            proc.stderr.write("unknown subcommand\n")
            usage(proc.stderr, name, sub_commands)
            return 1
        return sub.command(args[1:], proc)

    return command


def run(command: Command, argv: Sequence[str] | None = None) -> NoReturn:
    """Run a command on the process's streams and exit with its status."""
    args = sys.argv[1:] if argv is None else list(argv)
    sys.exit(command(args, default_proc_inout()))