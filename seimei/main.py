"""The ``name`` command and its subcommand tree."""

from __future__ import annotations

from typing import NoReturn, Sequence

from seimei.cli import Command, SubCommand, command_with_sub_commands, run
from seimei.commands import apply, info, search, validate


def build_command() -> Command:
    """Return the top-level command with every subcommand attached."""
    filter_command = command_with_sub_commands(
        "filter",
        {
            "apply": SubCommand(help="apply a filter to name search results", command=apply.main),
            "validate": SubCommand(help="validate a filter", command=validate.main),
        },
    )
    return command_with_sub_commands(
        "name",
        {
            "search": SubCommand(help="search for given names", command=search.main),
            "info": SubCommand(help="show information about a given name", command=info.main),
            "filter": SubCommand(help="name filter related commands", command=filter_command),
        },
    )


def main(argv: Sequence[str] | None = None) -> NoReturn:
    """Run the command on the process's arguments and exit with its status."""
    run(build_command(), argv)


if __name__ == "__main__":
    main()