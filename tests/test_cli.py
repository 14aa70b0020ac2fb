import io

import pytest

from seimei.cli import (
    ProcInout,
    SubCommand,
    command_with_sub_commands,
    default_proc_inout,
    run,
    usage,
)


def _proc():
    return ProcInout(stdin=io.StringIO(), stdout=io.StringIO(), stderr=io.StringIO())


def _make(calls, status=0):
    def command(args, proc):
        calls.append(list(args))
        proc.stdout.write("ran\n")
        return status

    return command


def _main(calls, status=0):
    return command_with_sub_commands(
        "name",
        {
            "search": SubCommand(help="search for given names", command=_make(calls, status)),
            "info": SubCommand(help="show information about a given name", command=_make(calls)),
        },
    )


def test_usage_lists_subcommands():
    out = io.StringIO()
    usage(out, "name", {"info": SubCommand(help="show information about a given name", command=_make([]))})
    assert out.getvalue() == (
        "Usage: name [subcommand] [options]\n\n"
        "SUBCOMMANDS\n"
        "  info    show information about a given name\n"
    )


def test_dispatches_to_subcommand():
    calls = []
    proc = _proc()
    status = _main(calls, status=3)(["search", "山田", "--space", "full"], proc)
    assert status == 3
    assert calls == [["山田", "--space", "full"]]
    assert proc.stdout.getvalue() == "ran\n"


@pytest.mark.parametrize("flag", ["-h", "--help", "-help"])
def test_help_flag_prints_usage(flag):
    calls = []
    proc = _proc()
    assert _main(calls)([flag], proc) == 0
    assert proc.stderr.getvalue().startswith("Usage: name [subcommand] [options]")
    assert calls == []


def test_no_arguments_is_an_error():
    proc = _proc()
    assert _main([])([], proc) == 1
    assert "SUBCOMMANDS" in proc.stderr.getvalue()


def test_unknown_subcommand():
    proc = _proc()
    assert _main([])(["nope"], proc) == 1
    assert proc.stderr.getvalue().startswith("unknown subcommand\n")


def test_undefined_flag():
    calls = []
    proc = _proc()
    assert _main(calls)(["-x", "search"], proc) == 1
    assert "flag provided but not defined: -x" in proc.stderr.getvalue()
    assert calls == []


def test_double_dash_is_not_a_subcommand():
    proc = _proc()
    assert _main([])(["--", "search"], proc) == 1
    assert "unknown subcommand" in proc.stderr.getvalue()


def test_default_proc_inout_uses_process_streams():
    import sys

    proc = default_proc_inout()
    assert (proc.stdin, proc.stdout, proc.stderr) == (sys.stdin, sys.stdout, sys.stderr)


def test_run_exits_with_status(capsys):
    calls = []
    with pytest.raises(SystemExit) as excinfo:
        run(_main(calls, status=2), ["search", "山田"])
    assert excinfo.value.code == 2
    assert calls == [["山田"]]
    assert capsys.readouterr().out == "ran\n"