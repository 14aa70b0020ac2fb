import io

import pytest

from seimei import mora
from seimei.commands.apply import ApplyOptions, apply_filter, main, parse_options
from seimei.cli import ProcInout
from seimei.evaluation import Rank, Result
from seimei.filters import Target
from seimei.sex import Sex
from seimei.tsv import TSV_HEADERS, print_tsv_header, print_tsv_row


def _target(kanji: str, yomi: str, strokes: int, sex: Sex) -> Target:
    return Target(
        kanji=kanji,
        yomi=yomi,
        strokes=strokes,
        mora=mora.count(yomi),
        sex=sex,
        eval_result=Result(
            tenkaku=Rank.KICHI,
            jinkaku=Rank.DAI_KYO,
            chikaku=Rank.DAI_KICHI,
            gaikaku=Rank.DAI_KYO,
            sokaku=Rank.DAI_KICHI,
        ),
    )


TARO = _target("太郎", "タロウ", 13, Sex.MALE)
HANAKO = _target("花子", "ハナコ", 10, Sex.FEMALE)


@pytest.fixture
def result_file(tmp_path):
    path = tmp_path / "result.tsv"
    buf = io.StringIO()
    print_tsv_header(buf)
    print_tsv_row(buf, TARO)
    print_tsv_row(buf, HANAKO)
    path.write_text(buf.getvalue(), encoding="utf-8")
    return path


def _close(opts: ApplyOptions) -> None:
    if opts.result is not None:
        opts.result.close()


def test_parse_options_reads_family_name_and_filter(result_file):
    opts = parse_options(
        ["山田", "--to", str(result_file)],
        io.StringIO('{"kanji":{"equal":"太郎"}}'),
        io.StringIO(),
    )
    try:
        assert opts.family_name == "山田"
        assert opts.help is False
        assert opts.filter_func(TARO) is True
        assert opts.filter_func(HANAKO) is False
    finally:
        _close(opts)


def test_parse_options_help():
    stderr = io.StringIO()
    opts = parse_options(["-h"], io.StringIO(), stderr)
    assert opts.help is True
    assert "Usage: name filter apply" in stderr.getvalue()


def test_parse_options_requires_to():
    with pytest.raises(ValueError, match="missing required option: --to"):
        parse_options(["山田"], io.StringIO('{"true":{}}'), io.StringIO())


def test_parse_options_missing_file(tmp_path):
    with pytest.raises(ValueError, match="failed to open result file"):
        parse_options(
            ["山田", "--to", str(tmp_path / "absent.tsv")],
            io.StringIO('{"true":{}}'),
            io.StringIO(),
        )


def test_parse_options_bad_json(result_file):
    with pytest.raises(ValueError, match="failed to parse filter"):
        parse_options(["山田", "--to", str(result_file)], io.StringIO("{"), io.StringIO())


def test_parse_options_empty_filter(result_file):
    with pytest.raises(ValueError, match="failed to build filter"):
        parse_options(["山田", "--to", str(result_file)], io.StringIO("{}"), io.StringIO())


def test_apply_filter_keeps_accepted_rows(result_file):
    opts = parse_options(
        ["山田", "--to", str(result_file)],
        io.StringIO('{"sex":"female"}'),
        io.StringIO(),
    )
    collected = []
    try:
        apply_filter(opts, lambda targets: collected.extend(targets))
    finally:
        _close(opts)
    assert collected == [HANAKO]


def test_apply_filter_true_keeps_everything(result_file):
    opts = parse_options(
        ["--to", str(result_file), "山田"],
        io.StringIO('{"true":{}}'),
        io.StringIO(),
    )
    collected = []
    try:
        apply_filter(opts, lambda targets: collected.extend(targets))
    finally:
        _close(opts)
    assert collected == [TARO, HANAKO]


def test_main_writes_filtered_table(result_file):
    stdout = io.StringIO()
    proc = ProcInout(
        stdin=io.StringIO('{"yomi":{"startWith":"タ"}}'),
        stdout=stdout,
        stderr=io.StringIO(),
    )
    assert main(["山田", "--to", str(result_file)], proc) == 0
    lines = stdout.getvalue().splitlines()
    assert lines[0] == "\t".join(TSV_HEADERS)
    assert len(lines) == 2
    assert lines[1].split("\t")[2] == "太郎"


def test_main_reports_bad_table(tmp_path):
    path = tmp_path / "broken.tsv"
    path.write_text("only\tthree\tfields\n", encoding="utf-8")
    stderr = io.StringIO()
    proc = ProcInout(stdin=io.StringIO('{"true":{}}'), stdout=io.StringIO(), stderr=stderr)
    assert main(["山田", "--to", str(path)], proc) == 1
    assert "failed to apply filter" in stderr.getvalue()


def test_main_reports_option_error():
    stderr = io.StringIO()
    proc = ProcInout(stdin=io.StringIO('{"true":{}}'), stdout=io.StringIO(), stderr=stderr)
    assert main(["山田"], proc) == 1
    assert "failed to parse options: missing required option: --to" in stderr.getvalue()