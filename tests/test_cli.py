import io

import pytest

from antfarm.cli import main, parse_options, run
from antfarm.model import Options

DIRECT_TEXT = "2\n##start\ns 0 0\n##end\ne 1 1\ns-e\n"
CORRIDOR_TEXT = "3\n##start\ns 0 0\na 1 0\n##end\ne 2 0\ns-a\na-e\n"


def test_parse_options_empty():
    assert parse_options([]) == Options.NONE


def test_parse_options_both_switches():
    assert parse_options(["--paths", "--solution"]) == (
        Options.SHOW_PATH | Options.ONLY_SOLUTION
    )


def test_parse_options_ignores_unknown_next_to_known():
    assert parse_options(["--paths", "extra"]) == Options.SHOW_PATH


def test_parse_options_only_unknown_raises():
    with pytest.raises(ValueError, match="Usage"):
        parse_options(["--bogus"])


def test_run_prints_map_and_moves():
    out, err = io.StringIO(), io.StringIO()
    code = run(io.StringIO(DIRECT_TEXT), Options.NONE, out, err)
    assert code == 0
    assert out.getvalue() == DIRECT_TEXT + "\nL1-e L2-e\n"
    assert err.getvalue() == ""


def test_run_solution_only():
    out, err = io.StringIO(), io.StringIO()
    code = run(io.StringIO(CORRIDOR_TEXT), Options.ONLY_SOLUTION, out, err)
    assert code == 0
    assert out.getvalue().splitlines()[-1] == "L3-e"
    assert "##start" not in out.getvalue()


def test_run_reports_error_on_bad_input():
    out, err = io.StringIO(), io.StringIO()
    code = run(io.StringIO("0\n"), Options.NONE, out, err)
    assert code == -1
    assert err.getvalue() == "ERROR\n"


def test_run_reports_error_when_end_unreachable():
    text = "1\n##start\ns 0 0\na 1 0\n##end\ne 2 0\ns-a\n"
    out, err = io.StringIO(), io.StringIO()
    assert run(io.StringIO(text), Options.NONE, out, err) == -1
    assert err.getvalue() == "ERROR\n"


def test_main_usage(capsys):
    assert main(["--bogus"]) == 0
    assert capsys.readouterr().out.startswith("Usage")


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(DIRECT_TEXT))
    assert main(["--solution"]) == 0
    assert capsys.readouterr().out == "L1-e L2-e\n"


def test_main_error_goes_to_stderr(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("hello\n"))
    assert main([]) == -1
    captured = capsys.readouterr()
    assert captured.err == "ERROR\n"
    assert captured.out == ""