# tests/test_main.py
import io

import pytest

import main
from samples import DUPLICATE_GIVENS_TEXT, PRETTY_SOLUTION_TEXT, PUZZLE_TEXT, SOLUTION_TEXT


def _feed_stdin(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_stdin(monkeypatch, capsys):
    _feed_stdin(monkeypatch, PUZZLE_TEXT)
    assert main.main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == SOLUTION_TEXT + "\n"
    assert captured.err == ""


def test_stdin_pretty(monkeypatch, capsys):
    _feed_stdin(monkeypatch, PUZZLE_TEXT)
    assert main.main(["--pretty"]) == 0
    assert capsys.readouterr().out == PRETTY_SOLUTION_TEXT + "\n"


def test_dash_reads_stdin(monkeypatch, capsys):
    _feed_stdin(monkeypatch, PUZZLE_TEXT)
    assert main.main(["-"]) == 0
    assert capsys.readouterr().out == SOLUTION_TEXT + "\n"


def test_infile(tmp_path, capsys):
    path = tmp_path / "puzzle.txt"
    path.write_text(PUZZLE_TEXT)
    assert main.main([str(path)]) == 0
    assert capsys.readouterr().out == SOLUTION_TEXT + "\n"


def test_infile_pretty(tmp_path, capsys):
    path = tmp_path / "puzzle.txt"
    path.write_text(PUZZLE_TEXT)
    assert main.main([str(path), "-P"]) == 0
    assert capsys.readouterr().out == PRETTY_SOLUTION_TEXT + "\n"


@pytest.mark.parametrize("flags", [[], ["--pretty"]])
def test_unsolvable(monkeypatch, capsys, flags):
    _feed_stdin(monkeypatch, DUPLICATE_GIVENS_TEXT)
    assert main.main(flags) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "No solution\n"


def test_malformed_input(monkeypatch, capsys):
    _feed_stdin(monkeypatch, "123\n456\n")
    assert main.main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid input" in captured.err


def test_missing_file(tmp_path, capsys):
    assert main.main([str(tmp_path / "nope.txt")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error opening input file" in captured.err


def test_parse_args_defaults():
    args = main.parse_args([])
    assert args.infile == "-"
    assert not args.pretty
    assert not args.verbose


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main.parse_args(["--version"])
    assert excinfo.value.code == 0
    assert main.__version__ in capsys.readouterr().out
