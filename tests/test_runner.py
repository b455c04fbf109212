import io
import sys

import pytest

from puzzles import day01, day02, runner
from puzzles.util import U32_MAX


class FakeTerminal(io.StringIO):
    def isatty(self):
        return True


def assert_failed(excinfo, capsys, message: str):
    assert excinfo.value.code == 1
    last_line = capsys.readouterr().err.splitlines()[-1]
    assert last_line.startswith(message), last_line


@pytest.fixture
def input_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(runner, "INPUT_DIR", tmp_path)
    monkeypatch.setattr(sys, "stdin", FakeTerminal())
    return tmp_path


@pytest.mark.parametrize("day, module", [(1, day01), (2, day02)])
def test_load_problem(day, module):
    assert runner.load_problem(day) is module


def test_input_path():
    assert runner.input_path(2) == runner.INPUT_DIR / "day02.txt"


def test_solve_reads_input_file(input_dir):
    (input_dir / "day01.txt").write_text(day01.test_input)
    assert runner.solve(1) == 24000
    (input_dir / "day02.txt").write_text(day02.test_input)
    assert runner.solve(2, encode_play=True) == 15


def test_solve_reads_piped_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO(day01.test_input))
    assert runner.solve(1, n=3) == 45000


def test_missing_input_file(input_dir, capsys):
    with pytest.raises(SystemExit) as excinfo:
        runner.solve(1)
    assert_failed(excinfo, capsys, f"Failed to read {input_dir / 'day01.txt'}")


@pytest.mark.parametrize("day", [3, 25, 30, 0])
def test_unknown_day(day, capsys):
    with pytest.raises(SystemExit) as excinfo:
        runner.solve(day, io.StringIO(""))
    assert_failed(excinfo, capsys, f"No solution for day {day}")


@pytest.mark.parametrize(
    "day, text, args",
    [
        (1, "1000\nabc\n", {}),
        (1, "", {}),
        (1, day01.test_input, {"n": 0}),
        (2, "A Y\nB Q\n", {}),
        (2, "A\n", {"encode_play": True}),
    ],
)
def test_malformed_input(day, text, args, capsys):
    with pytest.raises(SystemExit) as excinfo:
        runner.solve(day, io.StringIO(text), **args)
    assert_failed(excinfo, capsys, f"Failed to solve day {day}: ")


def test_overflow(capsys):
    with pytest.raises(SystemExit) as excinfo:
        runner.solve(1, io.StringIO(f"{U32_MAX}\n1\n"))
    assert_failed(excinfo, capsys, "Failed to solve day 1: Sum overflow")


def test_undecodable_input(capsys):
    input_ = io.TextIOWrapper(io.BytesIO(b"\xff1\n"), encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        runner.solve(1, input_)
    assert_failed(excinfo, capsys, "Failed to solve day 1: ")


def test_fail(capsys):
    with pytest.raises(SystemExit) as excinfo:
        runner.fail("something went wrong")
    assert excinfo.value.code == 1
    assert capsys.readouterr().err == "something went wrong\n"
