"""Loading, input handling and error reporting for the command line, kept apart from the
CLI definition in main.py so it can be exercised directly."""
import sys
from importlib import import_module
from pathlib import Path
from time import perf_counter_ns
from typing import IO, NoReturn, Optional, Protocol, TypeVar, Union

INPUT_DIR = Path("inputs/")
DAYS = (1, 2)

Solution = TypeVar("Solution", covariant=True)
Param = Union[int, float, bool, str]


class Problem(Protocol[Solution]):
    def run(self, input_: IO[str], **args: Param) -> Solution:
        ...

    def test(self):
        ...


def fail(message: str) -> NoReturn:
    print(message, file=sys.stderr)
    sys.exit(1)


def problem_name(problem: int) -> str:
    assert 1 <= problem <= 25, "problem number must be between 1 and 25, inclusive"
    return f"day{str(problem).zfill(2)}"


def import_problem(problem: int) -> Problem:
    if problem not in DAYS:
        raise ValueError(f"No solution for day {problem}; available days are {list(DAYS)}")
    return import_module(f"puzzles.{problem_name(problem)}")  # type: ignore


def load_problem(day: int) -> Problem:
    try:
        return import_problem(day)
    except ValueError as e:
        fail(str(e))


def input_path(day: int) -> Path:
    return INPUT_DIR / (problem_name(day) + ".txt")


def get_input(day: int) -> IO[str]:
    return open(input_path(day)) if sys.stdin.isatty() else sys.stdin


def solve(day: int, input_: Optional[IO[str]] = None, **args: Param):
    """Solve a day's problem, reading its input file (or piped stdin) unless `input_` is
    given. Malformed input, bad arguments and unreadable input exit with status 1 and a
    one-line message on stderr."""
    problem = load_problem(day)
    if input_ is None:
        try:
            input_ = get_input(day)
        except OSError as e:
            fail(f"Failed to read {input_path(day)}: {e}")
    print(f"Running solution to day {day}...", file=sys.stderr)
    tic = perf_counter_ns()
    try:
        with input_:
            solution = problem.run(input_, **args)
    # ParseError and UnicodeDecodeError are both ValueErrors
    except (ValueError, OverflowError) as e:
        fail(f"Failed to solve day {day}: {e}")
    toc = perf_counter_ns()
    print(f"Ran in {(toc - tic) / 1000000} ms", file=sys.stderr)
    return solution
