#! /usr/bin/env python
import json
import sys
from inspect import signature

from bourbaki.application.cli import CommandLineInterface, cli_spec  # type: ignore
from bourbaki.application.typed_io.cli_parse import cli_parser  # type: ignore

from puzzles.runner import Param, fail, input_path, load_problem, solve


@cli_parser.register(Param, as_const=True, derive_nargs=True)
def parse_param(s: str):
    return json.loads(s)


def print_solution(solution):
    print(solution)


cli = CommandLineInterface(
    prog="main",
    require_options=False,
    require_subcommand=True,
    implicit_flags=True,
    use_verbose_flag=True,
)


@cli.definition
class ElfPuzzles:
    """Run and test solutions to the elf calorie-counting and rock-paper-scissors puzzles"""

    @cli_spec.output_handler(print_solution)
    def run(self, day: int, **args: Param):
        """Run the solution to one part of a particular day's problem. The default input is in
        the inputs/ folder, but input will be read from stdin if input is piped there.

        Each invocation prints a single part: day 1 gives part 1 by default and part 2 with
        `--n 3`; day 2 gives part 2 by default and part 1 with `--encode-play true`.

        :param day: the day number of the problem to solve
        :param args: keyword arguments to pass to the problem solution in case it is parameterized.
          Run the `info` command for the problem in question to see its parameters.
        """
        return solve(day, **args)

    def test(self, day: int):
        """Run unit tests for functions used in the solution to a particular day's problem

        :param day: the day number of the problem to run tests for
        """
        load_problem(day).test()
        print(f"Tests pass for day {day}!")

    def info(self, day: int):
        """Print the doc string for a particular day's solution, providing some details about methodology

        :param day: the day number of the problem to print info for
        """
        problem = load_problem(day)
        print(f"Day {day} problem info:")
        if problem.__doc__:
            print(problem.__doc__, end="\n\n")
        print("Signature:")
        print(signature(problem.run))

    def input(self, day: int):
        """Print the input text for a particular day's problem to stdout"""
        path = input_path(day)
        try:
            with open(path, "r") as f:
                for line in f:
                    print(line, file=sys.stdout, end="")
        except OSError as e:
            fail(f"Failed to read {path}: {e}")


if __name__ == "__main__":
    cli.run()
