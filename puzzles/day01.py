"""Calorie counting: the input is one integer per line, with a blank line between the
supplies carried by each elf. Each elf's block is summed, then we report either the
largest total (n=1) or the sum of the n largest totals (n=3 for part 2).

Sums are checked against the 32-bit unsigned range; passing it is an error, as is an
input containing no blocks at all."""
import heapq
from typing import IO, Iterable, Iterator, List

from .util import ParseError, checked_sum, parse_blocks, print_, set_verbose


def parse_int(s: str) -> int:
    s_ = s.strip()
    # int() would also take non-ASCII digits
    if not (s_.isascii() and s_.isdecimal()):
        raise ParseError(f"Failed to parse number: {s!r}")
    return int(s_)


def parse_ints(s: str) -> List[int]:
    return list(map(parse_int, filter(str.strip, s.strip().split("\n"))))


def parse_int_blocks(input_: Iterable[str]) -> Iterator[List[int]]:
    return parse_blocks(input_, parse_ints)


def parse_elf_calories(input_: Iterable[str]) -> List[int]:
    calories = list(map(checked_sum, parse_int_blocks(input_)))
    if not calories:
        raise ParseError("No calorie blocks found in input")
    return calories


def top_n(calories: Iterable[int], n: int) -> int:
    return checked_sum(heapq.nlargest(n, calories))


def part_one(calories: List[int]) -> int:
    return max(calories, default=0)


def part_two(calories: List[int], n: int = 3) -> int:
    return top_n(calories, n)


def run(input_: IO[str], n: int = 1, verbose: bool = False) -> int:
    """Part 1 with the default n=1, part 2 with n=3; one part per call"""
    set_verbose(verbose)
    if n < 1:
        raise ValueError(f"n must be a positive integer; got {n}")
    calories = parse_elf_calories(input_)
    print_(f"Parsed {len(calories)} calorie blocks; largest is {part_one(calories)}")
    return top_n(calories, n)


test_input = """
1000
2000
3000

4000

5000
6000

7000
8000
9000

10000
"""


def test():
    import io

    f = io.StringIO
    calories = parse_elf_calories(f(test_input))
    assert calories == [6000, 4000, 11000, 24000, 10000], calories
    assert part_one(calories) == 24000
    assert part_two(calories) == 45000
    assert run(f(test_input)) == 24000
    assert run(f(test_input), n=3) == 45000
    #         1(3) 2(7)  3(8) 4(5)
    input_ = "1 2  3 4   8    2 3".replace(" ", "\n")
    assert run(f(input_)) == 8
    assert dict(enumerate(parse_int_blocks(f(input_)), 1)) == {
        1: [1, 2],
        2: [3, 4],
        3: [8],
        4: [2, 3],
    }
