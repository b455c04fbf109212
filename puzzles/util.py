import sys
from itertools import accumulate
from typing import Callable, Iterable, Iterator, TypeVar

VERBOSE = False

U32_MAX = 2**32 - 1

T = TypeVar("T")


class ParseError(ValueError):
    pass


class SumOverflowError(OverflowError):
    pass


# Math


def checked_sum(values: Iterable[int], limit: int = U32_MAX) -> int:
    """Sum `values`, failing as soon as the running total passes `limit` rather than
    wrapping or widening"""
    total = 0
    for total in accumulate(values):
        if total > limit:
            raise SumOverflowError(f"Sum overflow: running total {total} exceeds {limit}")
    return total


# I/O


def set_verbose(value: bool):
    global VERBOSE
    VERBOSE = value


def print_(*args, **kwargs):
    if VERBOSE:
        print(*args, **kwargs, file=sys.stderr)


def parse_blocks(input_: Iterable[str], parse: Callable[[str], T]) -> Iterator[T]:
    block = []
    for line in map(str.rstrip, input_):
        if line:
            block.append(line)
        elif block:
            yield parse("\n".join(block))
            block = []
    if block:
        yield parse("\n".join(block))
