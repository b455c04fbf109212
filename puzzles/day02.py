"""Rock paper scissors: each line is a round, with the opponent's play (A/B/C) followed by
either our play (X/Y/Z, with --encode-play) or the outcome we want (X/Y/Z = lose/draw/win).

A round scores its outcome (0/3/6) plus the shape we played (1/2/3). Each shape beats the
one before it in rock -> paper -> scissors order, cyclically."""
from enum import IntEnum
from functools import partial
from itertools import chain, cycle, islice, starmap
from typing import IO, Callable, Dict, Iterable, Iterator, Mapping, Tuple, TypeVar

from .util import ParseError, checked_sum, print_, set_verbose

T = TypeVar("T")


class Outcome(IntEnum):
    loss = 0
    draw = 3
    win = 6


class Play(IntEnum):
    rock = 1
    paper = 2
    scissors = 3


# their play -> the play that beats it
WIN_RELATION: Dict[Play, Play] = dict(zip(Play, islice(chain(Play, Play), 1, 4)))
LOSE_RELATION: Dict[Play, Play] = {q: p for p, q in WIN_RELATION.items()}
PLAY_MAPPING = dict(zip("ABCXYZ", cycle(Play)))
OUTCOME_MAPPING = dict(zip("XYZ", cycle(Outcome)))


def outcome(their_play: Play, our_play: Play) -> Outcome:
    if our_play == their_play:
        return Outcome.draw
    elif WIN_RELATION[their_play] == our_play:
        return Outcome.win
    else:
        return Outcome.loss


def required_play(their_play: Play, outcome_: Outcome) -> Play:
    if outcome_ == Outcome.draw:
        return their_play
    elif outcome_ == Outcome.win:
        return WIN_RELATION[their_play]
    else:
        return LOSE_RELATION[their_play]


def parse_token(mapping: Mapping[str, T], kind: str, token: str) -> T:
    value = mapping.get(token)
    if value is None:
        raise ParseError(f"Invalid {kind} token: {token!r}")
    return value


def split_round(line: str, second: str) -> Tuple[str, str]:
    tokens = line.split()
    if not tokens:
        raise ParseError(f"Missing opponent move in line: {line.rstrip()!r}")
    if len(tokens) < 2:
        raise ParseError(f"Missing {second} in line: {line.rstrip()!r}")
    return tokens[0], tokens[1]


# Problem 1


def parse_1(line: str) -> Tuple[Play, Play]:
    their_play, our_play = split_round(line, "my move")
    parse_play = partial(parse_token, PLAY_MAPPING, "move")
    return parse_play(their_play), parse_play(our_play)


def score_1(their_play: Play, our_play: Play) -> int:
    result = outcome(their_play, our_play)
    return result + our_play


# Problem 2


def parse_2(line: str) -> Tuple[Play, Outcome]:
    their_play, outcome_ = split_round(line, "desired outcome")
    return (
        parse_token(PLAY_MAPPING, "move", their_play),
        parse_token(OUTCOME_MAPPING, "outcome", outcome_),
    )


def score_2(their_play: Play, outcome_: Outcome) -> int:
    our_play = required_play(their_play, outcome_)
    return outcome_ + our_play


def parse_rounds(parse: Callable[[str], T], input_: Iterable[str]) -> Iterator[T]:
    for i, line in enumerate(input_, 1):
        if not line.strip():
            continue
        try:
            yield parse(line)
        except ParseError as e:
            raise ParseError(f"line {i}: {e}") from e


def run(input_: IO[str], encode_play: bool = False, verbose: bool = False) -> int:
    """Part 2 by default, part 1 with encode_play=True; one part per call"""
    set_verbose(verbose)
    if encode_play:
        parse = parse_1
        score = score_1
    else:
        parse = parse_2  # type: ignore
        score = score_2  # type: ignore

    games = parse_rounds(parse, input_)
    scores = starmap(score, games)
    total = checked_sum(scores)
    print_(f"Total score with {'play' if encode_play else 'outcome'} encoding: {total}")
    return total


test_input = """
A Y
B X
C Z
"""


def test():
    import io

    assert score_1(Play.rock, Play.scissors) == 3
    assert score_1(Play.paper, Play.rock) == 7
    for play in Play:
        assert score_1(play, play) == 3 + play
        for outcome_ in Outcome:
            assert outcome(play, required_play(play, outcome_)) == outcome_

    assert parse_1("A Y") == (Play.rock, Play.paper)
    assert parse_2("A Y") == (Play.rock, Outcome.draw)
    assert run(io.StringIO(test_input), encode_play=True) == 15
    assert run(io.StringIO(test_input)) == 12
