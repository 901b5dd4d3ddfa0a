# python
"""
aoc2022/days/day02.py
Rock Paper Scissors: score a strategy guide from the second player's side.
"""
import enum
from typing import Callable, Iterator, Tuple

from ..errors import ParseError
from ..inputs import read_input

WIN = 6
DRAW = 3
LOSE = 0


class Shape(enum.Enum):
    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    def beats(self) -> "Shape":
        """The shape this one defeats."""
        return _BEATS[self]

    def beaten_by(self) -> "Shape":
        return _BEATEN_BY[self]


_BEATS = {
    Shape.ROCK: Shape.SCISSORS,
    Shape.PAPER: Shape.ROCK,
    Shape.SCISSORS: Shape.PAPER,
}
_BEATEN_BY = {loser: winner for winner, loser in _BEATS.items()}

OPPONENT = {"A": Shape.ROCK, "B": Shape.PAPER, "C": Shape.SCISSORS}
RESPONSE = {"X": Shape.ROCK, "Y": Shape.PAPER, "Z": Shape.SCISSORS}


def score_round(opponent: Shape, player: Shape) -> int:
    """Points earned by `player`: shape value plus outcome."""
    if opponent == player:
        return player.value + DRAW
    if player.beats() == opponent:
        return player.value + WIN
    return player.value + LOSE


def _choose_by_shape(opponent: Shape, code: str) -> Shape:
    return RESPONSE[code]


def _choose_by_outcome(opponent: Shape, code: str) -> Shape:
    # X lose, Y draw, Z win
    if code == "X":
        return opponent.beats()
    if code == "Y":
        return opponent
    return opponent.beaten_by()


def parse_rounds(text: str) -> Iterator[Tuple[Shape, str]]:
    for line_no, line in enumerate(text.splitlines(), start=1):
        parts = line.split()
        if len(parts) != 2 or parts[0] not in OPPONENT or parts[1] not in RESPONSE:
            raise ParseError(f"unexpected strategy line {line!r}", line=line, line_no=line_no)
        yield OPPONENT[parts[0]], parts[1]


def total_score(text: str, choose: Callable[[Shape, str], Shape]) -> int:
    return sum(score_round(opp, choose(opp, code)) for opp, code in parse_rounds(text))


def part1(file_path) -> int:
    return total_score(read_input(file_path), _choose_by_shape)


def part2(file_path) -> int:
    return total_score(read_input(file_path), _choose_by_outcome)
