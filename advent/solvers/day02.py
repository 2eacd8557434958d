"""
Day 2: Rock Paper Scissors
==========================
Scores a strategy guide of rock-paper-scissors rounds.

The first column is always the opponent's shape (A/B/C).  The second
column is read as our own shape (X/Y/Z) in part 1 and as the outcome we
must reach (lose/draw/win) in part 2.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from advent.inputs import read_lines
from advent.solvers.solver_errors import InputError

DAY = 2
INPUT_PATH = "inputs/day2.txt"


class Shape(Enum):
    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    @property
    def score(self) -> int:
        return self.value

    def beats(self) -> "Shape":
        """The shape this one defeats."""
        return _BEATS[self]

    def loses_to(self) -> "Shape":
        return _LOSES_TO[self]


_BEATS = {
    Shape.ROCK: Shape.SCISSORS,
    Shape.PAPER: Shape.ROCK,
    Shape.SCISSORS: Shape.PAPER,
}
_LOSES_TO = {beaten: winner for winner, beaten in _BEATS.items()}


class Outcome(Enum):
    LOSE = 0
    DRAW = 3
    WIN = 6

    @property
    def score(self) -> int:
        return self.value


OPPONENT_CODES = {"A": Shape.ROCK, "B": Shape.PAPER, "C": Shape.SCISSORS}
RESPONSE_CODES = {"X": Shape.ROCK, "Y": Shape.PAPER, "Z": Shape.SCISSORS}
OUTCOME_CODES = {"X": Outcome.LOSE, "Y": Outcome.DRAW, "Z": Outcome.WIN}


def _split_round(line: str) -> Tuple[str, str]:
    tokens = line.split(" ")
    if len(tokens) != 2:
        raise InputError(f"Expected two columns: {line!r}", day=DAY)
    return tokens[0], tokens[1]


def _lookup(codes, token: str):
    try:
        return codes[token]
    except KeyError:
        raise InputError(f"Unknown code {token!r}", day=DAY) from None


def outcome_of(opponent: Shape, ours: Shape) -> Outcome:
    if opponent == ours:
        return Outcome.DRAW
    if ours.beats() == opponent:
        return Outcome.WIN
    return Outcome.LOSE


def shape_for_outcome(opponent: Shape, outcome: Outcome) -> Shape:
    if outcome == Outcome.DRAW:
        return opponent
    if outcome == Outcome.WIN:
        return opponent.loses_to()
    return opponent.beats()


def round_score(opponent: Shape, ours: Shape) -> int:
    return ours.score + outcome_of(opponent, ours).score


def parse_moves(lines: List[str]) -> List[Tuple[Shape, Shape]]:
    moves = []
    for line in lines:
        opponent, ours = _split_round(line)
        moves.append((_lookup(OPPONENT_CODES, opponent), _lookup(RESPONSE_CODES, ours)))
    return moves


def parse_moves_outcomes(lines: List[str]) -> List[Tuple[Shape, Outcome]]:
    rounds = []
    for line in lines:
        opponent, outcome = _split_round(line)
        rounds.append((_lookup(OPPONENT_CODES, opponent), _lookup(OUTCOME_CODES, outcome)))
    return rounds


def part1(lines: List[str]) -> int:
    return sum(round_score(opponent, ours) for opponent, ours in parse_moves(lines))


def part2(lines: List[str]) -> int:
    return sum(
        round_score(opponent, shape_for_outcome(opponent, outcome))
        for opponent, outcome in parse_moves_outcomes(lines)
    )


def main():
    lines = read_lines(INPUT_PATH)
    print(f"Part 1: {part1(lines)}")
    print(f"Part 2: {part2(lines)}")


if __name__ == "__main__":
    main()
