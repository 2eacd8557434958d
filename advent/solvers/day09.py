"""
Day 9: Rope Bridge
==================
Simulates a rope of knots dragged around by its head; each knot follows
the one ahead of it once they stop touching.
"""

from __future__ import annotations

from typing import List, Set, Tuple

from advent.inputs import read_lines
from advent.solvers.solver_errors import InputError, parse_int

DAY = 9
INPUT_PATH = "inputs/day9.txt"

Position = Tuple[int, int]

DIRECTIONS = {
    "U": (0, 1),
    "R": (1, 0),
    "D": (0, -1),
    "L": (-1, 0),
}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def parse_steps(lines: List[str]) -> List[Tuple[Position, int]]:
    steps = []
    for line in lines:
        tokens = line.split(" ")
        if len(tokens) != 2:
            raise InputError(f"Invalid step: {line!r}", day=DAY)
        direction, number = tokens
        if direction not in DIRECTIONS:
            raise InputError(f"Invalid direction {direction!r}", day=DAY)
        steps.append((DIRECTIONS[direction], parse_int(number, day=DAY)))
    return steps


def follow(knot: Position, leader: Position) -> Position:
    """New position of ``knot`` after ``leader`` moved."""
    dx = leader[0] - knot[0]
    dy = leader[1] - knot[1]
    if abs(dx) <= 1 and abs(dy) <= 1:
        return knot
    return knot[0] + _sign(dx), knot[1] + _sign(dy)


class Rope:
    def __init__(self, n_knots: int):
        if n_knots < 1:
            raise ValueError("A rope needs at least one knot")
        self.knots: List[Position] = [(0, 0)] * n_knots

    @property
    def tail(self) -> Position:
        return self.knots[-1]

    def move_head(self, delta: Position) -> None:
        head = self.knots[0]
        self.knots[0] = (head[0] + delta[0], head[1] + delta[1])
        for i in range(1, len(self.knots)):
            moved = follow(self.knots[i], self.knots[i - 1])
            if moved == self.knots[i]:
                # Knots further back cannot move either
                break
            self.knots[i] = moved


def tail_positions(lines: List[str], n_knots: int) -> Set[Position]:
    rope = Rope(n_knots)
    visited = {rope.tail}
    for delta, number in parse_steps(lines):
        for _ in range(number):
            rope.move_head(delta)
            visited.add(rope.tail)
    return visited


def part1(lines: List[str]) -> int:
    return len(tail_positions(lines, 2))


def part2(lines: List[str]) -> int:
    return len(tail_positions(lines, 10))


def main():
    lines = read_lines(INPUT_PATH)
    print(f"Part 1: {part1(lines)}")
    print(f"Part 2: {part2(lines)}")


if __name__ == "__main__":
    main()
