"""
Day 17: Pyroclastic Flow
========================
Tetris-like rocks fall into a chamber seven units wide, pushed sideways
by a repeating jet pattern.

Part 2 (a trillion rocks) relies on the fall becoming periodic: the state
(shape of the top of the tower, next rock, next jet) eventually repeats,
and the height gained per repetition can be extrapolated.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, List, Set, Tuple

from advent.inputs import read_lines
from advent.solvers.solver_errors import InputError

DAY = 17
INPUT_PATH = "inputs/day17.txt"

CHAMBER_WIDTH = 7
SPAWN_LEFT = 2
SPAWN_GAP = 3
SHORT_ROCK_COUNT = 2022
LONG_ROCK_COUNT = 1_000_000_000_000
# Rows below the top of the tower that make up the cycle key
PROFILE_DEPTH = 32

Point = Tuple[int, int]

# Offsets from the bottom-left corner of each rock's bounding box
ROCK_SHAPES: Tuple[Tuple[Point, ...], ...] = (
    ((0, 0), (1, 0), (2, 0), (3, 0)),              # horizontal line
    ((1, 0), (0, 1), (1, 1), (2, 1), (1, 2)),      # plus
    ((0, 0), (1, 0), (2, 0), (2, 1), (2, 2)),      # mirrored L
    ((0, 0), (0, 1), (0, 2), (0, 3)),              # vertical line
    ((0, 0), (1, 0), (0, 1), (1, 1)),              # square
)

JETS = {"<": -1, ">": 1}


def parse_jet_pattern(lines: List[str]) -> List[int]:
    if not lines:
        raise InputError("Empty input", day=DAY)
    pattern = []
    for char in lines[0]:
        if char not in JETS:
            raise InputError(f"Invalid jet {char!r}", day=DAY)
        pattern.append(JETS[char])
    if not pattern:
        raise InputError("Empty jet pattern", day=DAY)
    return pattern


class Chamber:
    """Tower of fallen rocks; the floor is y = 0, rocks occupy y >= 1."""

    def __init__(self, jet_pattern: List[int]):
        self.jet_pattern = jet_pattern
        self.shape_index = 0
        self.jet_index = 0
        self.occupied: Set[Point] = set()
        self.height = 0

    def _fits(self, shape, x: int, y: int) -> bool:
        for dx, dy in shape:
            px, py = x + dx, y + dy
            if not 0 <= px < CHAMBER_WIDTH or py <= 0 or (px, py) in self.occupied:
                return False
        return True

    def drop_rock(self) -> None:
        shape = ROCK_SHAPES[self.shape_index]
        self.shape_index = (self.shape_index + 1) % len(ROCK_SHAPES)
        x, y = SPAWN_LEFT, self.height + SPAWN_GAP + 1

        while True:
            push = self.jet_pattern[self.jet_index]
            self.jet_index = (self.jet_index + 1) % len(self.jet_pattern)
            if self._fits(shape, x + push, y):
                x += push
            if not self._fits(shape, x, y - 1):
                break
            y -= 1

        for dx, dy in shape:
            self.occupied.add((x + dx, y + dy))
            self.height = max(self.height, y + dy)

    def profile(self) -> FrozenSet[Point]:
        """Occupied cells near the top, relative to the tower height."""
        return frozenset(
            (x, self.height - y)
            for y in range(max(1, self.height - PROFILE_DEPTH), self.height + 1)
            for x in range(CHAMBER_WIDTH)
            if (x, y) in self.occupied
        )


def tower_height(jet_pattern: List[int], rocks: int) -> int:
    chamber = Chamber(jet_pattern)
    seen: Dict[Tuple[FrozenSet[Point], int, int], int] = {}
    heights: List[int] = []

    for dropped in range(rocks):
        key = (chamber.profile(), chamber.shape_index, chamber.jet_index)
        if key in seen:
            previous = seen[key]
            cycle_length = dropped - previous
            gain_per_cycle = chamber.height - heights[previous]
            cycles, remainder = divmod(rocks - dropped, cycle_length)
            partial_gain = heights[previous + remainder] - heights[previous]
            return chamber.height + cycles * gain_per_cycle + partial_gain
        seen[key] = dropped
        heights.append(chamber.height)
        chamber.drop_rock()

    return chamber.height


def part1(lines: List[str], rocks: int = SHORT_ROCK_COUNT) -> int:
    return tower_height(parse_jet_pattern(lines), rocks)


def part2(lines: List[str], rocks: int = LONG_ROCK_COUNT) -> int:
    return tower_height(parse_jet_pattern(lines), rocks)


def main():
    lines = read_lines(INPUT_PATH)
    print(f"Part 1: {part1(lines)}")
    print(f"Part 2: {part2(lines)}")


if __name__ == "__main__":
    main()
