"""
Day 14: Regolith Reservoir
==========================
Sand pours from (500, 0) into a cave of rock paths.  A unit of sand falls
straight down, then diagonally down-left, then down-right, and comes to
rest when all three are blocked.
"""

from __future__ import annotations

from typing import List, Optional, Set, Tuple

from advent.inputs import read_lines
from advent.solvers.solver_errors import InputError, parse_int

DAY = 14
INPUT_PATH = "inputs/day14.txt"

Point = Tuple[int, int]

SAND_SOURCE: Point = (500, 0)
FALL_ORDER = (0, -1, 1)


def parse_point(text: str) -> Point:
    coords = text.split(",")
    if len(coords) != 2:
        raise InputError(f"Invalid point: {text!r}", day=DAY)
    return parse_int(coords[0], day=DAY), parse_int(coords[1], day=DAY)


def parse_rock_structure(line: str) -> List[Point]:
    points = [parse_point(p) for p in line.split(" -> ")]
    if len(points) < 2:
        raise InputError(f"Not enough points: {line!r}", day=DAY)
    return points


def rock_points(structure: List[Point]) -> Set[Point]:
    """Every tile covered by the straight segments of a rock path."""
    points: Set[Point] = set()
    for (x1, y1), (x2, y2) in zip(structure, structure[1:]):
        if x1 == x2:
            for y in range(min(y1, y2), max(y1, y2) + 1):
                points.add((x1, y))
        elif y1 == y2:
            for x in range(min(x1, x2), max(x1, x2) + 1):
                points.add((x, y1))
        else:
            raise InputError(f"Diagonal rock segment {(x1, y1)} -> {(x2, y2)}", day=DAY)
    return points


class Cave:
    """
    Rock and sand tiles.  With ``floor`` set, an endless floor lies two rows
    below the lowest rock; otherwise sand below the lowest rock falls into
    the abyss.
    """

    def __init__(self, lines: List[str], floor: bool = False):
        self.blocked: Set[Point] = set()
        for line in lines:
            self.blocked |= rock_points(parse_rock_structure(line))
        self.bottom = max((y for _, y in self.blocked), default=0)
        self.floor = self.bottom + 2 if floor else None
        # Path of the last falling unit; the next unit retraces it
        self._path: List[Point] = [SAND_SOURCE]

    def _next_position(self, x: int, y: int) -> Optional[Point]:
        for dx in FALL_ORDER:
            candidate = (x + dx, y + 1)
            if candidate not in self.blocked and candidate[1] != self.floor:
                return candidate
        return None

    def drop_sand(self) -> bool:
        """Drop one unit; False when it fell into the abyss or the source is blocked."""
        while self._path:
            x, y = self._path[-1]
            if self.floor is None and y > self.bottom:
                return False
            following = self._next_position(x, y)
            if following is None:
                self.blocked.add(self._path.pop())
                return True
            self._path.append(following)
        return False


def count_resting_sand(cave: Cave) -> int:
    count = 0
    while cave.drop_sand():
        count += 1
    return count


def part1(lines: List[str]) -> int:
    return count_resting_sand(Cave(lines))


def part2(lines: List[str]) -> int:
    return count_resting_sand(Cave(lines, floor=True))


def main():
    lines = read_lines(INPUT_PATH)
    print(f"Part 1: {part1(lines)}")
    print(f"Part 2: {part2(lines)}")


if __name__ == "__main__":
    main()
