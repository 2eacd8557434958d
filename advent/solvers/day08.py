"""
Day 8: Treetop Tree House
=========================
"""

from __future__ import annotations

from typing import Iterable, List

from advent.inputs import read_lines
from advent.solvers.solver_errors import InputError, NoSolutionError

DAY = 8
INPUT_PATH = "inputs/day8.txt"

DIGITS = set("0123456789")


class Grid:
    """Rectangular grid of tree heights, stored row-major."""

    def __init__(self, rows: List[List[int]]):
        widths = {len(row) for row in rows}
        if len(widths) > 1:
            raise InputError("Inconsistent row width", day=DAY)
        self.rows = rows
        self.height = len(rows)
        self.width = widths.pop() if widths else 0

    def get(self, row: int, col: int) -> int:
        return self.rows[row][col]

    def lines_of_sight(self, row: int, col: int) -> List[List[int]]:
        """Tree heights seen from (row, col) looking up, down, left, right."""
        column = [self.rows[r][col] for r in range(self.height)]
        return [
            column[:row][::-1],
            column[row + 1:],
            self.rows[row][:col][::-1],
            self.rows[row][col + 1:],
        ]

    def positions(self) -> Iterable:
        for row in range(self.height):
            for col in range(self.width):
                yield row, col


def parse_forest_map(lines: List[str]) -> Grid:
    rows = []
    for line in lines:
        if not line or set(line) - DIGITS:
            raise InputError(f"Invalid tree heights: {line!r}", day=DAY)
        rows.append([int(c) for c in line])
    return Grid(rows)


def is_visible(grid: Grid, row: int, col: int) -> bool:
    height = grid.get(row, col)
    return any(all(tree < height for tree in line) for line in grid.lines_of_sight(row, col))


def viewing_distance(height: int, line: List[int]) -> int:
    distance = 0
    for tree in line:
        distance += 1
        if tree >= height:
            break
    return distance


def scenic_score(grid: Grid, row: int, col: int) -> int:
    height = grid.get(row, col)
    score = 1
    for line in grid.lines_of_sight(row, col):
        score *= viewing_distance(height, line)
    return score


def part1(lines: List[str]) -> int:
    grid = parse_forest_map(lines)
    return sum(1 for row, col in grid.positions() if is_visible(grid, row, col))


def part2(lines: List[str]) -> int:
    grid = parse_forest_map(lines)
    scores = [scenic_score(grid, row, col) for row, col in grid.positions()]
    if not scores:
        raise NoSolutionError("Empty forest", day=DAY)
    return max(scores)


def main():
    lines = read_lines(INPUT_PATH)
    print(f"Part 1: {part1(lines)}")
    print(f"Part 2: {part2(lines)}")


if __name__ == "__main__":
    main()
