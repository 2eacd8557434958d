"""
Day 3: Rucksack Reorganization
==============================
"""

from __future__ import annotations

from typing import Iterable, List, Set

from advent.inputs import read_lines
from advent.solvers.solver_errors import InputError

DAY = 3
INPUT_PATH = "inputs/day3.txt"
GROUP_SIZE = 3


def priority(item: str) -> int:
    if "a" <= item <= "z":
        return ord(item) - ord("a") + 1
    if "A" <= item <= "Z":
        return ord(item) - ord("A") + 27
    raise InputError(f"Invalid item {item!r}", day=DAY)


def compartments(line: str):
    if len(line) % 2 != 0:
        raise InputError(f"Odd number of items: {line!r}", day=DAY)
    half = len(line) // 2
    return line[:half], line[half:]


def single_common_item(contents: Iterable[str]) -> str:
    """The one item shared by every collection of contents."""
    sets: List[Set[str]] = [set(c) for c in contents]
    if not sets:
        raise InputError("Empty group", day=DAY)
    overlap = set.intersection(*sets)
    if not overlap:
        raise InputError("No overlapping items", day=DAY)
    if len(overlap) > 1:
        raise InputError(f"Many overlapping items: {''.join(sorted(overlap))}", day=DAY)
    return overlap.pop()


def part1(lines: List[str]) -> int:
    return sum(priority(single_common_item(compartments(line))) for line in lines)


def part2(lines: List[str]) -> int:
    # Only complete groups count
    usable = len(lines) - len(lines) % GROUP_SIZE
    return sum(
        priority(single_common_item(lines[i:i + GROUP_SIZE]))
        for i in range(0, usable, GROUP_SIZE)
    )


def main():
    lines = read_lines(INPUT_PATH)
    print(f"Part 1: {part1(lines)}")
    print(f"Part 2: {part2(lines)}")


if __name__ == "__main__":
    main()
