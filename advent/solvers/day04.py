"""
Day 4: Camp Cleanup
===================
Each line is a pair of elf section assignments, ``a-b,c-d``, both ranges
inclusive.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from advent.inputs import read_lines
from advent.solvers.solver_errors import InputError, parse_int

DAY = 4
INPUT_PATH = "inputs/day4.txt"


@dataclass(frozen=True)
class Assignment:
    start: int
    end: int

    @classmethod
    def parse(cls, text: str) -> "Assignment":
        bounds = text.split("-")
        if len(bounds) != 2:
            raise InputError(f"Invalid range: {text!r}", day=DAY)
        start, end = (parse_int(b, day=DAY) for b in bounds)
        return cls(start, end)

    def contains(self, other: "Assignment") -> bool:
        # Ranges behave as sets of sections: an empty range (start > end)
        # sits inside every range but overlaps none
        if other.start > other.end:
            return True
        return self.start <= other.start and other.end <= self.end

    def overlaps(self, other: "Assignment") -> bool:
        if self.start > self.end or other.start > other.end:
            return False
        return self.start <= other.end and other.start <= self.end


def parse_assignment_pairs(lines: List[str]):
    pairs = []
    for line in lines:
        halves = line.split(",")
        if len(halves) != 2:
            raise InputError(f"Invalid line: {line!r}", day=DAY)
        pairs.append((Assignment.parse(halves[0]), Assignment.parse(halves[1])))
    return pairs


def part1(lines: List[str]) -> int:
    return sum(1 for a, b in parse_assignment_pairs(lines) if a.contains(b) or b.contains(a))


def part2(lines: List[str]) -> int:
    return sum(1 for a, b in parse_assignment_pairs(lines) if a.overlaps(b))


def main():
    lines = read_lines(INPUT_PATH)
    print(f"Part 1: {part1(lines)}")
    print(f"Part 2: {part2(lines)}")


if __name__ == "__main__":
    main()
