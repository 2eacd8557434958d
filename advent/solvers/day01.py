"""
Day 1: Calorie Counting
=======================
Each elf's inventory is a block of calorie counts; blocks are separated
by a blank line.
"""

from __future__ import annotations

from typing import List

from advent.inputs import read_lines, split_blocks
from advent.solvers.solver_errors import InputError, parse_int

DAY = 1
INPUT_PATH = "inputs/day1.txt"


def parse_elf_calories(lines: List[str]) -> List[List[int]]:
    elves = [[parse_int(line, day=DAY) for line in block] for block in split_blocks(lines)]
    if not elves:
        raise InputError("No elf inventories in input", day=DAY)
    return elves


def elf_totals(lines: List[str]) -> List[int]:
    """Total calories per elf, largest first."""
    return sorted((sum(elf) for elf in parse_elf_calories(lines)), reverse=True)


def part1(lines: List[str]) -> int:
    return elf_totals(lines)[0]


def part2(lines: List[str]) -> int:
    return sum(elf_totals(lines)[:3])


def main():
    lines = read_lines(INPUT_PATH)
    print(f"Part 1: {part1(lines)}")
    print(f"Part 2: {part2(lines)}")


if __name__ == "__main__":
    main()
