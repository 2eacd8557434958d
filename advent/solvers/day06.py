"""
Day 6: Tuning Trouble
=====================
"""

from __future__ import annotations

from collections import Counter, deque
from typing import List

from advent.inputs import read_lines
from advent.solvers.solver_errors import InputError, NoSolutionError

DAY = 6
INPUT_PATH = "inputs/day6.txt"

PACKET_MARKER_SIZE = 4
MESSAGE_MARKER_SIZE = 14


def find_marker(signal: str, window_size: int) -> int:
    """
    Number of characters processed when the last ``window_size`` characters
    are first all different.
    """
    window: deque = deque()
    counts: Counter = Counter()
    for position, char in enumerate(signal, start=1):
        window.append(char)
        counts[char] += 1
        if len(window) > window_size:
            dropped = window.popleft()
            counts[dropped] -= 1
            if counts[dropped] == 0:
                del counts[dropped]
        if len(window) == window_size and len(counts) == window_size:
            return position
    raise NoSolutionError(f"No marker of size {window_size}", day=DAY)


def _signal(lines: List[str]) -> str:
    if not lines:
        raise InputError("Empty input", day=DAY)
    return lines[0]


def part1(lines: List[str]) -> int:
    return find_marker(_signal(lines), PACKET_MARKER_SIZE)


def part2(lines: List[str]) -> int:
    return find_marker(_signal(lines), MESSAGE_MARKER_SIZE)


def main():
    lines = read_lines(INPUT_PATH)
    print(f"Part 1: {part1(lines)}")
    print(f"Part 2: {part2(lines)}")


if __name__ == "__main__":
    main()
