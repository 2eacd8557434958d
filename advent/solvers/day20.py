"""
Day 20: Grove Positioning System
"""

from __future__ import annotations

from typing import List

from advent.inputs import read_lines
from advent.solvers.solver_errors import InputError, NoSolutionError, parse_int

DAY = 20
INPUT_PATH = "inputs/day20.txt"

DECRYPTION_KEY = 811589153
DECRYPTED_ROUNDS = 10
GROVE_OFFSETS = (1000, 2000, 3000)


def parse_numbers(lines: List[str]) -> List[int]:
    numbers = [parse_int(line.strip(), day=DAY) for line in lines if line.strip()]
    if not numbers:
        raise InputError("Empty input", day=DAY)
    return numbers


def mix(numbers: List[int], rounds: int = 1) -> List[int]:
    """
    Move every number forward (or backward) by its own value, in original
    order.  The list is circular; a number leaving its slot sees ``n - 1``
    other numbers, hence the modulus.
    """
    size = len(numbers)
    if size < 2:
        return list(numbers)

    # order[position] = index into the original list
    order = list(range(size))
    for _ in range(rounds):
        for index, value in enumerate(numbers):
            position = order.index(index)
            order.pop(position)
            order.insert((position + value) % (size - 1), index)
    return [numbers[i] for i in order]


def grove_coordinates(mixed: List[int]) -> int:
    try:
        zero = mixed.index(0)
    except ValueError:
        raise NoSolutionError("Zero not found", day=DAY) from None
    return sum(mixed[(zero + offset) % len(mixed)] for offset in GROVE_OFFSETS)


def part1(lines: List[str]) -> int:
    return grove_coordinates(mix(parse_numbers(lines)))


def part2(lines: List[str], key: int = DECRYPTION_KEY, rounds: int = DECRYPTED_ROUNDS) -> int:
    numbers = [n * key for n in parse_numbers(lines)]
    return grove_coordinates(mix(numbers, rounds))


def main():
    lines = read_lines(INPUT_PATH)
    print(f"Part 1: {part1(lines)}")
    print(f"Part 2: {part2(lines)}")


if __name__ == "__main__":
    main()
