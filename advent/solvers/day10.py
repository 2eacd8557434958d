"""
Day 10: Cathode-Ray Tube
========================
Runs a two-instruction CPU (``noop``, ``addx V``) and samples its single
register ``X`` cycle by cycle, both to compute signal strengths and to
drive a 40 x 6 CRT.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from advent.inputs import read_lines
from advent.solvers.solver_errors import InputError, parse_int

DAY = 10
INPUT_PATH = "inputs/day10.txt"

CRT_WIDTH = 40
CRT_HEIGHT = 6
CRT_AREA = CRT_WIDTH * CRT_HEIGHT
SAMPLE_CYCLES = (20, 60, 100, 140, 180, 220)

LIT = "#"
DARK = "."

Instruction = Tuple[str, Optional[int]]

CYCLES_TO_COMPLETE = {"noop": 1, "addx": 2}


def parse_instructions(lines: List[str]) -> List[Instruction]:
    instructions: List[Instruction] = []
    for line in lines:
        tokens = line.split(" ")
        if tokens == ["noop"]:
            instructions.append(("noop", None))
        elif len(tokens) == 2 and tokens[0] == "addx":
            instructions.append(("addx", parse_int(tokens[1], day=DAY)))
        else:
            raise InputError(f"Invalid instruction: {line!r}", day=DAY)
    return instructions


def register_values(instructions: List[Instruction]) -> Iterator[Tuple[int, int]]:
    """
    Yield ``(cycle, x)`` for every cycle, where ``x`` is the register value
    *during* that cycle.  ``addx`` only takes effect once both of its cycles
    have completed.
    """
    x = 1
    cycle = 0
    for opcode, value in instructions:
        for _ in range(CYCLES_TO_COMPLETE[opcode]):
            cycle += 1
            yield cycle, x
        if opcode == "addx":
            x += value


def render(pixels: List[bool]) -> str:
    rows = []
    for i in range(CRT_HEIGHT):
        row = pixels[i * CRT_WIDTH:(i + 1) * CRT_WIDTH]
        rows.append("".join(LIT if lit else DARK for lit in row))
    return "\n".join(rows)


def part1(lines: List[str]) -> int:
    instructions = parse_instructions(lines)
    return sum(
        cycle * x
        for cycle, x in register_values(instructions)
        if cycle in SAMPLE_CYCLES
    )


def part2(lines: List[str]) -> str:
    instructions = parse_instructions(lines)
    pixels = [False] * CRT_AREA
    for cycle, x in register_values(instructions):
        index = cycle - 1
        # The sprite is three pixels wide, centred on X
        pixels[index % CRT_AREA] = abs(x - index % CRT_WIDTH) <= 1
    return render(pixels)


def main():
    lines = read_lines(INPUT_PATH)
    print(f"Part 1: {part1(lines)}")
    print(f"Part 2: \n{part2(lines)}")


if __name__ == "__main__":
    main()
