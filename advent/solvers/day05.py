"""
Day 5: Supply Stacks
====================
Rearranges crates between stacks following a list of moves.

Input layout::

        [D]
    [N] [C]
    [Z] [M] [P]
     1   2   3

    move 1 from 2 to 1

The crate of stack ``i`` (0-based) sits at column ``4 * i + 1`` of a
drawing line.  The last drawing line numbers the stacks.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Tuple

from advent.inputs import read_lines, split_blocks
from advent.solvers.solver_errors import InputError

DAY = 5
INPUT_PATH = "inputs/day5.txt"

Stacks = List[List[str]]

STEP_PATTERN = re.compile(r"^move (\d+) from (\d+) to (\d+)$")


@dataclass(frozen=True)
class Step:
    number: int
    source: int
    target: int


def parse_crate_arrangement(drawing: List[str]) -> Stacks:
    if not drawing:
        raise InputError("Empty crate drawing", day=DAY)
    *rows, labels = drawing
    number_stacks = len(labels.split())
    stacks: Stacks = [[] for _ in range(number_stacks)]

    # Bottom row first so each stack lists crates bottom to top
    for row in reversed(rows):
        for index in range(number_stacks):
            column = index * 4 + 1
            if column < len(row) and row[column] != " ":
                stacks[index].append(row[column])
    return stacks


def parse_steps(lines: List[str]) -> List[Step]:
    steps = []
    for line in lines:
        match = STEP_PATTERN.match(line)
        if match is None:
            raise InputError(f"Invalid step: {line!r}", day=DAY)
        number, source, target = (int(g) for g in match.groups())
        steps.append(Step(number, source, target))
    return steps


def parse_crate_arrangement_and_steps(lines: List[str]) -> Tuple[Stacks, List[Step]]:
    blocks = split_blocks(lines)
    if len(blocks) != 2:
        raise InputError("Expected a crate drawing and a list of steps", day=DAY)
    drawing, steps = blocks
    return parse_crate_arrangement(drawing), parse_steps(steps)


def _stack(stacks: Stacks, label: int) -> List[str]:
    if not 1 <= label <= len(stacks):
        raise InputError(f"No stack {label}", day=DAY)
    return stacks[label - 1]


def apply_step(stacks: Stacks, step: Step) -> None:
    """Move crates one at a time (the top crate ends up at the bottom)."""
    source, target = _stack(stacks, step.source), _stack(stacks, step.target)
    for _ in range(step.number):
        if not source:
            raise InputError(f"Stack {step.source} is empty", day=DAY)
        target.append(source.pop())


def apply_step_in_bulk(stacks: Stacks, step: Step) -> None:
    """Move all crates of a step at once, keeping their order."""
    source, target = _stack(stacks, step.source), _stack(stacks, step.target)
    if step.number > len(source):
        raise InputError(f"Stack {step.source} is empty", day=DAY)
    if step.number == 0:
        return
    target.extend(source[-step.number:])
    del source[-step.number:]


def top_crates(stacks: Stacks) -> str:
    if any(not stack for stack in stacks):
        raise InputError("A stack ended up empty", day=DAY)
    return "".join(stack[-1] for stack in stacks)


def _rearrange(lines: List[str], mover) -> str:
    stacks, steps = parse_crate_arrangement_and_steps(lines)
    for step in steps:
        mover(stacks, step)
    return top_crates(stacks)


def part1(lines: List[str]) -> str:
    return _rearrange(lines, apply_step)


def part2(lines: List[str]) -> str:
    return _rearrange(lines, apply_step_in_bulk)


def main():
    lines = read_lines(INPUT_PATH)
    print(f"Part 1: {part1(lines)}")
    print(f"Part 2: {part2(lines)}")


if __name__ == "__main__":
    main()
