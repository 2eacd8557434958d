"""
Day 11: Monkey in the Middle
============================
Monkeys pass items around according to their notes; the answer is the
product of the two busiest monkeys' inspection counts.

Part 2 removes the relief division, so worry levels are kept modulo the
product of every monkey's divisor.  That product preserves the result of
each divisibility test.
"""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional

from advent.inputs import read_lines, split_blocks
from advent.solvers.solver_errors import InputError, parse_int

DAY = 11
INPUT_PATH = "inputs/day11.txt"

RELIEF_ROUNDS = 20
WORRY_ROUNDS = 10_000
RELIEF_FACTOR = 3


@dataclass(frozen=True)
class MonkeyOperation:
    operator: str              # "+" or "*"
    operand: Optional[int]     # None means "old"

    @classmethod
    def parse(cls, text: str) -> "MonkeyOperation":
        tokens = text.split(" ")
        if len(tokens) != 3 or tokens[0] != "old" or tokens[1] not in ("+", "*"):
            raise InputError(f"Invalid monkey operation: {text!r}", day=DAY)
        operand = None if tokens[2] == "old" else parse_int(tokens[2], day=DAY)
        return cls(tokens[1], operand)

    def apply(self, old: int) -> int:
        operand = old if self.operand is None else self.operand
        if self.operator == "+":
            return old + operand
        return old * operand


@dataclass
class Monkey:
    items: Deque[int]
    operation: MonkeyOperation
    divisor: int
    if_true: int
    if_false: int
    inspections: int = field(default=0, compare=False)

    def target(self, worry: int) -> int:
        return self.if_true if worry % self.divisor == 0 else self.if_false


def _strip(line: str, prefix: str) -> str:
    stripped = line.strip()
    if not stripped.startswith(prefix):
        raise InputError(f"Expected {prefix!r}, got {line!r}", day=DAY)
    return stripped[len(prefix):]


def parse_monkey(block: List[str]) -> Monkey:
    if len(block) != 6:
        raise InputError(f"Invalid monkey format: expected 6 lines, got {len(block)}", day=DAY)
    _strip(block[0], "Monkey ")
    items = _strip(block[1], "Starting items:").strip()
    return Monkey(
        items=deque(parse_int(item, day=DAY) for item in items.split(", ") if item),
        operation=MonkeyOperation.parse(_strip(block[2], "Operation: new = ")),
        divisor=parse_int(_strip(block[3], "Test: divisible by "), day=DAY),
        if_true=parse_int(_strip(block[4], "If true: throw to monkey "), day=DAY),
        if_false=parse_int(_strip(block[5], "If false: throw to monkey "), day=DAY),
    )


def parse_monkeys(lines: List[str]) -> List[Monkey]:
    monkeys = [parse_monkey(block) for block in split_blocks(lines)]
    for monkey in monkeys:
        for target in (monkey.if_true, monkey.if_false):
            if not 0 <= target < len(monkeys):
                raise InputError(f"No monkey {target}", day=DAY)
        if monkey.divisor <= 0:
            raise InputError(f"Invalid divisor {monkey.divisor}", day=DAY)
    return monkeys


def play_rounds(monkeys: List[Monkey], rounds: int, relief: bool) -> None:
    modulo = math.prod(monkey.divisor for monkey in monkeys)
    for _ in range(rounds):
        for monkey in monkeys:
            while monkey.items:
                worry = monkey.operation.apply(monkey.items.popleft())
                worry = worry // RELIEF_FACTOR if relief else worry % modulo
                monkey.inspections += 1
                monkeys[monkey.target(worry)].items.append(worry)


def monkey_business(monkeys: List[Monkey]) -> int:
    busiest = sorted((m.inspections for m in monkeys), reverse=True)
    if len(busiest) < 2:
        raise InputError("Need at least two monkeys", day=DAY)
    return busiest[0] * busiest[1]


def part1(lines: List[str]) -> int:
    monkeys = parse_monkeys(lines)
    play_rounds(monkeys, RELIEF_ROUNDS, relief=True)
    return monkey_business(monkeys)


def part2(lines: List[str]) -> int:
    monkeys = parse_monkeys(lines)
    play_rounds(monkeys, WORRY_ROUNDS, relief=False)
    return monkey_business(monkeys)


def main():
    lines = read_lines(INPUT_PATH)
    print(f"Part 1: {part1(lines)}")
    print(f"Part 2: {part2(lines)}")


if __name__ == "__main__":
    main()
