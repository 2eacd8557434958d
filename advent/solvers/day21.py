"""
Day 21: Monkey Math
===================
Every monkey either yells a number or combines the numbers of two other
monkeys.  Division is integer division truncating toward zero.

For part 2 ``root`` becomes an equality test and ``humn`` is the unknown.
Both sides of ``root`` are reduced: every sub-tree not containing ``humn``
collapses to a number, leaving a chain of operations between ``humn`` and
a constant, which is then undone one step at a time.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from advent.inputs import read_lines
from advent.solvers.solver_errors import InputError, NoSolutionError, parse_int

DAY = 21
INPUT_PATH = "inputs/day21.txt"

ROOT = "root"
HUMAN = "humn"


def divide(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    if b == 0:
        raise NoSolutionError("Division by zero", day=DAY)
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


OPERATIONS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": divide,
}


@dataclass(frozen=True)
class Operation:
    left: str
    operator: str
    right: str

    def apply(self, a: int, b: int) -> int:
        return OPERATIONS[self.operator](a, b)


Job = Union[int, Operation]


@dataclass(frozen=True)
class Unknown:
    """A reduced expression with ``humn`` somewhere inside.

    ``left``/``right`` hold the other operand; exactly one of them is set.
    """
    operator: Optional[str] = None
    inner: Optional["Unknown"] = None
    left: Optional[int] = None
    right: Optional[int] = None


HUMAN_LEAF = Unknown()


def parse_job(line: str):
    name, sep, job = line.partition(": ")
    if not sep or not name:
        raise InputError(f"Invalid monkey: {line!r}", day=DAY)
    tokens = job.split()
    if len(tokens) == 1:
        return name, parse_int(tokens[0], day=DAY)
    if len(tokens) == 3 and tokens[1] in OPERATIONS:
        return name, Operation(tokens[0], tokens[1], tokens[2])
    raise InputError(f"Invalid job for {name}: {job!r}", day=DAY)


def parse_jobs(lines: List[str]) -> Dict[str, Job]:
    jobs = dict(parse_job(line) for line in lines if line.strip())
    if ROOT not in jobs:
        raise InputError("Monkey 'root' not found", day=DAY)
    return jobs


def _job(jobs: Dict[str, Job], name: str) -> Job:
    try:
        return jobs[name]
    except KeyError:
        raise InputError(f"Unknown monkey {name!r}", day=DAY) from None


def evaluate(jobs: Dict[str, Job], name: str = ROOT) -> int:
    job = _job(jobs, name)
    if isinstance(job, int):
        return job
    return job.apply(evaluate(jobs, job.left), evaluate(jobs, job.right))


def reduce(jobs: Dict[str, Job], name: str) -> Union[int, Unknown]:
    if name == HUMAN:
        return HUMAN_LEAF
    job = _job(jobs, name)
    if isinstance(job, int):
        return job

    left = reduce(jobs, job.left)
    right = reduce(jobs, job.right)
    if isinstance(left, int) and isinstance(right, int):
        return job.apply(left, right)
    if isinstance(left, Unknown) and isinstance(right, Unknown):
        raise NoSolutionError("Unknown appears on both sides", day=DAY, detail=name)
    if isinstance(left, Unknown):
        return Unknown(job.operator, left, right=right)
    return Unknown(job.operator, right, left=left)


def solve(expression: Unknown, target: int) -> int:
    """Undo the operations around the unknown until only ``humn`` is left."""
    while expression is not HUMAN_LEAF:
        op = expression.operator
        if expression.right is not None:
            # unknown OP right == target
            b = expression.right
            if op == "+":
                target -= b
            elif op == "-":
                target += b
            elif op == "*":
                target = divide(target, b)
            else:
                target *= b
        else:
            # left OP unknown == target
            a = expression.left
            if op == "+":
                target -= a
            elif op == "-":
                target = a - target
            elif op == "*":
                target = divide(target, a)
            else:
                target = divide(a, target)
        expression = expression.inner
    return target


def find_human_value(jobs: Dict[str, Job]) -> int:
    root = jobs[ROOT]
    if not isinstance(root, Operation):
        raise InputError("Monkey 'root' must combine two monkeys", day=DAY)

    left = reduce(jobs, root.left)
    right = reduce(jobs, root.right)
    if isinstance(left, Unknown) and isinstance(right, Unknown):
        raise NoSolutionError("Unknown appears on both sides", day=DAY, detail=ROOT)
    if isinstance(left, int) and isinstance(right, int):
        raise NoSolutionError("Monkey 'humn' does not affect 'root'", day=DAY)
    if isinstance(left, Unknown):
        return solve(left, right)
    return solve(right, left)


def part1(lines: List[str]) -> int:
    return evaluate(parse_jobs(lines))


def part2(lines: List[str]) -> int:
    return find_human_value(parse_jobs(lines))


def main():
    lines = read_lines(INPUT_PATH)
    print(f"Part 1: {part1(lines)}")
    print(f"Part 2: {part2(lines)}")


if __name__ == "__main__":
    main()
