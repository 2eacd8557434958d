"""
Solver Runner
=============
Loads a day's solver module, runs both parts and times them.

Provides:
- load_solver(day): import ``advent.solvers.dayNN``
- solve_day(day, ...): run both parts, returning a DayResult
- format_answer / print_result: the ``Part N: <answer>`` output
"""

import importlib
import logging
import time
from dataclasses import dataclass
from types import ModuleType
from typing import Any, Callable, List, Optional

from advent.inputs import PathLike, input_path, read_lines
from advent.solvers.solver_errors import PuzzleError

logger = logging.getLogger(__name__)

FIRST_DAY = 1
LAST_DAY = 21
AVAILABLE_DAYS = tuple(range(FIRST_DAY, LAST_DAY + 1))


@dataclass
class PartMetrics:
    """Answer and timing of a single part."""
    part: int
    answer: Any
    elapsed: float            # wall-clock seconds


@dataclass
class DayResult:
    day: int
    part1: PartMetrics
    part2: PartMetrics

    @property
    def parts(self) -> List[PartMetrics]:
        return [self.part1, self.part2]

    @property
    def total_time(self) -> float:
        return self.part1.elapsed + self.part2.elapsed


def module_name(day: int) -> str:
    return f"advent.solvers.day{day:02d}"


def load_solver(day: int) -> ModuleType:
    if day not in AVAILABLE_DAYS:
        raise PuzzleError(f"No solver for day {day}", day=day)
    return importlib.import_module(module_name(day))


def run_part(part: int, solve: Callable[[List[str]], Any], lines: List[str]) -> PartMetrics:
    start_time = time.perf_counter()
    answer = solve(lines)
    elapsed = time.perf_counter() - start_time
    return PartMetrics(part=part, answer=answer, elapsed=elapsed)


def solve_day(
    day: int,
    lines: Optional[List[str]] = None,
    input_dir: Optional[PathLike] = None,
) -> DayResult:
    """
    Run both parts of a day.

    ``lines`` overrides the input file; otherwise ``<input dir>/day<N>.txt``
    is read (OSError propagates when it is missing).
    """
    solver = load_solver(day)
    if lines is None:
        path = input_path(day, input_dir)
        logger.debug("Day %d: reading %s", day, path)
        lines = read_lines(path)

    part1 = run_part(1, solver.part1, lines)
    logger.debug("Day %d part 1 solved in %.4fs", day, part1.elapsed)
    part2 = run_part(2, solver.part2, lines)
    logger.debug("Day %d part 2 solved in %.4fs", day, part2.elapsed)
    return DayResult(day=day, part1=part1, part2=part2)


def format_answer(answer: Any) -> str:
    """Multi-line answers (rendered screens) start on their own line."""
    text = str(answer)
    if "\n" in text:
        return "\n" + text
    return text


def print_result(result: DayResult, timings: bool = False) -> None:
    for metrics in result.parts:
        line = f"Part {metrics.part}: {format_answer(metrics.answer)}"
        if timings:
            line += f"  ({metrics.elapsed * 1000:.2f} ms)"
        print(line)
