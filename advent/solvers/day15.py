"""
Day 15: Beacon Exclusion Zone
=============================
Every sensor reports the closest beacon by Manhattan distance, so no
other beacon can sit inside that radius.

Part 1 merges the sensors' coverage intervals on a single row.  Part 2
looks for the single uncovered position in a square: it has to sit just
outside the radius of several sensors, so candidates are taken from the
intersections of the sensors' "radius + 1" boundary lines.  A row scan
over merged intervals is kept as a fallback for gaps the intersections
miss (e.g. at the edge of the search area).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Set, Tuple

from advent.inputs import read_lines
from advent.solvers.solver_errors import InputError, NoSolutionError

DAY = 15
INPUT_PATH = "inputs/day15.txt"

REPORT_ROW = 2_000_000
SEARCH_MIN = 0
SEARCH_MAX = 4_000_000
TUNING_MULTIPLIER = 4_000_000

REPORT_PATTERN = re.compile(
    r"^Sensor at x=(-?\d+), y=(-?\d+): closest beacon is at x=(-?\d+), y=(-?\d+)$"
)

Point = Tuple[int, int]
Interval = Tuple[int, int]


def manhattan_distance(a: Point, b: Point) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@dataclass(frozen=True)
class SensorReport:
    sensor: Point
    beacon: Point

    @property
    def radius(self) -> int:
        return manhattan_distance(self.sensor, self.beacon)

    def covers(self, point: Point) -> bool:
        return manhattan_distance(self.sensor, point) <= self.radius

    def range_at(self, y: int) -> Optional[Interval]:
        """Inclusive x interval covered on row ``y``, if any."""
        remaining = self.radius - abs(y - self.sensor[1])
        if remaining < 0:
            return None
        return self.sensor[0] - remaining, self.sensor[0] + remaining


def parse_sensor_reports(lines: List[str]) -> List[SensorReport]:
    reports = []
    for line in lines:
        match = REPORT_PATTERN.match(line)
        if match is None:
            raise InputError(f"Invalid sensor report: {line!r}", day=DAY)
        sx, sy, bx, by = (int(g) for g in match.groups())
        reports.append(SensorReport((sx, sy), (bx, by)))
    if not reports:
        raise InputError("Empty input", day=DAY)
    return reports


def merge_intervals(intervals: Iterable[Interval]) -> List[Interval]:
    """Merge overlapping or touching inclusive intervals."""
    merged: List[Interval] = []
    for start, end in sorted(intervals):
        if merged and start <= merged[-1][1] + 1:
            if end > merged[-1][1]:
                merged[-1] = (merged[-1][0], end)
        else:
            merged.append((start, end))
    return merged


def covered_intervals(reports: List[SensorReport], y: int) -> List[Interval]:
    return merge_intervals(r for r in (report.range_at(y) for report in reports) if r is not None)


def count_excluded(reports: List[SensorReport], y: int) -> int:
    intervals = covered_intervals(reports, y)
    covered = sum(end - start + 1 for start, end in intervals)
    beacons_on_row = {
        report.beacon for report in reports
        if report.beacon[1] == y
        and any(start <= report.beacon[0] <= end for start, end in intervals)
    }
    return covered - len(beacons_on_row)


def _boundary_candidates(reports: List[SensorReport]) -> Set[Point]:
    # Lines y = x + a and y = -x + b just outside each sensor's radius
    ascending = set()
    descending = set()
    for report in reports:
        sx, sy = report.sensor
        reach = report.radius + 1
        ascending.update((sy - sx + reach, sy - sx - reach))
        descending.update((sy + sx + reach, sy + sx - reach))

    candidates = set()
    for a in ascending:
        for b in descending:
            if (b - a) % 2 == 0:
                x = (b - a) // 2
                candidates.add((x, x + a))
    return candidates


def _row_scan(reports: List[SensorReport], search_min: int, search_max: int) -> Optional[Point]:
    for y in range(search_min, search_max + 1):
        x = search_min
        for start, end in covered_intervals(reports, y):
            if start > x:
                break
            x = max(x, end + 1)
        if x <= search_max:
            return x, y
    return None


def find_distress_beacon(reports: List[SensorReport], search_min: int, search_max: int) -> Point:
    def in_area(point: Point) -> bool:
        return all(search_min <= c <= search_max for c in point)

    for candidate in sorted(_boundary_candidates(reports)):
        if in_area(candidate) and not any(report.covers(candidate) for report in reports):
            return candidate

    found = _row_scan(reports, search_min, search_max)
    if found is None:
        raise NoSolutionError("Beacon not found", day=DAY)
    return found


def part1(lines: List[str], row: int = REPORT_ROW) -> int:
    return count_excluded(parse_sensor_reports(lines), row)


def part2(lines: List[str], search_min: int = SEARCH_MIN, search_max: int = SEARCH_MAX) -> int:
    x, y = find_distress_beacon(parse_sensor_reports(lines), search_min, search_max)
    return x * TUNING_MULTIPLIER + y


def main():
    lines = read_lines(INPUT_PATH)
    print(f"Part 1: {part1(lines)}")
    print(f"Part 2: {part2(lines)}")


if __name__ == "__main__":
    main()
