"""
Day 12: Hill Climbing Algorithm
===============================
Shortest climb on an elevation map, one step at a time, climbing at most
one level per step (descending is unrestricted).

Both parts run Dijkstra's algorithm on the grid; part 2 seeds the queue
with every lowest-elevation square at distance 0 instead of running one
search per starting square.
"""

from __future__ import annotations

import heapq
from typing import Dict, Iterable, Iterator, List, Tuple

from advent.inputs import read_lines
from advent.solvers.solver_errors import InputError, NoSolutionError

DAY = 12
INPUT_PATH = "inputs/day12.txt"

Point = Tuple[int, int]


class ElevationMap:
    def __init__(self, lines: List[str]):
        self.height = len(lines)
        widths = {len(line) for line in lines}
        if len(widths) > 1:
            raise InputError("Inconsistent row width", day=DAY)
        self.width = widths.pop() if widths else 0

        self.elevations: Dict[Point, int] = {}
        start = end = None
        for y, row in enumerate(lines):
            for x, marker in enumerate(row):
                if marker == "S":
                    start = (x, y)
                    marker = "a"
                elif marker == "E":
                    end = (x, y)
                    marker = "z"
                elif not "a" <= marker <= "z":
                    raise InputError(f"Invalid elevation {marker!r}", day=DAY)
                self.elevations[(x, y)] = ord(marker) - ord("a")

        if start is None:
            raise InputError("No start position", day=DAY)
        if end is None:
            raise InputError("No end position", day=DAY)
        self.start: Point = start
        self.end: Point = end

    def neighbours(self, point: Point) -> Iterator[Point]:
        """Squares reachable from ``point`` in a single step."""
        x, y = point
        limit = self.elevations[point] + 1
        for nx, ny in ((x - 1, y), (x, y - 1), (x + 1, y), (x, y + 1)):
            elevation = self.elevations.get((nx, ny))
            if elevation is not None and elevation <= limit:
                yield nx, ny

    def lowest_points(self) -> List[Point]:
        return [p for p, elevation in self.elevations.items() if elevation == 0]

    def length_of_shortest_path(self, starts: Iterable[Point]) -> int:
        distances: Dict[Point, int] = {}
        queue = []
        for start in starts:
            distances[start] = 0
            queue.append((0, start))
        heapq.heapify(queue)

        while queue:
            distance, point = heapq.heappop(queue)
            if point == self.end:
                return distance
            if distance > distances[point]:
                continue
            for neighbour in self.neighbours(point):
                tentative = distance + 1
                if tentative < distances.get(neighbour, tentative + 1):
                    distances[neighbour] = tentative
                    heapq.heappush(queue, (tentative, neighbour))

        raise NoSolutionError("End position is unreachable", day=DAY)


def part1(lines: List[str]) -> int:
    elevation_map = ElevationMap(lines)
    return elevation_map.length_of_shortest_path([elevation_map.start])


def part2(lines: List[str]) -> int:
    elevation_map = ElevationMap(lines)
    return elevation_map.length_of_shortest_path(elevation_map.lowest_points())


def main():
    lines = read_lines(INPUT_PATH)
    print(f"Part 1: {part1(lines)}")
    print(f"Part 2: {part2(lines)}")


if __name__ == "__main__":
    main()
