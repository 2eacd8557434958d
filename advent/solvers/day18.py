"""
Day 18: Boiling Boulders
"""

from __future__ import annotations

from collections import deque
from typing import List, Set, Tuple

from advent.inputs import read_lines
from advent.solvers.solver_errors import InputError, parse_int

DAY = 18
INPUT_PATH = "inputs/day18.txt"

Cube = Tuple[int, int, int]

FACE_OFFSETS = (
    (1, 0, 0), (-1, 0, 0),
    (0, 1, 0), (0, -1, 0),
    (0, 0, 1), (0, 0, -1),
)


def parse_cube(line: str) -> Cube:
    coords = line.split(",")
    if len(coords) != 3:
        raise InputError(f"Invalid cube: {line!r}", day=DAY)
    x, y, z = (parse_int(c.strip(), day=DAY) for c in coords)
    return x, y, z


def parse_cubes(lines: List[str]) -> Set[Cube]:
    cubes = {parse_cube(line) for line in lines if line.strip()}
    if not cubes:
        raise InputError("Empty input", day=DAY)
    return cubes


def neighbours(cube: Cube):
    x, y, z = cube
    for dx, dy, dz in FACE_OFFSETS:
        yield x + dx, y + dy, z + dz


def surface_area(cubes: Set[Cube]) -> int:
    return sum(1 for cube in cubes for n in neighbours(cube) if n not in cubes)


def exterior(cubes: Set[Cube]) -> Set[Cube]:
    """Flood fill the air around the droplet within a bounding box one unit larger."""
    low = [min(c[i] for c in cubes) - 1 for i in range(3)]
    high = [max(c[i] for c in cubes) + 1 for i in range(3)]

    start = tuple(low)
    outside = {start}
    queue = deque([start])
    while queue:
        for n in neighbours(queue.popleft()):
            if n in outside or n in cubes:
                continue
            if all(low[i] <= n[i] <= high[i] for i in range(3)):
                outside.add(n)
                queue.append(n)
    return outside


def exterior_surface_area(cubes: Set[Cube]) -> int:
    outside = exterior(cubes)
    return sum(1 for cube in cubes for n in neighbours(cube) if n in outside)


def part1(lines: List[str]) -> int:
    return surface_area(parse_cubes(lines))


def part2(lines: List[str]) -> int:
    return exterior_surface_area(parse_cubes(lines))


def main():
    lines = read_lines(INPUT_PATH)
    print(f"Part 1: {part1(lines)}")
    print(f"Part 2: {part2(lines)}")


if __name__ == "__main__":
    main()
