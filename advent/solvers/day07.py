"""
Day 7: No Space Left On Device
==============================
Replays a terminal session (``cd`` / ``ls`` and their output) to rebuild
the directory tree, then looks for directories worth deleting.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from advent.inputs import read_lines
from advent.solvers.solver_errors import InputError, NoSolutionError, parse_int

DAY = 7
INPUT_PATH = "inputs/day7.txt"

SMALL_DIRECTORY_LIMIT = 100_000
DISK_SIZE = 70_000_000
REQUIRED_FREE_SPACE = 30_000_000


@dataclass
class Directory:
    name: str
    parent: Optional["Directory"] = None
    directories: Dict[str, "Directory"] = field(default_factory=dict)
    files: Dict[str, int] = field(default_factory=dict)

    def total_size(self) -> int:
        return sum(self.files.values()) + sum(d.total_size() for d in self.directories.values())

    def walk(self) -> Iterator["Directory"]:
        """Yield this directory and every directory below it."""
        to_explore = [self]
        while to_explore:
            directory = to_explore.pop()
            yield directory
            to_explore.extend(directory.directories.values())


def _record_entry(cwd: Directory, line: str) -> None:
    tokens = line.split(" ")
    if len(tokens) != 2:
        raise InputError(f"Invalid directory entry: {line!r}", day=DAY)
    kind, name = tokens
    if kind == "dir":
        cwd.directories.setdefault(name, Directory(name, parent=cwd))
    else:
        cwd.files[name] = parse_int(kind, day=DAY)


def infer_structure(lines: List[str]) -> Directory:
    root = Directory("/")
    cwd = root
    listing = False

    for line in lines:
        if not line.startswith("$"):
            if not listing:
                raise InputError(f"Output outside of ls: {line!r}", day=DAY)
            _record_entry(cwd, line)
            continue

        listing = False
        tokens = line.split(" ")
        if tokens == ["$", "ls"]:
            listing = True
        elif len(tokens) == 3 and tokens[:2] == ["$", "cd"]:
            target = tokens[2]
            if target == "/":
                cwd = root
            elif target == "..":
                # cd .. at the root stays at the root
                cwd = cwd.parent or root
            elif target in cwd.directories:
                cwd = cwd.directories[target]
            else:
                raise InputError(f"No directory {target!r} in {cwd.name!r}", day=DAY)
        else:
            raise InputError(f"Invalid command: {line!r}", day=DAY)

    return root


def directory_sizes(lines: List[str]) -> List[int]:
    return [d.total_size() for d in infer_structure(lines).walk()]


def part1(lines: List[str]) -> int:
    return sum(size for size in directory_sizes(lines) if size <= SMALL_DIRECTORY_LIMIT)


def part2(lines: List[str]) -> int:
    root = infer_structure(lines)
    unused_space = DISK_SIZE - root.total_size()
    required_space = REQUIRED_FREE_SPACE - unused_space

    candidates = [d.total_size() for d in root.walk() if d.total_size() >= required_space]
    if not candidates:
        raise NoSolutionError("No directory frees enough space", day=DAY)
    return min(candidates)


def main():
    lines = read_lines(INPUT_PATH)
    print(f"Part 1: {part1(lines)}")
    print(f"Part 2: {part2(lines)}")


if __name__ == "__main__":
    main()
