"""
Day 16: Proboscidea Volcanium
=============================
Releases as much pressure as possible by opening valves in a tunnel
network before the volcano erupts.

Only valves with a positive flow rate are worth visiting, so the search
runs on the compressed graph of those valves, using all-pairs shortest
path lengths (Floyd-Warshall) as edge weights.  A depth-first search
records the best pressure for every *set* of opened valves; part 2 then
pairs two disjoint sets, one for us and one for the elephant.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from advent.inputs import read_lines
from advent.solvers.solver_errors import (
    InputError,
    SearchLimitExceededError,
    resolve_search_limit,
)

logger = logging.getLogger(__name__)

DAY = 16
INPUT_PATH = "inputs/day16.txt"

START_VALVE = "AA"
SOLO_MINUTES = 30
TEAM_MINUTES = 26

VALVE_PATTERN = re.compile(
    r"^Valve ([A-Z]+) has flow rate=(\d+); tunnels? leads? to valves? ([A-Z]+(?:, [A-Z]+)*)$"
)


@dataclass(frozen=True)
class Valve:
    label: str
    flow_rate: int
    tunnels: Tuple[str, ...]


def parse_valve(line: str) -> Valve:
    match = VALVE_PATTERN.match(line)
    if match is None:
        raise InputError(f"Invalid valve: {line!r}", day=DAY)
    label, flow_rate, tunnels = match.groups()
    return Valve(label, int(flow_rate), tuple(tunnels.split(", ")))


def parse_valves(lines: List[str]) -> Dict[str, Valve]:
    valves = {valve.label: valve for valve in map(parse_valve, lines)}
    for valve in valves.values():
        for tunnel in valve.tunnels:
            if tunnel not in valves:
                raise InputError(f"Tunnel from {valve.label} to unknown valve {tunnel}", day=DAY)
    return valves


def all_shortest_paths(valves: Dict[str, Valve]) -> Dict[str, Dict[str, List[str]]]:
    """
    Floyd-Warshall with path reconstruction.

    Returns ``paths[a][b]``: the valves visited walking from ``a`` to ``b``,
    excluding ``a`` and including ``b``.  Unreachable pairs are absent.
    """
    distance: Dict[Tuple[str, str], int] = {}
    successor: Dict[Tuple[str, str], str] = {}
    for label, valve in valves.items():
        distance[(label, label)] = 0
        successor[(label, label)] = label
        for tunnel in valve.tunnels:
            distance[(label, tunnel)] = 1
            successor[(label, tunnel)] = tunnel

    labels = sorted(valves)
    for k in labels:
        for i in labels:
            if (i, k) not in distance:
                continue
            for j in labels:
                if (k, j) not in distance:
                    continue
                through_k = distance[(i, k)] + distance[(k, j)]
                if through_k < distance.get((i, j), through_k + 1):
                    distance[(i, j)] = through_k
                    successor[(i, j)] = successor[(i, k)]

    paths: Dict[str, Dict[str, List[str]]] = {label: {} for label in labels}
    for (source, target) in distance:
        path = []
        node = source
        while node != target:
            node = successor[(node, target)]
            path.append(node)
        paths[source][target] = path
    return paths


class PressureSearch:
    """Depth-first search over the order in which useful valves are opened."""

    def __init__(self, valves: Dict[str, Valve], start: str = START_VALVE,
                 limit: Optional[int] = None):
        if start not in valves:
            raise InputError(f"Starting valve {start} not found", day=DAY)
        self.start = start
        self.flow = {label: v.flow_rate for label, v in valves.items() if v.flow_rate > 0}
        self.bits = {label: 1 << i for i, label in enumerate(sorted(self.flow))}
        paths = all_shortest_paths(valves)
        self.distance = {
            source: {target: len(path) for target, path in paths[source].items()}
            for source in paths
        }
        self.limit = resolve_search_limit(limit)
        self.nodes_visited = 0

    def best_by_opened_set(self, minutes: int) -> Dict[int, int]:
        """Maximum pressure released for each bitmask of opened valves."""
        best: Dict[int, int] = {}
        stack = [(self.start, minutes, 0, 0)]
        while stack:
            position, time_left, opened, released = stack.pop()
            self.nodes_visited += 1
            if self.nodes_visited > self.limit:
                raise SearchLimitExceededError(
                    limit=self.limit,
                    observed=self.nodes_visited,
                    context=f"valve search, {minutes} minutes",
                    day=DAY,
                )
            if released > best.get(opened, -1):
                best[opened] = released

            for label, bit in self.bits.items():
                if opened & bit:
                    continue
                steps = self.distance[position].get(label)
                if steps is None:
                    continue
                # Walking there and opening the valve
                remaining = time_left - steps - 1
                if remaining > 0:
                    stack.append((label, remaining, opened | bit,
                                  released + self.flow[label] * remaining))

        logger.debug("Valve search (%d minutes): %d nodes, %d opened sets",
                     minutes, self.nodes_visited, len(best))
        return best


def part1(lines: List[str], minutes: int = SOLO_MINUTES) -> int:
    search = PressureSearch(parse_valves(lines))
    return max(search.best_by_opened_set(minutes).values())


def part2(lines: List[str], minutes: int = TEAM_MINUTES) -> int:
    search = PressureSearch(parse_valves(lines))
    ranked = sorted(search.best_by_opened_set(minutes).items(), key=lambda kv: kv[1], reverse=True)

    best = 0
    for i, (mine, my_pressure) in enumerate(ranked):
        if my_pressure * 2 <= best:
            break
        for theirs, their_pressure in ranked[i:]:
            if my_pressure + their_pressure <= best:
                break
            if not mine & theirs:
                best = my_pressure + their_pressure
    return best


def main():
    lines = read_lines(INPUT_PATH)
    print(f"Part 1: {part1(lines)}")
    print(f"Part 2: {part2(lines)}")


if __name__ == "__main__":
    main()
