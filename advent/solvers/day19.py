"""
Day 19: Not Enough Minerals
===========================
Each blueprint lists the cost of four robot types; the goal is to crack as
many geodes as possible in a fixed number of minutes.

The search branches on *which robot to build next* rather than on every
minute, jumping straight to the minute the robot becomes affordable.  The
tree is pruned with:

* robot caps: never own more robots of a kind than any recipe can spend
  per minute (geode robots excepted);
* an optimistic bound: a new geode robot every remaining minute;
* late-game cut-offs: a robot built too close to the end cannot turn into
  an extra geode.

Geode robots are not tracked as a resource: building one with ``r``
minutes left immediately credits the ``r`` geodes it will crack.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from advent.inputs import read_lines
from advent.solvers.solver_errors import (
    InputError,
    SearchLimitExceededError,
    resolve_search_limit,
)

logger = logging.getLogger(__name__)

DAY = 19
INPUT_PATH = "inputs/day19.txt"

QUALITY_MINUTES = 24
LONG_MINUTES = 32
LONG_BLUEPRINTS = 3

ORE, CLAY, OBSIDIAN, GEODE = range(4)

# Minutes that must remain after a robot is built for it to still add a geode
MIN_USEFUL_MINUTES = {ORE: 3, CLAY: 5, OBSIDIAN: 3, GEODE: 1}

BLUEPRINT_PATTERN = re.compile(
    r"Blueprint (\d+):\s+"
    r"Each ore robot costs (\d+) ore\.\s+"
    r"Each clay robot costs (\d+) ore\.\s+"
    r"Each obsidian robot costs (\d+) ore and (\d+) clay\.\s+"
    r"Each geode robot costs (\d+) ore and (\d+) obsidian\."
)

Stock = Tuple[int, int, int]


@dataclass(frozen=True)
class Blueprint:
    id: int
    # costs[robot] = (ore, clay, obsidian)
    costs: Tuple[Stock, Stock, Stock, Stock]

    @property
    def max_spend(self) -> Stock:
        return tuple(max(cost[resource] for cost in self.costs) for resource in (ORE, CLAY, OBSIDIAN))


def parse_blueprint(line: str) -> Blueprint:
    match = BLUEPRINT_PATTERN.fullmatch(line.strip())
    if match is None:
        raise InputError(f"Invalid blueprint: {line!r}", day=DAY)
    (blueprint_id, ore_ore, clay_ore, obsidian_ore, obsidian_clay,
     geode_ore, geode_obsidian) = (int(g) for g in match.groups())
    return Blueprint(
        blueprint_id,
        (
            (ore_ore, 0, 0),
            (clay_ore, 0, 0),
            (obsidian_ore, obsidian_clay, 0),
            (geode_ore, 0, geode_obsidian),
        ),
    )


def parse_blueprints(lines: List[str]) -> List[Blueprint]:
    blueprints = [parse_blueprint(line) for line in lines if line.strip()]
    if not blueprints:
        raise InputError("Empty input", day=DAY)
    return blueprints


class GeodeSearch:
    def __init__(self, blueprint: Blueprint, minutes: int, limit: Optional[int] = None):
        self.blueprint = blueprint
        self.minutes = minutes
        self.max_spend = blueprint.max_spend
        self.limit = resolve_search_limit(limit)
        self.nodes_visited = 0
        self.best = 0

    def run(self) -> int:
        self.nodes_visited = 0
        self.best = 0
        self._search(self.minutes, (1, 0, 0), (0, 0, 0), 0)
        logger.debug("Blueprint %d (%d minutes): %d geodes, %d nodes",
                     self.blueprint.id, self.minutes, self.best, self.nodes_visited)
        return self.best

    def _minutes_until_affordable(self, cost: Stock, robots: Stock, stock: Stock) -> Optional[int]:
        wait = 0
        for resource in (ORE, CLAY, OBSIDIAN):
            missing = cost[resource] - stock[resource]
            if missing <= 0:
                continue
            if robots[resource] == 0:
                return None
            wait = max(wait, math.ceil(missing / robots[resource]))
        return wait

    def _search(self, time_left: int, robots: Stock, stock: Stock, geodes: int) -> None:
        self.nodes_visited += 1
        if self.nodes_visited > self.limit:
            raise SearchLimitExceededError(
                limit=self.limit,
                observed=self.nodes_visited,
                context=f"blueprint {self.blueprint.id}, {self.minutes} minutes",
                day=DAY,
            )

        self.best = max(self.best, geodes)
        if geodes + time_left * (time_left - 1) // 2 <= self.best:
            return

        for robot in (GEODE, OBSIDIAN, CLAY, ORE):
            if robot != GEODE and robots[robot] >= self.max_spend[robot]:
                continue
            cost = self.blueprint.costs[robot]
            wait = self._minutes_until_affordable(cost, robots, stock)
            if wait is None:
                continue
            remaining = time_left - wait - 1
            if remaining < MIN_USEFUL_MINUTES[robot]:
                continue

            new_stock = tuple(
                stock[r] + robots[r] * (wait + 1) - cost[r] for r in (ORE, CLAY, OBSIDIAN)
            )
            if robot == GEODE:
                self._search(remaining, robots, new_stock, geodes + remaining)
            else:
                new_robots = tuple(count + (r == robot) for r, count in enumerate(robots))
                self._search(remaining, new_robots, new_stock, geodes)


def max_geodes(blueprint: Blueprint, minutes: int, limit: Optional[int] = None) -> int:
    return GeodeSearch(blueprint, minutes, limit).run()


def part1(lines: List[str], minutes: int = QUALITY_MINUTES) -> int:
    return sum(bp.id * max_geodes(bp, minutes) for bp in parse_blueprints(lines))


def part2(lines: List[str], minutes: int = LONG_MINUTES, count: int = LONG_BLUEPRINTS) -> int:
    return math.prod(max_geodes(bp, minutes) for bp in parse_blueprints(lines)[:count])


def main():
    lines = read_lines(INPUT_PATH)
    print(f"Part 1: {part1(lines)}")
    print(f"Part 2: {part2(lines)}")


if __name__ == "__main__":
    main()
