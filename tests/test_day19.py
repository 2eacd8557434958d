import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from advent.inputs import to_lines
from advent.solvers import day19
from advent.solvers.day19 import GeodeSearch
from advent.solvers.solver_errors import InputError, SearchLimitExceededError

SAMPLE = """\
Blueprint 1: Each ore robot costs 4 ore. Each clay robot costs 2 ore. Each obsidian robot costs 3 ore and 14 clay. Each geode robot costs 2 ore and 7 obsidian.
Blueprint 2: Each ore robot costs 2 ore. Each clay robot costs 3 ore. Each obsidian robot costs 3 ore and 8 clay. Each geode robot costs 3 ore and 12 obsidian.
"""


class TestNotEnoughMinerals(unittest.TestCase):

    def setUp(self):
        self.blueprints = day19.parse_blueprints(to_lines(SAMPLE))

    def test_parse_blueprint(self):
        first = self.blueprints[0]
        self.assertEqual(first.id, 1)
        self.assertEqual(first.costs, ((4, 0, 0), (2, 0, 0), (3, 14, 0), (2, 0, 7)))
        self.assertEqual(first.max_spend, (4, 14, 7))

    def test_max_geodes_short(self):
        self.assertEqual(day19.max_geodes(self.blueprints[0], 24), 9)
        self.assertEqual(day19.max_geodes(self.blueprints[1], 24), 12)

    def test_part1_sample(self):
        self.assertEqual(day19.part1(to_lines(SAMPLE)), 33)

    def test_part2_sample(self):
        self.assertEqual(day19.part2(to_lines(SAMPLE)), 56 * 62)

    def test_search_limit(self):
        search = GeodeSearch(self.blueprints[0], 24, limit=5)
        with self.assertRaises(SearchLimitExceededError) as ctx:
            search.run()
        self.assertEqual(ctx.exception.day, 19)
        self.assertIn("blueprint 1", ctx.exception.context)

    def test_invalid_blueprint(self):
        with self.assertRaises(InputError):
            day19.part1(["Blueprint 1: Each ore robot costs 4 ore."])


if __name__ == '__main__':
    unittest.main()
