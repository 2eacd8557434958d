import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from advent.inputs import to_lines
from advent.solvers import day16
from advent.solvers.day16 import PressureSearch
from advent.solvers.solver_errors import InputError, SearchLimitExceededError

SAMPLE = """\
Valve AA has flow rate=0; tunnels lead to valves DD, II, BB
Valve BB has flow rate=13; tunnels lead to valves CC, AA
Valve CC has flow rate=2; tunnels lead to valves DD, BB
Valve DD has flow rate=20; tunnels lead to valves CC, AA, EE
Valve EE has flow rate=3; tunnels lead to valves FF, DD
Valve FF has flow rate=0; tunnels lead to valves EE, GG
Valve GG has flow rate=0; tunnels lead to valves FF, HH
Valve HH has flow rate=22; tunnel leads to valve GG
Valve II has flow rate=0; tunnels lead to valves AA, JJ
Valve JJ has flow rate=21; tunnel leads to valve II
"""


class TestValveGraph(unittest.TestCase):

    def setUp(self):
        self.valves = day16.parse_valves(to_lines(SAMPLE))

    def test_parse_singular_tunnel(self):
        self.assertEqual(self.valves["HH"].flow_rate, 22)
        self.assertEqual(self.valves["HH"].tunnels, ("GG",))
        self.assertEqual(self.valves["AA"].tunnels, ("DD", "II", "BB"))

    def test_shortest_path_reconstruction(self):
        paths = day16.all_shortest_paths(self.valves)
        self.assertEqual(paths["AA"]["HH"], ["DD", "EE", "FF", "GG", "HH"])
        self.assertEqual(paths["JJ"]["BB"], ["II", "AA", "BB"])
        self.assertEqual(paths["CC"]["CC"], [])

    def test_dangling_tunnel(self):
        with self.assertRaises(InputError):
            day16.parse_valves(["Valve AA has flow rate=0; tunnel leads to valve ZZ"])

    def test_missing_start(self):
        with self.assertRaises(InputError):
            day16.part1(["Valve BB has flow rate=1; tunnel leads to valve BB"])


class TestProboscideaVolcanium(unittest.TestCase):

    def test_part1_sample(self):
        self.assertEqual(day16.part1(to_lines(SAMPLE)), 1651)

    def test_part2_sample(self):
        self.assertEqual(day16.part2(to_lines(SAMPLE)), 1707)

    def test_search_limit(self):
        search = PressureSearch(day16.parse_valves(to_lines(SAMPLE)), limit=10)
        with self.assertRaises(SearchLimitExceededError) as ctx:
            search.best_by_opened_set(30)
        self.assertEqual(ctx.exception.limit, 10)
        self.assertEqual(ctx.exception.observed, 11)


if __name__ == '__main__':
    unittest.main()
