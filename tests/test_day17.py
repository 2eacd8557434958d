import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from advent.solvers import day17
from advent.solvers.day17 import Chamber
from advent.solvers.solver_errors import InputError

SAMPLE = [">>><<><>><<<>><>>><<<>>><<<><<<>><>><<>>"]


class TestPyroclasticFlow(unittest.TestCase):

    def test_first_rocks(self):
        chamber = Chamber(day17.parse_jet_pattern(SAMPLE))
        chamber.drop_rock()
        self.assertEqual(chamber.height, 1)
        chamber.drop_rock()
        self.assertEqual(chamber.height, 4)
        chamber.drop_rock()
        self.assertEqual(chamber.height, 6)

    def test_short_tower_without_cycles(self):
        self.assertEqual(day17.part1(SAMPLE, rocks=10), 17)

    def test_part1_sample(self):
        self.assertEqual(day17.part1(SAMPLE), 3068)

    def test_part2_sample(self):
        self.assertEqual(day17.part2(SAMPLE), 1514285714288)

    def test_invalid_jet(self):
        with self.assertRaises(InputError):
            day17.part1([">><x"])

    def test_empty_pattern(self):
        with self.assertRaises(InputError):
            day17.part1([""])
        with self.assertRaises(InputError):
            day17.part1([])


if __name__ == '__main__':
    unittest.main()
