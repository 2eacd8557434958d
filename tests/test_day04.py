import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from advent.inputs import to_lines
from advent.solvers import day04
from advent.solvers.day04 import Assignment
from advent.solvers.solver_errors import InputError

SAMPLE = """\
2-4,6-8
2-3,4-5
5-7,7-9
2-8,3-7
6-6,4-6
2-6,4-8
"""


class TestCampCleanup(unittest.TestCase):

    def test_contains(self):
        self.assertTrue(Assignment(2, 8).contains(Assignment(3, 7)))
        self.assertFalse(Assignment(3, 7).contains(Assignment(2, 8)))

    def test_overlaps(self):
        self.assertTrue(Assignment(5, 7).overlaps(Assignment(7, 9)))
        self.assertFalse(Assignment(2, 4).overlaps(Assignment(6, 8)))

    def test_empty_range_as_set(self):
        empty = Assignment(5, 3)
        self.assertTrue(Assignment(1, 2).contains(empty))
        self.assertFalse(empty.contains(Assignment(1, 2)))
        self.assertFalse(Assignment(1, 9).overlaps(empty))
        self.assertEqual(day04.part1(["5-3,1-2"]), 1)
        self.assertEqual(day04.part2(["5-3,1-9"]), 0)

    def test_part1_sample(self):
        self.assertEqual(day04.part1(to_lines(SAMPLE)), 2)

    def test_part2_sample(self):
        self.assertEqual(day04.part2(to_lines(SAMPLE)), 4)

    def test_invalid_line(self):
        with self.assertRaises(InputError):
            day04.part1(["2-4;6-8"])
        with self.assertRaises(InputError):
            day04.part1(["2-x,6-8"])


if __name__ == '__main__':
    unittest.main()
