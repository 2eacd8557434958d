import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from advent.inputs import to_lines
from advent.solvers import day18
from advent.solvers.solver_errors import InputError

SAMPLE = """\
2,2,2
1,2,2
3,2,2
2,1,2
2,3,2
2,2,1
2,2,3
2,2,4
2,2,6
1,2,5
3,2,5
2,1,5
2,3,5
"""


class TestBoilingBoulders(unittest.TestCase):

    def test_two_adjacent_cubes(self):
        self.assertEqual(day18.part1(["1,1,1", "2,1,1"]), 10)

    def test_part1_sample(self):
        self.assertEqual(day18.part1(to_lines(SAMPLE)), 64)

    def test_part2_sample(self):
        self.assertEqual(day18.part2(to_lines(SAMPLE)), 58)

    def test_enclosed_pocket_excluded(self):
        # Hollow 3x3x3 shell around a single air cube
        shell = [
            f"{x},{y},{z}"
            for x in range(3) for y in range(3) for z in range(3)
            if (x, y, z) != (1, 1, 1)
        ]
        self.assertEqual(day18.part1(shell), 54 + 6)
        self.assertEqual(day18.part2(shell), 54)

    def test_empty_input(self):
        with self.assertRaises(InputError):
            day18.part1([])

    def test_invalid_cube(self):
        with self.assertRaises(InputError):
            day18.part1(["1,2"])


if __name__ == '__main__':
    unittest.main()
