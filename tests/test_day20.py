import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from advent.solvers import day20
from advent.solvers.solver_errors import InputError, NoSolutionError

SAMPLE = ["1", "2", "-3", "3", "-2", "0", "4"]


def from_zero(numbers):
    zero = numbers.index(0)
    return numbers[zero:] + numbers[:zero]


class TestGrovePositioningSystem(unittest.TestCase):

    def test_mix_one_round(self):
        mixed = day20.mix(day20.parse_numbers(SAMPLE))
        self.assertEqual(from_zero(mixed), [0, 3, -2, 1, 2, -3, 4])

    def test_grove_coordinates(self):
        self.assertEqual(day20.grove_coordinates([1, 2, -3, 4, 0, 3, -2]), 3)

    def test_part1_sample(self):
        self.assertEqual(day20.part1(SAMPLE), 3)

    def test_part2_sample(self):
        self.assertEqual(day20.part2(SAMPLE), 1623178306)

    def test_single_number(self):
        self.assertEqual(day20.mix([0]), [0])

    def test_missing_zero(self):
        with self.assertRaises(NoSolutionError):
            day20.part1(["1", "2", "3"])

    def test_empty_input(self):
        with self.assertRaises(InputError):
            day20.part1([])


if __name__ == '__main__':
    unittest.main()
