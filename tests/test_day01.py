import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from advent.inputs import to_lines
from advent.solvers import day01
from advent.solvers.solver_errors import InputError

SAMPLE = """\
1000
2000
3000

4000

5000
6000

7000
8000
9000

10000
"""


class TestCalorieCounting(unittest.TestCase):

    def test_elf_totals_sorted_descending(self):
        self.assertEqual(day01.elf_totals(to_lines(SAMPLE)), [24000, 11000, 10000, 6000, 4000])

    def test_part1_sample(self):
        self.assertEqual(day01.part1(to_lines(SAMPLE)), 24000)

    def test_part2_sample(self):
        self.assertEqual(day01.part2(to_lines(SAMPLE)), 45000)

    def test_bad_number(self):
        with self.assertRaises(InputError) as ctx:
            day01.part1(["100", "abc"])
        self.assertIsInstance(ctx.exception.__cause__, ValueError)

    def test_empty_input(self):
        with self.assertRaises(InputError):
            day01.part1([])


if __name__ == '__main__':
    unittest.main()
