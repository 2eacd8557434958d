import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from advent.solvers import day05
from advent.solvers.day05 import Step
from advent.solvers.solver_errors import InputError

# Leading spaces matter in the drawing
SAMPLE = [
    "    [D]    ",
    "[N] [C]    ",
    "[Z] [M] [P]",
    " 1   2   3 ",
    "",
    "move 1 from 2 to 1",
    "move 3 from 1 to 3",
    "move 2 from 2 to 1",
    "move 1 from 1 to 2",
]


class TestSupplyStacks(unittest.TestCase):

    def test_parse_crate_arrangement(self):
        stacks, steps = day05.parse_crate_arrangement_and_steps(SAMPLE)
        self.assertEqual(stacks, [["Z", "N"], ["M", "C", "D"], ["P"]])
        self.assertEqual(steps[0], Step(1, 2, 1))
        self.assertEqual(len(steps), 4)

    def test_trailing_spaces_optional(self):
        trimmed = [line.rstrip() for line in SAMPLE]
        self.assertEqual(day05.part1(trimmed), "CMZ")

    def test_part1_sample(self):
        self.assertEqual(day05.part1(SAMPLE), "CMZ")

    def test_part2_sample(self):
        self.assertEqual(day05.part2(SAMPLE), "MCD")

    def test_pop_from_empty_stack(self):
        lines = SAMPLE[:5] + ["move 4 from 3 to 1"]
        with self.assertRaises(InputError):
            day05.part1(lines)
        with self.assertRaises(InputError):
            day05.part2(lines)

    def test_empty_stack_at_end(self):
        lines = SAMPLE[:5] + ["move 1 from 3 to 1"]
        with self.assertRaises(InputError):
            day05.part1(lines)

    def test_invalid_step(self):
        lines = SAMPLE[:5] + ["move one from 1 to 2"]
        with self.assertRaises(InputError):
            day05.part1(lines)


if __name__ == '__main__':
    unittest.main()
