import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from advent.inputs import to_lines
from advent.solvers import day11
from advent.solvers.day11 import MonkeyOperation
from advent.solvers.solver_errors import InputError

SAMPLE = """\
Monkey 0:
  Starting items: 79, 98
  Operation: new = old * 19
  Test: divisible by 23
    If true: throw to monkey 2
    If false: throw to monkey 3

Monkey 1:
  Starting items: 54, 65, 75, 74
  Operation: new = old + 6
  Test: divisible by 19
    If true: throw to monkey 2
    If false: throw to monkey 0

Monkey 2:
  Starting items: 79, 60, 97
  Operation: new = old * old
  Test: divisible by 13
    If true: throw to monkey 1
    If false: throw to monkey 3

Monkey 3:
  Starting items: 74
  Operation: new = old + 3
  Test: divisible by 17
    If true: throw to monkey 0
    If false: throw to monkey 1
"""


class TestMonkeyInTheMiddle(unittest.TestCase):

    def test_parse_monkeys(self):
        monkeys = day11.parse_monkeys(to_lines(SAMPLE))
        self.assertEqual(len(monkeys), 4)
        self.assertEqual(list(monkeys[1].items), [54, 65, 75, 74])
        self.assertEqual(monkeys[2].operation, MonkeyOperation("*", None))
        self.assertEqual(monkeys[3].divisor, 17)

    def test_operation(self):
        self.assertEqual(MonkeyOperation.parse("old * old").apply(7), 49)
        self.assertEqual(MonkeyOperation.parse("old + 6").apply(7), 13)

    def test_inspections_after_twenty_rounds(self):
        monkeys = day11.parse_monkeys(to_lines(SAMPLE))
        day11.play_rounds(monkeys, 20, relief=True)
        self.assertEqual([m.inspections for m in monkeys], [101, 95, 7, 105])

    def test_part1_sample(self):
        self.assertEqual(day11.part1(to_lines(SAMPLE)), 10605)

    def test_part2_sample(self):
        self.assertEqual(day11.part2(to_lines(SAMPLE)), 2713310158)

    def test_unknown_target(self):
        lines = to_lines(SAMPLE.replace("throw to monkey 3", "throw to monkey 7"))
        with self.assertRaises(InputError):
            day11.part1(lines)

    def test_truncated_monkey(self):
        with self.assertRaises(InputError):
            day11.part1(to_lines(SAMPLE)[:4])


if __name__ == '__main__':
    unittest.main()
