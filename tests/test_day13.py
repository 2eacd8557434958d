import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from advent.inputs import to_lines
from advent.solvers import day13
from advent.solvers.solver_errors import InputError

SAMPLE = """\
[1,1,3,1,1]
[1,1,5,1,1]

[[1],[2,3,4]]
[[1],4]

[9]
[[8,7,6]]

[[4,4],4,4]
[[4,4],4,4,4]

[7,7,7,7]
[7,7,7]

[]
[3]

[[[]]]
[[]]

[1,[2,[3,[4,[5,6,7]]]],8,9]
[1,[2,[3,[4,[5,6,0]]]],8,9]
"""


class TestPacketParser(unittest.TestCase):

    def test_nested(self):
        self.assertEqual(day13.parse_packet("[1,[2,[3]],[],10]"), [1, [2, [3]], [], 10])

    def test_unbalanced(self):
        with self.assertRaises(InputError):
            day13.parse_packet("[1,2")

    def test_trailing_garbage(self):
        with self.assertRaises(InputError):
            day13.parse_packet("[1]]")

    def test_unexpected_character(self):
        with self.assertRaises(InputError):
            day13.parse_packet("[1,a]")


class TestDistressSignal(unittest.TestCase):

    def test_compare(self):
        self.assertLess(day13.compare([1, 1, 3, 1, 1], [1, 1, 5, 1, 1]), 0)
        self.assertLess(day13.compare([[1], [2, 3, 4]], [[1], 4]), 0)
        self.assertGreater(day13.compare([9], [[8, 7, 6]]), 0)
        self.assertGreater(day13.compare([[[]]], [[]]), 0)
        self.assertEqual(day13.compare([[2]], [2]), 0)

    def test_pair_must_have_two_packets(self):
        with self.assertRaises(InputError):
            day13.part1(["[1]", "[2]", "[3]"])

    def test_part1_sample(self):
        self.assertEqual(day13.part1(to_lines(SAMPLE)), 13)

    def test_part2_sample(self):
        self.assertEqual(day13.part2(to_lines(SAMPLE)), 140)


if __name__ == '__main__':
    unittest.main()
