import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import contextlib
import io
import tempfile

from advent import __main__ as cli
from advent.solver_runner import DayResult, PartMetrics, format_answer, load_solver, print_result, solve_day
from advent.solvers.solver_errors import PuzzleError


class TestSolverRunner(unittest.TestCase):

    def test_load_solver(self):
        module = load_solver(4)
        self.assertEqual(module.DAY, 4)
        self.assertTrue(callable(module.part1))

    def test_unknown_day(self):
        with self.assertRaises(PuzzleError):
            load_solver(26)

    def test_solve_day_with_lines(self):
        result = solve_day(6, lines=["mjqjpqmgbljsphdztnvjfqwrcgsmlb"])
        self.assertEqual(result.day, 6)
        self.assertEqual(result.part1.answer, 7)
        self.assertEqual(result.part2.answer, 19)
        self.assertGreaterEqual(result.total_time, 0.0)

    def test_solve_day_reads_input_dir(self):
        with tempfile.TemporaryDirectory() as tmp:
            with open(os.path.join(tmp, "day4.txt"), "w") as f:
                f.write("2-8,3-7\n5-7,7-9\n")
            result = solve_day(4, input_dir=tmp)
        self.assertEqual([p.answer for p in result.parts], [1, 2])

    def test_missing_input(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(OSError):
                solve_day(1, input_dir=tmp)

    def test_format_answer(self):
        self.assertEqual(format_answer(42), "42")
        self.assertEqual(format_answer("##\n.."), "\n##\n..")

    def test_print_result(self):
        result = DayResult(3, PartMetrics(1, 157, 0.001), PartMetrics(2, 70, 0.002))
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            print_result(result)
        self.assertEqual(out.getvalue(), "Part 1: 157\nPart 2: 70\n")


class TestCommandLine(unittest.TestCase):

    def test_solves_day(self):
        with tempfile.TemporaryDirectory() as tmp:
            with open(os.path.join(tmp, "day2.txt"), "w") as f:
                f.write("A Y\nB X\nC Z\n")
            out = io.StringIO()
            with contextlib.redirect_stdout(out):
                status = cli.main(["2", "--input-dir", tmp])
        self.assertEqual(status, 0)
        self.assertEqual(out.getvalue(), "Part 1: 15\nPart 2: 12\n")

    def test_error_exit_status(self):
        with tempfile.TemporaryDirectory() as tmp:
            with open(os.path.join(tmp, "day6.txt"), "w") as f:
                f.write("aaaa\n")
            err = io.StringIO()
            with contextlib.redirect_stderr(err):
                status = cli.main(["6", "--input-dir", tmp])
        self.assertEqual(status, 1)
        self.assertIn("NoSolutionError(", err.getvalue())
        self.assertIn("day=6", err.getvalue())


if __name__ == '__main__':
    unittest.main()
