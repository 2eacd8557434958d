
import sys
import os
import time
import csv
import argparse
from typing import Dict, Any, List

# Add project root to path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from advent.inputs import input_path, read_lines
from advent.solver_runner import AVAILABLE_DAYS, load_solver

FIELDS = ["day", "part", "answer", "mean_time", "min_time"]


def benchmark_day(day: int, lines: List[str], repeat: int) -> List[Dict[str, Any]]:
    """
    Runs both parts of a day `repeat` times and keeps the timings.
    """
    solver = load_solver(day)
    rows = []
    for part, solve in ((1, solver.part1), (2, solver.part2)):
        times = []
        answer = None
        for _ in range(repeat):
            start_time = time.perf_counter()
            answer = solve(lines)
            times.append(time.perf_counter() - start_time)

        rows.append({
            "day": day,
            "part": part,
            # Day 10 part 2 renders a screen; keep CSV rows on one line
            "answer": str(answer).replace("\n", "|"),
            "mean_time": sum(times) / len(times),
            "min_time": min(times),
        })
    return rows


def main():
    parser = argparse.ArgumentParser(description="Benchmark the daily solvers")
    parser.add_argument("--repeat", type=int, default=3, help="Runs per part")
    parser.add_argument("--input-dir", type=str, default=None, help="Directory holding dayN.txt")
    parser.add_argument("--output", type=str, default="benchmark_results.csv", help="Output CSV file")

    args = parser.parse_args()
    repeat = max(1, args.repeat)

    days = [d for d in AVAILABLE_DAYS if input_path(d, args.input_dir).is_file()]
    if not days:
        print("No puzzle inputs found, nothing to benchmark.")
        return

    print(f"Starting Benchmark: {len(days)} days, {repeat} runs per part")

    results = []
    for i, day in enumerate(days):
        print(f"Running Day {day} ({i + 1}/{len(days)})...", end="\r")
        lines = read_lines(input_path(day, args.input_dir))
        results.extend(benchmark_day(day, lines, repeat))

    print(f"\nBenchmark Complete!")

    with open(args.output, "w", newline="") as f:
        dict_writer = csv.DictWriter(f, fieldnames=FIELDS)
        dict_writer.writeheader()
        dict_writer.writerows(results)

    print(f"Results saved to {args.output}")

    # Print Summary Table
    print("\nSummary Statistics:")
    print(f"{'Day':<5} | {'Part':<4} | {'Mean (ms)':>10} | {'Min (ms)':>10}")
    print("-" * 40)
    for r in results:
        print(f"{r['day']:<5} | {r['part']:<4} | {r['mean_time'] * 1000:>10.2f} | {r['min_time'] * 1000:>10.2f}")

    total = sum(r["mean_time"] for r in results)
    print("-" * 40)
    print(f"{'Total':<12} | {total * 1000:>10.2f} |")


if __name__ == "__main__":
    main()
