"""
Timing Chart Generator
======================
Draws charts from the CSV written by benchmark_solvers.py.
Run:  python generate_timing_charts.py --input benchmark_results.csv
Output: timing_charts/ folder with 2 PNG files.
"""

import os
import csv
import argparse
import numpy as np
from collections import defaultdict
from typing import Dict, List

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for file output
import matplotlib.pyplot as plt

# ─────────────────────────────────────────────────────────────
# Color Palette & Styling
# ─────────────────────────────────────────────────────────────
COLORS = {
    1: "#FF6B6B",   # Coral Red
    2: "#339AF0",   # Sky Blue
}
CUMULATIVE_COLOR = "#51CF66"
BG_COLOR = "#1A1B26"
CARD_COLOR = "#24283B"
TEXT_COLOR = "#C0CAF5"
GRID_COLOR = "#414868"


def setup_style():
    """Apply a dark matplotlib style."""
    plt.rcParams.update({
        "figure.facecolor": BG_COLOR,
        "axes.facecolor": CARD_COLOR,
        "axes.edgecolor": GRID_COLOR,
        "axes.labelcolor": TEXT_COLOR,
        "axes.titleweight": "bold",
        "text.color": TEXT_COLOR,
        "xtick.color": TEXT_COLOR,
        "ytick.color": TEXT_COLOR,
        "grid.color": GRID_COLOR,
        "grid.alpha": 0.3,
        "font.size": 12,
        "legend.facecolor": CARD_COLOR,
        "legend.edgecolor": GRID_COLOR,
        "figure.dpi": 150,
        "savefig.dpi": 150,
        "savefig.bbox": "tight",
        "savefig.facecolor": BG_COLOR,
    })


def load_results(path: str) -> Dict[int, Dict[int, float]]:
    """Mean time in ms, keyed by day then part."""
    timings: Dict[int, Dict[int, float]] = defaultdict(dict)
    with open(path, newline="") as f:
        for row in csv.DictReader(f):
            timings[int(row["day"])][int(row["part"])] = float(row["mean_time"]) * 1000
    return timings


def chart_per_day(timings, out_dir):
    """Grouped bar chart: mean time of each part per day (log scale)."""
    days = sorted(timings)
    x = np.arange(len(days))
    width = 0.38

    fig, ax = plt.subplots(figsize=(12, 6))
    for i, part in enumerate((1, 2)):
        values = [timings[d].get(part, 0.0) for d in days]
        ax.bar(x + i * width, values, width, label=f"Part {part}",
               color=COLORS[part], edgecolor="none", alpha=0.9, zorder=3)

    ax.set_xticks(x + width / 2)
    ax.set_xticklabels([str(d) for d in days])
    ax.set_xlabel("Day")
    ax.set_ylabel("Mean Time (ms)")
    ax.set_yscale("log")
    ax.set_title("Solve Time per Day", fontsize=16, pad=12)
    ax.legend(loc="upper left")
    ax.grid(axis="y", zorder=0)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)

    fig.savefig(os.path.join(out_dir, "1_time_per_day.png"))
    plt.close(fig)
    print("  Chart 1: Time per Day")


def chart_cumulative(timings, out_dir):
    """Line chart: running total of the solve time across days."""
    days = sorted(timings)
    totals: List[float] = [sum(timings[d].values()) for d in days]
    cumulative = np.cumsum(totals)

    fig, ax = plt.subplots(figsize=(12, 6))
    ax.plot(days, cumulative, "o-", color=CUMULATIVE_COLOR,
            linewidth=2.5, markersize=7, zorder=3)
    ax.fill_between(days, cumulative, alpha=0.15, color=CUMULATIVE_COLOR)

    ax.set_xticks(days)
    ax.set_xlabel("Day")
    ax.set_ylabel("Cumulative Time (ms)")
    ax.set_title("Cumulative Runtime", fontsize=16, pad=12)
    ax.grid(True, zorder=0)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)

    fig.savefig(os.path.join(out_dir, "2_cumulative_time.png"))
    plt.close(fig)
    print("  Chart 2: Cumulative Runtime")


def main():
    parser = argparse.ArgumentParser(description="Generate solver timing charts")
    parser.add_argument("--input", type=str, default="benchmark_results.csv",
                        help="CSV written by benchmark_solvers.py")
    parser.add_argument("--out", type=str, default="timing_charts",
                        help="Output directory")
    args = parser.parse_args()

    timings = load_results(args.input)
    if not timings:
        print(f"No rows in {args.input}, nothing to draw.")
        return

    os.makedirs(args.out, exist_ok=True)
    setup_style()

    print(f"Generating charts for {len(timings)} days...")
    chart_per_day(timings, args.out)
    chart_cumulative(timings, args.out)
    print(f"Charts saved to {os.path.abspath(args.out)}")


if __name__ == "__main__":
    main()
