"""Plot the CSV produced by run_scaling.py."""

from __future__ import annotations

import argparse
import csv
from collections import defaultdict
from pathlib import Path

import matplotlib.pyplot as plt


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Plot mean runtime against network size")
    parser.add_argument(
        "--input",
        type=Path,
        default=Path("outputs/scaling_summary.csv"),
        help="Input CSV file",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("outputs/scaling_plot.png"),
        help="Output image path",
    )
    return parser.parse_args()


def read_rows(path: Path):
    with path.open("r", newline="") as handle:
        return list(csv.DictReader(handle))


def main() -> None:
    args = parse_args()
    rows = read_rows(args.input)
    if not rows:
        raise SystemExit("No rows found in input CSV.")

    series = defaultdict(list)
    for row in rows:
        label = f"{row['algorithm']} ({row['dimension']})"
        series[label].append((int(row["cities"]), float(row["mean_ns"]) / 1_000_000))

    plt.figure(figsize=(8, 5))
    for label, points in sorted(series.items()):
        points.sort()
        plt.plot([p[0] for p in points], [p[1] for p in points], marker="o", label=label)
    plt.xlabel("Cities")
    plt.ylabel("Mean runtime (ms)")
    plt.title("Route query runtime by algorithm")
    plt.grid(True, linestyle="--", alpha=0.4)
    plt.legend()

    args.output.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(args.output)


if __name__ == "__main__":
    main()
