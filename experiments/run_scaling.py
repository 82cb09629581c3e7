"""Time every algorithm choice over growing random networks and export a CSV."""

from __future__ import annotations

import argparse
import csv
import random
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from optimalgo.benchmark import summarize_samples
from optimalgo.config import BenchmarkConfig, NetworkConfig
from optimalgo.network import build_network
from optimalgo.results import ALGORITHM_CHOICES
from optimalgo.service import RouteService


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run runtime scaling experiments")
    parser.add_argument("--sizes", default="50,100,200,400,800")
    parser.add_argument("--degree", type=int, default=4)
    parser.add_argument("--topology", default="random-regular")
    parser.add_argument("--repetitions", type=int, default=10)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("outputs/scaling_summary.csv"),
        help="CSV output path",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    sizes = [int(s) for s in args.sizes.split(",") if s]
    rows = []
    for size in sizes:
        network = NetworkConfig(num_cities=size, degree=args.degree, topology=args.topology)
        graph = build_network(network, random.Random(args.seed))
        service = RouteService(graph, BenchmarkConfig(repetitions=args.repetitions))
        source, destination = graph.cities[0], graph.cities[-1]

        for number, choice in enumerate(ALGORITHM_CHOICES, start=1):
            average = service.measure_average_runtime(choice, source, destination)
            if average.mean_ns is None:
                print(f"n={size} {choice.label}: {average.error}")
                continue
            stats = summarize_samples(average.samples_ns)
            rows.append(
                {
                    "cities": size,
                    "edges": graph.edge_count,
                    "choice": number,
                    "algorithm": choice.algorithm.value,
                    "dimension": choice.dimension.value,
                    "mean_ns": average.mean_ns,
                    "median_ns": stats["median"],
                    "min_ns": stats["min"],
                    "max_ns": stats["max"],
                }
            )
            print(f"n={size} {choice.label}: mean={average.mean_ns} ns")

    if not rows:
        raise SystemExit("No successful measurements.")
    args.output.parent.mkdir(parents=True, exist_ok=True)
    with args.output.open("w", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=rows[0].keys())
        writer.writeheader()
        writer.writerows(rows)


if __name__ == "__main__":
    main()
