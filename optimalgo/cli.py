"""Command line driver for route queries and algorithm benchmarks.

Each ``--query SOURCE DESTINATION`` pair is canonicalized, validated and
run in the selected mode. A rejected or failing query is reported and the
remaining queries still run.
"""

from __future__ import annotations

import argparse
import logging
import random
import string
import sys
from typing import List, Sequence

from .config import BenchmarkConfig, NetworkConfig
from .enums import Topology
from .errors import ValidationError
from .formatting import format_average, format_comparison, format_timed_run
from .graph import Graph
from .network import build_network, sample_city_graph
from .service import RouteService

logger = logging.getLogger(__name__)

MODES = ["fastest", "cheapest", "direct", "compare-fastest", "compare-cheapest", "average"]


def canonical_city_name(raw: str, short_code_length: int = 3) -> str:
    """Trim and capitalize each word of a city name; short names become upper-case codes."""

    name = (raw or "").strip().casefold()
    if not name:
        raise ValidationError(
            "City names cannot be empty. Please enter valid source and destination."
        )
    if len(name) <= short_code_length:
        return name.upper()
    return string.capwords(name)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Multi-criteria route finder and benchmark")
    parser.add_argument("--mode", choices=MODES, default="fastest")
    parser.add_argument(
        "--choice",
        type=int,
        default=1,
        help="Algorithm for --mode average: 1 PQ/time, 2 radix/time, 3 PQ/cost, "
        "4 radix/cost, 5 Bellman-Ford/cost, 6 BFS/hops",
    )
    parser.add_argument(
        "--query",
        nargs=2,
        action="append",
        metavar=("SOURCE", "DESTINATION"),
        default=[],
        help="Route endpoints; may be repeated",
    )
    parser.add_argument("--graph", choices=["sample", "random"], default="sample")
    parser.add_argument("--cities", type=int, default=50)
    parser.add_argument("--degree", type=int, default=4)
    parser.add_argument(
        "--topology",
        choices=[t.value for t in Topology],
        default="random-regular",
    )
    parser.add_argument(
        "--rewire-prob",
        type=float,
        default=0.1,
        help="Small-world rewiring probability",
    )
    parser.add_argument("--directed", action="store_true", help="Generate one-way edges")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--repetitions", type=int, default=10, help="Samples for --mode average")
    parser.add_argument("--list-cities", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def build_graph(args: argparse.Namespace) -> Graph:
    if args.graph == "sample":
        return sample_city_graph()
    config = NetworkConfig(
        num_cities=args.cities,
        degree=args.degree,
        topology=args.topology,
        rewire_prob=args.rewire_prob,
        directed=args.directed,
    )
    return build_network(config, random.Random(args.seed))


def run_query(service: RouteService, mode: str, choice: int, source: str, destination: str) -> str:
    threshold = service.config.millisecond_threshold_ns
    if mode == "fastest":
        return format_timed_run(service.find_fastest_route(source, destination), threshold)
    if mode == "cheapest":
        return format_timed_run(service.find_cheapest_route(source, destination), threshold)
    if mode == "direct":
        return format_timed_run(service.find_most_direct_route(source, destination), threshold)
    if mode == "compare-fastest":
        return format_comparison(service.compare_fastest_routes(source, destination), threshold)
    if mode == "compare-cheapest":
        return format_comparison(service.compare_cheapest_routes(source, destination), threshold)
    if mode == "average":
        return format_average(
            service.measure_average_runtime(choice, source, destination), threshold
        )
    raise ValueError(f"Unknown mode: {mode}")


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = BenchmarkConfig(repetitions=args.repetitions)
    graph = build_graph(args)
    service = RouteService(graph, config)

    if args.list_cities:
        print(", ".join(sorted(graph.cities)))

    failures = 0
    outputs: List[str] = []
    for raw_source, raw_destination in args.query:
        try:
            source = canonical_city_name(raw_source, config.short_code_length)
            destination = canonical_city_name(raw_destination, config.short_code_length)
            outputs.append(run_query(service, args.mode, args.choice, source, destination))
        except ValidationError as exc:
            failures += 1
            outputs.append(f"Error: {exc}")
        except Exception as exc:
            failures += 1
            logger.error("Query %s -> %s failed: %s", raw_source, raw_destination, exc)
            outputs.append(f"An unexpected error occurred: {exc}")
        print(outputs[-1])
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
