from __future__ import annotations

import logging
import time
from typing import Callable, Mapping, Sequence

from .algorithms import ALGORITHMS
from .benchmark import Clock, determine_fastest, mean_ns, timed
from .config import BenchmarkConfig
from .enums import Algorithm, WeightDimension
from .errors import NegativeWeightError, UnknownCityError, ValidationError
from .graph import Graph
from .results import (
    BELLMAN_FORD_COST,
    BFS_HOPS,
    PQ_COST,
    PQ_TIME,
    RADIX_COST,
    RADIX_TIME,
    AlgorithmChoice,
    AverageRuntime,
    Comparison,
    RouteResult,
    TimedRun,
    choice_by_number,
)
from .types import City

logger = logging.getLogger(__name__)

RouteFunction = Callable[[Graph, City, City, WeightDimension], RouteResult]


def validate_endpoints(graph: Graph, source: City, destination: City) -> None:
    if not source or not destination:
        raise ValidationError(
            "City names cannot be empty. Please enter valid source and destination."
        )
    for city in (source, destination):
        if not graph.contains_city(city):
            raise UnknownCityError(city)


class RouteService:
    """Runs route queries over one graph and times every algorithm call.

    Endpoints are validated before any algorithm executes, so a bad query
    raises :class:`ValidationError` and produces no partial results. Failures
    inside a single algorithm call are recorded on its :class:`TimedRun`
    and never stop sibling runs of the same comparison.
    """

    def __init__(
        self,
        graph: Graph,
        config: BenchmarkConfig | None = None,
        algorithms: Mapping[Algorithm, RouteFunction] | None = None,
        clock: Clock = time.perf_counter_ns,
    ) -> None:
        self.graph = graph
        self.config = config or BenchmarkConfig()
        self._algorithms = dict(ALGORITHMS)
        if algorithms:
            self._algorithms.update(algorithms)
        self._clock = clock

    def _run(self, choice: AlgorithmChoice, source: City, destination: City) -> TimedRun:
        func = self._algorithms[choice.algorithm]
        try:
            result, elapsed = timed(
                lambda: func(self.graph, source, destination, choice.dimension), self._clock
            )
        except NegativeWeightError as exc:
            logger.warning("%s rejected the query: %s", choice.label, exc)
            return TimedRun(choice, None, 0, f"Error: {exc}")
        except Exception as exc:
            logger.error(
                "Unexpected error while running %s from %s to %s: %s",
                choice.label,
                source,
                destination,
                exc,
            )
            return TimedRun(
                choice,
                None,
                0,
                f"An unexpected error occurred while running {choice.label}: {exc}",
            )
        logger.debug("%s %s -> %s took %d ns", choice.label, source, destination, elapsed)
        return TimedRun(choice, result, elapsed)

    def find_route(self, choice: AlgorithmChoice, source: City, destination: City) -> TimedRun:
        validate_endpoints(self.graph, source, destination)
        return self._run(choice, source, destination)

    def find_fastest_route(self, source: City, destination: City) -> TimedRun:
        return self.find_route(PQ_TIME, source, destination)

    def find_cheapest_route(self, source: City, destination: City) -> TimedRun:
        return self.find_route(RADIX_COST, source, destination)

    def find_most_direct_route(self, source: City, destination: City) -> TimedRun:
        return self.find_route(BFS_HOPS, source, destination)

    def measure_average_runtime(
        self, choice: AlgorithmChoice | int, source: City, destination: City
    ) -> AverageRuntime:
        """Run one choice ``config.repetitions`` times back to back and average the samples.

        ``choice`` may be an :class:`AlgorithmChoice` or its menu number (1-6).
        A failing invocation stops the measurement and leaves ``mean_ns`` unset.
        """

        if isinstance(choice, int):
            choice = choice_by_number(choice)
        validate_endpoints(self.graph, source, destination)

        average = AverageRuntime(choice)
        for _ in range(self.config.repetitions):
            run = self._run(choice, source, destination)
            if not run.ok:
                average.error = run.error
                return average
            average.samples_ns.append(run.elapsed_ns)
        average.mean_ns = mean_ns(average.samples_ns)
        return average

    def compare(
        self,
        kind: str,
        choices: Sequence[AlgorithmChoice],
        source: City,
        destination: City,
    ) -> Comparison:
        validate_endpoints(self.graph, source, destination)
        runs = [self._run(choice, source, destination) for choice in choices]
        return Comparison(kind, runs, determine_fastest(runs))

    def compare_fastest_routes(self, source: City, destination: City) -> Comparison:
        return self.compare("fastest", (PQ_TIME, RADIX_TIME), source, destination)

    def compare_cheapest_routes(self, source: City, destination: City) -> Comparison:
        return self.compare(
            "cheapest", (PQ_COST, RADIX_COST, BELLMAN_FORD_COST), source, destination
        )
