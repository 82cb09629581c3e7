from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Tuple

from .enums import Algorithm, RouteStatus, WeightDimension
from .errors import InvalidChoiceError
from .types import CityPath


@dataclass(frozen=True)
class RouteResult:
    """Outcome of one shortest-path computation."""

    status: RouteStatus
    algorithm: Algorithm
    dimension: WeightDimension
    path: CityPath = ()
    distance: float = math.inf

    @property
    def found(self) -> bool:
        return self.status is RouteStatus.FOUND

    @property
    def hops(self) -> int:
        return max(len(self.path) - 1, 0)

    @classmethod
    def found_path(
        cls,
        algorithm: Algorithm,
        dimension: WeightDimension,
        path: CityPath,
        distance: float,
    ) -> "RouteResult":
        return cls(RouteStatus.FOUND, algorithm, dimension, tuple(path), distance)

    @classmethod
    def unreachable(cls, algorithm: Algorithm, dimension: WeightDimension) -> "RouteResult":
        return cls(RouteStatus.UNREACHABLE, algorithm, dimension)

    @classmethod
    def negative_cycle(cls, algorithm: Algorithm, dimension: WeightDimension) -> "RouteResult":
        return cls(RouteStatus.NEGATIVE_CYCLE, algorithm, dimension, distance=-math.inf)


@dataclass(frozen=True)
class AlgorithmChoice:
    """An algorithm paired with the weight dimension it optimizes."""

    algorithm: Algorithm
    dimension: WeightDimension

    def __post_init__(self) -> None:
        if self.algorithm is Algorithm.BFS and self.dimension is not WeightDimension.HOPS:
            raise InvalidChoiceError("Breadth-first search only minimizes hops")
        if self.algorithm is not Algorithm.BFS and self.dimension is WeightDimension.HOPS:
            raise InvalidChoiceError(f"{self.algorithm.label} needs a time or cost dimension")

    @property
    def label(self) -> str:
        return f"{self.algorithm.label} ({self.dimension.value})"


PQ_TIME = AlgorithmChoice(Algorithm.PRIORITY_QUEUE, WeightDimension.TIME)
RADIX_TIME = AlgorithmChoice(Algorithm.RADIX_HEAP, WeightDimension.TIME)
PQ_COST = AlgorithmChoice(Algorithm.PRIORITY_QUEUE, WeightDimension.COST)
RADIX_COST = AlgorithmChoice(Algorithm.RADIX_HEAP, WeightDimension.COST)
BELLMAN_FORD_COST = AlgorithmChoice(Algorithm.BELLMAN_FORD, WeightDimension.COST)
BFS_HOPS = AlgorithmChoice(Algorithm.BFS, WeightDimension.HOPS)

ALGORITHM_CHOICES: Tuple[AlgorithmChoice, ...] = (
    PQ_TIME,
    RADIX_TIME,
    PQ_COST,
    RADIX_COST,
    BELLMAN_FORD_COST,
    BFS_HOPS,
)


def choice_by_number(number: int) -> AlgorithmChoice:
    """Return the menu choice numbered from 1."""

    if not 1 <= number <= len(ALGORITHM_CHOICES):
        raise InvalidChoiceError(
            f"Choice must be between 1 and {len(ALGORITHM_CHOICES)}, got {number}"
        )
    return ALGORITHM_CHOICES[number - 1]


@dataclass
class TimedRun:
    """One timed invocation of an algorithm."""

    choice: AlgorithmChoice
    result: RouteResult | None
    elapsed_ns: int
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class AverageRuntime:
    """Mean runtime over repeated invocations of one choice."""

    choice: AlgorithmChoice
    samples_ns: List[int] = field(default_factory=list)
    mean_ns: int | None = None
    error: str | None = None


@dataclass
class Comparison:
    """Timings of several algorithms on the same query."""

    kind: str
    runs: List[TimedRun]
    verdict: str
