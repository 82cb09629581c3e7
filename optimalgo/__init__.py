"""Multi-criteria route computation and shortest-path benchmarking."""

__version__ = "1.0.0"

from .algorithms import (
    bellman_ford,
    breadth_first_search,
    dijkstra_priority_queue,
    dijkstra_radix_heap,
    run_algorithm,
)
from .config import BenchmarkConfig, NetworkConfig
from .enums import Algorithm, RouteStatus, WeightDimension
from .graph import Edge, Graph
from .results import ALGORITHM_CHOICES, AlgorithmChoice, RouteResult
from .service import RouteService

__all__ = [
    "ALGORITHM_CHOICES",
    "Algorithm",
    "AlgorithmChoice",
    "BenchmarkConfig",
    "Edge",
    "Graph",
    "NetworkConfig",
    "RouteResult",
    "RouteService",
    "RouteStatus",
    "WeightDimension",
    "bellman_ford",
    "breadth_first_search",
    "dijkstra_priority_queue",
    "dijkstra_radix_heap",
    "run_algorithm",
]
