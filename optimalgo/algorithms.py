"""Shortest-path algorithms over a :class:`~optimalgo.graph.Graph`.

All four share one contract: given a graph, two city names and a weight
dimension, return a :class:`RouteResult`. An unreachable destination or a
negative cycle is a result status, not an exception.
"""

from __future__ import annotations

import heapq
import itertools
import math
from collections import deque
from typing import Dict, List, Tuple

from .enums import Algorithm, WeightDimension
from .errors import NegativeWeightError
from .graph import Graph, neighbor_weight
from .radix_heap import RadixHeap
from .results import AlgorithmChoice, RouteResult
from .types import City


def _check_weighted(graph: Graph, dimension: WeightDimension, algorithm: Algorithm) -> None:
    if dimension is WeightDimension.HOPS:
        raise ValueError(f"{algorithm.label} needs a time or cost dimension")
    if graph.has_negative_weights(dimension):
        raise NegativeWeightError(
            f"{algorithm.label} requires non-negative {dimension.value} weights"
        )


def _build_path(previous: Dict[City, City | None], destination: City) -> Tuple[City, ...]:
    path: List[City] = []
    node: City | None = destination
    while node is not None:
        path.append(node)
        node = previous[node]
    path.reverse()
    return tuple(path)


def dijkstra_priority_queue(
    graph: Graph,
    source: City,
    destination: City,
    dimension: WeightDimension = WeightDimension.TIME,
) -> RouteResult:
    """Dijkstra with a binary heap; equal distances pop in discovery order."""

    algorithm = Algorithm.PRIORITY_QUEUE
    graph.require(source)
    graph.require(destination)
    _check_weighted(graph, dimension, algorithm)

    distances: Dict[City, float] = {source: 0.0}
    previous: Dict[City, City | None] = {source: None}
    settled = set()
    counter = itertools.count()
    pq: List[Tuple[float, int, City]] = [(0.0, next(counter), source)]

    while pq:
        distance, _, node = heapq.heappop(pq)
        if node in settled:
            continue
        settled.add(node)
        if node == destination:
            return RouteResult.found_path(
                algorithm, dimension, _build_path(previous, destination), distance
            )
        for neighbor in graph.neighbors(node):
            target = neighbor[0]
            if target in settled:
                continue
            candidate = distance + neighbor_weight(neighbor, dimension)
            if candidate < distances.get(target, math.inf):
                distances[target] = candidate
                previous[target] = node
                heapq.heappush(pq, (candidate, next(counter), target))

    return RouteResult.unreachable(algorithm, dimension)


def dijkstra_radix_heap(
    graph: Graph,
    source: City,
    destination: City,
    dimension: WeightDimension = WeightDimension.TIME,
) -> RouteResult:
    """Dijkstra with a monotone radix heap in place of the binary heap."""

    algorithm = Algorithm.RADIX_HEAP
    graph.require(source)
    graph.require(destination)
    _check_weighted(graph, dimension, algorithm)

    distances: Dict[City, float] = {source: 0.0}
    previous: Dict[City, City | None] = {source: None}
    settled = set()
    heap = RadixHeap()
    heap.push(0.0, source)

    while heap:
        distance, node = heap.pop()
        if node in settled or distance > distances[node]:
            continue
        settled.add(node)
        if node == destination:
            return RouteResult.found_path(
                algorithm, dimension, _build_path(previous, destination), distance
            )
        for neighbor in graph.neighbors(node):
            target = neighbor[0]
            if target in settled:
                continue
            candidate = distance + neighbor_weight(neighbor, dimension)
            if candidate < distances.get(target, math.inf):
                distances[target] = candidate
                previous[target] = node
                heap.push(candidate, target)

    return RouteResult.unreachable(algorithm, dimension)


def bellman_ford(
    graph: Graph,
    source: City,
    destination: City,
    dimension: WeightDimension = WeightDimension.COST,
) -> RouteResult:
    """Relax every edge up to |V|-1 times; tolerate negative weights.

    A further successful relaxation after that means a negative cycle is
    reachable from ``source`` and no distance is reported.
    """

    algorithm = Algorithm.BELLMAN_FORD
    graph.require(source)
    graph.require(destination)
    if dimension is WeightDimension.HOPS:
        raise ValueError(f"{algorithm.label} needs a time or cost dimension")

    distances: Dict[City, float] = {source: 0.0}
    previous: Dict[City, City | None] = {source: None}
    edges = [(e.source, e.target, Graph.weight(e, dimension)) for e in graph.edges]

    for _ in range(len(graph) - 1):
        updated = False
        for u, v, w in edges:
            if u not in distances:
                continue
            candidate = distances[u] + w
            if candidate < distances.get(v, math.inf):
                distances[v] = candidate
                previous[v] = u
                updated = True
        if not updated:
            break

    for u, v, w in edges:
        if u in distances and distances[u] + w < distances.get(v, math.inf):
            return RouteResult.negative_cycle(algorithm, dimension)

    if destination not in distances:
        return RouteResult.unreachable(algorithm, dimension)
    return RouteResult.found_path(
        algorithm, dimension, _build_path(previous, destination), distances[destination]
    )


def breadth_first_search(
    graph: Graph,
    source: City,
    destination: City,
    dimension: WeightDimension = WeightDimension.HOPS,
) -> RouteResult:
    """Fewest-hops route; both edge weights are ignored."""

    algorithm = Algorithm.BFS
    graph.require(source)
    graph.require(destination)

    previous: Dict[City, City | None] = {source: None}
    if source == destination:
        return RouteResult.found_path(algorithm, WeightDimension.HOPS, (source,), 0)

    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbor in graph.neighbors(node):
            target = neighbor[0]
            if target in previous:
                continue
            previous[target] = node
            if target == destination:
                path = _build_path(previous, destination)
                return RouteResult.found_path(algorithm, WeightDimension.HOPS, path, len(path) - 1)
            queue.append(target)

    return RouteResult.unreachable(algorithm, WeightDimension.HOPS)


ALGORITHMS = {
    Algorithm.PRIORITY_QUEUE: dijkstra_priority_queue,
    Algorithm.RADIX_HEAP: dijkstra_radix_heap,
    Algorithm.BELLMAN_FORD: bellman_ford,
    Algorithm.BFS: breadth_first_search,
}


def run_algorithm(
    graph: Graph, choice: AlgorithmChoice, source: City, destination: City
) -> RouteResult:
    return ALGORITHMS[choice.algorithm](graph, source, destination, choice.dimension)
