from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple

import networkx as nx

from .enums import WeightDimension
from .errors import UnknownCityError
from .types import City, Neighbor


@dataclass(frozen=True)
class Edge:
    source: City
    target: City
    time: float
    cost: float

    def reversed(self) -> "Edge":
        return Edge(self.target, self.source, self.time, self.cost)


class Graph:
    """Read-only adjacency structure over named cities.

    Every edge carries two independent weights: ``time`` for the fastest
    route and ``cost`` for the cheapest route. Parallel edges between the
    same pair of cities are kept. When ``directed`` is false each edge is
    also inserted in the reverse direction.
    """

    def __init__(
        self,
        edges: Iterable[Edge],
        directed: bool = True,
        cities: Iterable[City] = (),
    ) -> None:
        self._directed = directed
        adjacency: Dict[City, List[Neighbor]] = {}
        arcs: List[Edge] = []

        for city in cities:
            adjacency.setdefault(city, [])
        for edge in edges:
            pairs = [edge] if directed else [edge, edge.reversed()]
            for arc in pairs:
                adjacency.setdefault(arc.source, []).append((arc.target, arc.time, arc.cost))
                adjacency.setdefault(arc.target, [])
                arcs.append(arc)

        # Frozen so the weight minima below stay valid for the graph's lifetime.
        self._adjacency: Dict[City, Tuple[Neighbor, ...]] = {
            city: tuple(neighbors) for city, neighbors in adjacency.items()
        }
        self._arcs: Tuple[Edge, ...] = tuple(arcs)
        self._min_weight = {
            WeightDimension.TIME: min((a.time for a in arcs), default=0.0),
            WeightDimension.COST: min((a.cost for a in arcs), default=0.0),
        }

    @classmethod
    def from_tuples(
        cls,
        rows: Iterable[Sequence],
        directed: bool = True,
    ) -> "Graph":
        """Build a graph from ``(source, target, time, cost)`` rows."""

        return cls((Edge(s, t, float(tm), float(c)) for s, t, tm, c in rows), directed)

    @classmethod
    def from_networkx(cls, graph: nx.Graph) -> "Graph":
        """Build a graph from networkx edges carrying ``time`` and ``cost`` attributes."""

        edges = [
            Edge(str(u), str(v), float(data["time"]), float(data["cost"]))
            for u, v, data in graph.edges(data=True)
        ]
        return cls(edges, directed=graph.is_directed(), cities=(str(n) for n in graph.nodes))

    def to_networkx(self) -> nx.MultiDiGraph:
        result = nx.MultiDiGraph()
        result.add_nodes_from(self._adjacency)
        for arc in self._arcs:
            result.add_edge(arc.source, arc.target, time=arc.time, cost=arc.cost)
        return result

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def cities(self) -> Tuple[City, ...]:
        return tuple(self._adjacency)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        """All directed arcs, in insertion order."""

        return self._arcs

    @property
    def edge_count(self) -> int:
        return len(self._arcs)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, city: object) -> bool:
        return city in self._adjacency

    def contains_city(self, name: City) -> bool:
        return name in self._adjacency

    def neighbors(self, city: City) -> Tuple[Neighbor, ...]:
        try:
            return self._adjacency[city]
        except KeyError:
            raise UnknownCityError(city) from None

    def require(self, city: City) -> None:
        if city not in self._adjacency:
            raise UnknownCityError(city)

    def has_negative_weights(self, dimension: WeightDimension) -> bool:
        if dimension is WeightDimension.HOPS:
            return False
        return self._min_weight[dimension] < 0

    @staticmethod
    def weight(edge: Edge, dimension: WeightDimension) -> float:
        if dimension is WeightDimension.TIME:
            return edge.time
        if dimension is WeightDimension.COST:
            return edge.cost
        if dimension is WeightDimension.HOPS:
            return 1
        raise ValueError(f"Unknown weight dimension: {dimension}")


def neighbor_weight(neighbor: Neighbor, dimension: WeightDimension) -> float:
    if dimension is WeightDimension.TIME:
        return neighbor[1]
    if dimension is WeightDimension.COST:
        return neighbor[2]
    return 1


def path_weight(graph: Graph, path: Sequence[City], dimension: WeightDimension) -> float:
    """Cheapest total weight of walking ``path`` hop by hop, using the best parallel edge."""

    if not path:
        return math.inf
    total = 0.0 if dimension is not WeightDimension.HOPS else 0
    for u, v in zip(path, path[1:]):
        weights = [neighbor_weight(n, dimension) for n in graph.neighbors(u) if n[0] == v]
        if not weights:
            raise ValueError(f"No edge from {u!r} to {v!r}")
        total += min(weights)
    return total
