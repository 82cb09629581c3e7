from enum import Enum


class Algorithm(Enum):
    PRIORITY_QUEUE = "priority-queue"
    RADIX_HEAP = "radix-heap"
    BELLMAN_FORD = "bellman-ford"
    BFS = "bfs"

    @property
    def label(self) -> str:
        return _ALGORITHM_LABELS[self]


_ALGORITHM_LABELS = {
    Algorithm.PRIORITY_QUEUE: "Dijkstra priority queue",
    Algorithm.RADIX_HEAP: "Dijkstra radix heap",
    Algorithm.BELLMAN_FORD: "Bellman-Ford",
    Algorithm.BFS: "Breadth-first search",
}


class WeightDimension(Enum):
    TIME = "time"
    COST = "cost"
    HOPS = "hops"


class RouteStatus(Enum):
    FOUND = "found"
    UNREACHABLE = "unreachable"
    NEGATIVE_CYCLE = "negative-cycle"


class Topology(Enum):
    RANDOM_REGULAR = "random-regular"
    SCALE_FREE = "scale-free"
    SMALL_WORLD = "small-world"
    STAR = "star"
    LINE = "line"
