import networkx as nx
import pytest

from optimalgo.enums import WeightDimension
from optimalgo.errors import UnknownCityError
from optimalgo.graph import Edge, Graph, path_weight


def small_graph(directed=True) -> Graph:
    return Graph.from_tuples(
        [("A", "B", 2, 5), ("B", "C", 3, -1), ("A", "C", 10, 20), ("A", "B", 1, 9)],
        directed=directed,
    )


class TestGraph:
    def test_contains_city(self):
        graph = small_graph()
        assert graph.contains_city("A")
        assert graph.contains_city("C")
        assert not graph.contains_city("a")
        assert not graph.contains_city("Nowhere")
        assert "B" in graph

    def test_neighbors_keep_insertion_order_and_parallel_edges(self):
        graph = small_graph()
        assert list(graph.neighbors("A")) == [("B", 2.0, 5.0), ("C", 10.0, 20.0), ("B", 1.0, 9.0)]
        assert list(graph.neighbors("C")) == []

    def test_neighbors_are_read_only(self):
        graph = small_graph()
        neighbors = graph.neighbors("A")
        assert isinstance(neighbors, tuple)
        with pytest.raises(AttributeError):
            neighbors.append(("B", -100.0, -100.0))
        assert not graph.has_negative_weights(WeightDimension.TIME)
        assert graph.neighbors("A") == (("B", 2.0, 5.0), ("C", 10.0, 20.0), ("B", 1.0, 9.0))

    def test_unknown_vertex(self):
        with pytest.raises(UnknownCityError, match="Nowhere"):
            small_graph().neighbors("Nowhere")

    def test_undirected_adds_reverse_arcs(self):
        graph = small_graph(directed=False)
        assert ("A", 2.0, 5.0) in graph.neighbors("B")
        assert graph.edge_count == 8
        assert not graph.directed

    def test_isolated_cities(self):
        graph = Graph([Edge("A", "B", 1.0, 1.0)], cities=["Z"])
        assert graph.contains_city("Z")
        assert len(graph) == 3

    def test_negative_weight_detection(self):
        graph = small_graph()
        assert graph.has_negative_weights(WeightDimension.COST)
        assert not graph.has_negative_weights(WeightDimension.TIME)
        assert not graph.has_negative_weights(WeightDimension.HOPS)

    def test_empty_graph(self):
        graph = Graph([])
        assert len(graph) == 0
        assert not graph.has_negative_weights(WeightDimension.COST)

    def test_networkx_round_trip(self):
        graph = small_graph()
        exported = graph.to_networkx()
        assert isinstance(exported, nx.MultiDiGraph)
        assert exported.number_of_edges("A", "B") == 2
        rebuilt = Graph.from_networkx(exported)
        assert rebuilt.directed
        assert sorted(rebuilt.neighbors("A")) == sorted(graph.neighbors("A"))

    def test_from_undirected_networkx(self):
        source = nx.Graph()
        source.add_edge("X", "Y", time=1.5, cost=2.5)
        graph = Graph.from_networkx(source)
        assert list(graph.neighbors("Y")) == [("X", 1.5, 2.5)]

    def test_path_weight_uses_best_parallel_edge(self):
        graph = small_graph()
        assert path_weight(graph, ["A", "B", "C"], WeightDimension.TIME) == 4.0
        assert path_weight(graph, ["A", "B", "C"], WeightDimension.COST) == 4.0
        assert path_weight(graph, ["A", "B", "C"], WeightDimension.HOPS) == 2

    def test_path_weight_missing_edge(self):
        with pytest.raises(ValueError, match="No edge"):
            path_weight(small_graph(), ["C", "A"], WeightDimension.TIME)
