from __future__ import annotations

import random
from typing import List

import networkx as nx

from .config import NetworkConfig
from .graph import Edge, Graph


def generate_random_regular_graph(num_cities: int, degree: int, rng: random.Random) -> nx.Graph:
    """Generate a random regular topology."""

    if (num_cities * degree) % 2 != 0:
        raise ValueError("num_cities * degree must be even")

    try:
        seed = rng.randint(0, 2**32 - 1)
        return nx.random_regular_graph(degree, num_cities, seed=seed)
    except nx.NetworkXError as exc:
        raise RuntimeError(f"Failed to generate a random regular graph: {exc}") from exc


def generate_topology(config: NetworkConfig, rng: random.Random) -> nx.Graph:
    if config.topology == "random-regular":
        return generate_random_regular_graph(config.num_cities, config.degree, rng)
    if config.topology == "scale-free":
        m = config.scale_free_m or max(1, config.degree // 2)
        if m >= config.num_cities:
            raise ValueError("scale_free_m must be less than num_cities")
        seed = rng.randint(0, 2**32 - 1)
        return nx.barabasi_albert_graph(config.num_cities, m, seed=seed)
    if config.topology == "small-world":
        if config.degree % 2 != 0:
            raise ValueError("degree must be even for small-world topology")
        seed = rng.randint(0, 2**32 - 1)
        return nx.watts_strogatz_graph(
            config.num_cities, config.degree, config.rewire_prob, seed=seed
        )
    if config.topology == "star":
        return nx.star_graph(config.num_cities - 1)
    if config.topology == "line":
        return nx.path_graph(config.num_cities)
    raise ValueError(f"Unknown topology: {config.topology}")


def city_name(config: NetworkConfig, index: int) -> str:
    width = len(str(config.num_cities - 1))
    return f"{config.city_prefix}{index:0{width}d}"


def assign_weights(
    topology: nx.Graph, config: NetworkConfig, rng: random.Random
) -> List[Edge]:
    """Draw an independent uniform time and cost for every edge."""

    edges: List[Edge] = []
    for u, v in topology.edges():
        edges.append(
            Edge(
                city_name(config, u),
                city_name(config, v),
                rng.uniform(config.time_min, config.time_max),
                rng.uniform(config.cost_min, config.cost_max),
            )
        )
    return edges


def build_network(config: NetworkConfig, rng: random.Random) -> Graph:
    topology = generate_topology(config, rng)
    edges = assign_weights(topology, config, rng)
    cities = [city_name(config, node) for node in topology.nodes]
    return Graph(edges, directed=config.directed, cities=cities)


# (source, destination, travel time in hours, fare in rupees)
SAMPLE_ROUTES = [
    ("Delhi", "Jaipur", 4.5, 650.0),
    ("Delhi", "Lucknow", 7.0, 900.0),
    ("Delhi", "Ahmedabad", 1.5, 4200.0),
    ("Delhi", "Mumbai", 2.2, 5200.0),
    ("Delhi", "Kolkata", 2.3, 5600.0),
    ("Jaipur", "Ahmedabad", 10.0, 800.0),
    ("Lucknow", "Kolkata", 14.0, 1100.0),
    ("Ahmedabad", "Mumbai", 8.0, 700.0),
    ("Mumbai", "Pune", 3.0, 400.0),
    ("Mumbai", "GOA", 1.2, 3100.0),
    ("Pune", "GOA", 9.5, 750.0),
    ("Pune", "Hyderabad", 10.0, 950.0),
    ("GOA", "Bengaluru", 11.0, 900.0),
    ("Mumbai", "Bengaluru", 1.7, 4300.0),
    ("Hyderabad", "Bengaluru", 9.0, 850.0),
    ("Hyderabad", "Chennai", 11.5, 950.0),
    ("Bengaluru", "Chennai", 5.5, 500.0),
    ("Kolkata", "Bhubaneswar", 6.5, 600.0),
    ("Bhubaneswar", "Visakhapatnam", 7.0, 650.0),
    ("Visakhapatnam", "Chennai", 12.0, 1000.0),
    ("Visakhapatnam", "Hyderabad", 10.5, 900.0),
    ("Chennai", "Kolkata", 2.4, 5100.0),
    ("Kochi", "Bengaluru", 9.5, 800.0),
    ("Kochi", "Chennai", 11.0, 950.0),
]


def sample_city_graph() -> Graph:
    """Static network of Indian cities used by the command line driver."""

    return Graph.from_tuples(SAMPLE_ROUTES, directed=False)
