"""
Pytest configuration and shared fixtures.

Graphs used across the test modules: the Czech road sample, a small
diamond with a cheaper detour, and a factory for seeded random graphs.
"""

import random
from pathlib import Path

import networkx as nx
import pytest

from dijkstra_route import config
from dijkstra_route.graph_model import Graph


@pytest.fixture
def road_rows() -> list[tuple[str, str, str]]:
    return [
        ("Praha", "Hradec", "100"),
        ("Hradec", "Olomouc", "156"),
        ("Hradec", "Jihlava", "90"),
        ("Jihlava", "Ostrava", "260"),
    ]


@pytest.fixture
def road_graph(road_rows) -> Graph:
    return Graph.from_triples(road_rows)


@pytest.fixture
def road_table() -> Path:
    """Return the sample table shipped inside the package."""
    return config.DATA_DIR / "road_distances.csv"


@pytest.fixture
def diamond_graph() -> Graph:
    # A-B direct is 10, the detour through C costs 2
    return Graph.from_triples([
        ("A", "B", 10),
        ("A", "C", 1),
        ("C", "B", 1),
        ("B", "D", 3),
    ])


def build_random_graph(n_nodes=8, edge_prob=0.4, weight_range=(1, 11), seed=None, bidirectional=True):
    """Erdos-Renyi skeleton with random integer weights, nodes named n0..n{N-1}."""
    rng = random.Random(seed)
    skeleton = nx.gnp_random_graph(n=n_nodes, p=edge_prob, seed=seed, directed=not bidirectional)
    rows = [(f"n{u}", f"n{v}", rng.randint(*weight_range)) for u, v in skeleton.edges()]
    return Graph.from_triples(rows, bidirectional=bidirectional)


@pytest.fixture
def random_graph_factory():
    return build_random_graph
