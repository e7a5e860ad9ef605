"""Shared graph builders for the test suite."""

import numpy as np
import pytest
from scipy.sparse.csgraph import connected_components

from metrograph.graph import Graph, create_graph_from_edges


def random_graph(rng: np.random.Generator, n: int, p: float) -> Graph:
    """Erdos-Renyi G(n, p) simple graph."""
    graph = Graph(n)
    for r in range(n):
        for c in range(r + 1, n):
            if rng.random() < p:
                graph.adjacency.set(r, c, True)
    return graph


def random_connected_graph(rng: np.random.Generator, n: int, p: float) -> Graph:
    """G(n, p) plus a random Hamiltonian path, so always connected."""
    graph = random_graph(rng, n, p)
    order = rng.permutation(n).tolist()
    for a, b in zip(order, order[1:]):
        graph.adjacency.set(a, b, True)
    return graph


def scipy_components(graph: Graph, keep: list[int] | None = None) -> int:
    """Component count from scipy, optionally of the subgraph induced by keep."""
    adj = graph.adjacency.to_sparse()
    if keep is not None:
        adj = adj[keep][:, keep]
    n_components, _ = connected_components(adj, directed=False)
    return int(n_components)


def assert_prefixes_stay_connected(graph: Graph, sequence: list[int]) -> None:
    assert sorted(sequence) == list(range(graph.size))
    for k in range(graph.size):
        keep = sorted(set(range(graph.size)) - set(sequence[:k]))
        assert scipy_components(graph, keep) == 1, (
            f"Deleting {sequence[:k]} disconnects the graph"
        )


@pytest.fixture
def triangle() -> Graph:
    return create_graph_from_edges(3, [(0, 1), (1, 2), (0, 2)])


@pytest.fixture
def path4() -> Graph:
    return create_graph_from_edges(4, [(0, 1), (1, 2), (2, 3)])


@pytest.fixture
def star5() -> Graph:
    return create_graph_from_edges(5, [(0, 1), (0, 2), (0, 3), (0, 4)])


@pytest.fixture
def split4() -> Graph:
    """Edge (0, 1) only; vertices 2 and 3 isolated."""
    return create_graph_from_edges(4, [(0, 1)])
