"""Independent checks of spanning forests and deleting sequences.

These run against scipy's sparse graph routines rather than the engine's
own traversal, so they can vouch for its results. Each validator returns a
list of error strings; an empty list means the result is valid.
"""

import logging

import numpy as np
from scipy.sparse.csgraph import connected_components

from metrograph.graph.simple import Graph

log = logging.getLogger(__name__)


def count_components(graph: Graph) -> int:
    """Number of connected components (0 for a null graph)."""
    if graph.is_null:
        return 0
    n_components, _ = connected_components(
        graph.adjacency.to_sparse(), directed=False
    )
    return int(n_components)


def validate_spanning_forest(graph: Graph, forest: Graph) -> list[str]:
    """Validate that forest is a spanning forest of graph.

    Checks (cheapest first):
    1. Same vertex count
    2. Every forest edge is an edge of graph
    3. Same number of components as graph
    4. Exactly size - components edges (with 3, this means no cycles)

    Args:
        graph: The source graph.
        forest: Candidate spanning forest.

    Returns:
        List of error strings (empty = valid forest).
    """
    errors: list[str] = []

    # 1. Vertex count
    if forest.size != graph.size:
        errors.append(
            f"Size mismatch: forest has {forest.size} vertices, "
            f"graph has {graph.size}"
        )
        return errors

    if graph.is_null:
        return errors

    # 2. Edge subset
    extra = [
        (r, c) for r, c in forest.adjacency.edges() if not graph.adjacency.get(r, c)
    ]
    if extra:
        errors.append(f"Forest edges missing from graph: {extra}")

    # 3. Component count
    expected_components = count_components(graph)
    forest_components = count_components(forest)
    if forest_components != expected_components:
        errors.append(
            f"Forest has {forest_components} components, "
            f"graph has {expected_components}"
        )

    # 4. Edge count
    n_edges = forest.adjacency.edge_count()
    if n_edges != graph.size - expected_components:
        errors.append(
            f"Forest has {n_edges} edges, expected "
            f"{graph.size - expected_components}"
        )

    return errors


def validate_deleting_sequence(graph: Graph, sequence: list[int]) -> list[str]:
    """Validate that deleting sequence keeps graph connected at every step.

    The sequence must be a permutation of range(size). For every prefix
    length k in [0, size - 1], the vertices left after deleting the first k
    must induce a connected subgraph of graph.

    Args:
        graph: The source graph.
        sequence: Vertex indices in deletion order.

    Returns:
        List of error strings (empty = valid sequence).
    """
    errors: list[str] = []
    n = graph.size

    if sorted(sequence) != list(range(n)):
        errors.append(f"Sequence is not a permutation of 0..{n - 1}: {sequence}")
        return errors

    adj = graph.adjacency.to_sparse()
    remaining = np.ones(n, dtype=bool)
    for k in range(n):
        if k > 0:
            remaining[sequence[k - 1]] = False
        keep = np.flatnonzero(remaining)
        sub = adj[keep][:, keep]
        n_components, _ = connected_components(sub, directed=False)
        if n_components != 1:
            errors.append(
                f"Deleting {sequence[:k]} leaves {n_components} components"
            )

    log.debug(
        "Validated deleting sequence of %d vertices: %d error(s)", n, len(errors)
    )
    return errors
