"""Simple graph with connectivity, spanning-forest and vertex deleting sequence.

The deleting sequence answers the station closing question: in which order
can the vertices of a connected graph be removed one at a time so that the
vertices still present stay connected until the last one? Any leaf of a
spanning tree can go first without disconnecting the rest, so the sequence
is built by peeling leaves off a spanning tree until one vertex is left.
"""

import logging
from collections.abc import Iterable

import numpy as np

from metrograph.graph.errors import (
    IndexOutOfRangeError,
    InvalidConstructionError,
    InvariantViolationError,
    PreconditionNotMetError,
)
from metrograph.graph.matrix import AdjacencyMatrix
from metrograph.graph.types import AllEdgesSet, EdgeChanged, GraphKind
from metrograph.graph.vertex import Vertex

log = logging.getLogger(__name__)


class Graph:
    """Fixed-size graph owning one adjacency matrix and its vertices.

    Vertices and matrix cells are addressed by integer index. The size is set
    at construction and never changes; the graph is mutated only through edge
    writes on ``adjacency``. A Graph is not thread-safe; callers must not
    mutate one instance from several threads.
    """

    def __init__(self, size: int, kind: GraphKind = GraphKind.SIMPLE) -> None:
        if size < 0:
            raise InvalidConstructionError(
                f"The graph size must not be negative, got {size}"
            )
        if kind is not GraphKind.SIMPLE:
            raise NotImplementedError(f"{kind.value} graphs are not supported")

        self._size = size
        self._kind = kind
        self._adjacency: AdjacencyMatrix | None = None
        self._adjacency = AdjacencyMatrix(self, size)
        self._vertices = tuple(Vertex(self, i) for i in range(size))

    @property
    def size(self) -> int:
        return self._size

    @property
    def kind(self) -> GraphKind:
        return self._kind

    @property
    def adjacency(self) -> AdjacencyMatrix | None:
        return self._adjacency

    @property
    def vertices(self) -> tuple[Vertex, ...]:
        return self._vertices

    @property
    def is_directed(self) -> bool:
        return self._kind.is_directed

    @property
    def is_loop_graph(self) -> bool:
        return self._kind.is_loop_graph

    @property
    def is_null(self) -> bool:
        return self._size == 0

    @property
    def is_singleton(self) -> bool:
        return self._size == 1

    @property
    def max_edge_count(self) -> int:
        return self._kind.max_edge_count(self._size)

    def __repr__(self) -> str:
        # No matrix yet while __init__ is building it
        edges = "?" if self._adjacency is None else self._adjacency.edge_count()
        return f"Graph(size={self._size}, kind={self._kind.value}, edges={edges})"

    # ── Degree bookkeeping ─────────────────────────────────────────

    def _on_edge_changed(self, event: EdgeChanged) -> None:
        """Called by the matrix after a single edge flipped."""
        self._vertices[event.first]._apply_edge_changed(event)
        self._vertices[event.second]._apply_edge_changed(event)

    def _on_all_edges_set(self, event: AllEdgesSet) -> None:
        """Called by the matrix after a bulk fill."""
        for vertex in self._vertices:
            vertex._apply_all_edges_set(event)

    def recalc_vertex_degrees(self) -> None:
        """Rebuild every cached degree from the matrix."""
        for vertex in self._vertices:
            vertex.recalc_degree()

    # ── Predicates ─────────────────────────────────────────────────

    def is_empty(self) -> bool:
        """True for a graph without edges, including null and singleton graphs."""
        return self._adjacency.for_each_cell(lambda value: not value)

    def is_complete(self) -> bool:
        """True if every vertex pair is joined; never for null or singleton graphs."""
        return self._size >= 2 and self._adjacency.for_each_cell(
            lambda value: value
        )

    def do_empty(self) -> None:
        self._adjacency.fill(False)

    def do_complete(self) -> None:
        self._adjacency.fill(True)

    # ── Connectivity ───────────────────────────────────────────────

    def _check_start(self, start: int) -> None:
        if self._size == 0:
            raise IndexOutOfRangeError("The graph is a null graph")
        if start < 0 or start >= self._size:
            raise IndexOutOfRangeError(
                f"The start vertex index ({start}) must be >= 0 and < the "
                f"graph size ({self._size})"
            )

    def get_connectivity_markers(self, start: int) -> list[bool]:
        """Mark every vertex reachable from start.

        Args:
            start: Vertex the traversal begins at.

        Returns:
            List of length size, True at i iff i is reachable from start.

        Raises:
            IndexOutOfRangeError: On a null graph or a start outside the graph.
        """
        self._check_start(start)

        markers = np.zeros(self._size, dtype=bool)
        markers[start] = True
        pending = [start]  # reached but not yet processed

        while pending:
            current = pending.pop()
            for neighbor in self._adjacency.neighbors(current):
                if not markers[neighbor]:
                    markers[neighbor] = True
                    pending.append(neighbor)

        return markers.tolist()

    def is_connected(self) -> bool:
        """True if every vertex is reachable from vertex 0.

        A singleton graph is trivially connected; a null graph raises
        IndexOutOfRangeError.
        """
        return all(self.get_connectivity_markers(0))

    def get_connected_components(self) -> list[list[int]]:
        """Vertex sets of the connected components, ordered by lowest vertex."""
        if self._size == 0:
            raise IndexOutOfRangeError("The graph is a null graph")

        assigned = np.zeros(self._size, dtype=bool)
        components: list[list[int]] = []
        for seed in range(self._size):
            if assigned[seed]:
                continue
            reached = np.asarray(self.get_connectivity_markers(seed))
            assigned |= reached
            components.append(np.flatnonzero(reached).tolist())

        log.debug(
            "Found %d connected component(s) in %d vertices",
            len(components),
            self._size,
        )
        return components

    # ── Spanning forest ────────────────────────────────────────────

    def get_spanning_forest(self, start: int) -> "Graph":
        """Build a spanning forest as a new graph of the same size.

        The first tree is grown depth-first from start. Each further tree is
        rooted at the lowest-index vertex no earlier tree reached. Every
        forest edge is an edge of this graph, and the forest has one tree per
        connected component.

        Args:
            start: Root of the first tree.

        Returns:
            A new Graph holding only the forest edges.

        Raises:
            IndexOutOfRangeError: On a null graph or a start outside the graph.
        """
        self._check_start(start)

        forest = Graph(self._size, self._kind)
        visited = np.zeros(self._size, dtype=bool)
        root: int | None = start
        n_trees = 0

        while root is not None:
            n_trees += 1
            stack: list[tuple[int, int | None]] = [(root, None)]
            while stack:
                candidate, parent = stack.pop()
                if visited[candidate]:
                    continue
                visited[candidate] = True
                if parent is not None:
                    forest.adjacency.set(candidate, parent, True)
                for neighbor in self._adjacency.neighbors(candidate):
                    if not visited[neighbor]:
                        stack.append((neighbor, candidate))

            unvisited = np.flatnonzero(~visited)
            root = int(unvisited[0]) if unvisited.size else None

        log.debug(
            "Spanning forest from %d: %d tree(s), %d edge(s)",
            start,
            n_trees,
            forest.adjacency.edge_count(),
        )
        return forest

    # ── Vertex deleting sequence ───────────────────────────────────

    def get_connected_graph_vertex_deleting_sequence(self, start: int) -> list[int]:
        """Order in which vertices can be deleted keeping the rest connected.

        Peels leaves off a spanning tree rooted at start and appends the last
        remaining vertex. Among the current leaves, the one with the lowest
        degree in this graph goes first, ties going to the lowest index. After deleting any prefix of the result from this graph, the
        remaining vertices are still connected. This graph is not modified.

        Args:
            start: Root of the spanning tree.

        Returns:
            A permutation of range(size).

        Raises:
            IndexOutOfRangeError: On a null graph or a start outside the graph.
            PreconditionNotMetError: If the graph is not connected.
            InvariantViolationError: If the spanning tree runs out of leaves
                before one vertex is left (corrupted tree).
        """
        self._check_start(start)
        if not self.is_connected():
            raise PreconditionNotMetError("The graph is not a connected graph")

        tree = self.get_spanning_forest(start)
        processed = np.zeros(self._size, dtype=bool)
        sequence: list[int] = []

        while len(sequence) < self._size - 1:
            leaf = min(
                (
                    i
                    for i in range(self._size)
                    if not processed[i] and tree.vertices[i].degree == 1
                ),
                key=lambda i: (self._vertices[i].degree, i),
                default=None,
            )
            if leaf is None:
                raise InvariantViolationError(
                    "No leaf found in the spanning tree with "
                    f"{self._size - len(sequence)} vertices left"
                )
            # A leaf has exactly one remaining tree edge
            neighbor = tree.adjacency.neighbors(leaf)[0]
            tree.adjacency.set(leaf, neighbor, False)
            processed[leaf] = True
            sequence.append(leaf)

        sequence.append(int(np.flatnonzero(~processed)[0]))

        log.debug("Deleting sequence from %d: %s", start, sequence)
        return sequence


def create_graph(size: int, kind: GraphKind = GraphKind.SIMPLE) -> Graph:
    """Create an edgeless graph with size vertices."""
    return Graph(size, kind)


def create_graph_from_edges(size: int, edges: Iterable[tuple[int, int]]) -> Graph:
    """Create a simple graph and add every (row, column) pair as an edge."""
    graph = Graph(size)
    for row, column in edges:
        graph.adjacency.set(row, column, True)
    return graph
