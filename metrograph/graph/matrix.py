"""Triangular adjacency matrix for simple graphs.

A simple graph is unweighted, undirected and has no loops or parallel
edges, so its adjacency matrix is symmetric with an all-false diagonal.
Only the strictly lower triangle is stored: a flat numpy bool array of
size * (size - 1) / 2 cells where the pair (r, c), r > c, lives at offset
r * (r - 1) / 2 + c. Laid out this way the store is the ragged array of
size - 1 rows, row i holding i + 1 cells, written end to end.
"""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

import numpy as np
import scipy.sparse

from metrograph.graph.errors import (
    IndexOutOfRangeError,
    InvalidConstructionError,
    InvariantViolationError,
)
from metrograph.graph.types import AllEdgesSet, EdgeChanged

if TYPE_CHECKING:
    from metrograph.graph.simple import Graph

log = logging.getLogger(__name__)


def _offset(row: int, column: int) -> int:
    """Flat offset of the unordered pair (row, column), row != column."""
    if column > row:
        row, column = column, row
    return row * (row - 1) // 2 + column


class AdjacencyMatrix:
    """Edge storage owned by exactly one Graph.

    Every committed change is reported straight to the owner through
    ``_on_edge_changed`` / ``_on_all_edges_set`` so derived state (vertex
    degrees) is updated before the mutating call returns. Not thread-safe:
    a matrix must not be mutated from more than one thread at a time.
    """

    def __init__(self, owner: "Graph", size: int) -> None:
        if owner is None:
            raise InvalidConstructionError("The matrix owner must be a graph")
        if owner.adjacency is not None:
            raise InvalidConstructionError(
                "The owner already has an adjacency matrix"
            )
        if size < 0:
            raise InvalidConstructionError(
                f"The matrix size must not be negative, got {size}"
            )

        self._owner = owner
        self._size = size
        self._cells = np.zeros(size * (size - 1) // 2, dtype=bool)

    @property
    def size(self) -> int:
        return self._size

    def _check_index(self, name: str, index: int) -> None:
        if index < 0 or index >= self._size:
            raise IndexOutOfRangeError(
                f"The '{name}' ({index}) must be >= 0 and < the matrix size "
                f"({self._size})"
            )

    def _check_access(self, row: int, column: int) -> None:
        if self._size == 0:
            raise IndexOutOfRangeError("The graph is a null graph")
        self._check_index("row", row)
        self._check_index("column", column)

    def get(self, row: int, column: int) -> bool:
        """Return True if an edge joins the two vertices."""
        self._check_access(row, column)
        if row == column:
            return False
        return bool(self._cells[_offset(row, column)])

    def set(self, row: int, column: int, value: bool) -> None:
        """Add or remove the edge between two vertices.

        Writing False on the diagonal is a no-op; writing True there raises
        InvariantViolationError. A rejected write leaves the matrix untouched.
        """
        self._check_access(row, column)
        value = bool(value)
        if row == column:
            if value:
                raise InvariantViolationError(
                    "A simple graph cannot contain loops: vertex "
                    f"{row} cannot be connected with itself"
                )
            return

        offset = _offset(row, column)
        if self._cells[offset] == value:
            return
        self._cells[offset] = value
        self._owner._on_edge_changed(
            EdgeChanged(min(row, column), max(row, column), value)
        )

    def __getitem__(self, key: tuple[int, int]) -> bool:
        row, column = key
        return self.get(row, column)

    def __setitem__(self, key: tuple[int, int], value: bool) -> None:
        row, column = key
        self.set(row, column, value)

    def fill(self, value: bool) -> None:
        """Set every off-diagonal cell to value (empty or complete graph)."""
        value = bool(value)
        changed = bool((self._cells != value).any())
        if not changed:
            return
        self._cells[:] = value
        log.debug("Filled %d cells with %s", self._cells.size, value)
        self._owner._on_all_edges_set(AllEdgesSet(value))

    def for_each_cell(self, predicate: Callable[[bool], bool]) -> bool:
        """Return True iff predicate holds for every stored cell.

        Cells are visited row-major over the triangle and the walk stops at
        the first cell the predicate rejects. Vacuously True below size 2.
        """
        for value in self._cells:
            if not predicate(bool(value)):
                return False
        return True

    def row(self, index: int) -> np.ndarray:
        """Return a copy of the full logical row for one vertex."""
        if self._size == 0:
            raise IndexOutOfRangeError("The graph is a null graph")
        self._check_index("index", index)

        result = np.zeros(self._size, dtype=bool)
        # Columns below the diagonal are contiguous in the store
        start = index * (index - 1) // 2
        result[:index] = self._cells[start : start + index]
        # Columns above the diagonal come from the later rows
        later = np.arange(index + 1, self._size)
        result[index + 1 :] = self._cells[later * (later - 1) // 2 + index]
        return result

    def neighbors(self, index: int) -> list[int]:
        """Indices adjacent to a vertex, ascending."""
        return np.flatnonzero(self.row(index)).tolist()

    def edges(self) -> list[tuple[int, int]]:
        """Every edge as (r, c) with r < c, ordered by r then c."""
        rows, cols = self._pairs()
        mask = self._cells
        return sorted(zip(cols[mask].tolist(), rows[mask].tolist()))

    def edge_count(self) -> int:
        return int(self._cells.sum())

    def to_sparse(self) -> scipy.sparse.csr_matrix:
        """Symmetric size x size 0/1 CSR matrix of the graph."""
        rows, cols = self._pairs()
        mask = self._cells
        i = np.concatenate([rows[mask], cols[mask]])
        j = np.concatenate([cols[mask], rows[mask]])
        data = np.ones(i.size, dtype=np.int8)
        return scipy.sparse.csr_matrix(
            (data, (i, j)), shape=(self._size, self._size)
        )

    def _pairs(self) -> tuple[np.ndarray, np.ndarray]:
        """(row, column) index arrays aligned with the flat store (row > column)."""
        return np.tril_indices(self._size, k=-1)
