"""Graph vertex with an incrementally maintained degree."""

from typing import TYPE_CHECKING

from metrograph.graph.errors import InvalidConstructionError
from metrograph.graph.types import AllEdgesSet, EdgeChanged

if TYPE_CHECKING:
    from metrograph.graph.simple import Graph


class Vertex:
    """A vertex addressed by its index in the owning graph.

    The degree is a cached value. The owner applies every edge change to it
    as it is committed, so it always equals the number of True cells in the
    vertex's matrix row; ``recalc_degree`` rebuilds it from the matrix.
    """

    __slots__ = ("_owner", "_index", "_degree")

    def __init__(self, owner: "Graph", index: int) -> None:
        if owner is None:
            raise InvalidConstructionError("The vertex owner must be a graph")
        if index < 0 or index >= owner.size:
            raise InvalidConstructionError(
                f"The vertex index ({index}) must be >= 0 and < the owner "
                f"size ({owner.size})"
            )
        self._owner = owner
        self._index = index
        self._degree = 0

    @property
    def index(self) -> int:
        return self._index

    @property
    def degree(self) -> int:
        """Number of edges meeting at this vertex."""
        return self._degree

    def __repr__(self) -> str:
        return f"Vertex(index={self._index}, degree={self._degree})"

    def _apply_edge_changed(self, event: EdgeChanged) -> None:
        if self._index not in (event.first, event.second):
            return
        self._degree += 1 if event.value else -1

    def _apply_all_edges_set(self, event: AllEdgesSet) -> None:
        self._degree = self._owner.size - 1 if event.value else 0

    def recalc_degree(self) -> int:
        """Rescan the owner's matrix row and reset the cached degree."""
        self._degree = int(self._owner.adjacency.row(self._index).sum())
        return self._degree
