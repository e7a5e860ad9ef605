"""Graph kind tags and edge-change notifications."""

from dataclasses import dataclass
from enum import Enum


class GraphKind(Enum):
    """Capability tag consulted by edge access and degree bookkeeping.

    Only SIMPLE (undirected, loop-free) graphs are implemented. The other
    members exist so that edge-count limits and serializers can be written
    once against the full set of variants.
    """

    SIMPLE = "simple"
    DIRECTED = "directed"
    LOOP = "loop"
    DIRECTED_LOOP = "directed_loop"

    @property
    def is_directed(self) -> bool:
        return self in (GraphKind.DIRECTED, GraphKind.DIRECTED_LOOP)

    @property
    def is_loop_graph(self) -> bool:
        return self in (GraphKind.LOOP, GraphKind.DIRECTED_LOOP)

    def max_edge_count(self, size: int) -> int:
        """Largest number of distinct edges a graph of this kind can hold."""
        if self.is_directed and self.is_loop_graph:
            return size * size
        if self.is_directed:
            return size * (size - 1)
        if self.is_loop_graph:
            return size * (size - 1) // 2 + size
        return size * (size - 1) // 2


@dataclass(frozen=True, slots=True)
class EdgeChanged:
    """A single edge flipped. Vertices are normalized so first < second."""

    first: int
    second: int
    value: bool


@dataclass(frozen=True, slots=True)
class AllEdgesSet:
    """Every off-diagonal cell was filled with value in one bulk write."""

    value: bool
