"""Simple graph engine: storage, degrees, connectivity and deleting sequences."""

from metrograph.graph.errors import (
    GraphError,
    IndexOutOfRangeError,
    InvalidConstructionError,
    InvariantViolationError,
    PreconditionNotMetError,
)
from metrograph.graph.matrix import AdjacencyMatrix
from metrograph.graph.simple import Graph, create_graph, create_graph_from_edges
from metrograph.graph.types import AllEdgesSet, EdgeChanged, GraphKind
from metrograph.graph.validation import (
    count_components,
    validate_deleting_sequence,
    validate_spanning_forest,
)
from metrograph.graph.vertex import Vertex

__all__ = [
    "AdjacencyMatrix",
    "AllEdgesSet",
    "EdgeChanged",
    "Graph",
    "GraphError",
    "GraphKind",
    "IndexOutOfRangeError",
    "InvalidConstructionError",
    "InvariantViolationError",
    "PreconditionNotMetError",
    "Vertex",
    "count_components",
    "create_graph",
    "create_graph_from_edges",
    "validate_deleting_sequence",
    "validate_spanning_forest",
]
