"""Graph service: the deleting sequence operation over XML text.

``compute`` is the service boundary. It never raises for bad input; the
failure comes back as a SequenceResult carrying the error message, the way
a remote caller would receive it.
"""

import functools
import logging

from metrograph.codec.xml import (
    GraphXmlFormatError,
    load_graph_from_xml,
    save_graph_to_xml,
)
from metrograph.config.settings import SolverConfig
from metrograph.graph.errors import GraphError, InvariantViolationError
from metrograph.graph.simple import Graph
from metrograph.graph.validation import validate_deleting_sequence
from metrograph.service.types import SequenceResult

log = logging.getLogger(__name__)


class GraphService:
    """Stateless facade over the codec and the graph engine."""

    def __init__(self, config: SolverConfig | None = None) -> None:
        self.config = config if config is not None else SolverConfig()

    def load_graph_from_xml(self, input_xml: str) -> Graph:
        return load_graph_from_xml(input_xml)

    def save_graph_to_xml(self, graph: Graph) -> str:
        return save_graph_to_xml(graph)

    def get_connected_graph_vertex_deleting_sequence(self, input_xml: str) -> list[int]:
        """Compute a deleting sequence for the connected graph in input_xml.

        Raises:
            GraphXmlFormatError: If the XML is invalid.
            GraphError: If the graph is null, disconnected, or the start
                vertex is outside it; or if verification is enabled and the
                sequence fails it.
        """
        graph = self.load_graph_from_xml(input_xml)
        sequence = graph.get_connected_graph_vertex_deleting_sequence(
            self.config.start_vertex
        )

        if self.config.verify_sequence:
            errors = validate_deleting_sequence(graph, sequence)
            if errors:
                raise InvariantViolationError(
                    "Deleting sequence failed verification: " + "; ".join(errors)
                )
            log.debug("Deleting sequence verified for %d vertices", graph.size)

        log.info(
            "Computed deleting sequence: %d vertices, %d edges",
            graph.size,
            graph.adjacency.edge_count(),
        )
        return sequence

    def compute(self, input_xml: str) -> SequenceResult:
        """Service boundary: wrap the sequence or the failure in a result.

        Bad documents, graph rule violations and graphs too large to allocate
        all come back as a failed result.
        """
        try:
            sequence = self.get_connected_graph_vertex_deleting_sequence(input_xml)
        except (GraphXmlFormatError, GraphError) as e:
            log.warning("Deleting sequence request failed: %s", e)
            return SequenceResult.failed(e)
        except MemoryError as e:
            log.error("Deleting sequence request ran out of memory: %s", e)
            return SequenceResult.failed(e)
        return SequenceResult.ok(sequence)


@functools.lru_cache(maxsize=1)
def get_default_service() -> GraphService:
    """Shared service instance, created on first use."""
    return GraphService()


def get_new_service(config: SolverConfig | None = None) -> GraphService:
    return GraphService(config)
