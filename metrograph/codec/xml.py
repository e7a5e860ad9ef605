"""XML encoding of simple graphs.

Format::

    <Graph>
      <Size>3</Size>
      <Edges>
        <Edge><Vertex1>0</Vertex1><Vertex2>1</Vertex2></Edge>
      </Edges>
    </Graph>

Vertex indices are 0-based. Only edges with Vertex1 < Vertex2 are written;
on load either orientation is accepted and repeated edges are idempotent.
"""

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterable

from metrograph.graph.errors import GraphError
from metrograph.graph.simple import Graph, create_graph

log = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>\n'


class GraphXmlFormatError(ValueError):
    """Raised when graph XML cannot be turned into a valid graph."""


def _invalid(description: str) -> str:
    return f"The input xml is in an invalid format: {description}"


def _child_int(element: ET.Element, tag: str, context: str) -> int:
    child = element.find(tag)
    if child is None or child.text is None:
        raise GraphXmlFormatError(_invalid(f"{context} contains no {tag} element"))
    return int(child.text.strip())


def load_graph_from_xml(text: str) -> Graph:
    """Parse graph XML into a new simple graph.

    Args:
        text: XML document in the format above.

    Returns:
        A graph with every listed edge set.

    Raises:
        GraphXmlFormatError: For malformed XML, a missing or non-integer
            Size/Vertex1/Vertex2, more edges than the graph can hold, or an
            edge the graph rejects. The underlying error is chained.
    """
    try:
        root = ET.fromstring(text)
        if root.tag != "Graph":
            raise GraphXmlFormatError(
                _invalid(f"the root element is {root.tag!r}, expected 'Graph'")
            )

        graph = create_graph(_child_int(root, "Size", "the graph"))

        edge_elements = root.findall("./Edges/Edge")
        if len(edge_elements) > graph.max_edge_count:
            raise GraphXmlFormatError(
                _invalid(
                    f"a graph of size {graph.size} cannot contain more than "
                    f"{graph.max_edge_count} edges, got {len(edge_elements)}"
                )
            )

        for number, edge in enumerate(edge_elements, start=1):
            context = f"the edge element {number}"
            vertex1 = _child_int(edge, "Vertex1", context)
            vertex2 = _child_int(edge, "Vertex2", context)
            graph.adjacency.set(vertex1, vertex2, True)

    except GraphXmlFormatError:
        raise
    except (ET.ParseError, ValueError, GraphError) as e:
        raise GraphXmlFormatError(_invalid(f"{e} ({type(e).__name__})")) from e

    log.debug(
        "Loaded graph from xml: size=%d, edges=%d",
        graph.size,
        graph.adjacency.edge_count(),
    )
    return graph


def edges_to_xml(size: int, edges: Iterable[tuple[int, int]]) -> str:
    """Write a graph document straight from a size and 0-based edge pairs.

    No validation happens here; the reader of the document enforces the
    graph rules.
    """
    root = ET.Element("Graph")
    ET.SubElement(root, "Size").text = str(size)
    edge_list = ET.SubElement(root, "Edges")
    for vertex1, vertex2 in edges:
        edge = ET.SubElement(edge_list, "Edge")
        ET.SubElement(edge, "Vertex1").text = str(vertex1)
        ET.SubElement(edge, "Vertex2").text = str(vertex2)

    ET.indent(root)
    return XML_DECLARATION + ET.tostring(root, encoding="unicode")


def save_graph_to_xml(graph: Graph) -> str:
    """Serialize a graph to an indented XML document string."""
    return edges_to_xml(graph.size, graph.adjacency.edges())
