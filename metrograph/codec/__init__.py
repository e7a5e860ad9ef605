"""Text encodings of graphs."""

from metrograph.codec.xml import (
    XML_DECLARATION,
    GraphXmlFormatError,
    edges_to_xml,
    load_graph_from_xml,
    save_graph_to_xml,
)

__all__ = [
    "XML_DECLARATION",
    "GraphXmlFormatError",
    "edges_to_xml",
    "load_graph_from_xml",
    "save_graph_to_xml",
]
