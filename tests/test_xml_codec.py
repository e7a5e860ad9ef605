"""Tests for the graph XML codec."""

import pytest

from metrograph.codec import (
    XML_DECLARATION,
    GraphXmlFormatError,
    edges_to_xml,
    load_graph_from_xml,
    save_graph_to_xml,
)
from metrograph.graph import Graph, create_graph


def graph_xml(size: str, *edges: tuple[str, str]) -> str:
    body = "".join(
        f"<Edge><Vertex1>{a}</Vertex1><Vertex2>{b}</Vertex2></Edge>" for a, b in edges
    )
    return f"<Graph><Size>{size}</Size><Edges>{body}</Edges></Graph>"


class TestLoad:
    def test_basic_graph(self) -> None:
        graph = load_graph_from_xml(graph_xml("3", ("0", "1"), ("2", "1")))
        assert graph.size == 3
        assert graph.adjacency.edges() == [(0, 1), (1, 2)]
        assert [v.degree for v in graph.vertices] == [1, 2, 1]

    def test_whitespace_around_numbers(self) -> None:
        graph = load_graph_from_xml(graph_xml(" 2 ", (" 0", "1 ")))
        assert graph.adjacency.get(0, 1)

    def test_edges_element_optional(self) -> None:
        graph = load_graph_from_xml("<Graph><Size>4</Size></Graph>")
        assert graph.size == 4
        assert graph.is_empty()

    def test_null_graph(self) -> None:
        assert load_graph_from_xml(graph_xml("0")).is_null

    def test_repeated_edge_is_idempotent(self) -> None:
        graph = load_graph_from_xml(graph_xml("3", ("0", "1"), ("1", "0")))
        assert graph.adjacency.edge_count() == 1
        assert graph.vertices[0].degree == 1

    def test_with_declaration(self) -> None:
        graph = load_graph_from_xml(XML_DECLARATION + graph_xml("2", ("0", "1")))
        assert graph.is_complete()


class TestLoadErrors:
    @pytest.mark.parametrize(
        "text, fragment",
        [
            ("<Graph><Size>3</Size>", "ParseError"),
            ("", "ParseError"),
            ("<Network><Size>3</Size></Network>", "expected 'Graph'"),
            ("<Graph><Edges/></Graph>", "contains no Size element"),
            ("<Graph><Size/></Graph>", "contains no Size element"),
            (graph_xml("three"), "ValueError"),
            (graph_xml("-1"), "InvalidConstructionError"),
            (graph_xml("3", ("0", "x")), "ValueError"),
            (graph_xml("3", ("0", "3")), "IndexOutOfRangeError"),
            (graph_xml("3", ("1", "1")), "InvariantViolationError"),
            (graph_xml("2", ("0", "1"), ("1", "0")), "cannot contain more than 1 edges"),
        ],
    )
    def test_invalid_documents(self, text: str, fragment: str) -> None:
        with pytest.raises(GraphXmlFormatError) as info:
            load_graph_from_xml(text)
        message = str(info.value)
        assert message.startswith("The input xml is in an invalid format: ")
        assert fragment in message

    def test_missing_vertex(self) -> None:
        text = "<Graph><Size>3</Size><Edges><Edge><Vertex1>0</Vertex1></Edge></Edges></Graph>"
        with pytest.raises(GraphXmlFormatError, match="edge element 1 contains no Vertex2"):
            load_graph_from_xml(text)

    def test_cause_is_chained(self) -> None:
        with pytest.raises(GraphXmlFormatError) as info:
            load_graph_from_xml(graph_xml("3", ("0", "5")))
        assert isinstance(info.value.__cause__, IndexError)

    def test_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            load_graph_from_xml("not xml")


class TestSave:
    def test_document_layout(self, path4: Graph) -> None:
        text = save_graph_to_xml(path4)
        assert text.startswith(XML_DECLARATION)
        assert "<Size>4</Size>" in text
        assert text.count("<Edge>") == 3
        assert "<Vertex1>1</Vertex1>" in text

    def test_reload_gives_same_graph(self, star5: Graph) -> None:
        restored = load_graph_from_xml(save_graph_to_xml(star5))
        assert restored.size == star5.size
        assert restored.adjacency.edges() == star5.adjacency.edges()

    def test_edgeless_graph(self) -> None:
        text = save_graph_to_xml(create_graph(2))
        assert "<Edge>" not in text
        assert load_graph_from_xml(text).is_empty()

    def test_edges_to_xml_keeps_order(self) -> None:
        text = edges_to_xml(3, [(2, 1), (0, 1)])
        assert text.index("<Vertex1>2</Vertex1>") < text.index("<Vertex1>0</Vertex1>")
