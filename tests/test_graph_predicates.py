"""Tests for graph-level predicates and kinds."""

import pytest

from metrograph.graph import Graph, GraphKind, create_graph, create_graph_from_edges


class TestNullAndSingleton:
    def test_null_graph(self) -> None:
        graph = create_graph(0)
        assert graph.is_null and not graph.is_singleton
        assert graph.vertices == ()

    def test_singleton_graph(self) -> None:
        graph = create_graph(1)
        assert graph.is_singleton and not graph.is_null
        assert len(graph.vertices) == 1


class TestEmptyComplete:
    def test_degenerate_graphs_are_empty_not_complete(self) -> None:
        for n in (0, 1):
            graph = create_graph(n)
            assert graph.is_empty()
            assert not graph.is_complete()
            graph.do_complete()
            assert graph.is_empty()
            assert not graph.is_complete()

    @pytest.mark.parametrize("n", [2, 3, 6])
    def test_do_empty_then_is_empty(self, n: int) -> None:
        graph = create_graph(n)
        graph.adjacency.set(0, 1, True)
        assert not graph.is_empty()
        graph.do_empty()
        assert graph.is_empty()

    @pytest.mark.parametrize("n", [2, 3, 6])
    def test_do_complete_then_is_complete(self, n: int) -> None:
        graph = create_graph(n)
        assert not graph.is_complete()
        graph.do_complete()
        assert graph.is_complete()
        assert graph.adjacency.edge_count() == graph.max_edge_count

    def test_triangle_is_complete(self, triangle: Graph) -> None:
        assert triangle.is_complete()
        assert not triangle.is_empty()

    def test_path_neither_empty_nor_complete(self, path4: Graph) -> None:
        assert not path4.is_empty()
        assert not path4.is_complete()


class TestGraphKind:
    def test_simple_graph_flags(self) -> None:
        graph = create_graph(3)
        assert graph.kind is GraphKind.SIMPLE
        assert not graph.is_directed
        assert not graph.is_loop_graph

    @pytest.mark.parametrize(
        "kind,expected",
        [
            (GraphKind.SIMPLE, 6),
            (GraphKind.DIRECTED, 12),
            (GraphKind.LOOP, 10),
            (GraphKind.DIRECTED_LOOP, 16),
        ],
    )
    def test_max_edge_count(self, kind: GraphKind, expected: int) -> None:
        assert kind.max_edge_count(4) == expected

    @pytest.mark.parametrize(
        "kind", [GraphKind.DIRECTED, GraphKind.LOOP, GraphKind.DIRECTED_LOOP]
    )
    def test_other_kinds_not_implemented(self, kind: GraphKind) -> None:
        with pytest.raises(NotImplementedError):
            create_graph(3, kind)


class TestFactories:
    def test_create_graph_from_edges(self) -> None:
        graph = create_graph_from_edges(4, [(0, 1), (3, 2), (1, 0)])
        assert graph.adjacency.edges() == [(0, 1), (2, 3)]
        assert [v.degree for v in graph.vertices] == [1, 1, 1, 1]

    def test_repr(self) -> None:
        graph = create_graph_from_edges(3, [(0, 1)])
        assert repr(graph) == "Graph(size=3, kind=simple, edges=1)"

    def test_repr_while_matrix_is_built(self) -> None:
        seen: list[str] = []

        class ReprOnAttach(Graph):
            @property
            def adjacency(self):
                seen.append(repr(self))
                return super().adjacency

        ReprOnAttach(2)
        assert seen[0] == "Graph(size=2, kind=simple, edges=?)"
