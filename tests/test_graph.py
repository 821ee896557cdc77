import logging

import numpy as np
import pytest

from adjgraph import AdjListsGraph, pyadjgraph, pyenode
from adjgraph import InvalidArgumentError, IndexOutOfRangeError, InvalidStateError, AdjGraphError


class TestConstruction:
    def test_empty_graph(self):
        graph = AdjListsGraph(0)
        assert graph.nVertex == 0
        assert len(graph) == 0
        assert graph.num_edges() == 0

    def test_vertices_start_without_edges(self):
        graph = AdjListsGraph(5)
        assert graph.get_vertex_count() == 5
        assert graph.aAdjacency == [None] * 5
        assert all(graph.degree(v) == 0 for v in range(5))

    def test_negative_count_rejected(self):
        with pytest.raises(InvalidArgumentError) as excinfo:
            AdjListsGraph(-1)
        assert excinfo.value.context == {'nVertex': -1}

    @pytest.mark.parametrize("nVertex", [2.5, "3", None, True])
    def test_non_integer_count_rejected(self, nVertex):
        with pytest.raises(InvalidArgumentError):
            AdjListsGraph(nVertex)

    def test_numpy_integer_count_accepted(self):
        graph = AdjListsGraph(np.int64(3))
        assert graph.nVertex == 3
        assert type(graph.nVertex) is int

    def test_vertex_count_is_read_only(self):
        graph = AdjListsGraph(3)
        with pytest.raises(AttributeError):
            graph.nVertex = 4


class TestAddEdge:
    def test_records_are_stored_both_ways(self):
        graph = AdjListsGraph(2)
        assert graph.add_edge(0, 1) is True

        pRecord_0 = graph.aAdjacency[0]
        pRecord_1 = graph.aAdjacency[1]
        assert pRecord_0.dest == 1 and pRecord_0.next is None
        assert pRecord_1.dest == 0 and pRecord_1.next is None
        assert pRecord_0 is not pRecord_1
        assert pRecord_0.lEdgeID == pRecord_1.lEdgeID == 0

    def test_head_insertion_order(self):
        graph = AdjListsGraph(4)
        graph.add_edge(0, 1)
        graph.add_edge(0, 2)
        graph.add_edge(3, 0)
        assert graph.get_neighbors(0) == [3, 2, 1]
        assert graph.aAdjacency[0].dest == 3

    def test_degrees_and_count_increase_by_one(self):
        graph = AdjListsGraph(3)
        graph.add_edge(0, 1)
        before = [graph.degree(v) for v in range(3)]
        nEdge = graph.num_edges()

        graph.add_edge(1, 2)

        assert graph.degree(1) == before[1] + 1
        assert graph.degree(2) == before[2] + 1
        assert graph.degree(0) == before[0]
        assert graph.num_edges() == nEdge + 1

    def test_self_loop_adds_two_records(self):
        graph = AdjListsGraph(2)
        graph.add_edge(1, 1)
        assert graph.degree(1) == 2
        assert graph.num_edges() == 1
        assert graph.get_neighbors(1) == [1, 1]

    def test_multi_edge_is_not_deduplicated(self):
        graph = AdjListsGraph(2)
        graph.add_edge(0, 1)
        graph.add_edge(0, 1)
        assert graph.degree(0) == 2
        assert graph.degree(1) == 2
        assert graph.num_edges() == 2
        aID = sorted(record.lEdgeID for record in graph.aAdjacency[0])
        assert aID == [0, 1]

    @pytest.mark.parametrize("v1, v2", [(-1, 0), (0, 3), (3, 3), (0, -5), (1.0, 2), ("0", 1)])
    def test_invalid_index_is_skipped(self, v1, v2, caplog):
        graph = AdjListsGraph(3)
        graph.add_edge(0, 1)

        with caplog.at_level(logging.WARNING, logger="adjgraph.core.graph"):
            assert graph.add_edge(v1, v2) is False

        assert "Invalid parameter to add_edge" in caplog.text
        assert len(caplog.records) == 1
        assert graph.num_edges() == 1
        assert [graph.degree(v) for v in range(3)] == [1, 1, 0]

    def test_invalid_index_never_half_inserted(self):
        graph = AdjListsGraph(3)
        graph.add_edge(2, 3)
        assert graph.aAdjacency[2] is None

    def test_strict_mode_raises(self):
        graph = AdjListsGraph(3, iFlag_strict=True)
        with pytest.raises(InvalidArgumentError) as excinfo:
            graph.add_edge(0, 3)

        assert isinstance(excinfo.value, ValueError)
        assert excinfo.value.context == {'v1': 0, 'v2': 3, 'nVertex': 3}
        assert graph.num_edges() == 0
        assert graph.aAdjacency == [None, None, None]

    def test_directed_insert_does_not_revalidate(self, caplog):
        graph = AdjListsGraph(3)
        with caplog.at_level(logging.WARNING, logger="adjgraph.core.graph"):
            graph.add_edge(0, 1)
            graph._add_directed_edge(2, 0, lEdgeID=5)

        assert not caplog.records
        assert graph.aAdjacency[2].dest == 0
        assert graph.aAdjacency[2].lEdgeID == 5


class TestQueries:
    def test_degree_out_of_range(self):
        graph = AdjListsGraph(3)
        for vertex_id in (-1, 3, 10):
            with pytest.raises(IndexOutOfRangeError):
                graph.degree(vertex_id)

    def test_degree_error_is_an_index_error(self):
        graph = AdjListsGraph(1)
        with pytest.raises(IndexError):
            graph.degree(1)

    def test_num_edges_is_half_the_degree_sum(self):
        graph = AdjListsGraph(6)
        for v1, v2 in [(0, 1), (1, 2), (2, 2), (3, 4), (0, 1), (5, 0), (9, 1)]:
            graph.add_edge(v1, v2)
        total = sum(graph.degree(v) for v in range(6))
        assert total % 2 == 0
        assert graph.num_edges() == total // 2 == 6

    def test_degree_array(self, star5):
        aDegree = star5.get_degree_array()
        assert isinstance(aDegree, np.ndarray)
        assert aDegree.tolist() == [4, 1, 1, 1, 1]

    def test_degree_array_empty_graph(self):
        assert AdjListsGraph(0).get_degree_array().shape == (0,)

    def test_iter_edge_records(self, path3):
        aRecord = [(source, record.dest) for source, record in path3.iter_edge_records()]
        assert sorted(aRecord) == [(0, 1), (1, 0), (1, 2), (2, 1)]

    def test_neighbors_of_isolated_vertex(self):
        assert AdjListsGraph(2).get_neighbors(1) == []

    def test_neighbors_out_of_range(self):
        with pytest.raises(IndexOutOfRangeError):
            AdjListsGraph(2).get_neighbors(2)

    def test_repr(self, square):
        assert repr(square) == "pyadjgraph(nVertex=4, nEdge=4)"
        assert repr(AdjListsGraph(2)) == "AdjListsGraph(nVertex=2, nEdge=0)"


class TestEdgeRecord:
    def test_iterates_chain(self):
        pTail = pyenode(2)
        pHead = pyenode(1, pTail)
        assert [record.dest for record in pHead] == [1, 2]

    def test_repr(self):
        assert repr(pyenode(3, lEdgeID=7)) == "pyenode(dest=3, lEdgeID=7)"


class TestErrors:
    def test_to_dict(self):
        error = InvalidArgumentError("bad vertex", context={'v1': -1})
        assert error.to_dict() == {
            'code': 'InvalidArgumentError',
            'message': 'bad vertex',
            'context': {'v1': -1},
        }

    def test_hierarchy(self):
        assert issubclass(InvalidArgumentError, AdjGraphError)
        assert issubclass(IndexOutOfRangeError, AdjGraphError)
        assert issubclass(InvalidStateError, AdjGraphError)
        assert issubclass(InvalidStateError, RuntimeError)


class TestFacade:
    def test_strict_flag_is_forwarded(self):
        graph = pyadjgraph(2, iFlag_strict=True)
        assert graph.iFlag_strict is True
        with pytest.raises(InvalidArgumentError):
            graph.add_edge(0, 2)

    def test_basic_operations_delegate(self, path3):
        assert path3.nVertex == 3
        assert len(path3) == 3
        assert path3.get_vertex_count() == 3
        assert path3.num_edges() == 2
        assert path3.get_neighbors(1) == [2, 0]
        assert path3.get_degree_array().tolist() == [1, 2, 1]
        assert len(list(path3.iter_edge_records())) == 4
