import pytest

from adjgraph import pyadjgraph


def _build_graph(nVertex, aEdge, **kwargs):
    graph = pyadjgraph(nVertex, **kwargs)
    for v1, v2 in aEdge:
        graph.add_edge(v1, v2)
    return graph


@pytest.fixture
def square():
    """Four vertices joined in a single cycle."""
    return _build_graph(4, [(0, 1), (1, 2), (2, 3), (3, 0)])


@pytest.fixture
def path3():
    return _build_graph(3, [(0, 1), (1, 2)])


@pytest.fixture
def star5():
    return _build_graph(5, [(0, 1), (0, 2), (0, 3), (0, 4)])


@pytest.fixture
def two_squares():
    """Two disjoint 4-cycles on 8 vertices."""
    return _build_graph(8, [(0, 1), (1, 2), (2, 3), (3, 0),
                           (4, 5), (5, 6), (6, 7), (7, 4)])


@pytest.fixture
def make_graph():
    """Factory building a pyadjgraph from a vertex count and an edge list."""
    return _build_graph
