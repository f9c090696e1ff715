from classicgraphs.graph import Graph
import classicgraphs.graphDB as graphs
from classicgraphs.exception import LoopError

import networkx as nx
import pytest


def test_str():
    G = Graph([[2, 1], [2, 3]])
    assert str(G) == "Graph with vertices [1, 2, 3] and edges [[1, 2], [2, 3]]"
    G = Graph.from_vertices([3, 1, 0])
    assert str(G) == "Graph with vertices [0, 1, 3] and edges []"
    assert repr(G) == str(G)


def test_vertex_edge_lists():
    G = Graph([[2, 1], [2, 3]])
    assert G.vertex_list() == [1, 2, 3]
    assert G.edge_list() == [[1, 2], [2, 3]]
    assert G.edge_set() == {frozenset([1, 2]), frozenset([2, 3])}
    G = Graph.from_vertices([4, 0, 2])
    assert G.vertex_list() == [0, 2, 4]
    assert G.edge_list() == []


def test_from_vertices_and_edges():
    G = Graph.from_vertices_and_edges([0, 1, 2, 3], [(0, 1), [2, 1]])
    assert G.vertex_list() == [0, 1, 2, 3]
    assert G.edge_list() == [[0, 1], [1, 2]]
    with pytest.raises(TypeError):
        Graph.from_vertices_and_edges([0, 1], [(0, 2)])
    with pytest.raises(TypeError):
        Graph.from_vertices_and_edges([0, 1, 2], [(0, 1, 2)])


def test_add_vertex_idempotent():
    G = Graph()
    G.add_vertex(0)
    G.add_vertex(0)
    G.add_vertices([0, 1, 1])
    assert G.number_of_nodes() == 2
    assert G.number_of_edges() == 0


def test_add_edge_adds_endpoints():
    G = Graph()
    G.add_edge(3, 5)
    assert G.vertex_list() == [3, 5]
    assert G.has_edge(3, 5)
    assert G.has_edge(5, 3)
    assert G.neighbor_list(3) == [5]
    assert G.neighbor_list(5) == [3]


@pytest.mark.parametrize("edge", [(0, 1), (1, 0)])
def test_add_edge_idempotent(edge):
    G = Graph()
    G.add_edge(0, 1)
    G.add_edge(*edge)
    G.add_edges([edge, edge])
    assert G.number_of_edges() == 1
    assert G.neighbor_list(0) == [1]
    assert G.neighbor_list(1) == [0]


def test_neighbor_order():
    G = Graph()
    G.add_edges([(0, 3), (0, 1), (2, 0), (1, 0)])
    assert G.neighbor_list(0) == [3, 1, 2]
    assert G.neighbor_list(1) == [0]


def test_symmetry():
    G = graphs.TadpoleGraph(4, 3)
    for u in G.nodes:
        for v in G.neighbor_list(u):
            assert u in G.neighbor_list(v)


def test_loops():
    G = Graph([(0, 1)])
    with pytest.raises(LoopError):
        G.add_edge(1, 1)
    with pytest.raises(LoopError):
        G.add_edges([(1, 2), (2, 2)])
    # networkx wraps errors raised while reading an edge list
    with pytest.raises((LoopError, nx.NetworkXError)):
        Graph([(0, 1), (1, 1)])
    assert G.edge_list() == [[0, 1]]
    assert G.neighbor_list(1) == [0]


def test_degrees():
    G = Graph([(0, 1), (1, 2)])
    assert G.degree_sequence() == [1, 2, 1]
    assert G.degree_sequence(vertex_order=[1, 0, 2]) == [2, 1, 1]
    assert G.min_degree() == 1
    assert G.max_degree() == 2
    with pytest.raises(IndexError):
        G.degree_sequence(vertex_order=[0, 1])
