"""
Module with the undirected graph all the generators build.
"""

from __future__ import annotations

from typing import Iterable, List, Set, FrozenSet

import networkx as nx

from classicgraphs.data_type import Vertex, Edge, GraphType
from classicgraphs.exception import LoopError


class Graph(nx.Graph):
    """
    Class representing a simple undirected graph.

    One option for *incoming_graph_data* is a list of edges.
    See :class:`networkx.Graph` for the other input formats
    or use class methods :meth:`~Graph.from_vertices_and_edges`
    or :meth:`~Graph.from_vertices` when specifying the vertex set is needed.

    Adding an edge adds its endpoints, adding an edge or a vertex
    that is already present does nothing. Loops are rejected
    with :class:`~classicgraphs.exception.LoopError`.
    The neighbors of a vertex are kept in insertion order.

    Examples
    --------
    >>> from classicgraphs import Graph
    >>> G = Graph([(0,1), (1,2), (2,3), (0,3)])
    >>> print(G)
    Graph with vertices [0, 1, 2, 3] and edges [[0, 1], [0, 3], [1, 2], [2, 3]]

    >>> G = Graph()
    >>> G.add_vertices([0,2,5,7])
    >>> G.add_edges([(0,7), (2,5), (7,0)])
    >>> print(G)
    Graph with vertices [0, 2, 5, 7] and edges [[0, 7], [2, 5]]

    Notes
    -----
    This class inherits the class :class:`networkx.Graph`,
    so the usual queries like ``number_of_nodes``, ``has_edge``,
    ``neighbors`` or ``degree`` are available,
    as are the :doc:`NetworkX <networkx:index>` algorithms.
    """

    def __str__(self) -> str:
        """
        Return the string representation.
        """
        return (
            self.__class__.__name__
            + f" with vertices {self.vertex_list()} and edges {self.edge_list()}"
        )

    def __repr__(self) -> str:
        """
        Return a representation.
        """
        return self.__str__()

    @classmethod
    def from_vertices_and_edges(
        cls, vertices: Iterable[Vertex], edges: Iterable[Edge]
    ) -> GraphType:
        """
        Create a graph from a list of vertices and edges.

        Parameters
        ----------
        vertices
        edges:
            Edges are tuples of vertices. They can either be a tuple ``(i,j)`` or
            a list ``[i,j]`` with two entries.

        Examples
        --------
        >>> Graph.from_vertices_and_edges([0, 1, 2, 3], [(0, 1), (1, 2)])
        Graph with vertices [0, 1, 2, 3] and edges [[0, 1], [1, 2]]
        """
        G = cls()
        G.add_nodes_from(vertices)
        for edge in edges:
            if len(edge) != 2 or not edge[0] in G.nodes or not edge[1] in G.nodes:
                raise TypeError(
                    f"Edge {edge} does not have the correct format "
                    "or has adjacent vertices the graph does not contain"
                )
            G.add_edge(*edge)
        return G

    @classmethod
    def from_vertices(cls, vertices: Iterable[Vertex]) -> GraphType:
        """
        Create a graph with no edges from a list of vertices.

        Examples
        --------
        >>> from classicgraphs import Graph
        >>> G = Graph.from_vertices([3, 1, 7, 2, 12, 3, 0])
        >>> G
        Graph with vertices [0, 1, 2, 3, 7, 12] and edges []
        """
        return cls.from_vertices_and_edges(vertices, [])

    def add_edge(self, u_of_edge: Vertex, v_of_edge: Vertex, **attr) -> None:
        """
        Add the edge ``u_of_edge``-``v_of_edge`` and its endpoints.

        Adding an edge that is already present in either orientation
        does not change the graph.

        Raises
        ------
        LoopError
            If both endpoints are the same vertex.
        """
        if u_of_edge == v_of_edge:
            raise LoopError(f"Edge ({u_of_edge}, {v_of_edge}) is a loop!")
        super().add_edge(u_of_edge, v_of_edge, **attr)

    def add_edges_from(self, ebunch_to_add, **attr) -> None:
        """
        Same as :meth:`networkx.Graph.add_edges_from`, but loops are rejected.
        The graph is not modified if any of the edges is a loop.
        """
        ebunch_to_add = list(ebunch_to_add)
        for edge in ebunch_to_add:
            if len(edge) >= 2 and edge[0] == edge[1]:
                raise LoopError(f"Edge ({edge[0]}, {edge[1]}) is a loop!")
        super().add_edges_from(ebunch_to_add, **attr)

    def add_vertex(self, vertex: Vertex) -> None:
        """Alias for :meth:`networkx.Graph.add_node`."""
        self.add_node(vertex)

    def add_vertices(self, vertices: Iterable[Vertex]) -> None:
        """Alias for :meth:`networkx.Graph.add_nodes_from`."""
        self.add_nodes_from(vertices)

    def add_edges(self, edges: Iterable[Edge]) -> None:
        """Alias for :meth:`networkx.Graph.add_edges_from`."""
        self.add_edges_from(edges)

    def vertex_list(self) -> List[Vertex]:
        """
        Return the list of vertices.

        The output is sorted if possible,
        otherwise, the internal order is used instead.
        """
        try:
            return sorted(self.nodes)
        except TypeError:
            return list(self.nodes)

    def edge_list(self) -> List[Edge]:
        """
        Return the list of edges.

        The output is sorted if possible,
        otherwise, the internal order is used instead.

        Examples
        --------
        >>> Graph([(2, 1), (0, 2)]).edge_list()
        [[0, 2], [1, 2]]
        """
        try:
            return sorted([sorted(e) for e in self.edges])
        except TypeError:
            return list(self.edges)

    def edge_set(self) -> Set[FrozenSet[Vertex]]:
        """
        Return the edges as a set of unordered pairs.

        Useful for comparing two graphs regardless of the order
        the edges were inserted in.
        """
        return {frozenset(e) for e in self.edges}

    def neighbor_list(self, vertex: Vertex) -> List[Vertex]:
        """
        Return the neighbors of ``vertex`` in the order they were added.

        Examples
        --------
        >>> G = Graph([(1, 3), (1, 0), (2, 1)])
        >>> G.neighbor_list(1)
        [3, 0, 2]
        """
        return list(self.adj[vertex])

    def degree_sequence(self, vertex_order: List[Vertex] = None) -> list[int]:
        """
        Return a list of degrees of the vertices of the graph.

        Parameters
        ----------
        vertex_order:
            By listing vertices in the preferred order, the degree_sequence
            can be computed in a way the user expects. If no vertex order is
            provided, :meth:`~.Graph.vertex_list()` is used.

        Examples
        --------
        >>> G = Graph([(0,1), (1,2)])
        >>> G.degree_sequence()
        [1, 2, 1]
        """
        if vertex_order is None:
            vertex_order = self.vertex_list()
        else:
            if not set(self.nodes) == set(
                vertex_order
            ) or not self.number_of_nodes() == len(vertex_order):
                raise IndexError(
                    "The vertex_order must contain the same vertices as the graph!"
                )
        return [self.degree(v) for v in vertex_order]

    def min_degree(self) -> int:
        """
        Return the minimum of the vertex degrees.

        Examples
        --------
        >>> G = Graph([(0,1), (1,2)])
        >>> G.min_degree()
        1
        """
        return min([self.degree(v) for v in self.nodes])

    def max_degree(self) -> int:
        """
        Return the maximum of the vertex degrees.

        Examples
        --------
        >>> G = Graph([(0,1), (1,2)])
        >>> G.max_degree()
        2
        """
        return max([self.degree(v) for v in self.nodes])
