"""
This is a module for providing common types of graphs.

All the generators number the vertices contiguously from 0
and return a new :class:`~classicgraphs.graph.Graph` on every call.
Sizes that are too small for a family give the smallest graph
that makes sense (often the empty one), only the families
that cannot exist below a certain size raise
:class:`~classicgraphs.exception.InvalidParameterError`.
"""

import logging
from itertools import combinations, product
from typing import List

from classicgraphs.exception import InvalidParameterError
from classicgraphs.graph import Graph
from classicgraphs.util.sequences import node_range, pairwise_edges


MIN_CYCLE_SIZE = 3
"""Smallest number of vertices of a cycle without loops or parallel edges."""

MIN_CIRCULAR_LADDER_RAIL = 3
"""Smallest number of vertices in a single rail of a circular ladder."""


def CompleteGraph(number_of_nodes: int) -> Graph:
    """
    Return the complete graph on ``number_of_nodes`` vertices.

    Only edges are added, so there are no vertices for ``number_of_nodes <= 1``.

    Examples
    --------
    >>> CompleteGraph(3)
    Graph with vertices [0, 1, 2] and edges [[0, 1], [0, 2], [1, 2]]
    """
    G = Graph()
    G.add_edges(combinations(node_range(0, number_of_nodes), 2))
    return G


def LadderGraph(nodes_in_single_path: int) -> Graph:
    """
    Return the ladder graph with two rails of ``nodes_in_single_path`` vertices.

    The rails are the paths on ``[k, 2k)`` and ``[0, k)``,
    the rungs join ``i`` and ``i + k``.

    Examples
    --------
    For ``nodes_in_single_path = 3`` you get this graph::

        3-4-5
        | | |
        0-1-2
    """
    k = nodes_in_single_path
    G = Graph()
    G.add_edges(pairwise_edges(node_range(k, 2 * k)))

    for i in node_range(0, k):
        G.add_edge(i, i + k)
        if i != k - 1:
            G.add_edge(i, i + 1)

    return G


def CircularLadderGraph(nodes_in_single_path: int) -> Graph:
    """
    Return the circular ladder graph, i.e. the ladder
    with both of its rails closed into cycles.

    Raises
    ------
    InvalidParameterError
        If ``nodes_in_single_path`` is less than 3.

    Examples
    --------
    >>> G = CircularLadderGraph(4)
    >>> G.number_of_nodes(), G.number_of_edges()
    (8, 12)
    """
    if nodes_in_single_path < MIN_CIRCULAR_LADDER_RAIL:
        raise InvalidParameterError(
            f"nodes_in_single_path must be at least {MIN_CIRCULAR_LADDER_RAIL}, "
            f"but is {nodes_in_single_path}!"
        )

    k = nodes_in_single_path
    G = LadderGraph(k)
    G.add_edge(0, k - 1)
    G.add_edge(k, 2 * k - 1)
    return G


def WheelGraph(number_of_nodes: int) -> Graph:
    """
    Return the wheel-like graph with the hub 0 and the rim ``1, ..., n - 1``.

    Every rim vertex is joined to the hub and to its predecessor.
    The rim is not closed, there is no edge between ``n - 1`` and ``1``.
    The hub is always present, even if ``number_of_nodes <= 1``.

    Examples
    --------
    >>> WheelGraph(4)
    Graph with vertices [0, 1, 2, 3] and edges [[0, 1], [0, 2], [0, 3], [1, 2], [2, 3]]
    """
    G = Graph.from_vertices([0])
    for i in node_range(1, number_of_nodes):
        G.add_edge(i - 1, i)
        G.add_edge(0, i)
    return G


def CompleteMultipartiteGraph(*sizes: int) -> Graph:
    """
    Return the complete multipartite graph with partitions of the given sizes.

    The partitions take consecutive vertices in the given order.
    Two vertices are adjacent if and only if they lie in different partitions.
    Vertices of partitions without neighbors are still part of the graph.

    Raises
    ------
    InvalidParameterError
        If any of the sizes is negative.

    Examples
    --------
    >>> CompleteMultipartiteGraph(1, 2)
    Graph with vertices [0, 1, 2] and edges [[0, 1], [0, 2]]
    """
    if any(size < 0 for size in sizes):
        raise InvalidParameterError(
            f"Partition sizes must be non-negative, but are {list(sizes)}!"
        )

    partitions: List[range] = []
    start = 0
    for size in sizes:
        partitions.append(node_range(start, start + size))
        start += size

    G = Graph()
    for partition in partitions:
        G.add_vertices(partition)

    for a, b in combinations(partitions, 2):
        G.add_edges(product(a, b))

    return G


def TuranGraph(n: int, r: int) -> Graph:
    """
    Return the Turán graph, the complete ``r``-partite graph on ``n`` vertices
    with partition sizes as equal as possible.

    The first ``n mod r`` partitions get ``ceil(n / r)`` vertices,
    the others ``floor(n / r)``.
    For ``r <= 0`` or ``n < 0`` the empty graph is returned.

    Examples
    --------
    >>> G = TuranGraph(6, 3)
    >>> G.number_of_nodes(), G.number_of_edges()
    (6, 12)
    """
    if r <= 0 or n < 0:
        return NullGraph()

    q, rem = divmod(n, r)
    sizes = [q + 1] * rem + [q] * (r - rem)
    return CompleteMultipartiteGraph(*sizes)


def TrivialGraph() -> Graph:
    """Return the graph with the single vertex 0 and no edges."""
    return Graph.from_vertices([0])


def NullGraph() -> Graph:
    """Return the graph without vertices and edges."""
    return Graph()


def TadpoleGraph(cycle_size: int, path_size: int) -> Graph:
    """
    Return the tadpole graph: the cycle on ``cycle_size`` vertices
    with a path of ``path_size`` more vertices attached by a bridge.

    The cycle is on ``[0, cycle_size)``, the path continues
    from the vertex ``cycle_size - 1`` over ``[cycle_size, cycle_size + path_size)``.

    Raises
    ------
    InvalidParameterError
        If ``cycle_size`` is less than 3.

    Examples
    --------
    >>> TadpoleGraph(3, 2)
    Graph with vertices [0, 1, 2, 3, 4] and edges [[0, 1], [0, 2], [1, 2], [2, 3], [3, 4]]
    """
    if cycle_size < MIN_CYCLE_SIZE:
        raise InvalidParameterError(
            f"cycle_size must be at least {MIN_CYCLE_SIZE}, but is {cycle_size}!"
        )

    G = Graph()
    for i in node_range(0, cycle_size):
        G.add_edge(i, (i + 1) % cycle_size)
    G.add_edges(pairwise_edges(node_range(cycle_size - 1, cycle_size + path_size)))
    return G


def StarGraph(number_of_nodes: int) -> Graph:
    """
    Return the star graph with the center 0 and ``number_of_nodes - 1`` leaves.

    Examples
    --------
    >>> StarGraph(4)
    Graph with vertices [0, 1, 2, 3] and edges [[0, 1], [0, 2], [0, 3]]
    """
    G = Graph()
    for i in node_range(1, number_of_nodes):
        G.add_edge(0, i)
    return G


def PathGraph(number_of_nodes: int) -> Graph:
    """
    Return the path graph with ``number_of_nodes`` vertices.

    There are no vertices for ``number_of_nodes <= 1``.
    """
    G = Graph()
    G.add_edges(pairwise_edges(node_range(0, number_of_nodes)))
    return G


def LollipopGraph(complete_graph_size: int, path_graph_size: int) -> Graph:
    """
    Return the lollipop graph: the complete graph on ``complete_graph_size``
    vertices with a path continuing from its last vertex
    over ``path_graph_size`` more vertices.

    If the complete graph has no vertices, the path starts at 0.

    Examples
    --------
    >>> LollipopGraph(3, 1)
    Graph with vertices [0, 1, 2, 3] and edges [[0, 1], [0, 2], [1, 2], [2, 3]]
    """
    if complete_graph_size < 0:
        logging.warning(
            f"Negative complete graph size {complete_graph_size}, "
            f"only a path is generated"
        )
    clique_size = max(complete_graph_size, 0)

    G = CompleteGraph(clique_size)
    G.add_edges(
        pairwise_edges(
            node_range(
                max(clique_size - 1, 0), complete_graph_size + path_graph_size
            )
        )
    )
    return G


def CirculantGraph(number_of_nodes: int, offset: int) -> Graph:
    """
    Return the circulant graph on ``number_of_nodes`` vertices
    where every vertex ``i`` is joined to ``(i + offset) mod number_of_nodes``.

    Edges that would be loops, i.e. when ``offset`` is a multiple
    of ``number_of_nodes``, are skipped.
    For ``number_of_nodes <= 0`` the empty graph is returned.

    Examples
    --------
    >>> CirculantGraph(6, 2)
    Graph with vertices [0, 1, 2, 3, 4, 5] and edges [[0, 2], [0, 4], [1, 3], [1, 5], [2, 4], [3, 5]]
    """
    if number_of_nodes <= 0:
        return NullGraph()

    G = Graph.from_vertices(node_range(0, number_of_nodes))
    if offset % number_of_nodes == 0:
        logging.warning(
            f"Offset {offset} is a multiple of {number_of_nodes}, "
            f"the circulant graph has no edges"
        )
        return G

    for i in node_range(0, number_of_nodes):
        G.add_edge(i, (i + offset) % number_of_nodes)
    return G


def CycleGraph(number_of_nodes: int) -> Graph:
    """
    Return the cycle graph on ``number_of_nodes`` vertices.

    For ``number_of_nodes <= 0`` the empty graph is returned,
    a single vertex has no edges and two vertices share one edge.

    Examples
    --------
    >>> CycleGraph(4)
    Graph with vertices [0, 1, 2, 3] and edges [[0, 1], [0, 3], [1, 2], [2, 3]]
    """
    if number_of_nodes == 1:
        return TrivialGraph()
    return CirculantGraph(number_of_nodes, 1)


def BarbellGraph(m1: int, m2: int) -> Graph:
    """
    Return the barbell graph: two complete graphs on ``m1`` vertices
    joined by a path through ``m2`` more vertices.

    The complete graphs are on ``[0, m1)`` and ``[m1 + m2, 2 * m1 + m2)``,
    the path goes from ``m1 - 1`` over ``[m1, m1 + m2)`` to ``m1 + m2``.

    Raises
    ------
    InvalidParameterError
        If ``m1 < 2`` or ``m2 < 0``.

    Examples
    --------
    >>> G = BarbellGraph(3, 1)
    >>> G.number_of_nodes(), G.number_of_edges()
    (7, 8)
    """
    if m1 < 2:
        raise InvalidParameterError(f"m1 must be at least 2, but is {m1}!")
    if m2 < 0:
        raise InvalidParameterError(f"m2 must be non-negative, but is {m2}!")

    G = CompleteGraph(m1)
    G.add_edges(pairwise_edges(node_range(m1 - 1, m1 + m2 + 1)))
    G.add_edges(combinations(node_range(m1 + m2, 2 * m1 + m2), 2))
    return G


def FullRaryTree(r: int, number_of_nodes: int) -> Graph:
    """
    Return the full ``r``-ary tree on ``number_of_nodes`` vertices.

    Vertices are filled level by level, the parent of ``i > 0``
    is ``(i - 1) // r``.

    Raises
    ------
    InvalidParameterError
        If ``r < 1``.

    Examples
    --------
    >>> FullRaryTree(2, 5)
    Graph with vertices [0, 1, 2, 3, 4] and edges [[0, 1], [0, 2], [1, 3], [1, 4]]
    """
    if r < 1:
        raise InvalidParameterError(f"r must be at least 1, but is {r}!")

    G = Graph.from_vertices(node_range(0, number_of_nodes))
    for i in node_range(1, number_of_nodes):
        G.add_edge((i - 1) // r, i)
    return G


def BalancedTree(r: int, h: int) -> Graph:
    """
    Return the perfectly balanced ``r``-ary tree of height ``h``.

    Raises
    ------
    InvalidParameterError
        If ``r < 1`` or ``h < 0``.

    Examples
    --------
    >>> G = BalancedTree(2, 2)
    >>> G.number_of_nodes(), G.number_of_edges()
    (7, 6)
    """
    if h < 0:
        raise InvalidParameterError(f"h must be non-negative, but is {h}!")
    if r < 1:
        raise InvalidParameterError(f"r must be at least 1, but is {r}!")
    return FullRaryTree(r, sum(r**level for level in range(h + 1)))


def BinomialTree(order: int) -> Graph:
    """
    Return the binomial tree of the given order with ``2**order`` vertices.

    The tree of order ``k`` consists of two trees of order ``k - 1``,
    the second one shifted by ``2**(k - 1)``, with their roots joined.

    Raises
    ------
    InvalidParameterError
        If ``order`` is negative.

    Examples
    --------
    >>> BinomialTree(2)
    Graph with vertices [0, 1, 2, 3] and edges [[0, 1], [0, 2], [2, 3]]
    """
    if order < 0:
        raise InvalidParameterError(f"order must be non-negative, but is {order}!")

    G = TrivialGraph()
    n = 1
    for _ in range(order):
        G.add_edges([(u + n, v + n) for u, v in G.edges])
        G.add_edge(0, n)
        n *= 2
    return G
