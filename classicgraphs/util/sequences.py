from typing import Iterable, Iterator

from more_itertools import pairwise

from classicgraphs.data_type import Edge, Vertex


def node_range(low: int, high: int) -> range:
    """
    Return the vertices ``low, low + 1, ..., high - 1``.

    The result is lazy and can be iterated over repeatedly.
    It is empty if ``low >= high``.

    Examples
    --------
    >>> list(node_range(2, 5))
    [2, 3, 4]
    >>> list(node_range(3, 3))
    []
    """
    return range(low, high)


def pairwise_edges(vertices: Iterable[Vertex]) -> Iterator[Edge]:
    """
    Return the edges joining consecutive vertices of a finite sequence,
    i.e. the edges of the path visiting ``vertices`` in order.

    Less than two vertices yield no edges.

    Examples
    --------
    >>> list(pairwise_edges(node_range(0, 4)))
    [(0, 1), (1, 2), (2, 3)]
    >>> list(pairwise_edges([7]))
    []
    """
    return pairwise(vertices)
