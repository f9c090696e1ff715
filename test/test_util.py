from classicgraphs.util.sequences import node_range, pairwise_edges

import pytest


@pytest.mark.parametrize(
    "low, high, result",
    [
        [0, 4, [0, 1, 2, 3]],
        [3, 5, [3, 4]],
        [2, 2, []],
        [5, 2, []],
        [-2, 0, [-2, -1]],
    ],
)
def test_node_range(low, high, result):
    assert list(node_range(low, high)) == result


def test_node_range_restartable():
    r = node_range(1, 4)
    assert list(r) == [1, 2, 3]
    assert list(r) == [1, 2, 3]


@pytest.mark.parametrize(
    "vertices, result",
    [
        [[], []],
        [[0], []],
        [[0, 1], [(0, 1)]],
        [node_range(3, 6), [(3, 4), (4, 5)]],
        [[5, 2, 7], [(5, 2), (2, 7)]],
    ],
)
def test_pairwise_edges(vertices, result):
    assert list(pairwise_edges(vertices)) == result


def test_pairwise_edges_lazy():
    def vertices():
        yield 0
        yield 1
        raise AssertionError("consumed too far")

    edges = pairwise_edges(vertices())
    assert next(edges) == (0, 1)
