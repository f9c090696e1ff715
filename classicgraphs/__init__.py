"""
Generators of classic undirected graph families.
"""

from classicgraphs.data_type import Vertex, Edge
from classicgraphs.exception import LoopError, InvalidParameterError
from classicgraphs.graph import Graph
from classicgraphs.util.sequences import node_range, pairwise_edges

from classicgraphs.graphDB import (
    CompleteGraph,
    LadderGraph,
    CircularLadderGraph,
    WheelGraph,
    CompleteMultipartiteGraph,
    TuranGraph,
    TrivialGraph,
    NullGraph,
    TadpoleGraph,
    StarGraph,
    PathGraph,
    LollipopGraph,
    CirculantGraph,
    CycleGraph,
    BarbellGraph,
    FullRaryTree,
    BalancedTree,
    BinomialTree,
)
