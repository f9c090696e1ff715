"""

Module for defining data type used for type hinting.

"""

from typing import Tuple, TypeVar


Vertex = int
"""
Vertices are non-negative integers, numbered contiguously from 0 by the generators.
"""

Edge = Tuple[Vertex, Vertex]
"""
An Edge is a pair of distinct :obj:`Vertices <classicgraphs.data_type.Vertex>`.
The order of the two vertices carries no meaning.
"""

GraphType = TypeVar("Graph")
