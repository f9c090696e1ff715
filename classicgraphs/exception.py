"""
Exceptions raised by the graph store and the graph generators.
"""


class LoopError(ValueError):
    """Raised when an edge would connect a vertex to itself."""

    def __init__(self, msg: str = "The graph must not contain a loop!", *args):
        super().__init__(msg, *args)


class InvalidParameterError(ValueError):
    """
    Raised when a generator parameter violates the minimum
    the graph family needs to exist, e.g. a cycle on less than 3 vertices.
    """
