"""Error taxonomy shared by the resolver, the path engine and the outer surfaces."""

from __future__ import annotations


class GraphError(ValueError):
    """Base class for every error raised by graph-resolve."""


class InvalidInput(GraphError):
    """Raised at construction time when the input does not describe a valid graph."""


class CycleDetected(GraphError):
    """The dependency graph contains a cycle, so no ordering exists.

    ``node`` is one node found on the cycle, for diagnostics only.
    """

    def __init__(self, node: int | None = None):
        self.node = node
        if node is None:
            message = "Cycle detected! No valid ordering exists."
        else:
            message = f"Cycle detected at node {node}! No valid ordering exists."
        super().__init__(message)


class NotAllReachable(GraphError):
    """Some nodes cannot be reached from the source."""

    def __init__(self, unreachable: list[int]):
        self.unreachable = list(unreachable)
        super().__init__(
            f"{len(self.unreachable)} node(s) unreachable from source: {self.unreachable}"
        )
