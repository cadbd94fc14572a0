"""Data models for the adjacency representations, visitation state and distance table."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from numbers import Real

from graph_resolve.errors import InvalidInput

UNREACHABLE = math.inf


class VisitState(enum.Enum):
    UNVISITED = 0
    IN_PROGRESS = 1
    DONE = 2


@dataclass
class DependencyGraph:
    node_count: int
    forward: list[list[int]] = field(default_factory=list)  # node -> [targets], supplied order
    edge_count: int = 0

    def successors(self, node: int) -> list[int]:
        return self.forward[node]

    def reversed(self) -> DependencyGraph:
        """Return a graph with every edge flipped."""
        reverse: list[list[int]] = [[] for _ in range(self.node_count)]
        for source, targets in enumerate(self.forward):
            for target in targets:
                reverse[target].append(source)
        return DependencyGraph(self.node_count, reverse, self.edge_count)


@dataclass
class WeightedGraph:
    node_count: int
    forward: list[list[tuple[int, float]]] = field(default_factory=list)  # node -> [(target, weight)]
    edge_count: int = 0

    def outgoing(self, node: int) -> list[tuple[int, float]]:
        return self.forward[node]


@dataclass
class DistanceMap:
    """Minimum distance from ``source`` to every node; ``UNREACHABLE`` where no path exists."""
    source: int
    distances: list[float] = field(default_factory=list)

    def __getitem__(self, node: int) -> float:
        return self.distances[node]

    def __len__(self) -> int:
        return len(self.distances)

    def __iter__(self):
        return iter(range(len(self.distances)))

    def items(self):
        return enumerate(self.distances)

    def is_reachable(self, node: int) -> bool:
        return self.distances[node] != UNREACHABLE

    def reachable(self) -> list[int]:
        return [node for node, dist in enumerate(self.distances) if dist != UNREACHABLE]

    def unreachable(self) -> list[int]:
        return [node for node, dist in enumerate(self.distances) if dist == UNREACHABLE]

    def to_dict(self) -> dict[int, float | None]:
        """JSON-friendly view; unreachable nodes map to ``None``."""
        return {
            node: (None if dist == UNREACHABLE else dist)
            for node, dist in enumerate(self.distances)
        }


def check_node_count(node_count) -> int:
    if isinstance(node_count, bool) or not isinstance(node_count, int):
        raise InvalidInput(f"Node count must be an integer, got {node_count!r}")
    if node_count < 0:
        raise InvalidInput(f"Node count must be >= 0, got {node_count}")
    return node_count


def check_node(node_count: int, node, role: str = "node") -> int:
    if isinstance(node, bool) or not isinstance(node, int):
        raise InvalidInput(f"{role} must be an integer node id, got {node!r}")
    if not 0 <= node < node_count:
        raise InvalidInput(f"{role} {node} is outside [0, {node_count})")
    return node


def check_weight(weight) -> float:
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise InvalidInput(f"Edge weight must be a number, got {weight!r}")
    if math.isnan(weight) or math.isinf(weight):
        raise InvalidInput(f"Edge weight must be finite, got {weight}")
    if weight < 0:
        raise InvalidInput(f"Edge weight must be >= 0, got {weight}")
    return weight
