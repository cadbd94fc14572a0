"""Graph analyses: dependency ordering and shortest paths."""

from graph_resolve.analysis.dependency_graph import DependencyResolver
from graph_resolve.analysis.graph_models import (
    UNREACHABLE,
    DependencyGraph,
    DistanceMap,
    VisitState,
    WeightedGraph,
)
from graph_resolve.analysis.shortest_path import ShortestPathEngine

__all__ = [
    "DependencyResolver",
    "ShortestPathEngine",
    "DependencyGraph",
    "WeightedGraph",
    "DistanceMap",
    "VisitState",
    "UNREACHABLE",
]
