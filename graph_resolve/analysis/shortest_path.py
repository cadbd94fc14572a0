"""Shortest-path engine: Dijkstra over a weighted adjacency list with lazy stale-entry removal."""

from __future__ import annotations

import heapq
import logging
from typing import Callable, Iterable

from graph_resolve.analysis.graph_models import (
    UNREACHABLE,
    DistanceMap,
    WeightedGraph,
    check_node,
    check_node_count,
    check_weight,
)
from graph_resolve.errors import InvalidInput, NotAllReachable
from graph_resolve.models import WeightedEdge

logger = logging.getLogger(__name__)

FinalizeCallback = Callable[[int, float], None]


class ShortestPathEngine:
    """Single-source shortest paths over non-negative edge weights.

    Args:
        on_finalize: Optional callback invoked as ``on_finalize(node, distance)``
            each time a node's distance becomes final.
    """

    def __init__(self, on_finalize: FinalizeCallback | None = None):
        self.on_finalize = on_finalize

    def build(self, node_count: int, edges: Iterable[WeightedEdge]) -> WeightedGraph:
        check_node_count(node_count)
        graph = WeightedGraph(node_count, [[] for _ in range(node_count)])

        for edge in edges:
            try:
                source, target, weight = edge
            except (TypeError, ValueError):
                raise InvalidInput(f"Weighted edge must be a (from, to, weight) triple, got {edge!r}")
            check_node(node_count, source, "Edge source")
            check_node(node_count, target, "Edge target")
            check_weight(weight)
            graph.forward[source].append((target, weight))
            graph.edge_count += 1

        return graph

    def shortest_paths(
        self, node_count: int, edges: Iterable[WeightedEdge], source: int,
    ) -> DistanceMap:
        """Return the minimum distance from ``source`` to every node."""
        graph = self.build(node_count, edges)
        distances, _ = self._run(graph, source)
        return DistanceMap(source=source, distances=distances)

    def shortest_path(
        self, node_count: int, edges: Iterable[WeightedEdge], source: int, target: int,
    ) -> list[int] | None:
        """Return one minimum-weight path ``[source, ..., target]``, or None if unreachable."""
        graph = self.build(node_count, edges)
        check_node(node_count, target, "Target")
        distances, previous = self._run(graph, source)
        if distances[target] == UNREACHABLE:
            return None

        path = [target]
        while path[-1] != source:
            path.append(previous[path[-1]])
        path.reverse()
        return path

    def max_propagation_time(
        self, node_count: int, edges: Iterable[WeightedEdge], source: int,
    ) -> float:
        """Time for a signal from ``source`` to reach every node.

        Raises:
            NotAllReachable: at least one node has no path from ``source``.
        """
        distance_map = self.shortest_paths(node_count, edges, source)
        unreachable = distance_map.unreachable()
        if unreachable:
            raise NotAllReachable(unreachable)
        return max(distance_map.distances)

    def _run(self, graph: WeightedGraph, source: int) -> tuple[list[float], list[int | None]]:
        check_node(graph.node_count, source, "Source")

        distances: list[float] = [UNREACHABLE] * graph.node_count
        previous: list[int | None] = [None] * graph.node_count
        finalized = [False] * graph.node_count
        distances[source] = 0

        # A node may appear several times; only its first pop counts
        frontier: list[tuple[float, int]] = [(0, source)]
        pops = stale = 0

        while frontier:
            dist, node = heapq.heappop(frontier)
            pops += 1
            if finalized[node]:
                stale += 1
                continue

            finalized[node] = True
            if self.on_finalize is not None:
                self.on_finalize(node, dist)

            for target, weight in graph.outgoing(node):
                candidate = dist + weight
                if candidate < distances[target]:
                    distances[target] = candidate
                    previous[target] = node
                    heapq.heappush(frontier, (candidate, target))

        logger.debug(
            "dijkstra from %d: %d nodes, %d edges, %d pops (%d stale)",
            source, graph.node_count, graph.edge_count, pops, stale,
        )
        return distances, previous
