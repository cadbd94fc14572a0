"""Dependency resolver: builds the adjacency list, detects cycles and emits a topological order."""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable

from graph_resolve.analysis.graph_models import (
    DependencyGraph,
    VisitState,
    check_node,
    check_node_count,
)
from graph_resolve.errors import CycleDetected, InvalidInput
from graph_resolve.models import Edge

logger = logging.getLogger(__name__)


class DependencyResolver:
    """Resolve ``prerequisite -> dependent`` edges into an execution order."""

    def build(self, node_count: int, edges: Iterable[Edge]) -> DependencyGraph:
        check_node_count(node_count)
        graph = DependencyGraph(node_count, [[] for _ in range(node_count)])

        for edge in edges:
            try:
                source, target = edge
            except (TypeError, ValueError):
                raise InvalidInput(f"Dependency edge must be a (from, to) pair, got {edge!r}")
            check_node(node_count, source, "Edge source")
            check_node(node_count, target, "Edge target")
            graph.forward[source].append(target)
            graph.edge_count += 1

        return graph

    def resolve(self, node_count: int, edges: Iterable[Edge]) -> list[int]:
        """Return every node once, each prerequisite before its dependents.

        Raises:
            InvalidInput: an edge endpoint is outside ``[0, node_count)``.
            CycleDetected: the edges contain a cycle (self-loops included).
        """
        graph = self.build(node_count, edges)
        finished, cycle = self._explore(graph)
        if cycle is not None:
            logger.debug("cycle found while ordering: %s", cycle)
            raise CycleDetected(cycle[0])

        finished.reverse()
        logger.debug("ordered %d nodes over %d edges", graph.node_count, graph.edge_count)
        return finished

    def find_cycle(self, node_count: int, edges: Iterable[Edge]) -> list[int] | None:
        """Return one cycle as a closed path (e.g. ``[1, 2, 1]``), or None if acyclic."""
        graph = self.build(node_count, edges)
        _, cycle = self._explore(graph)
        return cycle

    def prerequisites(self, node_count: int, edges: Iterable[Edge], node: int) -> set[int]:
        """BFS over reversed edges to find every node that must precede ``node``."""
        graph = self.build(node_count, edges)
        check_node(node_count, node)
        reverse = graph.reversed()

        found: set[int] = set()
        queue = deque([node])
        while queue:
            current = queue.popleft()
            for before in reverse.successors(current):
                if before not in found:
                    found.add(before)
                    queue.append(before)

        found.discard(node)
        return found

    def _explore(self, graph: DependencyGraph) -> tuple[list[int], list[int] | None]:
        """Three-color DFS with an explicit stack of ``[node, next_edge_index]`` frames.

        Returns the finish order and, if a cycle was hit, the cycle path.
        Roots are taken in ascending id, edges in supplied order.
        """
        state = [VisitState.UNVISITED] * graph.node_count
        finished: list[int] = []

        for root in range(graph.node_count):
            if state[root] is not VisitState.UNVISITED:
                continue

            state[root] = VisitState.IN_PROGRESS
            stack: list[list[int]] = [[root, 0]]

            while stack:
                frame = stack[-1]
                node, index = frame
                targets = graph.successors(node)

                if index == len(targets):
                    stack.pop()
                    state[node] = VisitState.DONE
                    finished.append(node)
                    continue

                frame[1] = index + 1
                target = targets[index]
                if state[target] is VisitState.IN_PROGRESS:
                    # Every IN_PROGRESS node sits on the stack
                    path = [f[0] for f in stack]
                    return finished, path[path.index(target):] + [target]
                if state[target] is VisitState.UNVISITED:
                    state[target] = VisitState.IN_PROGRESS
                    stack.append([target, 0])

        return finished, None
