"""Load graph documents from disk and run queries against them."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from graph_resolve.analysis.dependency_graph import DependencyResolver
from graph_resolve.analysis.graph_models import DistanceMap
from graph_resolve.analysis.shortest_path import ShortestPathEngine
from graph_resolve.errors import InvalidInput
from graph_resolve.models import GraphDocument, GraphKind, RunConfig

logger = logging.getLogger(__name__)

_EDGE_ARITY = {GraphKind.DEPENDENCY: 2, GraphKind.WEIGHTED: 3}


def load_document(path: Path, kind: GraphKind) -> GraphDocument:
    """Read ``{"nodes": n, "edges": [...], "source": k}`` from ``path``."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise InvalidInput(f"{path}: not UTF-8 text ({e})")
    except json.JSONDecodeError as e:
        raise InvalidInput(f"{path}: not valid JSON ({e})")

    document = parse_document(data, kind)
    document.path = Path(path)
    logger.info("loaded %s graph from %s: %s nodes, %d edges",
                kind.value, path, document.node_count, len(document.edges))
    return document


def parse_document(data, kind: GraphKind) -> GraphDocument:
    if not isinstance(data, dict):
        raise InvalidInput("Graph document must be a JSON object")
    if "nodes" not in data:
        raise InvalidInput("Graph document is missing 'nodes'")

    raw_edges = data.get("edges", [])
    if not isinstance(raw_edges, list):
        raise InvalidInput("'edges' must be a list")

    arity = _EDGE_ARITY[kind]
    edges = []
    for i, edge in enumerate(raw_edges):
        if not isinstance(edge, list) or len(edge) != arity:
            raise InvalidInput(f"edges[{i}]: expected a list of {arity} values, got {edge!r}")
        edges.append(tuple(edge))

    source = data.get("source")
    if kind is GraphKind.DEPENDENCY:
        source = None

    return GraphDocument(kind=kind, node_count=data["nodes"], edges=edges, source=source)


def run_order(config: RunConfig) -> list[int]:
    document = load_document(config.input_path, GraphKind.DEPENDENCY)
    return DependencyResolver().resolve(document.node_count, document.edges)


def run_cycle(config: RunConfig) -> list[int] | None:
    document = load_document(config.input_path, GraphKind.DEPENDENCY)
    return DependencyResolver().find_cycle(document.node_count, document.edges)


def run_paths(config: RunConfig) -> DistanceMap:
    document = load_document(config.input_path, GraphKind.WEIGHTED)
    source = _pick_source(document, config)
    return ShortestPathEngine().shortest_paths(document.node_count, document.edges, source)


def run_path(config: RunConfig) -> list[int] | None:
    if config.target is None:
        raise InvalidInput("A target node is required")
    document = load_document(config.input_path, GraphKind.WEIGHTED)
    source = _pick_source(document, config)
    return ShortestPathEngine().shortest_path(
        document.node_count, document.edges, source, config.target,
    )


def run_delay(config: RunConfig) -> float:
    document = load_document(config.input_path, GraphKind.WEIGHTED)
    source = _pick_source(document, config)
    return ShortestPathEngine().max_propagation_time(document.node_count, document.edges, source)


def _pick_source(document: GraphDocument, config: RunConfig) -> int:
    """Explicit source wins over the one stored in the document."""
    source = config.source if config.source is not None else document.source
    if source is None:
        raise InvalidInput(
            f"No source node given. Pass one explicitly or set 'source' in {document.path}"
        )
    return source
