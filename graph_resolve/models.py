"""Data models for graph documents and runs."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path

Edge = tuple[int, int]
WeightedEdge = tuple[int, int, float]


class GraphKind(enum.Enum):
    DEPENDENCY = "dependency"
    WEIGHTED = "weighted"


@dataclass
class GraphDocument:
    """A graph loaded from a JSON document."""
    kind: GraphKind
    node_count: int
    edges: list[Edge | WeightedEdge] = field(default_factory=list)
    source: int | None = None  # weighted documents only
    path: Path | None = None


@dataclass
class RunConfig:
    """Configuration for one pipeline run."""
    input_path: Path = field(default_factory=lambda: Path("graph.json"))
    source: int | None = None
    target: int | None = None
