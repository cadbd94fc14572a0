"""Runtime settings, read from the environment when not given explicitly."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_MAX_NODES = 1_000_000
DEFAULT_PORT = 8421


@dataclass
class Settings:
    log_level: str | None = None
    max_nodes: int | None = None
    host: str | None = None
    port: int | None = None

    def __post_init__(self):
        if self.log_level is None:
            self.log_level = os.getenv("GRAPH_RESOLVE_LOG_LEVEL", "WARNING")
        if self.max_nodes is None:
            self.max_nodes = _int_from_env("GRAPH_RESOLVE_MAX_NODES", DEFAULT_MAX_NODES)
        if self.host is None:
            self.host = os.getenv("GRAPH_RESOLVE_HOST", "127.0.0.1")
        if self.port is None:
            self.port = _int_from_env("GRAPH_RESOLVE_PORT", DEFAULT_PORT)
        self.log_level = self.log_level.upper()

    def configure_logging(self) -> None:
        """Install a root handler at ``log_level``."""
        level = logging.getLevelName(self.log_level)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
