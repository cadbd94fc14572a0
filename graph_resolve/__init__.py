"""graph-resolve: dependency ordering and shortest-path resolution over directed graphs."""

__version__ = "0.1.0"
