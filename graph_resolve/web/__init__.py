"""Web API for graph-resolve (requires the ``web`` extra)."""

from graph_resolve.web.app import create_app

__all__ = ["create_app"]
