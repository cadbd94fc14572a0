"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from graph_resolve import __version__
from graph_resolve.config import Settings
from graph_resolve.web.api import router


def create_app(settings: Settings | None = None) -> FastAPI:
    app = FastAPI(title="graph-resolve", version=__version__)
    app.state.settings = settings or Settings()

    @app.get("/api/health")
    async def health():
        return {"status": "ok", "version": __version__}

    app.include_router(router)
    return app
