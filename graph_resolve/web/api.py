"""Graph API: ordering, cycle lookup, shortest paths and propagation delay."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field, StrictFloat, StrictInt

from graph_resolve.analysis.dependency_graph import DependencyResolver
from graph_resolve.analysis.shortest_path import ShortestPathEngine
from graph_resolve.errors import CycleDetected, InvalidInput, NotAllReachable

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/graph")
_resolver = DependencyResolver()
_engine = ShortestPathEngine()


class DependencyGraphRequest(BaseModel):
    nodes: StrictInt = Field(ge=0)
    edges: list[tuple[StrictInt, StrictInt]] = Field(default_factory=list)


class WeightedGraphRequest(BaseModel):
    nodes: StrictInt = Field(ge=0)
    edges: list[tuple[StrictInt, StrictInt, StrictFloat | StrictInt]] = Field(default_factory=list)
    source: StrictInt


class PathRequest(WeightedGraphRequest):
    target: StrictInt


def _check_size(request: Request, nodes: int) -> None:
    max_nodes = request.app.state.settings.max_nodes
    if nodes > max_nodes:
        raise HTTPException(413, f"Graph has {nodes} nodes; the limit is {max_nodes}")


@router.post("/order")
async def order(req: DependencyGraphRequest, request: Request):
    _check_size(request, req.nodes)
    try:
        result = await asyncio.to_thread(_resolver.resolve, req.nodes, req.edges)
    except InvalidInput as e:
        raise HTTPException(422, str(e))
    except CycleDetected as e:
        raise HTTPException(409, {"message": str(e), "node": e.node})
    return {"order": result}


@router.post("/cycle")
async def cycle(req: DependencyGraphRequest, request: Request):
    _check_size(request, req.nodes)
    try:
        found = await asyncio.to_thread(_resolver.find_cycle, req.nodes, req.edges)
    except InvalidInput as e:
        raise HTTPException(422, str(e))
    return {"cycle": found}


@router.post("/paths")
async def paths(req: WeightedGraphRequest, request: Request):
    _check_size(request, req.nodes)
    try:
        distance_map = await asyncio.to_thread(
            _engine.shortest_paths, req.nodes, req.edges, req.source,
        )
    except InvalidInput as e:
        raise HTTPException(422, str(e))
    return {"source": req.source, "distances": distance_map.to_dict()}


@router.post("/path")
async def path(req: PathRequest, request: Request):
    _check_size(request, req.nodes)
    try:
        found = await asyncio.to_thread(
            _engine.shortest_path, req.nodes, req.edges, req.source, req.target,
        )
    except InvalidInput as e:
        raise HTTPException(422, str(e))
    return {"source": req.source, "target": req.target, "path": found}


@router.post("/delay")
async def delay(req: WeightedGraphRequest, request: Request):
    _check_size(request, req.nodes)
    try:
        time = await asyncio.to_thread(
            _engine.max_propagation_time, req.nodes, req.edges, req.source,
        )
    except InvalidInput as e:
        raise HTTPException(422, str(e))
    except NotAllReachable as e:
        logger.info("delay query from %d: %d node(s) unreachable", req.source, len(e.unreachable))
        raise HTTPException(409, {"message": str(e), "unreachable": e.unreachable})
    return {"time": time}
