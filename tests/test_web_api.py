"""Tests for the web API."""

import pytest

# Only run if fastapi/httpx are installed
try:
    from fastapi.testclient import TestClient
    from graph_resolve.web import create_app
    HAS_WEB = True
except ImportError:
    HAS_WEB = False

from graph_resolve.config import Settings

pytestmark = pytest.mark.skipif(not HAS_WEB, reason="web dependencies not installed")


@pytest.fixture
def client():
    app = create_app(Settings(max_nodes=100))
    return TestClient(app)


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    assert res.json()["status"] == "ok"


def test_order(client):
    res = client.post("/api/graph/order", json={"nodes": 2, "edges": [[0, 1]]})
    assert res.status_code == 200
    assert res.json() == {"order": [0, 1]}


def test_order_cycle(client):
    res = client.post("/api/graph/order", json={"nodes": 2, "edges": [[0, 1], [1, 0]]})
    assert res.status_code == 409
    assert res.json()["detail"]["node"] == 0


def test_order_out_of_range(client):
    res = client.post("/api/graph/order", json={"nodes": 2, "edges": [[0, 5]]})
    assert res.status_code == 422


def test_order_negative_nodes(client):
    res = client.post("/api/graph/order", json={"nodes": -1, "edges": []})
    assert res.status_code == 422


def test_too_many_nodes(client):
    res = client.post("/api/graph/order", json={"nodes": 101, "edges": []})
    assert res.status_code == 413


def test_cycle(client):
    res = client.post("/api/graph/cycle", json={"nodes": 3, "edges": [[0, 1], [1, 2], [2, 1]]})
    assert res.status_code == 200
    assert res.json() == {"cycle": [1, 2, 1]}


def test_no_cycle(client):
    res = client.post("/api/graph/cycle", json={"nodes": 2, "edges": [[0, 1]]})
    assert res.json() == {"cycle": None}


def test_paths(client):
    res = client.post("/api/graph/paths", json={
        "nodes": 5,
        "edges": [[2, 1, 1], [2, 3, 1], [3, 4, 1]],
        "source": 2,
    })
    assert res.status_code == 200
    data = res.json()
    assert data["source"] == 2
    assert data["distances"] == {"0": None, "1": 1, "2": 0, "3": 1, "4": 2}


def test_paths_negative_weight(client):
    res = client.post("/api/graph/paths", json={"nodes": 2, "edges": [[0, 1, -3]], "source": 0})
    assert res.status_code == 422


def test_paths_bad_source(client):
    res = client.post("/api/graph/paths", json={"nodes": 2, "edges": [], "source": 4})
    assert res.status_code == 422


def test_path(client):
    res = client.post("/api/graph/path", json={
        "nodes": 4,
        "edges": [[0, 1, 4], [0, 2, 1], [2, 1, 2], [1, 3, 1]],
        "source": 0,
        "target": 3,
    })
    assert res.status_code == 200
    assert res.json()["path"] == [0, 2, 1, 3]


def test_delay(client):
    res = client.post("/api/graph/delay", json={
        "nodes": 3, "edges": [[0, 1, 2], [1, 2, 3]], "source": 0,
    })
    assert res.status_code == 200
    assert res.json() == {"time": 5}


def test_delay_not_all_reachable(client):
    res = client.post("/api/graph/delay", json={"nodes": 3, "edges": [[1, 2, 1]], "source": 2})
    assert res.status_code == 409
    assert res.json()["detail"]["unreachable"] == [0, 1]


@pytest.mark.parametrize("edges", [[[True, False]], [["1", "0"]], [[0.0, 1]]])
def test_order_rejects_non_integer_endpoints(client, edges):
    res = client.post("/api/graph/order", json={"nodes": 2, "edges": edges})
    assert res.status_code == 422


def test_order_rejects_boolean_node_count(client):
    res = client.post("/api/graph/order", json={"nodes": True, "edges": []})
    assert res.status_code == 422


def test_paths_rejects_string_source(client):
    res = client.post("/api/graph/paths", json={"nodes": 2, "edges": [[0, 1, 1]], "source": "0"})
    assert res.status_code == 422


def test_paths_rejects_boolean_weight(client):
    res = client.post("/api/graph/paths", json={"nodes": 2, "edges": [[0, 1, True]], "source": 0})
    assert res.status_code == 422


def test_paths_accepts_float_weight(client):
    res = client.post("/api/graph/paths", json={"nodes": 2, "edges": [[0, 1, 1.5]], "source": 0})
    assert res.status_code == 200
    assert res.json()["distances"]["1"] == 1.5
