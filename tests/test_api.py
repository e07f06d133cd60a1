"""
HTTP host - endpoints, camelCase serialization and error mapping.
"""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch

from semantic_state import StateEngine
from semantic_state.api import main
from semantic_state.api.tracker import SemanticStateTracker


@pytest.fixture
def tracker():
    return SemanticStateTracker(StateEngine(alpha=0.5, drift_threshold=0.5), clock=lambda: 123.0)


@pytest.fixture
def client(tracker):
    main.app.dependency_overrides[main.get_tracker] = lambda: tracker
    yield TestClient(main.app)
    main.app.dependency_overrides.clear()


def test_health_endpoint(client):
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["tracking"] is False
    assert data["dimension"] is None
    assert data["updateCount"] == 0


def test_update_sequence(client):
    response = client.post("/state/update", json={"embedding": [1.0, 0.0], "nowMs": 0})
    assert response.status_code == 200
    assert response.json() == {"driftDetected": False, "driftScore": 0.0, "vector": [1.0, 0.0]}

    response = client.post("/state/update", json={"embedding": [0.0, 1.0], "nowMs": 1})
    data = response.json()
    assert data["driftDetected"] is True
    assert data["driftScore"] == pytest.approx(1.0)

    response = client.get("/state/snapshot", params={"nowMs": 1})
    assert response.status_code == 200
    snapshot = response.json()
    assert snapshot["vector"] == [0.25, 0.5]
    assert snapshot["timestamp"] == 1.0
    assert snapshot["healthScore"] == pytest.approx(0.5)
    assert snapshot["semanticSummary"] == "volatile"


def test_update_without_timestamp_uses_clock(client, tracker):
    response = client.post("/state/update", json={"embedding": [1.0, 0.0]})

    assert response.status_code == 200
    assert tracker.engine.last_updated_at == 123.0


def test_empty_embedding_is_400(client):
    response = client.post("/state/update", json={"embedding": [], "nowMs": 0})

    assert response.status_code == 400
    assert response.json()["detail"] == "Embedding must not be empty"


def test_dimension_mismatch_is_400(client, tracker):
    client.post("/state/update", json={"embedding": [1.0, 0.0], "nowMs": 0})
    response = client.post("/state/update", json={"embedding": [1.0, 0.0, 0.0], "nowMs": 1})

    assert response.status_code == 400
    assert response.json()["detail"] == "Embedding dimension mismatch: expected 2, got 3"
    assert tracker.engine.update_count == 1


def test_malformed_embedding_is_422(client):
    response = client.post("/state/update", json={"embedding": ["not", "numbers"]})
    assert response.status_code == 422


def test_snapshot_before_any_update(client):
    response = client.get("/state/snapshot", params={"nowMs": 0})

    assert response.status_code == 200
    assert response.json()["vector"] == []
    assert response.json()["semanticSummary"] == "stable"


def test_reset_endpoint(client, tracker):
    client.post("/state/update", json={"embedding": [1.0, 0.0], "nowMs": 0})
    response = client.post("/state/reset")

    assert response.status_code == 200
    assert response.json() == {"success": True, "previousUpdateCount": 1}
    assert tracker.engine.is_tracking is False


def test_normalize_endpoint(client):
    response = client.post("/vector/normalize", json={"vector": [3.0, 4.0]})

    assert response.status_code == 200
    assert response.json()["vector"] == pytest.approx([0.6, 0.8])


def test_debug_endpoint(client):
    client.post("/state/update", json={"embedding": [1.0, 0.0], "nowMs": 3})

    with patch.dict("os.environ", {"DEBUG": "true"}):
        response = client.get("/debug")

    assert response.status_code == 200
    assert response.json()["engine"]["update_count"] == 1
    assert response.json()["engine"]["last_updated_at"] == 3.0


def test_debug_endpoint_disabled(client):
    with patch.dict("os.environ", {"DEBUG": "false"}):
        response = client.get("/debug")

    assert response.status_code == 403


def test_default_tracker_built_from_config():
    with patch.object(main, "_tracker", None):
        tracker = main.get_tracker()

        assert isinstance(tracker, SemanticStateTracker)
        assert tracker is main.get_tracker()
