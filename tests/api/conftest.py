import pytest
from fastapi.testclient import TestClient

from league.core.dependencies import get_storage, get_store
from league.main import app
from tests.utils import API


@pytest.fixture
def test_client(store, storage):
    """Create a test client wired to a fresh store and a temporary snapshot file."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_storage] = lambda: storage

    client = TestClient(app)
    yield client

    # Clean up the overrides after the test
    app.dependency_overrides.clear()


@pytest.fixture
def player_ids(test_client):
    """Create Alice, Bob and Carol through the API and return their ids by name."""
    ids = {}
    for name in ("Alice", "Bob", "Carol"):
        response = test_client.post(f"{API}/players/", json={"name": name})
        assert response.status_code == 201
        ids[name] = response.json()["id"]
    return ids


@pytest.fixture
def live_match(test_client, player_ids):
    """Alice vs Bob, started."""
    response = test_client.post(
        f"{API}/matches/",
        json={"player1_id": player_ids["Alice"], "player2_id": player_ids["Bob"]},
    )
    match_id = response.json()["id"]
    response = test_client.post(f"{API}/matches/{match_id}/start")
    assert response.status_code == 200
    return response.json()
