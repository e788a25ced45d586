"""
Tests for the matches API endpoints.
"""

from tests.utils import API


class TestMatchesAPI:
    """Test matches API endpoints."""

    def test_create_match(self, test_client, player_ids):
        response = test_client.post(
            f"{API}/matches/",
            json={"player1_id": player_ids["Alice"], "player2_id": player_ids["Bob"]},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "pending"
        assert data["player1"]["name"] == "Alice"
        assert data["player2"]["name"] == "Bob"
        assert data["startTime"] is None

    def test_create_match_unknown_player(self, test_client, player_ids):
        response = test_client.post(
            f"{API}/matches/",
            json={"player1_id": player_ids["Alice"], "player2_id": "missing"},
        )
        assert response.status_code == 404

    def test_create_match_against_self(self, test_client, player_ids):
        response = test_client.post(
            f"{API}/matches/",
            json={"player1_id": player_ids["Alice"], "player2_id": player_ids["Alice"]},
        )
        assert response.status_code == 400

    def test_start_match(self, test_client, live_match):
        assert live_match["status"] == "in-progress"
        assert live_match["startTime"] is not None

        current = test_client.get(f"{API}/matches/current").json()
        assert current["match"]["id"] == live_match["id"]
        assert 0 <= current["betting_time_left"] <= 30

    def test_start_twice_rejected(self, test_client, live_match):
        response = test_client.post(f"{API}/matches/{live_match['id']}/start")
        assert response.status_code == 400

    def test_complete_match(self, test_client, player_ids, live_match):
        response = test_client.post(
            f"{API}/matches/{live_match['id']}/complete",
            json={"winner_id": player_ids["Alice"]},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "completed"
        assert data["winner"]["name"] == "Alice"
        assert data["eloChanges"] == {"player1Change": 16, "player2Change": -16}

        players = {p["name"]: p for p in test_client.get(f"{API}/players/").json()}
        assert players["Alice"]["elo"] == 1216
        assert players["Bob"]["elo"] == 1184
        assert test_client.get(f"{API}/matches/current").json()["match"] is None

    def test_complete_with_outsider_rejected(self, test_client, player_ids, live_match):
        response = test_client.post(
            f"{API}/matches/{live_match['id']}/complete",
            json={"winner_id": player_ids["Carol"]},
        )
        assert response.status_code == 400

    def test_complete_unknown_match(self, test_client, player_ids):
        response = test_client.post(
            f"{API}/matches/missing/complete", json={"winner_id": player_ids["Alice"]}
        )
        assert response.status_code == 404

    def test_cancel_match(self, test_client, live_match):
        response = test_client.post(f"{API}/matches/{live_match['id']}/cancel")

        assert response.status_code == 200
        assert response.json()["status"] == "cancelled"

        again = test_client.post(f"{API}/matches/{live_match['id']}/cancel")
        assert again.status_code == 400

    def test_rematch(self, test_client, player_ids, live_match):
        test_client.post(
            f"{API}/matches/{live_match['id']}/complete",
            json={"winner_id": player_ids["Bob"]},
        )

        response = test_client.post(f"{API}/matches/{live_match['id']}/rematch")

        assert response.status_code == 201
        data = response.json()
        assert data["id"] != live_match["id"]
        assert data["status"] == "in-progress"
        assert data["player2"]["elo"] == 1216

    def test_rematch_of_live_match_rejected(self, test_client, live_match):
        response = test_client.post(f"{API}/matches/{live_match['id']}/rematch")
        assert response.status_code == 400

    def test_list_matches(self, test_client, live_match):
        matches = test_client.get(f"{API}/matches/").json()
        assert [m["id"] for m in matches] == [live_match["id"]]

    def test_list_matches_by_status(self, test_client, player_ids, live_match):
        test_client.post(
            f"{API}/matches/",
            json={"player1_id": player_ids["Bob"], "player2_id": player_ids["Carol"]},
        )

        live = test_client.get(f"{API}/matches/", params={"status": "in-progress"}).json()
        pending = test_client.get(f"{API}/matches/", params={"status": "pending"}).json()

        assert [m["id"] for m in live] == [live_match["id"]]
        assert [m["player2"]["name"] for m in pending] == ["Carol"]
        assert test_client.get(f"{API}/matches/", params={"status": "done"}).status_code == 422

    def test_preview_match(self, test_client, player_ids):
        response = test_client.get(
            f"{API}/matches/preview",
            params={"player1_id": player_ids["Alice"], "player2_id": player_ids["Bob"]},
        )

        assert response.status_code == 200
        assert response.json() == {
            "player1_win_probability": 0.5,
            "player2_win_probability": 0.5,
            "odds": 1.5,
        }

    def test_preview_unknown_player(self, test_client, player_ids):
        response = test_client.get(
            f"{API}/matches/preview",
            params={"player1_id": player_ids["Alice"], "player2_id": "missing"},
        )
        assert response.status_code == 404

    def test_no_current_match(self, test_client):
        response = test_client.get(f"{API}/matches/current")

        assert response.status_code == 200
        assert response.json() == {"match": None, "betting_time_left": 0}
