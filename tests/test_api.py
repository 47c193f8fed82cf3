"""HTTP tests for the games and rounds routers."""

from uuid import uuid4


def create(client, **body):
    response = client.post("/api/games", json=body or None)
    assert response.status_code == 200
    return response.json()


def target_digits(target, count=5):
    return [int(c) for c in str(target).zfill(count)]


class TestHealth:
    def test_root(self, client):
        assert client.get("/").json() == {"message": "Abacus Game API", "status": "ok"}

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}


class TestGames:
    def test_create_without_body(self, client):
        state = create(client)

        assert state["digit_count"] == 5
        assert state["digits"] == [0, 0, 0, 0, 0]
        assert state["value"] == 0
        assert state["solved"] is False
        assert state["status"] == "in_progress"
        assert state["round_number"] == 1
        assert state["status_message"] == "Start adding beads..."
        assert state["next_enabled"] is False
        assert state["next_label"] == "Solve to Continue"
        assert state["display_target"] == f"{state['target']:,}"

    def test_create_with_options(self, client):
        state = create(client, digit_count=6, overflow_policy="clamp", seed=3)

        assert state["digit_count"] == 6
        assert state["overflow_policy"] == "clamp"
        assert len(state["digits"]) == 6
        assert 1 <= state["target"] <= 999999

    def test_create_rejects_bad_policy(self, client):
        response = client.post("/api/games", json={"overflow_policy": "bounce"})
        assert response.status_code == 422

    def test_create_rejects_too_many_games(self, client):
        for _ in range(3):
            create(client)
        response = client.post("/api/games")
        assert response.status_code == 429

    def test_get_state(self, client):
        state = create(client, seed=9)
        fetched = client.get(f"/api/games/{state['game_id']}").json()
        assert fetched == state

    def test_get_unknown_game(self, client):
        assert client.get(f"/api/games/{uuid4()}").status_code == 404

    def test_delete_game(self, client):
        state = create(client)
        game_url = f"/api/games/{state['game_id']}"

        assert client.delete(game_url).json() == {"status": "ok"}
        assert client.get(game_url).status_code == 404
        assert client.delete(game_url).status_code == 404


class TestRounds:
    def test_adjust_updates_state(self, client):
        state = create(client)
        response = client.post(
            f"/api/games/{state['game_id']}/adjust",
            json={"rod_index": 4, "direction": "inc"}
        )

        body = response.json()
        assert response.status_code == 200
        assert body["digits"] == [0, 0, 0, 0, 1]
        assert body["value"] == 1
        assert body["state"]["digits"] == body["digits"]
        assert body["state"]["value"] == body["value"]
        assert body["state"]["display_value"] == "1"
        assert body["state"]["status_message"] == "Keep adjusting the beads..."

    def test_adjust_out_of_range_is_noop(self, client):
        state = create(client)
        body = client.post(
            f"/api/games/{state['game_id']}/adjust",
            json={"rod_index": 99, "direction": "inc"}
        ).json()
        assert body["digits"] == [0, 0, 0, 0, 0]

    def test_adjust_rejects_unknown_direction(self, client):
        state = create(client)
        response = client.post(
            f"/api/games/{state['game_id']}/adjust",
            json={"rod_index": 0, "direction": "up"}
        )
        assert response.status_code == 422

    def test_adjust_unknown_game(self, client):
        response = client.post(
            f"/api/games/{uuid4()}/adjust",
            json={"rod_index": 0, "direction": "inc"}
        )
        assert response.status_code == 404

    def test_solving_enables_next_question(self, client):
        state = create(client, seed=21)
        url = f"/api/games/{state['game_id']}/adjust"

        for rod, count in enumerate(target_digits(state["target"])):
            for _ in range(count):
                body = client.post(url, json={"rod_index": rod, "direction": "inc"}).json()

        assert body["solved"] is True
        assert body["value"] == state["target"]
        assert body["state"]["status"] == "solved"
        assert body["state"]["status_message"] == "You matched the number!"
        assert body["state"]["next_enabled"] is True
        assert body["state"]["next_label"] == "New Question"

    def test_start_round(self, client):
        state = create(client)
        game_id = state["game_id"]
        client.post(f"/api/games/{game_id}/adjust", json={"rod_index": 2, "direction": "inc"})

        started = client.post(f"/api/games/{game_id}/rounds").json()
        fetched = client.get(f"/api/games/{game_id}").json()

        assert started["round_number"] == 2
        assert started["display_target"] == f"{started['target']:,}"
        assert fetched["target"] == started["target"]
        assert fetched["digits"] == [0, 0, 0, 0, 0]
        assert fetched["status_message"] == "Start adding beads..."

    def test_start_round_unknown_game(self, client):
        assert client.post(f"/api/games/{uuid4()}/rounds").status_code == 404
