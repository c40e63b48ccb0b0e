"""Tests for the presentation API."""

from fastapi.testclient import TestClient
import pytest

from quizboard.server.api_server import create_api_app


@pytest.fixture
def client(manager) -> TestClient:
    return TestClient(create_api_app(manager))


@pytest.fixture
def quiz(client) -> dict[str, list[dict]]:
    client.put("/config", json={"scale_conversion_enabled": True, "standard_scale": 10})
    rounds = [
        client.post("/rounds", json={"title": "A", "max_score": 20}).json(),
        client.post("/rounds", json={"title": "B", "max_score": 10, "exclude_from_scale": True}).json(),
        client.post("/rounds", json={"title": "Ex Aequo", "max_score": 100, "is_tiebreak_round": True}).json(),
    ]
    teams = [
        client.post("/teams", json={"name": "Team X"}).json(),
        client.post("/teams", json={"name": "Team Y"}).json(),
    ]
    for round_, team, points in [
        (0, 0, 10), (1, 0, 5), (2, 0, 9),
        (0, 1, 20), (2, 1, 6),
    ]:
        response = client.put(
            "/scores",
            json={"round_id": rounds[round_]["id"], "team_entry_id": teams[team]["id"], "points": points},
        )
        assert response.status_code == 200
    return {"rounds": rounds, "teams": teams}


class TestQuizEditing:
    def test_quiz_listing(self, client, quiz) -> None:
        body = client.get("/quiz").json()
        assert body["config"]["standard_scale"] == 10
        assert [r["title"] for r in body["rounds"]] == ["A", "B", "Ex Aequo"]
        assert [t["display_nr"] for t in body["teams"]] == [1, 2]

    def test_config_update_keeps_omitted_fields(self, client, quiz) -> None:
        body = client.put("/config", json={"ex_aequo_enabled": True}).json()
        assert body["ex_aequo_enabled"] is True
        assert body["scale_conversion_enabled"] is True

    def test_config_can_clear_target(self, client) -> None:
        client.put("/config", json={"ex_aequo_target_value": 7})
        body = client.put("/config", json={"ex_aequo_target_value": None}).json()
        assert body["ex_aequo_target_value"] is None

    def test_negative_scale_is_rejected(self, client) -> None:
        assert client.put("/config", json={"standard_scale": -2}).status_code == 422

    def test_round_validation(self, client, quiz) -> None:
        assert client.post("/rounds", json={"max_score": 0}).status_code == 422
        response = client.post("/rounds", json={"max_score": 5, "is_tiebreak_round": True})
        assert response.status_code == 422
        assert "tiebreak" in response.json()["detail"]

    def test_move_and_delete_round(self, client, quiz) -> None:
        rounds = client.put(f"/rounds/{quiz['rounds'][1]['id']}/order", json={"target_index": 0}).json()
        assert [r["title"] for r in rounds] == ["B", "A", "Ex Aequo"]
        assert client.delete(f"/rounds/{quiz['rounds'][1]['id']}").status_code == 204
        assert client.delete("/rounds/999").status_code == 404

    def test_team_validation_and_exclusion(self, client, quiz) -> None:
        assert client.post("/teams", json={"name": " "}).status_code == 422
        team_y = quiz["teams"][1]["id"]
        assert client.put(f"/teams/{team_y}/excluded", json={"excluded": True}).json()["excluded"] is True
        assert [r["name"] for r in client.get("/ranking").json()] == ["Team X"]
        assert client.put("/teams/999/excluded", json={"excluded": True}).status_code == 404

    def test_move_and_delete_team(self, client, quiz) -> None:
        team_y = quiz["teams"][1]["id"]
        teams = client.put(f"/teams/{team_y}/order", json={"target_index": 0}).json()
        assert [t["name"] for t in teams] == ["Team Y", "Team X"]
        assert client.delete(f"/teams/{team_y}").status_code == 204
        assert client.delete(f"/teams/{team_y}").status_code == 404

    def test_score_validation(self, client, quiz) -> None:
        round_a = quiz["rounds"][0]["id"]
        team_x = quiz["teams"][0]["id"]
        too_high = client.put("/scores", json={"round_id": round_a, "team_entry_id": team_x, "points": 21})
        assert too_high.status_code == 422
        negative = client.put("/scores", json={"round_id": round_a, "team_entry_id": team_x, "points": -1})
        assert negative.status_code == 422
        unknown = client.put("/scores", json={"round_id": 999, "team_entry_id": team_x, "points": 1})
        assert unknown.status_code == 404
        assert unknown.json()["detail"] == "Round 999 not found"


    def test_update_round(self, client, quiz) -> None:
        round_a = quiz["rounds"][0]["id"]
        body = client.patch(f"/rounds/{round_a}", json={"title": "Opening", "max_score": 40}).json()
        assert (body["title"], body["max_score"]) == ("Opening", 40)
        assert body["exclude_from_scale"] is False
        assert client.get("/ranking").json()[1]["total"] == pytest.approx(5.0)

    def test_update_round_validation(self, client, quiz) -> None:
        round_a = quiz["rounds"][0]["id"]
        assert client.patch(f"/rounds/{round_a}", json={"max_score": 15}).status_code == 422
        assert client.patch(f"/rounds/{round_a}", json={"is_tiebreak_round": True}).status_code == 422
        assert client.patch(f"/rounds/{round_a}", json={"max_score": 0}).status_code == 422
        assert client.patch("/rounds/999", json={"title": "Nope"}).status_code == 404

    def test_clear_score(self, client, quiz) -> None:
        round_a = quiz["rounds"][0]["id"]
        team_y = quiz["teams"][1]["id"]
        response = client.delete("/scores", params={"round_id": round_a, "team_entry_id": team_y})
        assert response.status_code == 204
        ranking = {r["name"]: r["total"] for r in client.get("/ranking").json()}
        assert ranking["Team Y"] == 0
        unknown = client.delete("/scores", params={"round_id": round_a, "team_entry_id": 999})
        assert unknown.status_code == 404
        assert unknown.json()["detail"] == "Team 999 not found"


class TestRankingViews:
    def test_ranking_uses_ex_aequo(self, client, quiz) -> None:
        client.put("/config", json={"ex_aequo_enabled": True, "ex_aequo_target_value": 7})
        ranking = client.get("/ranking").json()
        assert [(r["name"], r["rank"]) for r in ranking] == [("Team Y", 1), ("Team X", 2)]
        assert ranking[0]["total"] == pytest.approx(10.0)
        assert ranking[0]["tiebreak_value"] == 6

    def test_board(self, client, quiz) -> None:
        board = client.get("/board").json()
        assert [r["title"] for r in board["rounds"]] == ["A", "B"]
        assert board["tiebreak_round"]["title"] == "Ex Aequo"
        first = board["rows"][0]
        assert first["name"] == "Team X"
        assert first["round_points"] == pytest.approx([5.0, 5.0])
        assert first["color"] == "#4CAF50"
        assert first["background"] == "rgba(76, 175, 80, 0.15)"

    def test_chart(self, client, quiz) -> None:
        chart = client.get("/chart").json()
        assert chart["max_possible_total"] == pytest.approx(20.0)
        assert chart["bars"][1]["fill"] == "rgba(255, 82, 82, 0.7)"
        assert chart["bars"][1]["border"] == "rgba(255, 82, 82, 1)"

    def test_showcase(self, client, quiz) -> None:
        showcase = client.get("/showcase", params={"limit": 1}).json()
        assert [(s["name"], s["color"]) for s in showcase] == [("Team X", "#FFD700")]
        assert client.get("/showcase", params={"limit": -1}).status_code == 422

    def test_reveal_progression(self, client, quiz) -> None:
        start = client.get("/reveal").json()
        assert start["revealed"] == []
        assert (start["team_count"], start["tier_size"], start["next_rank"]) == (2, 2, 2)

        step = client.get("/reveal", params={"revealed_count": 1}).json()
        assert [r["rank"] for r in step["revealed"]] == [2]
        assert step["next_rank"] == 1

        done = client.get("/reveal", params={"revealed_count": 2}).json()
        assert done["complete"] is True
        assert done["next_rank"] is None
        assert client.get("/reveal", params={"tier_size": 0}).status_code == 422

    def test_empty_quiz(self, client) -> None:
        assert client.get("/ranking").json() == []
        assert client.get("/board").json()["rows"] == []
        assert client.get("/chart").json()["max_possible_total"] == 0
