"""Player stats and AI coach endpoints."""

import pytest

from squad_stats.api import ai_routes
from squad_stats.core.errors import UpstreamUnavailableError


@pytest.fixture
def team_id(client):
    r = client.post("/api/teams", json={"name": "UNAI Eagles"})
    tid = r.json()["id"]
    for name in ("Alex", "Sam", "Jordan"):
        client.post(f"/api/teams/{tid}/players", json={"name": name})
    return tid


def _game(client, team_id, opponent, date, players):
    r = client.post(
        "/api/games",
        json={"team_id": team_id, "opponent": opponent, "date": date, "players": players},
    )
    assert r.status_code == 200


@pytest.fixture
def played(client, team_id):
    _game(
        client,
        team_id,
        "Lions",
        "2024-01-05",
        [{"name": "Alex", "points": 20, "rebounds": 6}, {"name": "Sam", "points": 4}],
    )
    _game(client, team_id, "Bears", "2024-01-12", [{"name": "Alex", "points": 10}])
    return team_id


def test_player_stats(client, played):
    r = client.get(f"/api/stats/{played}/player/Alex")
    assert r.status_code == 200
    body = r.json()

    assert body["name"] == "Alex"
    assert body["total_games"] == 2
    assert body["averages"]["points"] == "15.0"
    assert body["averages"]["rebounds"] == "3.0"
    assert [h["opponent"] for h in body["history"]] == ["Bears", "Lions"]
    assert body["history"][0]["date"] == "2024-01-12"


def test_player_name_with_space(client, team_id):
    _game(client, team_id, "Lions", "2024-01-05", [{"name": "Alex Smith", "points": 9}])

    r = client.get(f"/api/stats/{team_id}/player/Alex Smith")
    assert r.status_code == 200
    assert r.json()["averages"]["points"] == "9.0"


def test_roster_player_without_games_is_404(client, played):
    r = client.get(f"/api/stats/{played}/player/Jordan")
    assert r.status_code == 404


def test_team_without_games_is_404(client, team_id):
    r = client.get(f"/api/stats/{team_id}/player/Alex")
    assert r.status_code == 404


def test_unknown_team_is_404(client):
    r = client.get("/api/stats/999/player/Alex")
    assert r.status_code == 404
    assert r.json()["detail"] == "Team not found"


def test_stats_do_not_leak_across_teams(client, played):
    other = client.post("/api/teams", json={"name": "Other"}).json()["id"]
    _game(client, other, "Hawks", "2024-02-01", [{"name": "Alex", "points": 40}])

    body = client.get(f"/api/stats/{played}/player/Alex").json()
    assert body["total_games"] == 2
    assert body["averages"]["points"] == "15.0"


class FakeGemini:
    def __init__(self, reply="Alex leads the team with 15 points per game.", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    async def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.reply


def test_ai_analyze(client, played, monkeypatch):
    fake = FakeGemini()
    monkeypatch.setattr(ai_routes, "client", fake)

    r = client.post(
        "/api/ai/analyze", json={"team_id": played, "question": "Who is our best scorer?"}
    )
    assert r.status_code == 200
    assert r.json() == {"reply": fake.reply}

    (prompt,) = fake.prompts
    assert "UNAI Eagles" in prompt
    assert "Roster: Alex, Sam, Jordan" in prompt
    assert "Who is our best scorer?" in prompt
    assert '"games_played": 2' in prompt


def test_ai_analyze_unknown_team(client, monkeypatch):
    fake = FakeGemini()
    monkeypatch.setattr(ai_routes, "client", fake)

    r = client.post("/api/ai/analyze", json={"team_id": 999, "question": "Q"})
    assert r.status_code == 404
    assert fake.prompts == []


def test_ai_analyze_provider_down(client, played, monkeypatch):
    monkeypatch.setattr(
        ai_routes, "client", FakeGemini(error=UpstreamUnavailableError("Gemini", "timeout"))
    )

    r = client.post("/api/ai/analyze", json={"team_id": played, "question": "Q"})
    assert r.status_code == 503
    assert r.json()["detail"] == "The AI Coach is currently unavailable."


def test_ai_analyze_requires_question(client, played):
    r = client.post("/api/ai/analyze", json={"team_id": played})
    assert r.status_code == 422


def test_ai_analyze_store_failure_is_500(client, played, monkeypatch):
    fake = FakeGemini()
    monkeypatch.setattr(ai_routes, "client", fake)

    async def broken_games(db, team_id):
        raise RuntimeError("connection reset")

    monkeypatch.setattr(ai_routes, "list_team_games", broken_games)

    r = client.post("/api/ai/analyze", json={"team_id": played, "question": "Q"})
    assert r.status_code == 500
    assert r.json()["detail"] == "Could not load team stats"
    assert fake.prompts == []
