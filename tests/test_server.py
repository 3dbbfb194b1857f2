"""Unit tests for the HTTP proxy routes."""

import random

import pytest

from nba_predictor.config import Settings
from nba_predictor.data.api_manager import ApiManager
from nba_predictor.server import create_app


@pytest.fixture
def client():
    manager = ApiManager(Settings(min_request_interval=0.0), sleep=lambda s: None, rng=random.Random(3))
    app = create_app(manager)
    app.config["TESTING"] = True
    return app.test_client()


def test_health(client):
    response = client.get("/health")
    body = response.get_json()

    assert response.status_code == 200
    assert body["status"] == "ok"
    assert body["dataSource"] == "MOCK"


@pytest.mark.parametrize("path", ["/api/games", "/games"])
def test_games_by_date(client, path):
    response = client.get(f"{path}?date=2026-02-16")
    body = response.get_json()

    assert response.status_code == 200
    assert body["_dataSource"] == "MOCK"
    assert len(body["data"]) == 3


def test_games_by_start_date(client):
    body = client.get("/api/games?start_date=2026-02-16&per_page=5&cursor=0").get_json()
    assert len(body["data"]) == 5


def test_games_without_date_is_bad_request(client):
    response = client.get("/api/games")

    assert response.status_code == 400
    assert response.get_json() == {"error": "Date parameter required"}


def test_games_with_malformed_date_is_bad_request(client):
    assert client.get("/api/games?date=tomorrow").status_code == 400


@pytest.mark.parametrize("path", ["/api/team-stats", "/team-stats"])
def test_team_stats(client, path):
    body = client.get(f"{path}?teamId=14").get_json()

    assert body["_dataSource"] == "MOCK"
    assert body["data"]["losses"] >= 10


def test_team_stats_requires_team_id(client):
    response = client.get("/api/team-stats")

    assert response.status_code == 400
    assert "teamId" in response.get_json()["error"]


def test_odds(client):
    body = client.get("/api/odds?homeTeam=Lakers&awayTeam=Warriors").get_json()

    assert body["_dataSource"] == "MOCK"
    assert body["home_team"] == "Lakers"
    assert body["bookmakers"][0]["key"] == "draftkings"


def test_odds_requires_both_teams(client):
    response = client.get("/odds?homeTeam=Lakers")

    assert response.status_code == 400
    assert response.get_json() == {"error": "homeTeam and awayTeam parameters required"}


def test_cors_header_present(client):
    response = client.get("/health", headers={"Origin": "http://localhost:5173"})
    assert response.headers.get("Access-Control-Allow-Origin") in ("*", "http://localhost:5173")


def test_team_stats_rejects_non_integer_season(client):
    response = client.get("/team-stats?teamId=1&season=abc")

    assert response.status_code == 400
    assert "season" in response.get_json()["error"]


@pytest.mark.parametrize("per_page", ["0", "101", "100000000"])
def test_games_rejects_oversized_page(client, per_page):
    response = client.get(f"/games?start_date=2026-01-01&per_page={per_page}")

    assert response.status_code == 400
    assert "per_page" in response.get_json()["error"]
