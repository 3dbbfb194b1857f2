"""Unit tests for generated fallback data."""

import random

import pytest

from nba_predictor.data.mock_data import (
    mock_games,
    mock_games_list,
    mock_moneylines,
    mock_odds,
    mock_team_stats,
)
from nba_predictor.models.game import GameStatus


def test_mock_games_are_fixed_matchups():
    games = mock_games("2026-02-16")

    assert [g.id for g in games] == [1, 2, 3]
    assert [(g.home_team.abbreviation, g.visitor_team.abbreviation) for g in games] == [
        ("LAL", "GSW"),
        ("BOS", "MIA"),
        ("PHX", "DEN"),
    ]
    assert [g.time for g in games] == ["7:30 PM ET", "7:00 PM ET", "10:00 PM ET"]
    assert all(g.date == "2026-02-16" for g in games)
    assert all(g.status is GameStatus.SCHEDULED for g in games)
    assert all(g.home_team_score == 0 and g.visitor_team_score == 0 for g in games)


def test_mock_games_are_deterministic():
    assert mock_games("2026-02-16") == mock_games("2026-02-16")


def test_mock_games_list_advances_date_every_three_games():
    games = mock_games_list("2026-02-16", per_page=7)

    assert [g.id for g in games] == list(range(1, 8))
    assert [g.date for g in games] == [
        "2026-02-16", "2026-02-16", "2026-02-16",
        "2026-02-17", "2026-02-17", "2026-02-17",
        "2026-02-18",
    ]


def test_mock_games_list_cycles_fixture():
    games = mock_games_list("2026-02-16", per_page=12)
    assert games[10].matchup == games[0].matchup


@pytest.mark.parametrize("team_id", [0, 1, 9, 10, 14, 29, 30, 45])
def test_mock_team_stats_invariants(team_id):
    stats = mock_team_stats(team_id)

    assert stats.losses >= 10
    assert stats.win_pct == stats.wins / (stats.wins + stats.losses)
    assert stats.net_rating == pytest.approx(stats.offensive_rating - stats.defensive_rating)


def test_mock_team_stats_pure_function_of_id():
    assert mock_team_stats(14) == mock_team_stats(14)
    assert mock_team_stats(2) == mock_team_stats(32)


def test_mock_team_stats_good_team_profile():
    stats = mock_team_stats(2)

    assert stats.wins == 39
    assert stats.losses == 19
    assert stats.offensive_rating == 116.6
    assert stats.defensive_rating == 107.0
    assert stats.last_10 == "9-1"


def test_mock_team_stats_average_team_profile():
    stats = mock_team_stats(14)

    assert stats.wins == 34
    assert stats.losses == 28
    assert stats.offensive_rating == 116.4
    assert stats.defensive_rating == 121.8
    assert stats.last_10 == "4-6"


def test_mock_moneylines():
    assert mock_moneylines(-3) == (-210, 190)
    assert mock_moneylines(4) == (210, -230)
    assert mock_moneylines(0) == (130, 130)


def test_mock_odds_shape():
    odds = mock_odds("Lakers", "Warriors", rng=random.Random(7))
    book = odds.primary

    assert book.key == "draftkings"
    assert book.title == "DraftKings"
    spreads = book.market("spreads").outcomes
    assert [o.name for o in spreads] == ["Lakers", "Warriors"]
    assert all(o.price == -110 for o in spreads)
    assert spreads[0].point == -spreads[1].point
    assert -5 <= spreads[0].point <= 5
    assert [o.name for o in book.market("h2h").outcomes] == ["Lakers", "Warriors"]


def test_mock_odds_spread_covers_full_range():
    rng = random.Random(0)
    points = {mock_odds("A", "B", rng=rng).spread_line() for _ in range(400)}
    assert points == {float(p) for p in range(-5, 6)}
