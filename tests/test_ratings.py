"""Unit tests for the Elo rating store."""

import pytest

from nba_predictor.models.game import Game, GameStatus
from nba_predictor.models.team import get_team
from nba_predictor.predictors.ratings import DEFAULT_ELO, EloRatingStore


def test_default_store_uses_seed_table():
    store = EloRatingStore()
    assert store.get("BOS") == 1620
    assert store.get("DEN") == 1600
    assert store.get("XYZ") == DEFAULT_ELO


def test_stores_do_not_share_state():
    first = EloRatingStore()
    second = EloRatingStore()
    first.update_elo_ratings("BOS", "MIA", 100, 90)

    assert second.get("BOS") == 1620


def test_expected_score():
    store = EloRatingStore({})
    assert store.expected_score(1500, 1500) == 0.5
    assert store.expected_score(1600, 1400) == pytest.approx(0.7597, abs=1e-4)


def test_update_equal_teams_moves_half_k():
    store = EloRatingStore({"AAA": 1500, "BBB": 1500})

    new_home, new_away = store.update_elo_ratings("AAA", "BBB", 101, 99)

    assert new_home == pytest.approx(1510)
    assert new_away == pytest.approx(1490)
    assert store.get("AAA") == pytest.approx(1510)


def test_update_is_zero_sum_and_rewards_upsets():
    store = EloRatingStore({"BOS": 1620, "DET": 1410})

    store.update_elo_ratings("BOS", "DET", 95, 100)

    assert store.get("BOS") + store.get("DET") == pytest.approx(1620 + 1410)
    assert 1620 - store.get("BOS") > 10


def test_record_result_only_applies_final_games():
    store = EloRatingStore()
    scheduled = Game(id=1, date="2026-02-16", home_team=get_team("BOS"), visitor_team=get_team("MIA"))
    final = Game(
        id=2,
        date="2026-02-16",
        home_team=get_team("BOS"),
        visitor_team=get_team("MIA"),
        home_team_score=90,
        visitor_team_score=104,
        status=GameStatus.FINAL,
        period=4,
    )

    assert store.record_result(scheduled) is False
    assert store.get("BOS") == 1620
    assert store.record_result(final) is True
    assert store.get("BOS") < 1620
    assert store.get("MIA") > 1520
