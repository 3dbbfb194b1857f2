"""Unit tests for the weighted-factor prediction model."""

import math

import pytest

from nba_predictor.models.game import Game
from nba_predictor.models.odds import Bookmaker, Market, Odds, Outcome
from nba_predictor.models.stats import TeamStats
from nba_predictor.models.team import get_team
from nba_predictor.predictors.ratings import EloRatingStore
from nba_predictor.predictors.reasoning import MONEYLINE_FALLBACK, SPREAD_FALLBACK, generate_reasoning
from nba_predictor.predictors.weighted import WeightedFactorPredictor, win_ratio


def make_game(home="BOS", away="CLE"):
    return Game(id=1, date="2026-02-16", home_team=get_team(home), visitor_team=get_team(away))


def make_odds(home_point, home_name="Boston Celtics", away_name="Cleveland Cavaliers", home_ml=-220, away_ml=180):
    return Odds(
        home_team=home_name,
        away_team=away_name,
        bookmakers=[
            Bookmaker(
                key="fanduel",
                title="FanDuel",
                markets=[
                    Market(
                        key="spreads",
                        outcomes=[
                            Outcome(name=away_name, price=-110, point=-home_point),
                            Outcome(name=home_name, price=-110, point=home_point),
                        ],
                    ),
                    Market(
                        key="h2h",
                        outcomes=[Outcome(name=home_name, price=home_ml), Outcome(name=away_name, price=away_ml)],
                    ),
                ],
            )
        ],
    )


@pytest.fixture
def even_stats():
    return TeamStats(wins=30, losses=30, win_pct=0.5, last_10="5-5", offensive_rating=112.0, defensive_rating=112.0)


def test_default_weights_sum_to_one():
    assert math.isclose(sum(WeightedFactorPredictor.DEFAULT_WEIGHTS.values()), 1.0, abs_tol=1e-12)


def test_weights_must_sum_to_one():
    weights = dict(WeightedFactorPredictor.DEFAULT_WEIGHTS, elo=0.5)
    with pytest.raises(ValueError, match="sum to 1.0"):
        WeightedFactorPredictor(weights=weights)


def test_weights_must_cover_every_factor():
    weights = dict(WeightedFactorPredictor.DEFAULT_WEIGHTS)
    weights.pop("restDays")
    weights["elo"] += 0.05
    with pytest.raises(ValueError, match="cover exactly"):
        WeightedFactorPredictor(weights=weights)


def test_win_ratio():
    assert win_ratio("7-3") == 0.7
    assert win_ratio(None) == 0.5
    assert win_ratio("0-0") == 0.5


def test_equal_teams_home_wins_by_home_court_margin(even_stats):
    predictor = WeightedFactorPredictor(ratings=EloRatingStore({}))

    prediction = predictor.generate_prediction(make_game("NYK", "SAC"), even_stats, even_stats)

    assert prediction.factors["elo"] == 0
    assert prediction.raw_score == pytest.approx(4.0)
    assert prediction.predicted_spread == pytest.approx(-0.4)
    assert prediction.spread.pick.abbreviation == "NYK"
    assert prediction.spread.line == pytest.approx(0.4)
    assert prediction.spread.actual_line is None
    # one of six factors positive, narrow margin, no market line
    assert prediction.spread.confidence == 7
    assert prediction.moneyline.confidence == 5
    assert prediction.moneyline.odds == "N/A"


def test_strong_home_team_against_market_line(even_stats):
    predictor = WeightedFactorPredictor()

    prediction = predictor.generate_prediction(make_game(), even_stats, even_stats, make_odds(-5.5))

    assert prediction.factors["elo"] == pytest.approx(65.0)
    assert prediction.predicted_spread == pytest.approx(-2.35)
    assert prediction.predicted_spread < 0
    assert prediction.spread.pick.abbreviation == "BOS"
    assert prediction.spread.actual_line == -5.5
    assert prediction.spread.confidence >= 5
    assert prediction.moneyline.pick.abbreviation == "BOS"
    assert prediction.moneyline.odds == "-220"
    assert "Celtics have superior Elo rating (65 point advantage)" in prediction.spread.reasoning
    assert "Celtics benefit from home court advantage" in prediction.spread.reasoning
    assert prediction.moneyline.reasoning == [
        "Celtics are the stronger team overall",
        "Home court advantage favors Celtics",
    ]


def test_strong_road_team_is_picked():
    predictor = WeightedFactorPredictor()
    home = TeamStats(last_10="2-8", offensive_rating=108.0, defensive_rating=116.0, win_pct=0.3)
    away = TeamStats(last_10="8-2", offensive_rating=118.0, defensive_rating=108.0, win_pct=0.7)

    prediction = predictor.generate_prediction(make_game("DET", "BOS"), home, away)

    assert prediction.raw_score < 0
    assert prediction.predicted_spread > 0
    assert prediction.spread.pick.abbreviation == "BOS"
    assert "Celtics in better form (8-2 last 10 games)" in prediction.spread.reasoning
    assert "Celtics have 70.0% win rate this season" in prediction.moneyline.reasoning


def test_factors_are_clamped_except_recent_form():
    predictor = WeightedFactorPredictor(ratings=EloRatingStore({"BOS": 1900, "DET": 1300}))
    home = TeamStats(last_10="10-0", offensive_rating=130.0, defensive_rating=95.0)
    away = TeamStats(last_10="0-10", offensive_rating=100.0, defensive_rating=125.0)

    factors = predictor.calculate_factors(make_game("BOS", "DET"), home, away)

    assert factors["elo"] == 100
    assert factors["offenseRating"] == 100
    assert factors["defenseRating"] == 100
    assert factors["recentForm"] == pytest.approx(200)
    assert factors["restDays"] == 0


def test_missing_stats_use_league_average():
    predictor = WeightedFactorPredictor(ratings=EloRatingStore({}))

    prediction = predictor.generate_prediction(make_game(), TeamStats(), TeamStats())

    assert prediction.factors["offenseRating"] == 0
    assert prediction.factors["defenseRating"] == 0
    assert prediction.factors["recentForm"] == 0
    assert prediction.moneyline.reasoning == ["Home court advantage favors Celtics"]


@pytest.mark.parametrize(
    "home,away,line",
    [
        (TeamStats(), TeamStats(), None),
        (TeamStats(last_10="10-0", offensive_rating=130, defensive_rating=95), TeamStats(last_10="0-10"), -11.0),
        (TeamStats(last_10="0-10"), TeamStats(last_10="10-0", offensive_rating=130, defensive_rating=95), -20.0),
        (TeamStats(wins=0, losses=10, win_pct=0.0), TeamStats(wins=82, losses=0, win_pct=1.0), 3.5),
    ],
)
def test_confidence_is_integer_in_range(home, away, line):
    predictor = WeightedFactorPredictor()
    odds = make_odds(line) if line is not None else None

    prediction = predictor.generate_prediction(make_game(), home, away, odds)

    for confidence in (prediction.spread.confidence, prediction.moneyline.confidence):
        assert isinstance(confidence, int)
        assert 1 <= confidence <= 10


def test_confidence_rewards_agreement_with_market():
    predictor = WeightedFactorPredictor()
    factors = {"elo": 10, "recentForm": 10, "offenseRating": 10, "defenseRating": 10, "homeAdvantage": 40, "restDays": 0}

    assert predictor.calculate_confidence(factors, -9.0, -8.5) == 10
    assert predictor.calculate_confidence(factors, -9.0, 0.0) == 8


def test_moneyline_confidence_adjustment():
    predictor = WeightedFactorPredictor()

    assert predictor.calculate_moneyline_confidence(-12.0, 10) == 10
    assert predictor.calculate_moneyline_confidence(-12.0, 6) == 7
    assert predictor.calculate_moneyline_confidence(-7.0, 6) == 6
    assert predictor.calculate_moneyline_confidence(-1.0, 2) == 1


def test_fallback_reasoning_when_nothing_stands_out(even_stats):
    predictor = WeightedFactorPredictor(ratings=EloRatingStore({}))
    game = make_game("NYK", "SAC")

    factors = predictor.calculate_factors(game, even_stats, even_stats)
    factors["homeAdvantage"] = 0

    spread, moneyline = generate_reasoning(factors, game.home_team, game.visitor_team, even_stats, even_stats)
    assert spread == [SPREAD_FALLBACK]
    assert moneyline == [MONEYLINE_FALLBACK]


def test_prediction_to_dict_uses_camel_case(even_stats):
    prediction = WeightedFactorPredictor().generate_prediction(make_game(), even_stats, even_stats, make_odds(-5.5))
    data = prediction.to_dict()

    assert set(data) == {"spread", "moneyline", "factors", "rawScore", "predictedSpread"}
    assert data["spread"]["actualLine"] == -5.5
    assert data["spread"]["pick"]["abbreviation"] == "BOS"
    assert set(data["factors"]) == {"elo", "recentForm", "offenseRating", "defenseRating", "homeAdvantage", "restDays"}
