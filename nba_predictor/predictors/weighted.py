"""Weighted multi-factor spread and moneyline predictor."""

import math
from typing import Dict, Optional

from ..models.game import Game
from ..models.odds import Odds, format_american
from ..models.prediction import FACTOR_NAMES, MoneylinePick, Prediction, SpreadPick
from ..models.stats import TeamStats, parse_record
from .ratings import EloRatingStore
from .reasoning import generate_reasoning

FACTOR_LIMIT = 100.0
HOME_ADVANTAGE_FACTOR = 40.0
SCORE_PER_POINT = 10.0

MIN_CONFIDENCE = 1
MAX_CONFIDENCE = 10
BASE_CONFIDENCE = 5


def _clamp(value: float, low: float = -FACTOR_LIMIT, high: float = FACTOR_LIMIT) -> float:
    return max(low, min(high, value))


def win_ratio(record: Optional[str]) -> float:
    """Share of wins in a ``"W-L"`` record; 0.5 when absent or empty."""
    parsed = parse_record(record)
    if parsed is None or sum(parsed) == 0:
        return 0.5
    wins, losses = parsed
    return wins / (wins + losses)


class WeightedFactorPredictor:
    """
    Scores a matchup from six signed factors.

    Each factor is on a -100..+100 scale where positive favors the home
    team. The weighted sum (``raw_score``) divided by ten gives the margin
    in points. ``predicted_spread`` reports that margin as the home team's
    line, so negative means home is favored, the same convention the odds
    feed uses for ``point``.
    """

    DEFAULT_WEIGHTS = {
        "elo": 0.30,
        "recentForm": 0.25,
        "offenseRating": 0.15,
        "defenseRating": 0.15,
        "homeAdvantage": 0.10,
        "restDays": 0.05,
    }

    def __init__(self, ratings: Optional[EloRatingStore] = None, weights: Optional[Dict[str, float]] = None):
        """
        Initialize predictor.

        Args:
            ratings: Elo store to read team strength from (default: preseason seeds)
            weights: Factor weights; must cover all six factors and sum to 1.0
        """
        self.ratings = ratings or EloRatingStore()
        self.weights = dict(weights or self.DEFAULT_WEIGHTS)
        self._validate_weights()

    def _validate_weights(self) -> None:
        if set(self.weights) != set(FACTOR_NAMES):
            raise ValueError(f"Weights must cover exactly {sorted(FACTOR_NAMES)}, got {sorted(self.weights)}")
        total = sum(self.weights.values())
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"Weights must sum to 1.0, got {total}")

    def generate_prediction(
        self,
        game: Game,
        home_stats: TeamStats,
        away_stats: TeamStats,
        odds: Optional[Odds] = None,
    ) -> Prediction:
        """
        Predict spread and moneyline for a game.

        Args:
            game: Game to predict
            home_stats: Season stats for the home team
            away_stats: Season stats for the visiting team
            odds: Current odds, if any

        Returns:
            Prediction with picks, confidences, factors and reasoning
        """
        home_team = game.home_team
        away_team = game.visitor_team

        factors = self.calculate_factors(game, home_stats, away_stats)
        raw_score = sum(value * self.weights[name] for name, value in factors.items())
        predicted_spread = -raw_score / SCORE_PER_POINT

        actual_line = odds.spread_line(home_team) if odds is not None else None
        confidence = self.calculate_confidence(factors, predicted_spread, actual_line)

        pick = home_team if predicted_spread < 0 else away_team
        moneyline_confidence = self.calculate_moneyline_confidence(predicted_spread, confidence)
        price = odds.moneyline_price(pick) if odds is not None else None

        spread_reasons, moneyline_reasons = generate_reasoning(
            factors, home_team, away_team, home_stats, away_stats
        )

        return Prediction(
            spread=SpreadPick(
                pick=pick,
                line=abs(predicted_spread),
                actual_line=actual_line,
                confidence=confidence,
                reasoning=spread_reasons,
            ),
            moneyline=MoneylinePick(
                pick=pick,
                odds=format_american(price),
                confidence=moneyline_confidence,
                reasoning=moneyline_reasons,
            ),
            factors=factors,
            raw_score=raw_score,
            predicted_spread=predicted_spread,
        )

    def calculate_factors(self, game: Game, home_stats: TeamStats, away_stats: TeamStats) -> Dict[str, float]:
        return {
            "elo": self._elo_factor(game.home_team.abbreviation, game.visitor_team.abbreviation),
            "recentForm": self._recent_form_factor(home_stats, away_stats),
            "offenseRating": self._offense_factor(home_stats, away_stats),
            "defenseRating": self._defense_factor(home_stats, away_stats),
            "homeAdvantage": HOME_ADVANTAGE_FACTOR,
            "restDays": self._rest_factor(home_stats, away_stats),
        }

    def _elo_factor(self, home_abbr: str, away_abbr: str) -> float:
        return _clamp((self.ratings.get(home_abbr) - self.ratings.get(away_abbr)) / 2)

    def _recent_form_factor(self, home_stats: TeamStats, away_stats: TeamStats) -> float:
        # not clamped: a 10-0 vs 0-10 split gives +/-200
        return (win_ratio(home_stats.last_10) - win_ratio(away_stats.last_10)) * 200

    def _offense_factor(self, home_stats: TeamStats, away_stats: TeamStats) -> float:
        return _clamp((home_stats.offense - away_stats.offense) * 5)

    def _defense_factor(self, home_stats: TeamStats, away_stats: TeamStats) -> float:
        # lower defensive rating is better
        return _clamp((away_stats.defense - home_stats.defense) * 5)

    def _rest_factor(self, home_stats: TeamStats, away_stats: TeamStats) -> float:
        """Rest between games is not modelled yet; always neutral."""
        return 0.0

    def calculate_confidence(self, factors: Dict[str, float], predicted_spread: float, actual_line: Optional[float]) -> int:
        """
        Integer confidence from 1 to 10.

        Starts at 5 and adjusts for how unanimous the factors are, how wide
        the predicted margin is, and how close it lands to the market line.
        """
        confidence = BASE_CONFIDENCE

        agreement = sum(1 for value in factors.values() if value > 0) / len(factors)
        if agreement > 0.8 or agreement < 0.2:
            confidence += 3
        elif agreement > 0.6 or agreement < 0.4:
            confidence += 1

        margin = abs(predicted_spread)
        if margin > 8:
            confidence += 1
        elif margin < 3:
            confidence -= 1

        if actual_line is not None:
            diff = abs(predicted_spread - actual_line)
            if diff < 2:
                confidence += 1
            elif diff > 5:
                confidence -= 1

        return max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, confidence))

    def calculate_moneyline_confidence(self, predicted_spread: float, spread_confidence: int) -> int:
        margin = abs(predicted_spread)
        if margin > 10:
            return min(MAX_CONFIDENCE, spread_confidence + 1)
        if margin < 5:
            return max(MIN_CONFIDENCE, spread_confidence - 2)
        return spread_confidence
