"""Elo rating store shared by the prediction model."""

import logging
from typing import Dict, Optional, Tuple

from ..models.game import Game, GameStatus
from ..models.team import seed_elo_ratings

logger = logging.getLogger(__name__)

DEFAULT_ELO = 1500.0
ELO_K_FACTOR = 20.0


class EloRatingStore:
    """
    Team Elo ratings keyed by abbreviation.

    Ratings only change through ``update_elo_ratings``; the prediction model
    reads them but never writes.
    """

    def __init__(
        self,
        ratings: Optional[Dict[str, float]] = None,
        k_factor: float = ELO_K_FACTOR,
        default_rating: float = DEFAULT_ELO,
    ):
        """
        Initialize the store.

        Args:
            ratings: Initial ratings (default: preseason seed table)
            k_factor: K-factor for rating updates
            default_rating: Rating assumed for unknown teams
        """
        self.ratings: Dict[str, float] = dict(ratings) if ratings is not None else seed_elo_ratings()
        self.k_factor = k_factor
        self.default_rating = default_rating

    def get(self, abbreviation: str) -> float:
        return self.ratings.get(abbreviation, self.default_rating)

    def expected_score(self, rating: float, opponent_rating: float) -> float:
        """
        Calculate expected score against an opponent.

        Returns:
            Expected probability of winning (0 to 1)
        """
        return 1.0 / (1.0 + 10 ** ((opponent_rating - rating) / 400.0))

    def update_elo_ratings(
        self, home_team: str, away_team: str, home_score: int, away_score: int
    ) -> Tuple[float, float]:
        """
        Update both ratings after a completed game.

        Args:
            home_team: Home team abbreviation
            away_team: Away team abbreviation
            home_score: Home final score
            away_score: Away final score

        Returns:
            Tuple of (new_home_rating, new_away_rating)
        """
        home_elo = self.get(home_team)
        away_elo = self.get(away_team)

        expected_home = self.expected_score(home_elo, away_elo)
        actual_home = 1.0 if home_score > away_score else 0.0

        new_home = home_elo + self.k_factor * (actual_home - expected_home)
        new_away = away_elo + self.k_factor * ((1.0 - actual_home) - (1.0 - expected_home))

        self.ratings[home_team] = new_home
        self.ratings[away_team] = new_away
        logger.debug("Elo update %s %.1f -> %.1f, %s %.1f -> %.1f", home_team, home_elo, new_home, away_team, away_elo, new_away)
        return new_home, new_away

    def record_result(self, game: Game) -> bool:
        """Apply a final game's result; returns False for games not yet final."""
        if game.status is not GameStatus.FINAL:
            return False
        self.update_elo_ratings(
            game.home_team.abbreviation,
            game.visitor_team.abbreviation,
            game.home_team_score,
            game.visitor_team_score,
        )
        return True
