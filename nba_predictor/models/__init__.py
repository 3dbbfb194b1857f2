"""Domain models: teams, games, stat blocks, odds and predictions."""

from .game import Game, GameStatus
from .odds import Bookmaker, Market, Odds, Outcome, format_american
from .prediction import FACTOR_NAMES, MoneylinePick, Prediction, SpreadPick
from .stats import TeamStats, parse_record
from .team import NBA_TEAMS, Team, get_team, get_team_colors

__all__ = [
    "Bookmaker",
    "FACTOR_NAMES",
    "Game",
    "GameStatus",
    "Market",
    "MoneylinePick",
    "NBA_TEAMS",
    "Odds",
    "Outcome",
    "Prediction",
    "SpreadPick",
    "Team",
    "TeamStats",
    "format_american",
    "get_team",
    "get_team_colors",
    "parse_record",
]
