"""Generated stand-in data used when an upstream feed is unavailable.

Schedules and stat blocks are pure functions of their inputs so that the
same request always yields the same fallback. Odds are drawn at random.
"""

from __future__ import annotations

import math
import random
from typing import List, Optional

from ..models.game import Game, GameStatus
from ..models.odds import MONEYLINE, SPREADS, Bookmaker, Market, Odds, Outcome
from ..models.stats import TeamStats
from ..models.team import NBA_TEAMS, Team
from .dates import shift_date

MOCK_GAMES_FIXTURE = (
    ("LAL", "GSW", "7:30 PM ET"),
    ("BOS", "MIA", "7:00 PM ET"),
    ("PHX", "DEN", "10:00 PM ET"),
)

MOCK_SCHEDULE_FIXTURE = (
    ("LAL", "GSW", "7:30 PM ET"),
    ("BOS", "MIA", "7:00 PM ET"),
    ("PHX", "DEN", "10:00 PM ET"),
    ("LAC", "NYK", "7:30 PM ET"),
    ("MIL", "BOS", "8:00 PM ET"),
    ("DAL", "HOU", "8:30 PM ET"),
    ("SAS", "OKC", "9:00 PM ET"),
    ("TOR", "WAS", "7:30 PM ET"),
    ("ATL", "CHA", "7:30 PM ET"),
    ("MIN", "MEM", "8:00 PM ET"),
)

GAMES_PER_MOCK_DAY = 3
TEAM_BUCKETS = 30
GOOD_TEAM_BUCKETS = 10


def _team(abbreviation: str) -> Team:
    return NBA_TEAMS[abbreviation].to_team()


def _scheduled(game_id: int, date: str, home: str, away: str, time: str) -> Game:
    return Game(
        id=game_id,
        date=date,
        home_team=_team(home),
        visitor_team=_team(away),
        status=GameStatus.SCHEDULED,
        time=time,
        period=0,
    )


def mock_games(date: str) -> List[Game]:
    """The three fixed illustrative matchups, stamped with ``date``."""
    return [
        _scheduled(idx, date, home, away, time)
        for idx, (home, away, time) in enumerate(MOCK_GAMES_FIXTURE, start=1)
    ]


def mock_games_list(start_date: str, per_page: int = 10) -> List[Game]:
    """
    A multi-day schedule starting at ``start_date``.

    Cycles through the fixture table and advances the date once every
    three games.
    """
    games = []
    for idx in range(max(per_page, 0)):
        home, away, time = MOCK_SCHEDULE_FIXTURE[idx % len(MOCK_SCHEDULE_FIXTURE)]
        day_offset = idx // GAMES_PER_MOCK_DAY
        games.append(_scheduled(idx + 1, shift_date(start_date, day_offset), home, away, time))
    return games


def _round1(value: float) -> float:
    # half-up, not banker's rounding
    return math.floor(value * 10 + 0.5) / 10


def mock_team_stats(team_id: int) -> TeamStats:
    """
    Closed-form stat block for a team id.

    Ids are folded into 30 buckets; the first ten buckets get a "good team"
    profile and the rest an average one.
    """
    seed = int(team_id) % TEAM_BUCKETS
    good = seed < GOOD_TEAM_BUCKETS

    wins = 35 + seed * 2 if good else 20 + seed
    losses = 20 - seed / 2 if good else 35 - seed / 2
    losses = max(10, losses)

    offensive_rating = _round1(115 + seed * 0.8 if good else 108 + seed * 0.6)
    defensive_rating = _round1(106 + seed * 0.5 if good else 112 + seed * 0.7)

    if good:
        last_10 = f"{7 + seed % 3}-{3 - seed % 3}"
        home_record = f"{20 + seed % 5}-{10 - seed % 3}"
        away_record = f"{15 + seed % 3}-{15 - seed % 3}"
    else:
        last_10 = f"{4 + seed % 2}-{6 - seed % 2}"
        home_record = f"{12 + seed % 4}-{18 - seed % 4}"
        away_record = f"{8 + seed % 3}-{22 - seed % 3}"

    return TeamStats(
        ppg=_round1(115 + seed * 1.5 if good else 105 + seed * 1.2),
        oppg=_round1(106 + seed * 0.8 if good else 110 + seed * 1.1),
        apg=24 + seed % 6,
        rpg=43 + seed % 8,
        spg=7.5 + seed % 3,
        bpg=4.5 + seed % 2.5,
        fg_pct=(0.47 if good else 0.44) + (seed % 5) * 0.01,
        fg3_pct=(0.37 if good else 0.34) + (seed % 4) * 0.01,
        ft_pct=0.76 + (seed % 8) * 0.01,
        wins=wins,
        losses=losses,
        win_pct=wins / (wins + losses),
        last_10=last_10,
        home_record=home_record,
        away_record=away_record,
        offensive_rating=offensive_rating,
        defensive_rating=defensive_rating,
        net_rating=offensive_rating - defensive_rating,
        pace=98 + seed % 6,
        true_shooting=(0.58 if good else 0.54) + (seed % 5) * 0.01,
    )


def mock_moneylines(spread: int):
    """Home and away American prices implied by a home spread line."""
    home_ml = -150 - abs(spread) * 20 if spread < 0 else 130 + spread * 20
    away_ml = -150 - spread * 20 if spread > 0 else 130 + abs(spread) * 20
    return home_ml, away_ml


def mock_odds(home_team: str, away_team: str, rng: Optional[random.Random] = None) -> Odds:
    """Single-bookmaker odds with a random home spread in [-5, 5]."""
    rng = rng or random.Random()
    spread = rng.randint(-5, 5)
    home_ml, away_ml = mock_moneylines(spread)

    return Odds(
        home_team=home_team,
        away_team=away_team,
        bookmakers=[
            Bookmaker(
                key="draftkings",
                title="DraftKings",
                markets=[
                    Market(
                        key=SPREADS,
                        outcomes=[
                            Outcome(name=home_team, price=-110, point=float(spread)),
                            Outcome(name=away_team, price=-110, point=float(-spread) if spread else 0.0),
                        ],
                    ),
                    Market(
                        key=MONEYLINE,
                        outcomes=[
                            Outcome(name=home_team, price=home_ml),
                            Outcome(name=away_team, price=away_ml),
                        ],
                    ),
                ],
            )
        ],
    )
