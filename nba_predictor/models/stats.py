"""Season aggregate statistics for a team."""

from dataclasses import dataclass, fields
from typing import Dict, Optional, Tuple

LEAGUE_AVERAGE_RATING = 110.0

_RECORD_FIELDS = ("last_10", "home_record", "away_record")


def parse_record(record: Optional[str]) -> Optional[Tuple[int, int]]:
    """Parse a ``"W-L"`` string into ``(wins, losses)``; None if malformed."""
    if not record:
        return None
    parts = str(record).split("-")
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def _to_float(value) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


@dataclass
class TeamStats:
    """
    Flat stat block as returned by the team-stats feed.

    Every field is optional: feeds omit what they do not track, and the
    prediction model substitutes league-average defaults instead of failing.
    """

    ppg: Optional[float] = None
    oppg: Optional[float] = None
    apg: Optional[float] = None
    rpg: Optional[float] = None
    spg: Optional[float] = None
    bpg: Optional[float] = None
    fg_pct: Optional[float] = None
    fg3_pct: Optional[float] = None
    ft_pct: Optional[float] = None
    wins: Optional[float] = None
    losses: Optional[float] = None
    win_pct: Optional[float] = None
    last_10: Optional[str] = None
    home_record: Optional[str] = None
    away_record: Optional[str] = None
    offensive_rating: Optional[float] = None
    defensive_rating: Optional[float] = None
    net_rating: Optional[float] = None
    pace: Optional[float] = None
    true_shooting: Optional[float] = None

    @property
    def offense(self) -> float:
        """Offensive rating, league average when missing or zero."""
        return self.offensive_rating or LEAGUE_AVERAGE_RATING

    @property
    def defense(self) -> float:
        """Defensive rating, league average when missing or zero."""
        return self.defensive_rating or LEAGUE_AVERAGE_RATING

    def to_dict(self) -> Dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict) -> "TeamStats":
        kwargs = {}
        for f in fields(cls):
            value = data.get(f.name)
            if f.name in _RECORD_FIELDS:
                kwargs[f.name] = str(value) if value not in (None, "") else None
            else:
                kwargs[f.name] = _to_float(value)

        stats = cls(**kwargs)
        if stats.win_pct is None and stats.wins is not None and stats.losses is not None:
            total = stats.wins + stats.losses
            if total > 0:
                stats.win_pct = stats.wins / total
        return stats

    @classmethod
    def from_payload(cls, payload) -> "TeamStats":
        """
        Build stats from a response body.

        Accepts ``{"data": {...}}``, ``{"data": [{...}]}`` or a bare block.
        """
        block = payload
        if isinstance(payload, dict) and "data" in payload:
            block = payload["data"]
        if isinstance(block, list):
            block = block[0] if block else {}
        if not isinstance(block, dict):
            raise ValueError(f"Team stats must be an object, got {type(block).__name__}")
        return cls.from_dict(block)
