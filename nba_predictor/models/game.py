"""Game model for NBA schedule data."""

from dataclasses import dataclass
from enum import Enum

from .team import Team
from ..data.dates import format_game_time_et, parse_date


class GameStatus(str, Enum):
    SCHEDULED = "scheduled"
    LIVE = "live"
    FINAL = "final"


def _looks_like_timestamp(value: str) -> bool:
    return len(value) >= 16 and value[4] == "-" and "T" in value


@dataclass(frozen=True)
class Game:
    """Represents a single scheduled, in-progress, or completed game."""

    id: int
    date: str
    home_team: Team
    visitor_team: Team
    home_team_score: int = 0
    visitor_team_score: int = 0
    status: GameStatus = GameStatus.SCHEDULED
    time: str = "TBD"
    period: int = 0

    def __post_init__(self):
        """Validate game data."""
        if self.home_team_score < 0 or self.visitor_team_score < 0:
            raise ValueError("Scores must be non-negative")
        if self.period < 0:
            raise ValueError(f"Period must be non-negative, got {self.period}")

    @property
    def matchup(self) -> str:
        return f"{self.visitor_team.abbreviation} @ {self.home_team.abbreviation}"

    def to_dict(self) -> dict:
        """Convert game to dictionary."""
        return {
            "id": self.id,
            "date": self.date,
            "home_team": self.home_team.to_dict(),
            "visitor_team": self.visitor_team.to_dict(),
            "home_team_score": self.home_team_score,
            "visitor_team_score": self.visitor_team_score,
            "status": self.status.value,
            "time": self.time,
            "period": self.period,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Game":
        """
        Create a game from a games-feed object.

        The feed reports status as free text ("Final", "3rd Qtr", or a tip-off
        timestamp for games not yet started); it is normalised here.
        """
        raw_date = str(data.get("date") or "")[:10]
        parse_date(raw_date)

        period = int(data.get("period") or 0)
        raw_status = str(data.get("status") or "").strip()
        lowered = raw_status.lower()
        if lowered.startswith("final"):
            status = GameStatus.FINAL
        elif lowered in (GameStatus.LIVE.value, GameStatus.SCHEDULED.value):
            status = GameStatus(lowered)
        elif period > 0:
            status = GameStatus.LIVE
        else:
            status = GameStatus.SCHEDULED

        display = str(data.get("time") or "").strip()
        if not display:
            tip_off = data.get("datetime") or (raw_status if _looks_like_timestamp(raw_status) else None)
            if tip_off:
                display = format_game_time_et(tip_off)
            elif status is GameStatus.FINAL:
                display = "Final"
            else:
                display = raw_status or "TBD"

        return cls(
            id=int(data.get("id") or 0),
            date=raw_date,
            home_team=Team.from_dict(data.get("home_team")),
            visitor_team=Team.from_dict(data.get("visitor_team")),
            home_team_score=int(data.get("home_team_score") or 0),
            visitor_team_score=int(data.get("visitor_team_score") or 0),
            status=status,
            time=display,
            period=period,
        )
