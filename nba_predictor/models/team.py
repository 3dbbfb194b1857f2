"""Team model and NBA reference data."""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class Team:
    """Represents an NBA franchise as delivered by the games feed."""

    id: int
    abbreviation: str
    city: str
    name: str
    full_name: str

    def matches_name(self, other: str) -> bool:
        """
        Check whether a bookmaker outcome name refers to this team.

        Bookmakers use full names ("Boston Celtics") while the games feed is
        keyed on nicknames, so either string may contain the other.

        Args:
            other: Name string from an odds outcome

        Returns:
            True if the names are substrings of each other
        """
        if not other:
            return False
        return self.name in other or other in self.full_name

    def to_dict(self) -> dict:
        """Convert team to dictionary."""
        return {
            "id": self.id,
            "abbreviation": self.abbreviation,
            "city": self.city,
            "name": self.name,
            "full_name": self.full_name,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Team":
        """Create team from a games-feed team object."""
        if not isinstance(data, dict):
            raise ValueError(f"Team must be an object, got {type(data).__name__}")

        abbreviation = str(data.get("abbreviation") or "").upper()
        reference = NBA_TEAMS.get(abbreviation)
        name = data.get("name") or (reference.name if reference else "")
        city = data.get("city") or (reference.city if reference else "")
        full_name = data.get("full_name") or (f"{city} {name}".strip() if city else name)
        return cls(
            id=int(data.get("id") or (reference.id if reference else 0)),
            abbreviation=abbreviation,
            city=city,
            name=name,
            full_name=full_name,
        )


@dataclass(frozen=True)
class TeamReference:
    """Static per-franchise metadata."""

    id: int
    abbreviation: str
    city: str
    name: str
    elo: float
    primary_color: str
    secondary_color: str

    @property
    def full_name(self) -> str:
        return f"{self.city} {self.name}"

    def to_team(self) -> Team:
        return Team(
            id=self.id,
            abbreviation=self.abbreviation,
            city=self.city,
            name=self.name,
            full_name=self.full_name,
        )


def _ref(team_id, abbr, city, name, elo, primary, secondary) -> TeamReference:
    return TeamReference(team_id, abbr, city, name, elo, primary, secondary)


# Ids follow the BallDontLie numbering; Elo seeds are the hand-tuned preseason values.
NBA_TEAMS: Dict[str, TeamReference] = {
    t.abbreviation: t
    for t in (
        _ref(1, "ATL", "Atlanta", "Hawks", 1470, "#E03A3E", "#C1D32F"),
        _ref(2, "BOS", "Boston", "Celtics", 1620, "#007A33", "#BA9653"),
        _ref(3, "BKN", "Brooklyn", "Nets", 1480, "#000000", "#FFFFFF"),
        _ref(4, "CHA", "Charlotte", "Hornets", 1400, "#1D1160", "#00788C"),
        _ref(5, "CHI", "Chicago", "Bulls", 1460, "#CE1141", "#000000"),
        _ref(6, "CLE", "Cleveland", "Cavaliers", 1490, "#860038", "#041E42"),
        _ref(7, "DAL", "Dallas", "Mavericks", 1530, "#00538C", "#002B5E"),
        _ref(8, "DEN", "Denver", "Nuggets", 1600, "#0E2240", "#FEC524"),
        _ref(9, "DET", "Detroit", "Pistons", 1410, "#C8102E", "#1D42BA"),
        _ref(10, "GSW", "Golden State", "Warriors", 1580, "#1D428A", "#FFC72C"),
        _ref(11, "HOU", "Houston", "Rockets", 1430, "#CE1141", "#000000"),
        _ref(12, "IND", "Indiana", "Pacers", 1470, "#002D62", "#FDBB30"),
        _ref(13, "LAC", "LA", "Clippers", 1540, "#C8102E", "#1D428A"),
        _ref(14, "LAL", "Los Angeles", "Lakers", 1550, "#552583", "#FDB927"),
        _ref(15, "MEM", "Memphis", "Grizzlies", 1510, "#5D76A9", "#12173F"),
        _ref(16, "MIA", "Miami", "Heat", 1520, "#98002E", "#F9A01B"),
        _ref(17, "MIL", "Milwaukee", "Bucks", 1590, "#00471B", "#EEE1C6"),
        _ref(18, "MIN", "Minnesota", "Timberwolves", 1520, "#0C2340", "#236192"),
        _ref(19, "NOP", "New Orleans", "Pelicans", 1490, "#0C2340", "#C8102E"),
        _ref(20, "NYK", "New York", "Knicks", 1500, "#006BB6", "#F58426"),
        _ref(21, "OKC", "Oklahoma City", "Thunder", 1450, "#007AC1", "#EF3B24"),
        _ref(22, "ORL", "Orlando", "Magic", 1460, "#0077C0", "#C4CED4"),
        _ref(23, "PHI", "Philadelphia", "76ers", 1570, "#006BB6", "#ED174C"),
        _ref(24, "PHX", "Phoenix", "Suns", 1540, "#1D1160", "#E56020"),
        _ref(25, "POR", "Portland", "Trail Blazers", 1430, "#E03A3E", "#000000"),
        _ref(26, "SAC", "Sacramento", "Kings", 1500, "#5A2D81", "#63727A"),
        _ref(27, "SAS", "San Antonio", "Spurs", 1440, "#C4CED4", "#000000"),
        _ref(28, "TOR", "Toronto", "Raptors", 1480, "#CE1141", "#000000"),
        _ref(29, "UTA", "Utah", "Jazz", 1480, "#002B5C", "#F9A01B"),
        _ref(30, "WAS", "Washington", "Wizards", 1420, "#002B5C", "#E31837"),
    )
}

DEFAULT_COLORS = {"primary": "#1D428A", "secondary": "#FDB927", "name": "Unknown"}


def get_team(abbreviation: str) -> Optional[Team]:
    """Look up a reference team by abbreviation."""
    reference = NBA_TEAMS.get((abbreviation or "").upper())
    return reference.to_team() if reference else None


def get_team_colors(abbreviation: str) -> Dict[str, str]:
    """Return the display palette for a team, or the league default."""
    reference = NBA_TEAMS.get((abbreviation or "").upper())
    if reference is None:
        return dict(DEFAULT_COLORS)
    return {
        "primary": reference.primary_color,
        "secondary": reference.secondary_color,
        "name": reference.name,
    }


def seed_elo_ratings() -> Dict[str, float]:
    """Fresh copy of the preseason Elo table keyed by abbreviation."""
    return {abbr: float(ref.elo) for abbr, ref in NBA_TEAMS.items()}
