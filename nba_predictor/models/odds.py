"""Sportsbook odds model (The Odds API event shape)."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .team import Team

SPREADS = "spreads"
MONEYLINE = "h2h"


@dataclass(frozen=True)
class Outcome:
    name: str
    price: float
    point: Optional[float] = None

    def to_dict(self) -> Dict:
        out = {"name": self.name, "price": self.price}
        if self.point is not None:
            out["point"] = self.point
        return out


@dataclass(frozen=True)
class Market:
    key: str
    outcomes: List[Outcome] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {"key": self.key, "outcomes": [o.to_dict() for o in self.outcomes]}


@dataclass(frozen=True)
class Bookmaker:
    key: str
    title: str
    markets: List[Market] = field(default_factory=list)

    def market(self, key: str) -> Optional[Market]:
        for market in self.markets:
            if market.key == key:
                return market
        return None

    def to_dict(self) -> Dict:
        return {"key": self.key, "title": self.title, "markets": [m.to_dict() for m in self.markets]}


@dataclass(frozen=True)
class Odds:
    """
    Odds for one game.

    Only the first bookmaker is consulted. Spread ``point`` values use the
    sportsbook convention: negative means that side is favored.
    """

    bookmakers: List[Bookmaker] = field(default_factory=list)
    home_team: Optional[str] = None
    away_team: Optional[str] = None
    commence_time: Optional[str] = None
    event_id: Optional[str] = None

    @property
    def primary(self) -> Optional[Bookmaker]:
        return self.bookmakers[0] if self.bookmakers else None

    def spread_line(self, home_team: Optional[Team] = None) -> Optional[float]:
        """
        Home spread point quoted by the primary bookmaker.

        With ``home_team`` only the outcome naming that team counts, and None
        is returned if there is none. Without it the first outcome is used.
        """
        book = self.primary
        if book is None:
            return None
        market = book.market(SPREADS)
        if market is None or not market.outcomes:
            return None
        if home_team is not None:
            for outcome in market.outcomes:
                if home_team.matches_name(outcome.name):
                    return outcome.point
            return None
        return market.outcomes[0].point

    def moneyline_price(self, team: Team) -> Optional[float]:
        book = self.primary
        if book is None:
            return None
        market = book.market(MONEYLINE)
        if market is None:
            return None
        for outcome in market.outcomes:
            if team.matches_name(outcome.name):
                return outcome.price
        return None

    def to_dict(self) -> Dict:
        out: Dict = {}
        if self.event_id is not None:
            out["id"] = self.event_id
        if self.home_team is not None:
            out["home_team"] = self.home_team
        if self.away_team is not None:
            out["away_team"] = self.away_team
        if self.commence_time is not None:
            out["commence_time"] = self.commence_time
        out["bookmakers"] = [b.to_dict() for b in self.bookmakers]
        return out

    @classmethod
    def from_dict(cls, data: Dict) -> "Odds":
        bookmakers = []
        for book in data.get("bookmakers") or []:
            markets = []
            for market in book.get("markets") or []:
                outcomes = [
                    Outcome(
                        name=str(o.get("name", "")),
                        price=float(o.get("price", 0)),
                        point=float(o["point"]) if o.get("point") is not None else None,
                    )
                    for o in market.get("outcomes") or []
                ]
                markets.append(Market(key=str(market.get("key", "")), outcomes=outcomes))
            bookmakers.append(
                Bookmaker(key=str(book.get("key", "")), title=str(book.get("title", "")), markets=markets)
            )
        return cls(
            bookmakers=bookmakers,
            home_team=data.get("home_team"),
            away_team=data.get("away_team"),
            commence_time=data.get("commence_time"),
            event_id=data.get("id"),
        )


def format_american(price: Optional[float]) -> str:
    """Render an American price (``+130`` / ``-150``); ``N/A`` when missing."""
    if price is None:
        return "N/A"
    value = int(price) if float(price).is_integer() else price
    return f"+{value}" if price > 0 else f"{value}"
