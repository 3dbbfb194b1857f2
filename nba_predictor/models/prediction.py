"""Prediction output model."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .team import Team

FACTOR_NAMES = ("elo", "recentForm", "offenseRating", "defenseRating", "homeAdvantage", "restDays")


@dataclass
class SpreadPick:
    pick: Team
    line: float
    actual_line: Optional[float]
    confidence: int
    reasoning: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "pick": self.pick.to_dict(),
            "line": self.line,
            "actualLine": self.actual_line,
            "confidence": self.confidence,
            "reasoning": list(self.reasoning),
        }


@dataclass
class MoneylinePick:
    pick: Team
    odds: str
    confidence: int
    reasoning: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "pick": self.pick.to_dict(),
            "odds": self.odds,
            "confidence": self.confidence,
            "reasoning": list(self.reasoning),
        }


@dataclass
class Prediction:
    """Spread and moneyline picks for one game, with the factors behind them."""

    spread: SpreadPick
    moneyline: MoneylinePick
    factors: Dict[str, float]
    raw_score: float
    predicted_spread: float

    def to_dict(self) -> dict:
        """Convert prediction to dictionary."""
        return {
            "spread": self.spread.to_dict(),
            "moneyline": self.moneyline.to_dict(),
            "factors": dict(self.factors),
            "rawScore": self.raw_score,
            "predictedSpread": self.predicted_spread,
        }
