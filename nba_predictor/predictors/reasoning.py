"""Human-readable reasons behind a pick."""

from typing import Dict, List, Tuple

from ..models.stats import TeamStats
from ..models.team import Team

ELO_THRESHOLD = 30
FORM_THRESHOLD = 20
EFFICIENCY_THRESHOLD = 20
WIN_PCT_THRESHOLD = 0.15

SPREAD_FALLBACK = "Close matchup with slight edge based on overall metrics"
MONEYLINE_FALLBACK = "Statistical models favor this outcome"


def generate_reasoning(
    factors: Dict[str, float],
    home_team: Team,
    away_team: Team,
    home_stats: TeamStats,
    away_stats: TeamStats,
) -> Tuple[List[str], List[str]]:
    """
    Build the spread and moneyline reason lists.

    Each factor contributes a sentence only when its magnitude clears a
    threshold; both lists fall back to a generic sentence if empty.

    Returns:
        Tuple of (spread_reasons, moneyline_reasons)
    """
    spread: List[str] = []
    moneyline: List[str] = []

    def side(value: float) -> Team:
        return home_team if value > 0 else away_team

    elo = factors["elo"]
    if abs(elo) > ELO_THRESHOLD:
        stronger = side(elo).name
        spread.append(f"{stronger} have superior Elo rating ({abs(elo):.0f} point advantage)")
        moneyline.append(f"{stronger} are the stronger team overall")

    form = factors["recentForm"]
    if abs(form) > FORM_THRESHOLD:
        record = (home_stats.last_10 if form > 0 else away_stats.last_10) or "N/A"
        spread.append(f"{side(form).name} in better form ({record} last 10 games)")

    if abs(factors["offenseRating"]) > EFFICIENCY_THRESHOLD:
        spread.append(f"{side(factors['offenseRating']).name} have superior offensive efficiency")

    if abs(factors["defenseRating"]) > EFFICIENCY_THRESHOLD:
        spread.append(f"{side(factors['defenseRating']).name} have stronger defensive rating")

    if factors["homeAdvantage"] > 0:
        spread.append(f"{home_team.name} benefit from home court advantage")
        moneyline.append(f"Home court advantage favors {home_team.name}")

    home_pct, away_pct = home_stats.win_pct, away_stats.win_pct
    if home_pct is not None and away_pct is not None and abs(home_pct - away_pct) > WIN_PCT_THRESHOLD:
        better = home_team if home_pct > away_pct else away_team
        moneyline.append(f"{better.name} have {max(home_pct, away_pct) * 100:.1f}% win rate this season")

    if not spread:
        spread.append(SPREAD_FALLBACK)
    if not moneyline:
        moneyline.append(MONEYLINE_FALLBACK)
    return spread, moneyline
