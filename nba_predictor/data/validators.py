"""Schema validators for upstream response bodies."""

from __future__ import annotations

from typing import Dict, List, Optional


def _to_float(value) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _validate_team(team, label: str) -> List[str]:
    if not isinstance(team, dict):
        return [f"{label} must be an object"]
    if not team.get("abbreviation"):
        return [f"{label} missing field: abbreviation"]
    return []


def validate_games_payload(payload: Dict) -> List[str]:
    """A games response must carry a ``data`` list of game objects (may be empty)."""
    if not isinstance(payload, dict):
        return ["games payload must be an object"]
    games = payload.get("data")
    if not isinstance(games, list):
        return ["games payload must include a 'data' list"]

    errors: List[str] = []
    for idx, row in enumerate(games):
        if not isinstance(row, dict):
            errors.append(f"data[{idx}] must be an object")
            continue
        if not row.get("date"):
            errors.append(f"data[{idx}] missing fields: date")
        errors.extend(_validate_team(row.get("home_team"), f"data[{idx}].home_team"))
        errors.extend(_validate_team(row.get("visitor_team"), f"data[{idx}].visitor_team"))
        for score_field in ("home_team_score", "visitor_team_score"):
            value = row.get(score_field)
            if value is not None and (_to_float(value) is None or _to_float(value) < 0):
                errors.append(f"data[{idx}] invalid numeric field '{score_field}'")
    return errors


def validate_team_stats_payload(payload: Dict) -> List[str]:
    if not isinstance(payload, dict):
        return ["team stats payload must be an object"]
    block = payload.get("data", payload)
    if isinstance(block, list):
        if not block:
            return ["team stats payload has an empty 'data' list"]
        block = block[0]
    if not isinstance(block, dict):
        return ["team stats 'data' must be an object"]

    errors: List[str] = []
    for key in ("wins", "losses", "offensive_rating", "defensive_rating", "win_pct"):
        if key in block and block[key] is not None and _to_float(block[key]) is None:
            errors.append(f"team stats invalid numeric field '{key}'")
    return errors


def validate_odds_feed(payload) -> List[str]:
    """The odds feed is a list of events, each with team names and bookmakers."""
    if not isinstance(payload, list):
        return ["odds feed must be a list of events"]

    errors: List[str] = []
    for idx, event in enumerate(payload):
        if not isinstance(event, dict):
            errors.append(f"events[{idx}] must be an object")
            continue
        missing = [k for k in ("home_team", "away_team") if not event.get(k)]
        if missing:
            errors.append(f"events[{idx}] missing fields: {', '.join(missing)}")
        errors.extend(_validate_bookmakers(event.get("bookmakers", []), f"events[{idx}]"))
    return errors


def _is_number(value) -> bool:
    return not isinstance(value, bool) and isinstance(value, (int, float))


def _validate_bookmakers(bookmakers, label: str) -> List[str]:
    if not isinstance(bookmakers, list):
        return [f"{label}.bookmakers must be a list"]

    errors: List[str] = []
    for b_idx, book in enumerate(bookmakers):
        book_label = f"{label}.bookmakers[{b_idx}]"
        if not isinstance(book, dict):
            errors.append(f"{book_label} must be an object")
            continue
        markets = book.get("markets", [])
        if not isinstance(markets, list):
            errors.append(f"{book_label}.markets must be a list")
            continue
        for m_idx, market in enumerate(markets):
            market_label = f"{book_label}.markets[{m_idx}]"
            if not isinstance(market, dict):
                errors.append(f"{market_label} must be an object")
                continue
            outcomes = market.get("outcomes", [])
            if not isinstance(outcomes, list):
                errors.append(f"{market_label}.outcomes must be a list")
                continue
            for o_idx, outcome in enumerate(outcomes):
                outcome_label = f"{market_label}.outcomes[{o_idx}]"
                if not isinstance(outcome, dict):
                    errors.append(f"{outcome_label} must be an object")
                    continue
                if not isinstance(outcome.get("name"), str) or not outcome.get("name"):
                    errors.append(f"{outcome_label} missing field: name")
                if not _is_number(outcome.get("price")):
                    errors.append(f"{outcome_label} invalid numeric field 'price'")
                if outcome.get("point") is not None and not _is_number(outcome.get("point")):
                    errors.append(f"{outcome_label} invalid numeric field 'point'")
    return errors
