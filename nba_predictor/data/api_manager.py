"""Cached, rate-limited data access with mock fallback.

Every public operation follows the same sequence:

1. Return a cached envelope if one is still fresh.
2. Without an API key, return (and cache) generated mock data.
3. Otherwise fetch through the shared rate limiter with bounded retries,
   validate the body, and tag it ``REAL``.
4. If the fetch is exhausted or the body is invalid, return (and cache)
   mock data tagged ``MOCK`` with an explanatory message.

Only a missing or malformed required parameter raises to the caller.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Tuple

from ..config import Settings
from ..models.game import Game
from ..models.odds import Odds
from ..models.stats import TeamStats
from .cache import ResponseCache, make_cache_key
from .dates import parse_date, shift_date
from .envelope import (
    FALLBACK_MESSAGE,
    GAME_NOT_FOUND_MESSAGE,
    MOCK_PROVIDER,
    ApiResponse,
    DataSource,
    game_count,
    mask_key,
)
from .errors import InvalidPayloadError, MissingParameterError, UpstreamError
from .mock_data import mock_games, mock_games_list, mock_odds, mock_team_stats
from .providers import BallDontLieClient, TheOddsApiClient
from .retry import RateLimiter, linear_backoff, retry_call
from .validators import validate_games_payload, validate_odds_feed, validate_team_stats_payload

logger = logging.getLogger(__name__)

NO_GAMES_KEY_MESSAGE = "Using mock data. Configure BALLDONTLIE_API_KEY to enable real data."
NO_ODDS_KEY_MESSAGE = "Using mock data. Configure ODDS_API_KEY to enable real odds data."

MAX_PER_PAGE = 100


def _names_overlap(a: str, b: str) -> bool:
    return bool(a) and bool(b) and (a in b or b in a)


def find_matching_event(feed: List[Dict], home_team: str, away_team: str) -> Optional[Dict]:
    """
    Pick the feed event for a matchup.

    Feeds use full names ("Los Angeles Lakers") while callers often pass
    nicknames or short forms, so a side matches when either name contains
    the other.
    """
    home = home_team.strip().lower()
    away = away_team.strip().lower()
    for event in feed:
        event_home = str(event.get("home_team") or "").lower()
        event_away = str(event.get("away_team") or "").lower()
        if _names_overlap(event_home, home) and _names_overlap(event_away, away):
            return event
    return None


def _require(value, parameter: str, message: str):
    if value is None or (isinstance(value, str) and not value.strip()):
        raise MissingParameterError(parameter, message)
    return value


def _require_date(value, parameter: str, message: str) -> str:
    value = str(_require(value, parameter, message)).strip()
    try:
        parse_date(value)
    except ValueError:
        raise MissingParameterError(parameter, f"{parameter} must be a YYYY-MM-DD date, got {value!r}")
    return value[:10]


def _require_int(value, parameter: str, message: str) -> int:
    value = _require(value, parameter, message)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise MissingParameterError(parameter, f"{parameter} must be an integer, got {value!r}")


def _optional_int(value, parameter: str, default: int) -> int:
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    return _require_int(value, parameter, f"{parameter} parameter required")


def _require_range(value: int, parameter: str, low: int, high: Optional[int] = None) -> int:
    if value < low or (high is not None and value > high):
        bounds = f"between {low} and {high}" if high is not None else f"at least {low}"
        raise MissingParameterError(parameter, f"{parameter} must be {bounds}, got {value}")
    return value


@dataclass
class MatchupData:
    """Everything the prediction model needs for one game."""

    game: Game
    home_stats: ApiResponse
    away_stats: ApiResponse
    odds: ApiResponse

    @property
    def responses(self) -> List[ApiResponse]:
        return [self.home_stats, self.away_stats, self.odds]


class ApiManager:
    """Owns the response cache, the rate limiter and the configured API keys."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        cache: Optional[ResponseCache] = None,
        rate_limiter: Optional[RateLimiter] = None,
        sleep: Callable[[float], None] = time.sleep,
        rng: Optional[random.Random] = None,
        games_client: Optional[BallDontLieClient] = None,
        odds_client: Optional[TheOddsApiClient] = None,
    ):
        self.settings = settings or Settings()
        self.cache = cache or ResponseCache(ttl=self.settings.cache_ttl_seconds)
        self.rate_limiter = rate_limiter or RateLimiter(self.settings.min_request_interval, sleep=sleep)
        self._sleep = sleep
        self._rng = rng or random.Random()
        self._games_client = games_client
        self._odds_client = odds_client
        self._clients_injected = games_client is not None or odds_client is not None

        self.balldontlie_api_key = self.settings.balldontlie_api_key
        self.odds_api_key = self.settings.odds_api_key

    def update_keys(self, balldontlie_api_key: str, odds_api_key: str) -> None:
        """Swap the API keys; cached envelopes built under the old keys are dropped."""
        self.balldontlie_api_key = balldontlie_api_key or ""
        self.odds_api_key = odds_api_key or ""
        if not self._clients_injected:
            self._games_client = None
            self._odds_client = None
        self.cache.clear()
        logger.info(
            "API keys updated (balldontlie=%s, odds=%s)",
            mask_key(self.balldontlie_api_key),
            mask_key(self.odds_api_key),
        )

    def health(self) -> Dict:
        both = bool(self.balldontlie_api_key) and bool(self.odds_api_key)
        return {
            "status": "ok",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "dataSource": DataSource.REAL.value if both else DataSource.MOCK.value,
            "apiStatus": {
                "balldontlie": "configured" if self.balldontlie_api_key else "NOT SET - using mock data",
                "oddsApi": "configured" if self.odds_api_key else "NOT SET - using mock data",
            },
            "cacheEntries": len(self.cache),
        }

    # ------------------------------------------------------------------
    # Games
    # ------------------------------------------------------------------

    def get_games(self, date: str) -> ApiResponse:
        """
        Games on one date.

        An empty live result triggers a day-by-day walk back (up to
        ``settings.lookback_days``) to the most recent date with games.
        """
        date = _require_date(date, "date", "Date parameter required")
        key = make_cache_key("games", {"date": date})
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        if not self.balldontlie_api_key:
            logger.warning("No BALLDONTLIE_API_KEY configured; using mock games for %s", date)
            return self._store(key, ApiResponse(mock_games(date), DataSource.MOCK, MOCK_PROVIDER, NO_GAMES_KEY_MESSAGE))

        try:
            games = self._fetch_games_for_date(date)
        except UpstreamError as exc:
            logger.warning("Games fetch for %s failed (%s); returning mock data", date, exc)
            return self._store(key, ApiResponse(mock_games(date), DataSource.MOCK, MOCK_PROVIDER, FALLBACK_MESSAGE))

        fallback_date = None
        message = None
        if not games:
            logger.info("No games found for %s; trying previous dates", date)
            games, fallback_date = self._lookback(date)
            if fallback_date:
                message = f"Showing games from {fallback_date} (no games found for {date})"
            else:
                logger.warning("No games found for %s or previous %d days", date, self.settings.lookback_days)
                message = f"No games found for {date} or previous {self.settings.lookback_days} days"

        response = ApiResponse(
            games,
            DataSource.REAL,
            BallDontLieClient.provider_name,
            message,
            requested_date=date,
            fallback_date=fallback_date,
            include_fallback_date=True,
        )
        logger.info("Fetched %d games from BallDontLie", game_count(response))
        return self._store(key, response)

    def get_games_list(self, start_date: str, per_page: int = 10, cursor: int = 0) -> ApiResponse:
        """A page of upcoming games starting at ``start_date``."""
        start_date = _require_date(start_date, "start_date", "start_date parameter required")
        per_page = _require_range(
            _require_int(per_page, "per_page", "per_page parameter required"), "per_page", 1, MAX_PER_PAGE
        )
        cursor = _require_range(_require_int(cursor, "cursor", "cursor parameter required"), "cursor", 0)
        key = make_cache_key("gamesList", {"start_date": start_date, "per_page": per_page, "cursor": cursor})
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        if not self.balldontlie_api_key:
            logger.warning("No BALLDONTLIE_API_KEY configured; using mock schedule from %s", start_date)
            mock = mock_games_list(start_date, per_page)
            return self._store(key, ApiResponse(mock, DataSource.MOCK, MOCK_PROVIDER, NO_GAMES_KEY_MESSAGE))

        try:
            payload = self._fetch(
                lambda: self._games_api().fetch_games_page(start_date, per_page, cursor),
                "games list",
            )
            games = self._parse_games(payload)
        except UpstreamError as exc:
            logger.warning("Games list fetch failed (%s); returning mock data", exc)
            mock = mock_games_list(start_date, per_page)
            return self._store(key, ApiResponse(mock, DataSource.MOCK, MOCK_PROVIDER, FALLBACK_MESSAGE))

        meta = payload.get("meta") if isinstance(payload.get("meta"), dict) else None
        return self._store(key, ApiResponse(games, DataSource.REAL, BallDontLieClient.provider_name, meta=meta))

    def _fetch_games_for_date(self, date: str) -> List[Game]:
        payload = self._fetch(lambda: self._games_api().fetch_games(date), f"games {date}")
        return self._parse_games(payload)

    def _parse_games(self, payload) -> List[Game]:
        errors = validate_games_payload(payload)
        if errors:
            raise InvalidPayloadError("games", errors)
        try:
            return [Game.from_dict(row) for row in payload["data"]]
        except (TypeError, ValueError) as exc:
            raise InvalidPayloadError("games", [str(exc)]) from exc

    def _lookback(self, date: str) -> Tuple[List[Game], Optional[str]]:
        for days_back in range(1, self.settings.lookback_days + 1):
            check_date = shift_date(date, -days_back)
            try:
                games = self._fetch_games_for_date(check_date)
            except UpstreamError as exc:
                logger.info("Lookback fetch for %s failed: %s", check_date, exc)
                continue
            if games:
                logger.info("Found %d games on %s", len(games), check_date)
                return games, check_date
        return [], None

    # ------------------------------------------------------------------
    # Team stats
    # ------------------------------------------------------------------

    def get_team_stats(self, team_id, season: Optional[int] = None) -> ApiResponse:
        team_id = _require_int(team_id, "teamId", "teamId parameter required")
        season = _optional_int(season, "season", self.settings.default_season)
        key = make_cache_key("teamStats", {"teamId": team_id, "season": season})
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        if not self.balldontlie_api_key:
            logger.warning("No BALLDONTLIE_API_KEY configured; using mock stats for team %s", team_id)
            return self._store(
                key, ApiResponse(mock_team_stats(team_id), DataSource.MOCK, MOCK_PROVIDER, NO_GAMES_KEY_MESSAGE)
            )

        try:
            payload = self._fetch(
                lambda: self._games_api().fetch_team_stats(team_id, season),
                f"team stats {team_id}",
            )
            errors = validate_team_stats_payload(payload)
            if errors:
                raise InvalidPayloadError("team stats", errors)
            stats = TeamStats.from_payload(payload)
        except UpstreamError as exc:
            logger.warning("Team stats fetch for %s failed (%s); returning mock data", team_id, exc)
            return self._store(
                key, ApiResponse(mock_team_stats(team_id), DataSource.MOCK, MOCK_PROVIDER, FALLBACK_MESSAGE)
            )

        return self._store(key, ApiResponse(stats, DataSource.REAL, BallDontLieClient.provider_name))

    # ------------------------------------------------------------------
    # Odds
    # ------------------------------------------------------------------

    def get_odds(self, home_team: str, away_team: str) -> ApiResponse:
        """
        Odds for one matchup.

        A feed without the requested game and a failed feed both fall back
        to mock odds, with different messages.
        """
        home_team = str(_require(home_team, "homeTeam", "homeTeam and awayTeam parameters required")).strip()
        away_team = str(_require(away_team, "awayTeam", "homeTeam and awayTeam parameters required")).strip()
        key = make_cache_key("odds", {"homeTeam": home_team, "awayTeam": away_team})
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        debug = {"apiKeyFound": bool(self.odds_api_key), "homeTeam": home_team, "awayTeam": away_team}

        if not self.odds_api_key:
            logger.warning("No ODDS_API_KEY configured; using mock odds for %s vs %s", home_team, away_team)
            debug["error"] = "API_KEY_NOT_CONFIGURED"
            return self._store(key, self._mock_odds_response(home_team, away_team, NO_ODDS_KEY_MESSAGE, debug))

        try:
            feed = self._fetch(lambda: self._odds_api().fetch_odds_feed(), "odds feed")
            errors = validate_odds_feed(feed)
            if errors:
                raise InvalidPayloadError("odds", errors)
            event = find_matching_event(feed, home_team, away_team)
            odds = _parse_odds(event) if event is not None else None
        except UpstreamError as exc:
            logger.warning("Odds fetch failed (%s); returning mock odds", exc)
            debug.update({"error": str(exc), "errorType": type(exc).__name__, "timestamp": _now_iso()})
            return self._store(key, self._mock_odds_response(home_team, away_team, FALLBACK_MESSAGE, debug))

        debug.update({"gameFound": odds is not None, "timestamp": _now_iso()})
        if odds is None:
            logger.warning("Game %s vs %s not found in odds feed; using mock odds", home_team, away_team)
            return self._store(key, self._mock_odds_response(home_team, away_team, GAME_NOT_FOUND_MESSAGE, debug))

        logger.info("Found real odds for %s vs %s", home_team, away_team)
        return self._store(key, ApiResponse(odds, DataSource.REAL, TheOddsApiClient.provider_name, debug=debug))

    def _mock_odds_response(self, home_team: str, away_team: str, message: str, debug: Dict) -> ApiResponse:
        odds = mock_odds(home_team, away_team, rng=self._rng)
        return ApiResponse(odds, DataSource.MOCK, MOCK_PROVIDER, message, debug=debug)

    # ------------------------------------------------------------------
    # Matchups
    # ------------------------------------------------------------------

    def fetch_matchup(self, game: Game, season: Optional[int] = None) -> MatchupData:
        """Stats for both sides plus odds, keyed the way the odds feed names teams."""
        return MatchupData(
            game=game,
            home_stats=self.get_team_stats(game.home_team.id, season),
            away_stats=self.get_team_stats(game.visitor_team.id, season),
            odds=self.get_odds(game.home_team.name, game.visitor_team.name),
        )

    # ------------------------------------------------------------------
    # Plumbing
    # ------------------------------------------------------------------

    def _fetch(self, fn, description: str):
        return retry_call(
            fn,
            attempts=self.settings.retry_attempts,
            delay=linear_backoff(self.settings.retry_base_delay),
            sleep=self._sleep,
            rate_limiter=self.rate_limiter,
            description=description,
        )

    def _store(self, key: str, response: ApiResponse) -> ApiResponse:
        self.cache.set(key, response)
        return response

    def _games_api(self) -> BallDontLieClient:
        if self._games_client is None:
            self._games_client = BallDontLieClient(
                self.balldontlie_api_key,
                base_url=self.settings.balldontlie_api_base,
                timeout=self.settings.request_timeout,
            )
        return self._games_client

    def _odds_api(self) -> TheOddsApiClient:
        if self._odds_client is None:
            self._odds_client = TheOddsApiClient(
                self.odds_api_key,
                base_url=self.settings.odds_api_base,
                timeout=self.settings.request_timeout,
            )
        return self._odds_client


def _parse_odds(event: Dict) -> Odds:
    try:
        return Odds.from_dict(event)
    except (TypeError, ValueError) as exc:
        raise InvalidPayloadError("odds", [str(exc)]) from exc


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()
