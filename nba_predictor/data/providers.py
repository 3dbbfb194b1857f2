"""HTTP clients for the upstream sports-data and odds APIs."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from .errors import UpstreamError

logger = logging.getLogger(__name__)

BALLDONTLIE_API_BASE = "https://api.balldontlie.io/v1"
ODDS_API_BASE = "https://api.the-odds-api.com/v4"
ODDS_SPORT_KEY = "basketball_nba"


class _JsonClient:
    """Shared GET-and-decode behaviour; every failure surfaces as UpstreamError."""

    provider_name = "upstream"

    def __init__(self, base_url: str, timeout: float = 30.0, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def _get(self, path: str, params: Any = None, headers: Optional[Dict[str, str]] = None) -> requests.Response:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(url, params=params, headers=headers, timeout=self.timeout)
        except requests.RequestException as exc:
            raise UpstreamError(f"{self.provider_name} request failed: {exc}") from exc

        if not response.ok:
            logger.warning("%s returned %s: %s", self.provider_name, response.status_code, response.text[:200])
            raise UpstreamError(
                f"{self.provider_name} API error: {response.status_code}",
                status_code=response.status_code,
            )
        return response

    def _get_json(self, path: str, params: Any = None, headers: Optional[Dict[str, str]] = None):
        response = self._get(path, params=params, headers=headers)
        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamError(f"{self.provider_name} returned a non-JSON body") from exc


class BallDontLieClient(_JsonClient):
    """Games and team statistics from the BallDontLie API."""

    provider_name = "BallDontLie"

    def __init__(self, api_key: str, base_url: str = BALLDONTLIE_API_BASE, **kwargs):
        super().__init__(base_url, **kwargs)
        self.api_key = api_key

    def _auth(self) -> Dict[str, str]:
        return {"Authorization": self.api_key}

    def fetch_games(self, date: str) -> Dict:
        logger.info("Fetching games from BallDontLie for %s", date)
        return self._get_json("/games", params=[("dates[]", date)], headers=self._auth())

    def fetch_games_page(self, start_date: str, per_page: int = 10, cursor: int = 0) -> Dict:
        logger.info("Fetching games page from BallDontLie (start=%s, per_page=%s, cursor=%s)", start_date, per_page, cursor)
        params = [("start_date", start_date), ("per_page", per_page), ("cursor", cursor)]
        return self._get_json("/games", params=params, headers=self._auth())

    def fetch_team_stats(self, team_id: int, season: int) -> Dict:
        logger.info("Fetching team stats from BallDontLie (team=%s, season=%s)", team_id, season)
        params = [("team_ids[]", team_id), ("seasons[]", season)]
        return self._get_json("/team_stats", params=params, headers=self._auth())


class TheOddsApiClient(_JsonClient):
    """Current NBA spreads and moneylines from The Odds API."""

    provider_name = "TheOddsAPI"

    def __init__(self, api_key: str, base_url: str = ODDS_API_BASE, **kwargs):
        super().__init__(base_url, **kwargs)
        self.api_key = api_key

    def fetch_odds_feed(self):
        params = {
            "apiKey": self.api_key,
            "regions": "us",
            "markets": "spreads,h2h",
            "oddsFormat": "american",
        }
        response = self._get(f"/sports/{ODDS_SPORT_KEY}/odds/", params=params)
        remaining = response.headers.get("x-requests-remaining", "unknown")
        logger.info("The Odds API requests remaining: %s", remaining)
        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamError(f"{self.provider_name} returned a non-JSON body") from exc
