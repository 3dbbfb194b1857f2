"""Configuration for the NBA betting predictor."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

from .data.providers import BALLDONTLIE_API_BASE, ODDS_API_BASE

logger = logging.getLogger(__name__)

DEFAULT_KEYS_FILE = Path.home() / ".nba_predictor" / "keys.json"


@dataclass
class Settings:
    balldontlie_api_key: str = ""
    odds_api_key: str = ""
    balldontlie_api_base: str = BALLDONTLIE_API_BASE
    odds_api_base: str = ODDS_API_BASE

    cache_ttl_seconds: float = 300.0
    min_request_interval: float = 1.0  # shared gap between outbound requests
    retry_attempts: int = 3
    retry_base_delay: float = 1.0
    request_timeout: float = 30.0
    lookback_days: int = 7

    default_season: int = 2025
    port: int = 3001
    keys_file: Optional[str] = None

    @classmethod
    def from_env(cls, keys_file: Optional[str] = None) -> "Settings":
        """
        Build settings from the environment (and a ``.env`` file if present).

        Keys left empty by the environment are filled from the saved keys file.
        """
        load_dotenv()
        settings = cls(
            balldontlie_api_key=os.getenv("BALLDONTLIE_API_KEY", ""),
            odds_api_key=os.getenv("ODDS_API_KEY", ""),
            balldontlie_api_base=os.getenv("BALLDONTLIE_API_BASE", BALLDONTLIE_API_BASE),
            odds_api_base=os.getenv("ODDS_API_BASE", ODDS_API_BASE),
            cache_ttl_seconds=float(os.getenv("CACHE_TTL_SECONDS", "300")),
            min_request_interval=float(os.getenv("MIN_REQUEST_INTERVAL", "1.0")),
            retry_attempts=int(os.getenv("RETRY_ATTEMPTS", "3")),
            retry_base_delay=float(os.getenv("RETRY_BASE_DELAY", "1.0")),
            request_timeout=float(os.getenv("REQUEST_TIMEOUT", "30")),
            default_season=int(os.getenv("DEFAULT_SEASON", "2025")),
            port=int(os.getenv("PORT", "3001")),
            keys_file=keys_file or os.getenv("NBA_PREDICTOR_KEYS_FILE") or str(DEFAULT_KEYS_FILE),
        )

        saved_bdl, saved_odds = load_saved_keys(settings.keys_file)
        return replace(
            settings,
            balldontlie_api_key=settings.balldontlie_api_key or saved_bdl,
            odds_api_key=settings.odds_api_key or saved_odds,
        )


def load_saved_keys(path: Optional[str]) -> Tuple[str, str]:
    """Read ``(balldontlie_key, odds_api_key)`` from the keys file; empty strings if unavailable."""
    if not path:
        return "", ""
    p = Path(path)
    if not p.exists():
        return "", ""
    try:
        with open(p, "r") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Unable to load API keys from %s: %s", p, exc)
        return "", ""
    if not isinstance(data, dict):
        return "", ""
    return str(data.get("balldontlie_api_key") or ""), str(data.get("odds_api_key") or "")


def save_keys(path: str, balldontlie_api_key: str, odds_api_key: str) -> bool:
    """Persist both keys; returns False if the file cannot be written."""
    p = Path(path)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        with open(p, "w") as f:
            json.dump(
                {"balldontlie_api_key": balldontlie_api_key, "odds_api_key": odds_api_key},
                f,
                indent=2,
            )
    except OSError as exc:
        logger.error("Error saving API keys to %s: %s", p, exc)
        return False
    return True
