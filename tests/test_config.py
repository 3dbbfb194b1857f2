"""Unit tests for settings and saved keys."""

import json

from nba_predictor.config import Settings, load_saved_keys, save_keys

ENV_VARS = ("BALLDONTLIE_API_KEY", "ODDS_API_KEY", "PORT", "RETRY_ATTEMPTS", "NBA_PREDICTOR_KEYS_FILE")


def clear_env(monkeypatch):
    monkeypatch.setattr("nba_predictor.config.load_dotenv", lambda *args, **kwargs: False)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings()
    assert settings.cache_ttl_seconds == 300
    assert settings.min_request_interval == 1.0
    assert settings.retry_attempts == 3
    assert settings.lookback_days == 7
    assert settings.port == 3001


def test_from_env_reads_keys(monkeypatch, tmp_path):
    clear_env(monkeypatch)
    monkeypatch.setenv("BALLDONTLIE_API_KEY", "bdl-env")
    monkeypatch.setenv("ODDS_API_KEY", "odds-env")
    monkeypatch.setenv("PORT", "8080")

    settings = Settings.from_env(keys_file=str(tmp_path / "keys.json"))

    assert settings.balldontlie_api_key == "bdl-env"
    assert settings.odds_api_key == "odds-env"
    assert settings.port == 8080


def test_from_env_falls_back_to_saved_keys(monkeypatch, tmp_path):
    clear_env(monkeypatch)
    monkeypatch.setenv("ODDS_API_KEY", "odds-env")
    keys_file = tmp_path / "keys.json"
    save_keys(str(keys_file), "bdl-saved", "odds-saved")

    settings = Settings.from_env(keys_file=str(keys_file))

    assert settings.balldontlie_api_key == "bdl-saved"
    assert settings.odds_api_key == "odds-env"


def test_save_and_load_keys(tmp_path):
    path = tmp_path / "nested" / "keys.json"

    assert save_keys(str(path), "abc", "def") is True
    assert json.loads(path.read_text()) == {"balldontlie_api_key": "abc", "odds_api_key": "def"}
    assert load_saved_keys(str(path)) == ("abc", "def")


def test_load_saved_keys_tolerates_missing_and_corrupt_files(tmp_path):
    assert load_saved_keys(str(tmp_path / "missing.json")) == ("", "")
    assert load_saved_keys(None) == ("", "")

    corrupt = tmp_path / "corrupt.json"
    corrupt.write_text("{not json")
    assert load_saved_keys(str(corrupt)) == ("", "")
