"""Unit tests for the response cache."""

from nba_predictor.data.cache import CACHE_DURATION_SECONDS, ResponseCache, make_cache_key


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


def test_set_then_get_returns_same_value():
    cache = ResponseCache(clock=FakeClock())
    value = {"data": [1, 2, 3]}
    cache.set("games:x", value)

    assert cache.get("games:x") is value


def test_missing_key_returns_none():
    cache = ResponseCache(clock=FakeClock())
    assert cache.get("nope") is None


def test_entry_expires_after_ttl_and_is_removed():
    clock = FakeClock()
    cache = ResponseCache(clock=clock)
    cache.set("k", "v")

    clock.now += CACHE_DURATION_SECONDS - 1
    assert cache.get("k") == "v"

    clock.now += 1
    assert cache.get("k") is None
    assert "k" not in cache
    assert cache.get("k") is None


def test_set_refreshes_timestamp():
    clock = FakeClock()
    cache = ResponseCache(ttl=10, clock=clock)
    cache.set("k", "old")
    clock.now += 8
    cache.set("k", "new")
    clock.now += 8

    assert cache.get("k") == "new"


def test_clear_and_len():
    cache = ResponseCache(clock=FakeClock())
    cache.set("a", 1)
    cache.set("b", 2)
    assert len(cache) == 2

    cache.clear()
    assert len(cache) == 0


def test_cache_key_ignores_parameter_order():
    first = make_cache_key("odds", {"homeTeam": "Lakers", "awayTeam": "Warriors"})
    second = make_cache_key("odds", {"awayTeam": "Warriors", "homeTeam": "Lakers"})

    assert first == second
    assert first.startswith("odds:")


def test_cache_key_distinguishes_resources():
    assert make_cache_key("games", {"date": "2026-02-16"}) != make_cache_key("gamesList", {"date": "2026-02-16"})
