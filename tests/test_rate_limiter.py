import time

from vahub.core.rate_limiter import InMemoryRateLimiter


def test_rate_limiter_allows_then_blocks_then_recovers():
    limiter = InMemoryRateLimiter()
    key = "ip:/api/auth/login"

    ok1, retry1 = limiter.allow(key, limit=2, window_seconds=1)
    ok2, retry2 = limiter.allow(key, limit=2, window_seconds=1)
    ok3, retry3 = limiter.allow(key, limit=2, window_seconds=1)

    assert ok1 is True and retry1 == 0
    assert ok2 is True and retry2 == 0
    assert ok3 is False
    assert retry3 >= 1

    time.sleep(1.05)
    ok4, retry4 = limiter.allow(key, limit=2, window_seconds=1)
    assert ok4 is True
    assert retry4 == 0


def test_rate_limiter_keys_are_independent_and_reset_clears():
    limiter = InMemoryRateLimiter()
    assert limiter.allow("a", limit=1)[0] is True
    assert limiter.allow("a", limit=1)[0] is False
    assert limiter.allow("b", limit=1)[0] is True
    limiter.reset()
    assert limiter.allow("a", limit=1)[0] is True


def test_rate_limiter_evicts_closed_windows(monkeypatch):
    clock = {"now": 1000.0}
    monkeypatch.setattr("vahub.core.rate_limiter.time.monotonic", lambda: clock["now"])
    limiter = InMemoryRateLimiter(sweep_interval_seconds=10)
    for n in range(50):
        limiter.allow(f"10.0.0.{n}:/api/auth/login", limit=5, window_seconds=5)
    assert limiter.tracked_keys() == 50

    clock["now"] += 11
    assert limiter.allow("10.0.0.99:/api/auth/login", limit=5, window_seconds=5)[0] is True
    assert limiter.tracked_keys() == 1


def test_rate_limiter_keeps_open_windows_on_sweep(monkeypatch):
    clock = {"now": 0.0}
    monkeypatch.setattr("vahub.core.rate_limiter.time.monotonic", lambda: clock["now"])
    limiter = InMemoryRateLimiter(sweep_interval_seconds=1)
    assert limiter.allow("busy", limit=1, window_seconds=60)[0] is True
    clock["now"] += 2
    assert limiter.allow("other", limit=1, window_seconds=60)[0] is True
    assert limiter.allow("busy", limit=1, window_seconds=60) == (False, 58)
    assert limiter.tracked_keys() == 2
