"""Tests for the per-key rate limiter."""

from __future__ import annotations

import pytest

from uswds_mcp_server.rate_limiter import RateLimiter


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


class TestRateLimiter:
    """Minute and day windows."""

    def test_first_request(self, clock: FakeClock) -> None:
        limiter = RateLimiter(per_minute=3, per_day=10, clock=clock)

        result = limiter.check("k")

        assert result.allowed
        assert result.limit == 3
        assert result.remaining == 2
        assert result.reset_seconds == 60
        assert result.retry_after is None

    def test_minute_limit(self, clock: FakeClock) -> None:
        limiter = RateLimiter(per_minute=2, per_day=10, clock=clock)
        limiter.check("k")
        clock.advance(10)
        second = limiter.check("k")

        third = limiter.check("k")

        assert second.allowed
        assert second.remaining == 0
        assert not third.allowed
        assert third.limit_type == "minute"
        assert third.limit == 2
        assert third.retry_after == 50

    def test_minute_window_resets(self, clock: FakeClock) -> None:
        limiter = RateLimiter(per_minute=1, per_day=10, clock=clock)
        limiter.check("k")
        assert not limiter.check("k").allowed

        clock.advance(61)

        assert limiter.check("k").allowed

    def test_day_limit(self, clock: FakeClock) -> None:
        limiter = RateLimiter(per_minute=5, per_day=2, clock=clock)
        limiter.check("k")
        limiter.check("k")
        clock.advance(120)

        result = limiter.check("k")

        assert not result.allowed
        assert result.limit_type == "day"
        assert result.limit == 2
        assert result.retry_after == 86_400 - 120

    def test_day_window_resets(self, clock: FakeClock) -> None:
        limiter = RateLimiter(per_minute=5, per_day=1, clock=clock)
        limiter.check("k")
        clock.advance(86_401)

        assert limiter.check("k").allowed
        assert limiter.usage("k") == {"minute": 1, "day": 1}

    def test_keys_are_independent(self, clock: FakeClock) -> None:
        limiter = RateLimiter(per_minute=1, per_day=1, clock=clock)
        limiter.check("a")

        assert limiter.check("b").allowed
        assert limiter.stats() == {"totalKeys": 2, "minuteLimit": 1, "dayLimit": 1}

    def test_usage_and_reset(self, clock: FakeClock) -> None:
        limiter = RateLimiter(clock=clock)
        limiter.check("k")
        limiter.check("k")

        assert limiter.usage("k") == {"minute": 2, "day": 2}
        assert limiter.usage("other") is None

        limiter.reset("k")
        assert limiter.usage("k") is None

    def test_reset_all(self, clock: FakeClock) -> None:
        limiter = RateLimiter(clock=clock)
        limiter.check("a")
        limiter.check("b")

        limiter.reset_all()

        assert limiter.stats()["totalKeys"] == 0

    def test_cleanup(self, clock: FakeClock) -> None:
        limiter = RateLimiter(clock=clock)
        limiter.check("old")
        clock.advance(86_000)
        limiter.check("new")
        clock.advance(500)

        assert limiter.cleanup() == 1
        assert limiter.usage("old") is None
        assert limiter.usage("new") is not None

    @pytest.mark.parametrize(("minute", "day"), [(0, 10), (10, 0)])
    def test_limits_must_be_positive(self, minute: int, day: int) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            RateLimiter(per_minute=minute, per_day=day)
