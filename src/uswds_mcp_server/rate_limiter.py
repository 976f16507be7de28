"""Per-key request limits for the HTTP transport.

Each API key gets a one minute window and a one day window. Counters live in
process memory, so they survive warm invocations and reset on a cold start.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, Literal

logger = logging.getLogger(__name__)

MINUTE_WINDOW = 60.0
DAY_WINDOW = 86_400.0

LimitType = Literal["minute", "day"]


@dataclass
class _Counters:
    minute_count: int
    minute_reset_at: float
    day_count: int
    day_reset_at: float


@dataclass(frozen=True)
class RateLimitResult:
    """Decision for one request.

    Attributes:
        allowed: Whether the request may proceed.
        limit: Limit of the window that decided the outcome.
        remaining: Requests left before the tighter window is exhausted.
        reset_in: Seconds until the minute window (or the exceeded window) resets.
        retry_after: Whole seconds to wait; only set when rejected.
        limit_type: Window that was exceeded; only set when rejected.
    """

    allowed: bool
    limit: int
    remaining: int
    reset_in: float
    retry_after: int | None = None
    limit_type: LimitType | None = None

    @property
    def reset_seconds(self) -> int:
        """``reset_in`` rounded up to whole seconds."""
        return math.ceil(self.reset_in)


class RateLimiter:
    """Sliding minute and day counters keyed by API key."""

    def __init__(
        self,
        per_minute: int = 100,
        per_day: int = 10_000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if per_minute < 1 or per_day < 1:
            raise ValueError("Rate limits must be positive")
        self.per_minute = per_minute
        self.per_day = per_day
        self._clock = clock
        self._counters: dict[str, _Counters] = {}

    def check(self, api_key: str) -> RateLimitResult:
        """Count a request for ``api_key`` if it is within both limits."""
        now = self._clock()
        entry = self._counters.get(api_key)

        if entry is None or now > entry.day_reset_at:
            self._counters[api_key] = _Counters(
                minute_count=1,
                minute_reset_at=now + MINUTE_WINDOW,
                day_count=1,
                day_reset_at=now + DAY_WINDOW,
            )
            return RateLimitResult(
                allowed=True,
                limit=self.per_minute,
                remaining=min(self.per_minute - 1, self.per_day - 1),
                reset_in=MINUTE_WINDOW,
            )

        if now > entry.minute_reset_at:
            entry.minute_count = 0
            entry.minute_reset_at = now + MINUTE_WINDOW

        # The minute window is the stricter one, so it is checked first.
        if entry.minute_count >= self.per_minute:
            return self._rejected("minute", entry.minute_reset_at - now)
        if entry.day_count >= self.per_day:
            return self._rejected("day", entry.day_reset_at - now)

        entry.minute_count += 1
        entry.day_count += 1
        return RateLimitResult(
            allowed=True,
            limit=self.per_minute,
            remaining=min(
                self.per_minute - entry.minute_count, self.per_day - entry.day_count
            ),
            reset_in=entry.minute_reset_at - now,
        )

    def _rejected(self, limit_type: LimitType, reset_in: float) -> RateLimitResult:
        return RateLimitResult(
            allowed=False,
            limit=self.per_minute if limit_type == "minute" else self.per_day,
            remaining=0,
            reset_in=reset_in,
            retry_after=math.ceil(reset_in),
            limit_type=limit_type,
        )

    def usage(self, api_key: str) -> dict[str, int] | None:
        """Requests counted in the current windows, or ``None`` if unknown."""
        entry = self._counters.get(api_key)
        if entry is None:
            return None
        now = self._clock()
        return {
            "minute": 0 if now > entry.minute_reset_at else entry.minute_count,
            "day": 0 if now > entry.day_reset_at else entry.day_count,
        }

    def reset(self, api_key: str) -> None:
        self._counters.pop(api_key, None)

    def reset_all(self) -> None:
        self._counters.clear()

    def stats(self) -> dict[str, int]:
        return {
            "totalKeys": len(self._counters),
            "minuteLimit": self.per_minute,
            "dayLimit": self.per_day,
        }

    def cleanup(self) -> int:
        """Drop keys whose day window has expired and return how many."""
        now = self._clock()
        expired = [
            key for key, entry in self._counters.items() if now > entry.day_reset_at
        ]
        for key in expired:
            del self._counters[key]
        if expired:
            logger.info("Cleaned up %d expired rate limit entries", len(expired))
        return len(expired)
