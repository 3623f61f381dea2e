"""Cooldown breaker guarding calls to the upstream catalog provider."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UpstreamHealthState:
    """Point-in-time view of the breaker."""

    disabled_until: float
    failure_streak: int

    def to_payload(self, *, now: float) -> dict[str, object]:
        return {
            "eligible": now >= self.disabled_until,
            "failureStreak": self.failure_streak,
            "disabledUntil": self.disabled_until or None,
        }


class UpstreamHealthTracker:
    """Track consecutive upstream failures and the resulting cooldown window.

    The streak trips the breaker once it reaches ``failure_threshold``. With the
    default threshold of one, every failure opens a fresh cooldown. Any success
    closes the breaker immediately, independent of the remaining cooldown.
    Updates from overlapping requests are last-writer-wins.
    """

    def __init__(
        self,
        *,
        cooldown_seconds: float,
        failure_threshold: int = 1,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._cooldown_seconds = max(cooldown_seconds, 0.0)
        self._failure_threshold = max(failure_threshold, 1)
        self._clock = clock
        self._lock = threading.Lock()
        self._disabled_until = 0.0
        self._failure_streak = 0

    @property
    def cooldown_seconds(self) -> float:
        return self._cooldown_seconds

    def now(self) -> float:
        return self._clock()

    def is_eligible(self, now: float | None = None) -> bool:
        current = self._clock() if now is None else now
        with self._lock:
            return current >= self._disabled_until

    def record_failure(self, now: float | None = None) -> None:
        current = self._clock() if now is None else now
        with self._lock:
            self._failure_streak += 1
            streak = self._failure_streak
            if streak < self._failure_threshold:
                tripped = False
            else:
                self._disabled_until = current + self._cooldown_seconds
                tripped = True
        if tripped:
            logger.warning(
                "TMDB unavailable after %s consecutive failure(s); disabled for %ss",
                streak,
                round(self._cooldown_seconds),
            )
        else:
            logger.warning(
                "TMDB failure %s of %s before cooldown", streak, self._failure_threshold
            )

    def record_success(self) -> None:
        with self._lock:
            if self._failure_streak or self._disabled_until:
                logger.info("TMDB breaker reset after %s failure(s)", self._failure_streak)
            self._failure_streak = 0
            self._disabled_until = 0.0

    def snapshot(self) -> UpstreamHealthState:
        with self._lock:
            return UpstreamHealthState(
                disabled_until=self._disabled_until,
                failure_streak=self._failure_streak,
            )
