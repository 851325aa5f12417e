"""Per-team turn timers of a room."""

from __future__ import annotations

import threading
import time
from typing import Callable, List, Optional


def _check_team(team: int) -> None:
    if team not in (0, 1):
        raise ValueError(f"team must be 0 or 1, got {team}")


class TimerAggregator:
    """Two timers, one per team, calling ``on_expired(team)`` on time-out."""

    def __init__(self, on_expired: Callable[[int], None]) -> None:
        self._on_expired = on_expired
        self._lock = threading.Lock()
        self._timers: List[Optional[threading.Timer]] = [None, None]
        self._generations = [0, 0]
        self._expiries = [0.0, 0.0]

    def cancel(self, team: int) -> None:
        """Stop the team's pending timer, if any."""
        _check_team(team)
        with self._lock:
            self._cancel_locked(team)

    def expires_after(self, team: int, seconds: float) -> None:
        """Arm the team's timer to expire ``seconds`` from now."""
        _check_team(team)
        with self._lock:
            self._cancel_locked(team)
            generation = self._generations[team]
            self._expiries[team] = time.time() + seconds
            timer = threading.Timer(
                max(seconds, 0.0), self._fire, args=(team, generation)
            )
            timer.daemon = True
            self._timers[team] = timer
            timer.start()

    def expiry(self, team: int) -> float:
        """The absolute time (seconds since the epoch) the timer expires at."""
        _check_team(team)
        with self._lock:
            return self._expiries[team]

    def _cancel_locked(self, team: int) -> None:
        self._generations[team] += 1
        timer = self._timers[team]
        if timer is not None:
            timer.cancel()
            self._timers[team] = None

    def _fire(self, team: int, generation: int) -> None:
        with self._lock:
            if generation != self._generations[team]:
                return
            self._timers[team] = None
        self._on_expired(team)