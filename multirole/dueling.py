"""Timing and match-progress rules applied while a duel runs."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Sequence, Tuple

GRACE_PERIOD_SECONDS = 5
DRAW = 2

# Matches continue until someone reaches the needed wins, draws included.
_TIEBREAKING = True


class FinishReason(enum.Enum):
    """Why a duel ended."""

    DUEL_WON = enum.auto()
    SURRENDERED = enum.auto()
    TIMED_OUT = enum.auto()
    WRONG_RESPONSE = enum.auto()
    CONNECTION_LOST = enum.auto()
    CORE_CRASHED = enum.auto()


@dataclass(frozen=True)
class DuelFinish:
    """The end of a duel: its reason and winning team (2 means a draw)."""

    reason: FinishReason
    winner: int

    def __post_init__(self) -> None:
        if self.winner not in (0, 1, DRAW):
            raise ValueError(f"winner must be 0, 1 or {DRAW}, got {self.winner}")


CORE_CRASH_FINISH = DuelFinish(FinishReason.CORE_CRASHED, DRAW)


class NextState(enum.Enum):
    """Where a room goes after a duel ends."""

    REMATCHING = enum.auto()
    SIDEDECKING = enum.auto()
    CLOSING = enum.auto()


def needed_wins(best_of: int) -> int:
    """Number of duel wins that take a match of ``best_of`` duels."""
    return best_of // 2 + (best_of & 1)


def initial_time_ms(limit_seconds: int) -> int:
    """Time each team starts a turn with, grace period included, in ms."""
    return (limit_seconds + GRACE_PERIOD_SECONDS) * 1000


def time_limit_ticks(remaining_seconds: int) -> int:
    """Seconds shown to clients: remaining time minus the grace, at least 0."""
    return max(int(remaining_seconds) - GRACE_PERIOD_SECONDS, 0) & 0xFFFF


def remaining_after_response(delta_seconds: float) -> int:
    """Time left (ms) once a team answers, rounding the rest up to a second."""
    return math.ceil(delta_seconds) * 1000


def turn_decider_position(winner: int) -> Tuple[int, int]:
    """Position of the duelist who picks the turn for the next duel.

    The first duelist of the losing team decides; on a draw, team 0's does.
    """
    if winner in (0, 1):
        return (1 - winner, 0)
    if winner == DRAW:
        return (0, 0)
    raise ValueError(f"winner must be 0, 1 or {DRAW}, got {winner}")


def next_state_after_finish(
    finish: DuelFinish,
    best_of: int,
    wins: Sequence[int],
    duels_had: int,
    match_killed: bool,
) -> Tuple[NextState, Tuple[int, int], int]:
    """Decide where the room goes after ``finish``.

    Returns the next state with the updated wins per team and number of
    duels played in the match.
    """
    if len(wins) != 2:
        raise ValueError(f"wins must hold 2 values, got {len(wins)}")
    new_wins = [int(wins[0]), int(wins[1])]
    reason = finish.reason
    if reason == FinishReason.CONNECTION_LOST:
        return NextState.CLOSING, tuple(new_wins), duels_had
    if reason == FinishReason.CORE_CRASHED:
        state = NextState.REMATCHING if best_of <= 1 else NextState.SIDEDECKING
        return state, tuple(new_wins), duels_had
    if best_of <= 1:
        return NextState.REMATCHING, tuple(new_wins), duels_had
    duels_had += 1
    needed = needed_wins(best_of)
    if finish.winner != DRAW:
        new_wins[finish.winner] += needed if match_killed else 1
        if new_wins[finish.winner] >= needed:
            return NextState.CLOSING, tuple(new_wins), duels_had
    elif not _TIEBREAKING and duels_had >= best_of:
        return NextState.CLOSING, tuple(new_wins), duels_had
    return NextState.SIDEDECKING, tuple(new_wins), duels_had