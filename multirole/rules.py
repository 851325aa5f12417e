"""Rules deciding who plays first."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

SCISSOR = 1
ROCK = 2
PAPER = 3

_BEATS = {ROCK: SCISSOR, PAPER: ROCK, SCISSOR: PAPER}


def rps_winner_team(choice0: int, choice1: int) -> Optional[int]:
    """Return the team that won rock-paper-scissors, or None on a tie."""
    for choice in (choice0, choice1):
        if choice not in _BEATS:
            raise ValueError(f"invalid rock-paper-scissors choice: {choice}")
    if choice0 == choice1:
        return None
    return int(_BEATS[choice1] == choice0)


def team1_goes_first(team: int, going_first: bool) -> bool:
    """Whether team 1 plays first after a player of ``team`` chose."""
    return (team == 0 and not going_first) or (team == 1 and going_first)


def initial_positions(
    relay: bool, counts: Sequence[int], team1_first: bool
) -> Tuple[int, int]:
    """Return the index of the first active duelist of each team."""
    if relay:
        return (0, 0)
    if team1_first:
        return ((counts[0] - 1) & 0xFF, 0)
    return (0, (counts[1] - 1) & 0xFF)


def swapped_team(team1_first: bool, team: int) -> int:
    """Map a team between room order and core order."""
    if team not in (0, 1):
        raise ValueError(f"team must be 0 or 1, got {team}")
    return int(team1_first) ^ team