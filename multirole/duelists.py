"""Seating of duelists in a room.

The seating is a dict mapping a position ``(team, slot)`` to the client sitting
there. The functions here change that dict and report what moved; updating the
clients and telling the room about it is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, List, Mapping, Optional, Tuple

Position = Tuple[int, int]
Seating = Dict[Position, Any]

_NO_HINT: Position = (0, 0)


@dataclass(frozen=True)
class DuelistData:
    """One duelist as shown in the room listing."""

    MAX_NAME_LENGTH: ClassVar[int] = 64

    pos: int
    name: str


@dataclass(frozen=True)
class DuelistsMap:
    """The duelists of a room in position order, capped in number."""

    MAX_AMOUNT_OF_DUELISTS: ClassVar[int] = 6

    pairs: Tuple[DuelistData, ...] = ()

    @property
    def used_count(self) -> int:
        """Number of duelists stored."""
        return len(self.pairs)


def _listing_name(name: str) -> str:
    raw = name.encode("utf-8")[: DuelistData.MAX_NAME_LENGTH]
    if len(raw) == DuelistData.MAX_NAME_LENGTH:
        # The last byte of a full buffer is always a terminator.
        raw = raw[:-1] + b"\0"
    return raw.decode("utf-8", "ignore")


def duelists_map(
    duelists: Mapping[Position, Any], encode: Callable[[Position], int]
) -> DuelistsMap:
    """Collect each duelist's encoded position and name, in position order.

    Clients need a ``name`` attribute. At most
    ``DuelistsMap.MAX_AMOUNT_OF_DUELISTS`` duelists are kept.
    """
    pairs = tuple(
        DuelistData(pos=encode(position), name=_listing_name(client.name))
        for position, client in sorted(duelists.items(), key=lambda kv: kv[0])
    )
    return DuelistsMap(pairs=pairs[: DuelistsMap.MAX_AMOUNT_OF_DUELISTS])


def team_counts(duelists: Mapping[Position, Any]) -> List[int]:
    """Return the number of duelists seated on each of the two teams."""
    counts = [0, 0]
    for team, _slot in duelists:
        counts[team] += 1
    return counts


def _emplace_from(
    duelists: Seating, client: Any, start: Position, limit: int
) -> Optional[Position]:
    team, first_slot = start
    for slot in range(first_slot, limit):
        position = (team, slot)
        if position not in duelists:
            duelists[position] = client
            return position
    return None


def try_emplace(
    duelists: Seating,
    client: Any,
    t0_count: int,
    t1_count: int,
    hint: Position = _NO_HINT,
) -> Optional[Position]:
    """Seat ``client`` at the first free position, starting from ``hint``.

    Team 0 is tried from the hint when the hint is on team 0, then team 1.
    If nothing is free and a hint was given, the search starts over without
    it. Returns the position taken, or None when the room is full.
    """
    if hint[0] == 0:
        position = _emplace_from(duelists, client, hint, t0_count)
        if position is not None:
            return position
    start = (1, hint[1] if hint[0] == 1 else 0)
    position = _emplace_from(duelists, client, start, t1_count)
    if position is not None:
        return position
    if hint != _NO_HINT:
        return try_emplace(duelists, client, t0_count, t1_count)
    return None


def tighten_team(
    duelists: Seating, team: int, count: int
) -> List[Tuple[Position, Position]]:
    """Move a team's duelists down into the first ``count`` slots.

    Each empty slot below ``count`` is filled by the nearest duelist seated
    above it. Returns the moves made as ``(old, new)`` pairs, in order.
    """
    moves: List[Tuple[Position, Position]] = []
    for _ in range(count):
        empty = next(
            ((team, slot) for slot in range(count) if (team, slot) not in duelists),
            None,
        )
        if empty is None:
            break
        above = [key for key in duelists if key[0] == team and key[1] > empty[1]]
        if not above:
            raise ValueError(f"team {team} has fewer than {count} duelists")
        old = min(above)
        duelists[empty] = duelists.pop(old)
        moves.append((old, empty))
    return moves


def kick_position(pos: int, t0_count: int) -> Position:
    """Turn a flat duelist index into a ``(team, slot)`` position."""
    team = int(pos >= t0_count)
    slot = pos - t0_count if team else pos
    return (team, slot & 0xFF)