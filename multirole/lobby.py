"""The set of open rooms and per-address connection counts."""

from __future__ import annotations

import threading
import time
import weakref
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from .duelists import DuelistsMap

_MASK64 = (1 << 64) - 1


class _SplitMix64:
    def __init__(self, state: int) -> None:
        self._state = state & _MASK64

    def __call__(self) -> int:
        self._state = (self._state + 0x9E3779B97F4A7C15) & _MASK64
        z = self._state
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK64
        return z ^ (z >> 31)


@dataclass(frozen=True)
class RoomProps:
    """A snapshot of a room used for the listing."""

    id: int
    host_info: Any
    notes: str
    passworded: bool
    started: bool
    duelists: DuelistsMap


class Lobby:
    """Keeps weak references to rooms by id and counts connections per IP.

    ``room_factory(info)`` builds a room once the lobby has set ``info.id``
    and ``info.seed``. Rooms must provide ``try_close()``, ``notes``,
    ``host_info``, ``is_private()``, ``started()`` and ``duelist_names()``.
    A negative ``max_connections`` disables connection counting.
    """

    def __init__(self, max_connections: int, room_factory: Callable[[Any], Any]) -> None:
        self._max_connections = max_connections
        self._room_factory = room_factory
        self._rng = _SplitMix64(time.time_ns())
        self._closed = False
        # Each slot: [in use, weak reference or None].
        self._rooms: List[List[Any]] = []
        self._rooms_lock = threading.RLock()
        self._connections: Dict[str, int] = {}
        self._connections_lock = threading.Lock()

    def get_room_by_id(self, room_id: int) -> Optional[Any]:
        """Return the live room with ``room_id``, or None."""
        with self._rooms_lock:
            if 0 < room_id <= len(self._rooms):
                ref = self._rooms[room_id - 1][1]
                return ref() if ref is not None else None
            return None

    def has_max_connections(self, ip: str) -> bool:
        """Whether ``ip`` already has the maximum number of connections."""
        if self._max_connections < 0:
            return False
        with self._connections_lock:
            return self._connections.get(ip, 0) >= self._max_connections > -1 and ip in self._connections

    def close(self) -> int:
        """Ask every room to close and stop registering new ones.

        Returns the number of rooms that refused to close.
        """
        with self._rooms_lock:
            count = 0
            for _used, ref in self._rooms:
                room = ref() if ref is not None else None
                if room is not None and not room.try_close():
                    count += 1
            self._rooms.clear()
            self._closed = True
            return count

    def make_room(self, info: Any) -> Any:
        """Assign an id and seed to ``info``, build the room and register it."""
        with self._rooms_lock:
            room_id = next(
                (index for index, slot in enumerate(self._rooms, 1) if not slot[0]),
                len(self._rooms) + 1,
            )
            info.id = room_id
            info.seed = (self._rng(), self._rng(), self._rng(), self._rng())
            room = self._room_factory(info)
            if not self._closed:
                slot = [True, weakref.ref(room)]
                if room_id <= len(self._rooms):
                    self._rooms[room_id - 1] = slot
                else:
                    self._rooms.append(slot)
            return room

    def collect_rooms(self, f: Callable[[RoomProps], None]) -> None:
        """Free slots of dead rooms and call ``f`` with each live room's props."""
        with self._rooms_lock:
            for room_id, slot in enumerate(self._rooms, 1):
                ref = slot[1]
                room = ref() if ref is not None else None
                if room is not None:
                    f(
                        RoomProps(
                            id=room_id,
                            host_info=room.host_info,
                            notes=room.notes,
                            passworded=room.is_private(),
                            started=room.started(),
                            duelists=room.duelist_names(),
                        )
                    )
                elif slot[0]:
                    slot[0] = False
                    slot[1] = None

    def increment_connection_count(self, ip: str) -> None:
        """Record one more connection from ``ip``."""
        if self._max_connections < 0:
            return
        with self._connections_lock:
            self._connections[ip] = self._connections.get(ip, 0) + 1

    def decrement_connection_count(self, ip: str) -> None:
        """Record one connection from ``ip`` closing."""
        if self._max_connections < 0:
            return
        with self._connections_lock:
            if ip not in self._connections:
                raise KeyError(ip)
            self._connections[ip] -= 1
            if self._connections[ip] == 0:
                del self._connections[ip]

    def _slots(self) -> List[Tuple[bool, bool]]:
        with self._rooms_lock:
            return [(used, ref is not None and ref() is not None) for used, ref in self._rooms]