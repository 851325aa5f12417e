"""A room: its password, kicked addresses and event-driven state."""

from __future__ import annotations

import threading
from typing import Any, Set

from .events import Close, Waiting


class Room:
    """A room whose state changes in response to events.

    ``handler`` decides what events do. It must provide:

    * ``handle(state, event)`` returning a new state or None,
    * ``enter(state)`` called on entering a state, returning a further
      state to move to or None,
    * ``is_started()``, ``host_info`` and ``duelist_names()``.
    """

    def __init__(self, notes: str, password: str, handler: Any) -> None:
        self._notes = notes
        self._password = password
        self._handler = handler
        self._state: Any = Waiting(host=None)
        self._state_lock = threading.RLock()
        self._kicked: Set[str] = set()
        self._kicked_lock = threading.Lock()

    @property
    def notes(self) -> str:
        return self._notes

    @property
    def state(self) -> Any:
        """The current state."""
        return self._state

    @property
    def host_info(self) -> Any:
        """The game options of the room."""
        return self._handler.host_info

    def duelist_names(self) -> Any:
        """Each duelist's encoded position and name."""
        return self._handler.duelist_names()

    def is_private(self) -> bool:
        """Whether a password is set."""
        return bool(self._password)

    def started(self) -> bool:
        """Whether the duel has been started."""
        return bool(self._handler.is_started())

    def check_password(self, text: str) -> bool:
        """True if ``text`` is the password, or if there is none."""
        return not self.is_private() or self._password == text

    def check_kicked(self, ip: str) -> bool:
        """Whether ``ip`` was kicked from this room before."""
        with self._kicked_lock:
            return ip in self._kicked

    def add_kicked(self, ip: str) -> None:
        """Bar ``ip`` from joining again."""
        with self._kicked_lock:
            self._kicked.add(ip)

    def try_close(self) -> bool:
        """Close the room unless it has started; return whether it was closed."""
        if self.started():
            return False
        self.dispatch(Close())
        return True

    def dispatch(self, event: Any) -> None:
        """Handle ``event`` and follow any chain of state changes."""
        with self._state_lock:
            new_state = self._handler.handle(self._state, event)
            while new_state is not None:
                self._state = new_state
                new_state = self._handler.enter(new_state)