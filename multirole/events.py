"""Events that drive a room, and the states a room can be in."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, List, Optional, Set


# Events


@dataclass(frozen=True)
class Chat:
    """A client sent a chat message."""

    client: Any
    msg: str


@dataclass(frozen=True)
class ChooseRPS:
    """A client picked rock, paper or scissors."""

    client: Any
    value: int


@dataclass(frozen=True)
class ChooseTurn:
    """A client decided whether to go first."""

    client: Any
    going_first: bool


@dataclass(frozen=True)
class Close:
    """The room is asked to close."""


@dataclass(frozen=True)
class ConnectionLost:
    """A client's connection dropped."""

    client: Any


@dataclass(frozen=True)
class Join:
    """A client entered the room."""

    client: Any


@dataclass(frozen=True)
class Ready:
    """A client changed its ready status."""

    client: Any
    value: bool


@dataclass(frozen=True)
class Rematch:
    """A client answered the rematch prompt."""

    client: Any
    answer: bool


@dataclass(frozen=True)
class Response:
    """A client answered a request of the duel."""

    client: Any
    data: bytes


@dataclass(frozen=True)
class Surrender:
    """A client gave up the duel."""

    client: Any


@dataclass(frozen=True)
class TimerExpired:
    """A team ran out of time."""

    team: int


@dataclass(frozen=True)
class ToDuelist:
    """A client asked to become (or move as) a duelist."""

    client: Any


@dataclass(frozen=True)
class ToObserver:
    """A client asked to become a spectator."""

    client: Any


@dataclass(frozen=True)
class TryKick:
    """A client asked to kick the duelist at a flat index."""

    client: Any
    pos: int


@dataclass(frozen=True)
class TryStart:
    """A client asked to start the duel."""

    client: Any


@dataclass(frozen=True)
class UpdateDeck:
    """A client sent its deck."""

    client: Any
    main: List[int]
    side: List[int]


# States


@dataclass
class ChoosingTurn:
    """Waiting for a player to pick who goes first."""

    turn_chooser: Any = None


@dataclass
class Closing:
    """The room is shutting down."""


@dataclass
class Dueling:
    """A duel is running."""

    core: Any = None
    duel: Any = None
    replay_id: int = 0
    turn_counter: int = 0
    replay: Any = None
    current_pos: List[int] = field(default_factory=lambda: [0, 0])
    retry_count: List[int] = field(default_factory=lambda: [0, 0])
    last_hint: bytes = b""
    last_request: bytes = b""
    replier: Any = None
    match_kill_reason: Optional[int] = None
    spectator_cache: Deque[Any] = field(default_factory=deque)
    time_remaining: List[int] = field(default_factory=lambda: [0, 0])


@dataclass
class Rematching:
    """Asking the duelists whether to play again."""

    turn_chooser: Any = None
    answered: Set[Any] = field(default_factory=set)


@dataclass
class RockPaperScissor:
    """Duelists play rock-paper-scissors to pick the turn chooser."""

    choices: List[int] = field(default_factory=lambda: [0, 0])


@dataclass
class Sidedecking:
    """Duelists adjust their decks between duels of a match."""

    turn_chooser: Any = None
    sidedecked: Set[Any] = field(default_factory=set)


@dataclass
class Waiting:
    """Clients gather before the duel starts."""

    host: Any = None