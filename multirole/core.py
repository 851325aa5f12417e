"""Interfaces for the duel-simulation core and the data it asks for."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

Script = Optional[Union[str, bytes]]

_U64_LIMIT = 1 << 64
_SEED_LENGTH = 4


class CoreError(RuntimeError):
    """Raised when the core fails an operation."""


class DuelStatus(enum.IntEnum):
    """Result of one processing step of a duel."""

    END = 0
    WAITING = 1
    CONTINUE = 2


class LogType(enum.IntEnum):
    """Kind of a message the core emits while running scripts."""

    ERROR = 0
    FROM_SCRIPT = 1
    FOR_DEBUG = 2


def script_data(script: Script) -> Script:
    """Return the script contents, or None when absent or empty."""
    if not script:
        return None
    return script


def script_size(script: Script) -> int:
    """Return the script length, 0 when absent."""
    if script is None:
        return 0
    return len(script)


class Logger(ABC):
    """Receives messages the core logs during a duel."""

    @abstractmethod
    def log(self, log_type: LogType, text: str) -> None:
        """Handle one logged message."""


class ScriptSupplier(ABC):
    """Provides script files to the core."""

    @abstractmethod
    def script_from_path(self, path: str) -> Script:
        """Return the script at ``path`` or None when unknown."""


class DataSupplier(ABC):
    """Provides card data to the core."""

    @abstractmethod
    def data_from_code(self, code: int) -> Any:
        """Return the card data for ``code``."""

    @abstractmethod
    def data_usage_done(self, data: Any) -> None:
        """Signal that the core no longer uses ``data``."""


@dataclass(frozen=True)
class DuelOptions:
    """Parameters used to create a duel."""

    data_supplier: DataSupplier
    script_supplier: ScriptSupplier
    logger: Optional[Logger]
    seed: Tuple[int, int, int, int]
    flags: int
    team1: Any
    team2: Any

    def __post_init__(self) -> None:
        seed = tuple(self.seed)
        if len(seed) != _SEED_LENGTH:
            raise ValueError(f"seed must hold {_SEED_LENGTH} values, got {len(seed)}")
        if any(not 0 <= part < _U64_LIMIT for part in seed):
            raise ValueError("seed values must be unsigned 64-bit integers")
        if not 0 <= self.flags < _U64_LIMIT:
            raise ValueError("flags must be an unsigned 64-bit integer")
        object.__setattr__(self, "seed", seed)


class Wrapper(ABC):
    """A loaded duel core able to run duels."""

    @abstractmethod
    def version(self) -> Tuple[int, int]:
        """Return the core's (major, minor) version."""

    @abstractmethod
    def create_duel(self, opts: DuelOptions) -> Any:
        """Create a duel and return its handle; raise CoreError on failure."""

    @abstractmethod
    def destroy_duel(self, duel: Any) -> None:
        """Release a duel."""

    @abstractmethod
    def add_card(self, duel: Any, info: Any) -> None:
        """Add a card to a duel."""

    @abstractmethod
    def start(self, duel: Any) -> None:
        """Start a duel."""

    @abstractmethod
    def process(self, duel: Any) -> DuelStatus:
        """Run the duel until it needs input or ends."""

    @abstractmethod
    def get_messages(self, duel: Any) -> bytes:
        """Return the messages produced by the last processing step."""

    @abstractmethod
    def set_response(self, duel: Any, buffer: bytes) -> None:
        """Pass a player's response to the duel."""

    @abstractmethod
    def load_script(self, duel: Any, name: str, text: Union[str, bytes]) -> int:
        """Load a script into the duel and return the core's result."""

    @abstractmethod
    def query_count(self, duel: Any, team: int, loc: int) -> int:
        """Return the number of cards of ``team`` at ``loc``."""

    @abstractmethod
    def query(self, duel: Any, info: Any) -> bytes:
        """Query a single card."""

    @abstractmethod
    def query_location(self, duel: Any, info: Any) -> bytes:
        """Query every card at a location."""

    @abstractmethod
    def query_field(self, duel: Any) -> bytes:
        """Query the whole field."""