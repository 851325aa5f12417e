"""Collects messages the core logs during a duel and forwards them."""

from __future__ import annotations

import enum
from typing import Callable

from . import i18n
from .core import Logger, LogType
from .hostinfo import HostInfo

DUEL_TCG_SEGOC_NONPUBLIC = 0x100000000
DUEL_MODE_MR5 = 0x2E800
DUEL_MODE_SPEED = 0x628000
DUEL_MODE_RUSH = 0x7F28200

Sink = Callable[["ErrorCategory", int, int, str], None]


class ErrorCategory(enum.Enum):
    """Which kind of duel a logged problem came from."""

    CORE = enum.auto()
    OFFICIAL = enum.auto()
    SPEED = enum.auto()
    RUSH = enum.auto()
    UNOFFICIAL = enum.auto()


def classify(host_info: HostInfo) -> ErrorCategory:
    """Guess the duel category from the host options."""
    flags = host_info.duel_flags

    def matches(mode: int) -> bool:
        return flags in (mode, mode | DUEL_TCG_SEGOC_NONPUBLIC)

    if (
        host_info.banlist_hash == 0
        or host_info.dont_check_deck_content != 0
        or host_info.extra_rules != 0
    ):
        return ErrorCategory.UNOFFICIAL
    if matches(DUEL_MODE_MR5):
        return ErrorCategory.OFFICIAL
    if matches(DUEL_MODE_SPEED):
        return ErrorCategory.SPEED
    if matches(DUEL_MODE_RUSH):
        return ErrorCategory.RUSH
    return ErrorCategory.UNOFFICIAL


class ScriptLogger(Logger):
    """Forwards core log messages to a sink, skipping direct repeats.

    The sink is called with the category, replay id, turn counter and text.
    """

    def __init__(self, sink: Sink, host_info: HostInfo) -> None:
        self._sink = sink
        self.category = classify(host_info)
        self._prev = ""
        self._curr = ""
        self.replay_id = 0
        self.turn_counter = 0

    def set_replay_id(self, rid: int) -> None:
        self.replay_id = rid

    def set_turn_counter(self, count: int) -> None:
        self.turn_counter = count

    def log(self, log_type: LogType, text: str) -> None:
        if log_type == LogType.FOR_DEBUG:
            # Held back and prefixed to the next message.
            self._curr = text + "\n"
            return
        if log_type == LogType.ERROR:
            self._curr += text
        elif log_type == LogType.FROM_SCRIPT:
            self._curr += i18n.SCRIPT_LOGGER_USER_MSG + text
        if self._curr != self._prev:
            self._prev = self._curr
            self._sink(self.category, self.replay_id, self.turn_counter, self._prev)
        self._curr = ""