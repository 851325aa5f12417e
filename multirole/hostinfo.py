"""Game options a room is hosted with, and their normalisation."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

MAX_LIMIT = 999
DUEL_RELAY = 0x80
DUEL_PSEUDO_SHUFFLE = 0x10
DEFAULT_LP = 8000
MIN_TEAM_SIZE = 1
MAX_TEAM_SIZE = 3


@dataclass(frozen=True)
class DeckLimit:
    """Inclusive bounds on the size of one deck section."""

    min: int = 0
    max: int = 0


@dataclass(frozen=True)
class DeckLimits:
    """Bounds for the main, extra and side decks."""

    main: DeckLimit = field(default_factory=DeckLimit)
    extra: DeckLimit = field(default_factory=DeckLimit)
    side: DeckLimit = field(default_factory=DeckLimit)


@dataclass(frozen=True)
class HostInfo:
    """Options chosen by the host of a room."""

    banlist_hash: int = 0
    allowed: int = 0
    dont_check_deck_content: int = 0
    dont_shuffle_deck: int = 0
    starting_lp: int = 0
    starting_draw_count: int = 0
    draw_count_per_turn: int = 0
    time_limit_in_seconds: int = 0
    duel_flags_high: int = 0
    duel_flags_low: int = 0
    t0_count: int = 1
    t1_count: int = 1
    best_of: int = 1
    forb: int = 0
    extra_rules: int = 0
    limits: DeckLimits = field(default_factory=DeckLimits)

    @property
    def duel_flags(self) -> int:
        """The full 64-bit duel flags."""
        return or_duel_flags(self.duel_flags_high, self.duel_flags_low)


def or_duel_flags(high: int, low: int) -> int:
    """Combine the high and low 32-bit halves of the duel flags."""
    return ((high & 0xFFFFFFFF) << 32) | (low & 0xFFFFFFFF)


def _fix_limit(limit: DeckLimit) -> DeckLimit:
    upper = min(limit.max, MAX_LIMIT)
    return DeckLimit(min=min(limit.min, upper), max=upper)


def normalize_host_info(info: HostInfo, has_banlist: bool) -> HostInfo:
    """Bring host options supplied by a client back into accepted ranges."""
    t0 = max(MIN_TEAM_SIZE, min(info.t0_count, MAX_TEAM_SIZE))
    t1 = max(MIN_TEAM_SIZE, min(info.t1_count, MAX_TEAM_SIZE))
    flags_low = info.duel_flags_low
    is_relay = (flags_low & DUEL_RELAY) != 0
    one_vs_one = t0 == 1 and t1 == 1
    if is_relay and one_vs_one:
        is_relay = False
        flags_low &= ~DUEL_RELAY
    starting_lp = info.starting_lp
    if starting_lp == 0:
        starting_lp = DEFAULT_LP if one_vs_one or is_relay else max(t0, t1) * DEFAULT_LP
    if info.dont_shuffle_deck:
        flags_low |= DUEL_PSEUDO_SHUFFLE
    limits = DeckLimits(
        main=_fix_limit(info.limits.main),
        extra=_fix_limit(info.limits.extra),
        side=_fix_limit(info.limits.side),
    )
    return replace(
        info,
        banlist_hash=info.banlist_hash if has_banlist else 0,
        t0_count=t0,
        t1_count=t1,
        best_of=max(info.best_of, 1),
        limits=limits,
        duel_flags_low=flags_low,
        starting_lp=starting_lp,
    )