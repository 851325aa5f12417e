from dataclasses import dataclass

import pytest

from multirole.duelists import (
    DuelistData,
    DuelistsMap,
    duelists_map,
    kick_position,
    team_counts,
    tighten_team,
    try_emplace,
)


@dataclass(eq=False)
class FakeClient:
    name: str


def _encode(position):
    return position[0] * 10 + position[1]


def test_team_counts():
    seating = {(0, 0): FakeClient("a"), (0, 1): FakeClient("b"), (1, 0): FakeClient("c")}
    assert team_counts(seating) == [2, 1]


def test_team_counts_empty():
    assert team_counts({}) == [0, 0]


def test_try_emplace_first_free_on_team0():
    seating = {}
    client = FakeClient("a")
    position = try_emplace(seating, client, 2, 2)
    assert position == (0, 0)
    assert seating[position] is client


def test_try_emplace_until_full():
    seating = {}
    t0, t1 = 2, 3
    taken = [try_emplace(seating, FakeClient(str(i)), t0, t1) for i in range(t0 + t1)]
    expected = {(0, s) for s in range(t0)} | {(1, s) for s in range(t1)}
    assert set(taken) == expected
    assert len(taken) == len(expected)
    before = dict(seating)
    assert try_emplace(seating, FakeClient("late"), t0, t1) is None
    assert seating == before


def test_try_emplace_uses_free_hint():
    seating = {}
    client = FakeClient("a")
    hint = (1, 1)
    assert try_emplace(seating, client, 2, 2, hint) == hint
    assert seating == {hint: client}


def test_try_emplace_hint_out_of_range_starts_over():
    seating = {}
    client = FakeClient("a")
    position = try_emplace(seating, client, 2, 2, (1, 5))
    assert position is not None
    assert seating[position] is client
    assert position[1] < 2


def test_try_emplace_skips_occupied_hint():
    first = FakeClient("first")
    seating = {(0, 1): first}
    client = FakeClient("b")
    position = try_emplace(seating, client, 2, 2, (0, 1))
    assert position not in ((0, 1),)
    assert seating[(0, 1)] is first
    assert seating[position] is client


def test_tighten_team_moves_into_gap():
    mover = FakeClient("mover")
    stayer = FakeClient("stayer")
    seating = {(0, 2): mover, (0, 0): stayer}
    moves = tighten_team(seating, 0, 2)
    assert moves == [((0, 2), (0, 1))]
    assert seating[(0, 1)] is mover
    assert seating[(0, 0)] is stayer
    assert {k for k in seating if k[0] == 0} == {(0, 0), (0, 1)}


def test_tighten_team_leaves_other_team():
    other = FakeClient("other")
    seating = {(0, 1): FakeClient("a"), (1, 2): other}
    tighten_team(seating, 0, 1)
    assert seating[(1, 2)] is other
    assert (0, 0) in seating


def test_tighten_team_already_tight_does_nothing():
    seating = {(1, 0): FakeClient("a"), (1, 1): FakeClient("b")}
    before = dict(seating)
    assert tighten_team(seating, 1, 2) == []
    assert seating == before


def test_tighten_team_too_few_duelists():
    seating = {(0, 0): FakeClient("a")}
    with pytest.raises(ValueError):
        tighten_team(seating, 0, 2)


def test_kick_position_first_of_team1():
    t0 = 3
    assert kick_position(t0, t0) == (1, 0)


@pytest.mark.parametrize("t0,t1", [(1, 1), (2, 3), (3, 3)])
def test_kick_position_is_bijective(t0, t1):
    positions = [kick_position(i, t0) for i in range(t0 + t1)]
    assert set(positions) == {(0, s) for s in range(t0)} | {(1, s) for s in range(t1)}


def test_duelists_map_in_position_order():
    seating = {
        (1, 0): FakeClient("c"),
        (0, 1): FakeClient("b"),
        (0, 0): FakeClient("a"),
    }
    result = duelists_map(seating, _encode)
    assert result.used_count == len(seating)
    assert [p.name for p in result.pairs] == ["a", "b", "c"]
    assert [p.pos for p in result.pairs] == [_encode(k) for k in sorted(seating)]


def test_duelists_map_truncates_long_names():
    seating = {(0, 0): FakeClient("x" * 100)}
    result = duelists_map(seating, _encode)
    name = result.pairs[0].name
    assert len(name) == DuelistData.MAX_NAME_LENGTH
    assert name.endswith("\0")
    assert name[:-1] == "x" * (DuelistData.MAX_NAME_LENGTH - 1)


def test_duelists_map_keeps_short_names():
    seating = {(0, 0): FakeClient("Alice")}
    assert duelists_map(seating, _encode).pairs[0].name == "Alice"


def test_duelists_map_caps_count():
    seating = {(t, s): FakeClient(f"{t}{s}") for t in range(2) for s in range(4)}
    result = duelists_map(seating, _encode)
    assert result.used_count == DuelistsMap.MAX_AMOUNT_OF_DUELISTS
    assert [p.pos for p in result.pairs] == [
        _encode(k) for k in sorted(seating)[: DuelistsMap.MAX_AMOUNT_OF_DUELISTS]
    ]


def test_duelists_map_empty():
    assert duelists_map({}, _encode).used_count == 0