import pytest

from multirole.dueling import (
    CORE_CRASH_FINISH,
    DRAW,
    GRACE_PERIOD_SECONDS,
    DuelFinish,
    FinishReason,
    NextState,
    initial_time_ms,
    needed_wins,
    next_state_after_finish,
    remaining_after_response,
    time_limit_ticks,
    turn_decider_position,
)


def test_needed_wins_single():
    assert needed_wins(1) == 1


@pytest.mark.parametrize("limit", [0, 1, 180, 600])
def test_initial_time_includes_grace(limit):
    assert initial_time_ms(limit) - initial_time_ms(0) == limit * 1000
    assert initial_time_ms(0) == GRACE_PERIOD_SECONDS * 1000


@pytest.mark.parametrize("shown", [0, 1, 30, 300])
def test_ticks_remove_grace(shown):
    assert time_limit_ticks(shown + GRACE_PERIOD_SECONDS) == shown


@pytest.mark.parametrize("remaining", [-10, 0, 1, GRACE_PERIOD_SECONDS])
def test_ticks_clamped_at_zero(remaining):
    assert time_limit_ticks(remaining) == 0


@pytest.mark.parametrize("whole", [0, 3, 42])
def test_remaining_after_response_whole_seconds(whole):
    assert remaining_after_response(float(whole)) == whole * 1000


@pytest.mark.parametrize("whole", [0, 3, 42])
def test_remaining_after_response_rounds_up(whole):
    assert remaining_after_response(whole + 0.25) == (whole + 1) * 1000


def test_turn_decider_is_loser_first_duelist():
    assert turn_decider_position(0) == (1, 0)
    assert turn_decider_position(1) == (0, 0)
    assert turn_decider_position(DRAW) == (0, 0)


def test_turn_decider_rejects_bad_winner():
    with pytest.raises(ValueError):
        turn_decider_position(3)


def test_duel_finish_rejects_bad_winner():
    with pytest.raises(ValueError):
        DuelFinish(FinishReason.DUEL_WON, 5)


def test_core_crash_finish_is_draw():
    assert turn_decider_position(CORE_CRASH_FINISH.winner) == (0, 0)
    state, wins, had = next_state_after_finish(CORE_CRASH_FINISH, 1, (0, 0), 0, False)
    assert state is NextState.REMATCHING
    assert wins == (0, 0)
    assert had == 0


@pytest.mark.parametrize(
    "reason",
    [
        FinishReason.DUEL_WON,
        FinishReason.SURRENDERED,
        FinishReason.TIMED_OUT,
        FinishReason.WRONG_RESPONSE,
        FinishReason.CORE_CRASHED,
    ],
)
def test_single_duel_goes_to_rematch(reason):
    state, wins, had = next_state_after_finish(DuelFinish(reason, 0), 1, (0, 0), 0, False)
    assert state is NextState.REMATCHING
    assert wins == (0, 0)
    assert had == 0


@pytest.mark.parametrize("best_of", [1, 3])
def test_connection_lost_closes(best_of):
    finish = DuelFinish(FinishReason.CONNECTION_LOST, 1)
    state, wins, had = next_state_after_finish(finish, best_of, (0, 0), 0, False)
    assert state is NextState.CLOSING
    assert wins == (0, 0)


def test_match_first_win_sidedecks():
    finish = DuelFinish(FinishReason.DUEL_WON, 1)
    state, wins, had = next_state_after_finish(finish, 3, (0, 0), 0, False)
    assert state is NextState.SIDEDECKING
    assert wins == (0, 1)
    assert had == 1


def test_match_decided_closes():
    finish = DuelFinish(FinishReason.SURRENDERED, 0)
    state, wins, had = next_state_after_finish(finish, 3, (1, 1), 2, False)
    assert state is NextState.CLOSING
    assert wins[0] == needed_wins(3)
    assert had == 3


def test_match_kill_ends_match_at_once():
    finish = DuelFinish(FinishReason.DUEL_WON, 0)
    state, wins, _ = next_state_after_finish(finish, 5, (0, 0), 0, True)
    assert state is NextState.CLOSING
    assert wins[0] == needed_wins(5)


def test_draw_keeps_match_going():
    finish = DuelFinish(FinishReason.DUEL_WON, DRAW)
    state, wins, had = next_state_after_finish(finish, 3, (1, 1), 2, False)
    assert state is NextState.SIDEDECKING
    assert wins == (1, 1)
    assert had == 3


def test_core_crash_in_match_does_not_count():
    state, wins, had = next_state_after_finish(CORE_CRASH_FINISH, 3, (1, 0), 1, False)
    assert state is NextState.SIDEDECKING
    assert wins == (1, 0)
    assert had == 1


def test_input_wins_not_mutated():
    wins = [0, 0]
    next_state_after_finish(DuelFinish(FinishReason.DUEL_WON, 0), 3, wins, 0, False)
    assert wins == [0, 0]


def test_bad_wins_length():
    with pytest.raises(ValueError):
        next_state_after_finish(DuelFinish(FinishReason.DUEL_WON, 0), 3, (0,), 0, False)