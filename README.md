# multirole

`multirole` holds server-side logic for hosting card game duels across many
rooms: a lobby of rooms, the seating of players in a room, the events and
states a room moves through, and the rules a match follows. It uses only the
Python standard library and needs Python 3.10 or newer.

## What is inside

- `multirole.core` defines the interfaces a duel engine is driven through.
  `Wrapper` creates and destroys duels, adds cards, processes steps, returns
  messages, takes responses, loads scripts and answers queries.
  `DataSupplier`, `ScriptSupplier` and `Logger` are the callbacks the engine
  uses. `DuelOptions` checks that its seed holds four unsigned 64-bit values
  and that its flags fit in 64 bits. `DuelStatus` and `LogType` are the
  engine's enumerations, `script_data` and `script_size` inspect a script,
  and `CoreError` is the error an engine raises when it fails.
- `multirole.hostinfo` holds the room options (`HostInfo`, `DeckLimits`,
  `DeckLimit`) and `or_duel_flags`, which joins the two 32-bit halves of the
  duel flags. `normalize_host_info` returns a corrected copy of the options:
  - the banlist hash is cleared when no banlist was found;
  - team sizes are clamped to 1 to 3 and `best_of` to at least 1;
  - deck limits are capped at 999, and each minimum at its maximum;
  - the relay flag is dropped for 1v1 rooms;
  - a starting LP of zero becomes 8000, or 8000 per player of the larger
    team in tag duels;
  - the pseudo-shuffle flag is set when the deck is not to be shuffled.
- `multirole.rules` covers the steps before a duel: `rps_winner_team`
  settles rock-paper-scissors (`None` on a tie, `ValueError` on a bad
  choice), `team1_goes_first` and `swapped_team` work out turn order, and
  `initial_positions` picks which duelist of each team plays first.
- `multirole.duelists` works on a room's seating, a dict from
  `(team, slot)` to client: `try_emplace` seats a client in the first free
  position, `tighten_team` closes gaps in a team and reports the moves,
  `kick_position` turns a flat listing index into a position, `team_counts`
  counts each team, and `duelists_map` builds the `DuelistsMap` of
  `DuelistData` entries (at most six, names cut to 64 bytes) shown in the
  listing.
- `multirole.events` holds the events a room reacts to (`Join`, `Chat`,
  `Ready`, `TryStart`, `TryKick`, `Response`, `TimerExpired` and the rest)
  and the states it moves through (`Waiting`, `RockPaperScissor`,
  `ChoosingTurn`, `Dueling`, `Sidedecking`, `Rematching`, `Closing`).
- `multirole.room.Room` keeps a room's notes, password, kicked addresses and
  current state. `Room.dispatch` passes an event to a handler object you
  supply and follows the chain of state changes it returns;
  `Room.try_close` dispatches `Close` unless the duel has started.
- `multirole.timers.TimerAggregator` keeps one turn timer per team, running
  on threads, and calls back with the team whose time ran out.
- `multirole.lobby.Lobby` hands out room ids (reusing slots of rooms that
  are gone), gives each new room a seed, keeps weak references to rooms,
  lists live rooms as `RoomProps` through `collect_rooms`, and counts
  connections per address so `has_max_connections` can report when one has
  reached the maximum.
- `multirole.lobby_listing` turns rooms into the JSON listing clients poll
  (`room_to_json`, `serialize_rooms`, which hides rooms without duelists,
  and `http_response`). `LobbyListing` serves the latest listing over
  asyncio to anyone who connects and sends data, rebuilding it every two
  seconds; `refresh` rebuilds it at once.
- `multirole.webhook.Webhook` is a small asyncio endpoint. It hands the
  first read of each connection (up to 255 bytes) to a callback and replies
  `200 OK`.
- `multirole.script_logger.ScriptLogger` collects the engine's script
  messages, skips direct repeats and passes each to a sink together with
  the replay id, the turn counter and an `ErrorCategory` that `classify`
  derives from the room options.
- `multirole.dueling` settles what happens when a duel ends:
  `next_state_after_finish` chooses between `NextState.REMATCHING`,
  `SIDEDECKING` and `CLOSING` and updates wins and duels played;
  `needed_wins`, `initial_time_ms`, `time_limit_ticks`,
  `remaining_after_response` and `turn_decider_position` cover match and
  timer bookkeeping.
- `multirole.i18n` holds the messages that are logged or sent to players.

## A short example

```python
from multirole.dueling import needed_wins
from multirole.hostinfo import HostInfo, normalize_host_info, or_duel_flags
from multirole.rules import ROCK, SCISSOR, rps_winner_team

# A best-of-three match is won with two wins.
assert needed_wins(3) == 2

# Duel flags are stored as two 32-bit halves.
assert or_duel_flags(0x1, 0x80) == (0x1 << 32) | 0x80

# Out-of-range options are brought back into range.
info = normalize_host_info(HostInfo(t0_count=5, t1_count=0), has_banlist=False)
assert (info.t0_count, info.t1_count, info.starting_lp) == (3, 1, 24000)

# Rock beats scissors: team 0 wins.
assert rps_winner_team(ROCK, SCISSOR) == 0
```

## What the package does not do

- It has no command and no server that accepts players: there is no
  endpoint for clients to host or join rooms, and no encoding of the game's
  wire messages.
- It contains no duel engine. `multirole.core.Wrapper` is an interface to
  be implemented elsewhere.
- `Room` decides nothing by itself; the rules for each state and event come
  from the handler you pass in.
- It does not store replays, card databases, banlists or scripts.

## Tests

Running the tests needs the `test` extra (pytest and pytest-asyncio):

```
pip install -e .[test]
pytest
```