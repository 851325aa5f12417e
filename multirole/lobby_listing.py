"""HTTP endpoint listing the open rooms as JSON."""

from __future__ import annotations

import asyncio
import contextlib
import json
import socket
import threading
from typing import Any, Dict, Iterable, Optional

from .hostinfo import or_duel_flags

HTTP_HEADER_FORMAT = (
    "HTTP/1.0 200 OK\r\n"
    "Content-Length: {:d}\r\n"
    "Content-Type: application/json\r\n\r\n"
)
SERIALIZE_INTERVAL = 2.0
_BUFFER_SIZE = 256


def room_to_json(props: Any) -> Dict[str, Any]:
    """Describe one room the way listing clients expect."""
    hi = props.host_info
    limits = hi.limits
    return {
        "roomid": props.id,
        "roomname": "",
        "roomnotes": props.notes,
        "roommode": 0,
        "needpass": bool(props.passworded),
        "team1": hi.t0_count,
        "team2": hi.t1_count,
        "best_of": hi.best_of,
        "duel_flag": or_duel_flags(hi.duel_flags_high, hi.duel_flags_low),
        "forbidden_types": hi.forb,
        "extra_rules": hi.extra_rules,
        "start_lp": hi.starting_lp,
        "start_hand": hi.starting_draw_count,
        "draw_count": hi.draw_count_per_turn,
        "time_limit": hi.time_limit_in_seconds,
        "rule": hi.allowed,
        "no_check": bool(hi.dont_check_deck_content),
        "no_shuffle": bool(hi.dont_shuffle_deck),
        "banlist_hash": hi.banlist_hash,
        "istart": "start" if props.started else "waiting",
        "main_min": limits.main.min,
        "main_max": limits.main.max,
        "extra_min": limits.extra.min,
        "extra_max": limits.extra.max,
        "side_min": limits.side.min,
        "side_max": limits.side.max,
        "users": [{"pos": d.pos, "name": d.name} for d in props.duelists.pairs],
    }


def serialize_rooms(rooms: Iterable[Any]) -> str:
    """Serialise rooms to compact JSON, hiding rooms without duelists."""
    listed = [room_to_json(p) for p in rooms if p.duelists.used_count > 0]
    return json.dumps({"rooms": listed}, separators=(",", ":"), ensure_ascii=False)


def http_response(body: str) -> bytes:
    """Wrap a JSON body in an HTTP/1.0 response."""
    data = body.encode("utf-8")
    return HTTP_HEADER_FORMAT.format(len(data)).encode("ascii") + data


def _make_listener(port: int) -> socket.socket:
    if socket.has_dualstack_ipv6():
        sock = socket.create_server(("", port), family=socket.AF_INET6, dualstack_ipv6=True)
    else:
        sock = socket.create_server(("", port))
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1)
    return sock


class LobbyListing:
    """Serves the latest room listing to anyone who connects and sends data.

    The listing is rebuilt every ``SERIALIZE_INTERVAL`` seconds while running.
    """

    def __init__(self, port: int, lobby: Any) -> None:
        self._requested_port = port
        self._lobby = lobby
        self._serialized = b""
        self._lock = threading.Lock()
        self._server: Optional[asyncio.AbstractServer] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def port(self) -> int:
        """The port being listened on, or the requested one before start."""
        if self._server is not None and self._server.sockets:
            return self._server.sockets[0].getsockname()[1]
        return self._requested_port

    def refresh(self) -> bytes:
        """Rebuild the listing from the lobby and return the response bytes."""
        rooms = []
        self._lobby.collect_rooms(rooms.append)
        response = http_response(serialize_rooms(rooms))
        with self._lock:
            self._serialized = response
        return response

    async def start(self) -> None:
        """Begin accepting connections and refreshing the listing."""
        if self._server is not None:
            raise RuntimeError("lobby listing already started")
        self._server = await asyncio.start_server(
            self._handle, sock=_make_listener(self._requested_port)
        )
        self._task = asyncio.create_task(self._serialize_loop())

    async def stop(self) -> None:
        """Stop accepting connections and refreshing."""
        if self._task is not None:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None
        if self._server is not None:
            server, self._server = self._server, None
            server.close()
            await server.wait_closed()

    async def _serialize_loop(self) -> None:
        while True:
            await asyncio.sleep(SERIALIZE_INTERVAL)
            self.refresh()

    async def _handle(
        self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ) -> None:
        with self._lock:
            outgoing = self._serialized
        try:
            data = await reader.read(_BUFFER_SIZE)
            if data:
                writer.write(outgoing)
                await writer.drain()
        except OSError:
            pass
        finally:
            writer.close()
            with contextlib.suppress(OSError):
                await writer.wait_closed()