"""TCP endpoint that hands the start of each request to a callback."""

from __future__ import annotations

import asyncio
import contextlib
import socket
from typing import Callable, Optional

HTTP_OK = (
    b"HTTP/1.0 200 OK\r\n"
    b"Content-Length: 17\r\n"
    b"Content-Type: text/plain\r\n\r\n"
    b"Payload received."
)

_BUFFER_SIZE = 256


def _payload(data: bytes) -> str:
    # A space-filled buffer whose last byte is a terminator, read as a C string.
    buf = data[:_BUFFER_SIZE].ljust(_BUFFER_SIZE, b" ")[: _BUFFER_SIZE - 1]
    return buf.split(b"\0", 1)[0].decode("utf-8", "replace")


def _make_listener(port: int) -> socket.socket:
    if socket.has_dualstack_ipv6():
        sock = socket.create_server(
            ("", port), family=socket.AF_INET6, dualstack_ipv6=True
        )
    else:
        sock = socket.create_server(("", port))
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1)
    return sock


class Webhook:
    """Accepts connections, passes the first read to ``callback`` and replies OK."""

    def __init__(self, port: int, callback: Callable[[str], None]) -> None:
        self._requested_port = port
        self._callback = callback
        self._server: Optional[asyncio.AbstractServer] = None

    @property
    def port(self) -> int:
        """The port being listened on, or the requested one before start."""
        if self._server is not None and self._server.sockets:
            return self._server.sockets[0].getsockname()[1]
        return self._requested_port

    async def start(self) -> None:
        """Begin accepting connections."""
        if self._server is not None:
            raise RuntimeError("webhook already started")
        sock = _make_listener(self._requested_port)
        self._server = await asyncio.start_server(self._handle, sock=sock)

    async def stop(self) -> None:
        """Stop accepting connections."""
        if self._server is None:
            return
        server, self._server = self._server, None
        server.close()
        await server.wait_closed()

    async def _handle(
        self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ) -> None:
        try:
            data = await reader.read(_BUFFER_SIZE)
            if not data:
                return
            self._callback(_payload(data))
            writer.write(HTTP_OK)
            await writer.drain()
        except OSError:
            pass
        finally:
            writer.close()
            with contextlib.suppress(OSError):
                await writer.wait_closed()