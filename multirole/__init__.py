"""Lobby, room, seating and duel-flow logic for a multi-room card game server."""

__version__ = "1.1.0"