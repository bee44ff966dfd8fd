"""Connection management helpers for role-scoped websocket rooms."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, DefaultDict, Set

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class RoomConnectionManager:
    """Manage active websocket connections grouped by room name."""

    def __init__(self) -> None:
        self._rooms: DefaultDict[str, Set[WebSocket]] = defaultdict(set)

    async def connect(self, room: str, websocket: WebSocket) -> None:
        """Accept the websocket connection and register it in ``room``."""

        await websocket.accept()
        self._rooms[room].add(websocket)

    def disconnect(self, room: str, websocket: WebSocket) -> None:
        """Remove ``websocket`` from ``room``."""

        connections = self._rooms.get(room)
        if connections is None:
            return
        connections.discard(websocket)
        if not connections:
            self._rooms.pop(room, None)

    def connection_count(self, room: str) -> int:
        return len(self._rooms.get(room, ()))

    async def send_to_room(self, room: str, message: dict[str, Any]) -> None:
        """Send ``message`` to every active connection in ``room``."""

        connections = list(self._rooms.get(room, set()))
        for connection in connections:
            try:
                await connection.send_json(message)
            except Exception:  # pragma: no cover - stale socket cleanup
                logger.debug("Dropping stale connection from room %s", room)
                self.disconnect(room, connection)


__all__ = ["RoomConnectionManager"]
