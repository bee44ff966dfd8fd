"""Best-effort broadcasting of realtime events to role rooms."""

from __future__ import annotations

import asyncio
import copy
import logging
from typing import Any, Iterable, Protocol

from anyio import from_thread

from rentdesk.domain.entities import Role

from .manager import RoomConnectionManager

logger = logging.getLogger(__name__)

NEW_CAR_EVENT = "new-car"
ACTIVITY_LOG_EVENT = "activity-log-update"
NOTIFICATION_EVENT = "notification"


class Broadcaster(Protocol):
    """Anything able to push an event to a set of rooms."""

    def broadcast(
        self, rooms: Iterable[Role | str], *, event: str, payload: Any
    ) -> None: ...


class RealtimeBroadcaster:
    """Dispatch structured realtime events to websocket rooms.

    Delivery is scheduled on the event loop and never awaited by the caller.
    No acknowledgement, retry or cross-room ordering is provided, and no error
    escapes :meth:`broadcast`.
    """

    def __init__(self, manager: RoomConnectionManager) -> None:
        self._manager = manager
        self._pending: set[asyncio.Task[None]] = set()

    def broadcast(
        self, rooms: Iterable[Role | str], *, event: str, payload: Any
    ) -> None:
        """Schedule ``event`` for every distinct room in ``rooms``."""

        try:
            message = {"type": event, "data": copy.deepcopy(payload)}
            seen: set[str] = set()
            for room in rooms:
                name = room.value if isinstance(room, Role) else str(room)
                if not name or name in seen:
                    continue
                seen.add(name)
                self._schedule_send(name, message)
        except Exception:
            logger.warning("Realtime broadcast of %s failed", event, exc_info=True)

    def _schedule_send(self, room: str, message: dict[str, Any]) -> None:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            # Sync endpoints run in a worker thread; hop onto the loop to spawn.
            try:
                from_thread.run_sync(self._spawn, room, message)
            except RuntimeError:
                logger.debug(
                    "No event loop available; dropping %s for room %s",
                    message.get("type"),
                    room,
                )
        else:
            self._spawn(room, message)

    def _spawn(self, room: str, message: dict[str, Any]) -> None:
        task = asyncio.get_running_loop().create_task(self._deliver(room, message))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _deliver(self, room: str, message: dict[str, Any]) -> None:
        try:
            await self._manager.send_to_room(room, message)
        except Exception:
            logger.warning(
                "Delivery of %s to room %s failed", message.get("type"), room, exc_info=True
            )


__all__ = [
    "ACTIVITY_LOG_EVENT",
    "Broadcaster",
    "NEW_CAR_EVENT",
    "NOTIFICATION_EVENT",
    "RealtimeBroadcaster",
]
