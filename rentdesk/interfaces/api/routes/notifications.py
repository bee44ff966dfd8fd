"""Endpoints and websocket handler for role-scoped notifications."""

from __future__ import annotations

import logging

from fastapi import (
    APIRouter,
    Depends,
    HTTPException,
    Query,
    Response,
    WebSocket,
    WebSocketDisconnect,
    status,
)
from sqlalchemy.orm import Session

from rentdesk.application.use_cases.notifications import (
    list_notifications as list_notifications_uc,
    mark_notifications_read as mark_notifications_read_uc,
)
from rentdesk.domain.entities import Notification, User
from rentdesk.infrastructure import database
from rentdesk.infrastructure.database import get_db
from rentdesk.infrastructure.notifications import (
    RoomConnectionManager,
    serialize_notification,
)
from rentdesk.interfaces.api.dependencies import get_current_active_user, resolve_current_user
from rentdesk.interfaces.api.schemas import NotificationMarkReadRequest, NotificationRead

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        id=notification.id or 0,
        recipient_role=notification.recipient_role,
        audience_roles=notification.audience_roles,
        module=notification.module,
        message=notification.message,
        link=notification.link,
        is_read=notification.is_read,
        created_at=notification.created_at,
        read_at=notification.read_at,
    )


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    module: str | None = None,
    unread_only: bool = False,
    limit: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[NotificationRead]:
    """Return the most recent notifications addressed to the caller's role."""

    notifications = list_notifications_uc(
        db,
        role=current_user.role,
        module=module,
        unread_only=unread_only,
        limit=limit,
    )
    return [_notification_to_schema(notification) for notification in notifications]


@router.post("/read", status_code=status.HTTP_204_NO_CONTENT)
def mark_notifications_read(
    payload: NotificationMarkReadRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Response:
    """Mark notifications of the caller's role as read."""

    mark_notifications_read_uc(db, payload.unique_ids(), role=current_user.role)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.websocket("/ws")
async def notifications_websocket(websocket: WebSocket) -> None:
    """Join the caller's role room and stream realtime events to it."""

    token = websocket.query_params.get("token")
    if not token:
        await websocket.close(code=1008)
        return

    session = database.SessionLocal()
    try:
        user = resolve_current_user(token, session)
        if not user.is_active:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Inactive user")
        pending_notifications = list_notifications_uc(
            session, role=user.role, unread_only=True
        )
    except HTTPException:
        await websocket.close(code=1008)
        return
    except Exception:  # pragma: no cover - store failure during handshake
        logger.exception("Could not open realtime session")
        await websocket.close(code=1011)
        return
    finally:
        session.close()

    manager: RoomConnectionManager = websocket.app.state.connections
    room = user.role.value
    await manager.connect(room, websocket)
    try:
        if pending_notifications:
            await websocket.send_json(
                {"type": "init", "data": [serialize_notification(n) for n in pending_notifications]}
            )
        while True:
            try:
                message = await websocket.receive_json()
            except WebSocketDisconnect:
                raise
            except ValueError:
                continue

            if not isinstance(message, dict):
                continue

            message_type = message.get("type")
            if message_type == "ping":
                await websocket.send_json({"type": "pong"})
                continue

            if message_type == "ack":
                ids = message.get("ids", [])
                if isinstance(ids, list) and ids:
                    ack_session = database.SessionLocal()
                    try:
                        mark_notifications_read_uc(ack_session, ids, role=user.role)
                    finally:
                        ack_session.close()
                continue
    except WebSocketDisconnect:
        manager.disconnect(room, websocket)
    except Exception:  # pragma: no cover - unexpected transport failure
        manager.disconnect(room, websocket)
        raise


__all__ = ["router"]
